import click

from shopcart.infrastructure.bootstrap import configure_logging
from shopcart.infrastructure.cli.cart_commands import cart_quote


@click.group()
@click.option("--verbose", is_flag=True, default=False, help="Log cart operations.")
def cli(verbose: bool) -> None:
    """shopcart — shopping cart pricing"""
    configure_logging(verbose)


@cli.group()
def cart() -> None:
    """Price carts."""


# Register subcommands
cart.add_command(cart_quote)
