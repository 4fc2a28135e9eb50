"""CLI commands for the Cart aggregate."""

from __future__ import annotations

import click

from shopcart.application.dto import CartLineSpec, CartQuoteDTO
from shopcart.domain.exceptions import DomainException
from shopcart.domain.model.product import DEFAULT_CATEGORY
from shopcart.infrastructure.bootstrap import quote_cart_handler


def _parse_item(raw: str) -> CartLineSpec:
    """Parse 'Laptop:999.99', 'Mouse:29.99:2' or 'Mouse:29.99:2:Electronics'."""
    parts = [part.strip() for part in raw.split(":")]
    if not 2 <= len(parts) <= 4:
        raise click.BadParameter(
            f"Invalid item format '{raw}'. Expected 'Name:Price[:Qty[:Category]]'."
        )

    name, price = parts[0], parts[1]
    qty = 1
    if len(parts) >= 3:
        try:
            qty = int(parts[2])
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{parts[2]}' for product '{name}'."
            )
    category = parts[3] if len(parts) == 4 else DEFAULT_CATEGORY

    return CartLineSpec(product_name=name, price=price, quantity=qty, category=category)


def _parse_promotions(raw: tuple[str, ...]) -> dict[str, str]:
    """Parse ('Laptop:100', 'Mouse:5') into {name: amount}."""
    result: dict[str, str] = {}
    for pair in raw:
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid promotion format '{pair}'. Expected 'ProductName:Amount'."
            )
        name, amount = pair.rsplit(":", 1)
        result[name.strip()] = amount.strip()
    return result


def _display_quote(dto: CartQuoteDTO) -> None:
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Subtotal':<27} {dto.subtotal:>20}")
    click.echo(f"  {'Discount':<27} {'-' + dto.discount:>20}")
    click.echo(f"  {'Total':<27} {dto.total:>20}")
    click.echo(f"  {dto.item_count} item(s), {dto.unique_product_count} product(s)")


@click.command("quote")
@click.option(
    "--item", "items", multiple=True, required=True,
    help="Item as 'Name:Price[:Qty[:Category]]'. Repeatable.",
)
@click.option("--discount", default=None, help="Cart-wide discount percentage (0-100).")
@click.option("--promo", "promos", multiple=True, help="Per-unit promotion as 'Name:Amount'. Repeatable.")
@click.option("--summary", "show_summary", is_flag=True, default=False, help="Print the plain-text cart summary.")
def cart_quote(
    items: tuple[str, ...],
    discount: str | None,
    promos: tuple[str, ...],
    show_summary: bool,
) -> None:
    """Price a cart without storing it."""
    lines = [_parse_item(raw) for raw in items]
    promotions = _parse_promotions(promos)

    handler = quote_cart_handler()

    try:
        dto = handler.handle(lines, discount=discount, promotions=promotions)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if show_summary:
        click.echo(dto.summary)
    else:
        _display_quote(dto)
