"""Composition root — wires runtime settings for the command line.

This is the only place that configures logging handlers; the domain
and application layers only ever obtain loggers.
"""

from __future__ import annotations

import logging

from shopcart.application.quote_cart import QuoteCartHandler
from shopcart.domain.model.cart import Cart

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        force=True,
    )


def quote_cart_handler() -> QuoteCartHandler:
    return QuoteCartHandler(cart_factory=Cart)
