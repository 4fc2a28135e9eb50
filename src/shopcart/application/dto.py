"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing the Cart aggregate to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopcart.domain.model.product import DEFAULT_CATEGORY


@dataclass(frozen=True)
class CartLineSpec:
    """Input: one product the shopper wants, as raw values."""

    product_name: str
    price: str
    quantity: int = 1
    category: str = DEFAULT_CATEGORY


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the user."""

    product_name: str
    category: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class CartQuoteDTO:
    """Output: a fully priced cart as displayed to the user."""

    items: list[CartLineDTO]
    subtotal: str
    discount_percentage: str
    discount: str
    total: str
    item_count: int
    unique_product_count: int
    summary: str
