"""Product value object.

Products are supplied fully formed by the caller (there is no catalog
lookup here). Two products built from the same name, price and category
are the same product: the cart uses them interchangeably as keys.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.value_objects import DEFAULT_CURRENCY, Money

DEFAULT_CATEGORY = "General"


@dataclass(frozen=True)
class Product:
    """A purchasable item.

    ``price`` may be given as ``Money`` or as anything ``Money.of``
    accepts; it is always stored as ``Money``. Equality and hashing
    cover all three fields.
    """

    name: str
    price: Money
    category: str = DEFAULT_CATEGORY

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValidationError("Product name cannot be null or empty")

        if not isinstance(self.price, Money):
            object.__setattr__(self, "price", _coerce_price(self.price))
        if self.price.currency != DEFAULT_CURRENCY:
            raise ValidationError(
                f"Product price must be in {DEFAULT_CURRENCY}, got {self.price.currency}"
            )

        if self.category is None:
            object.__setattr__(self, "category", DEFAULT_CATEGORY)

    def __str__(self) -> str:
        return f"{self.name} ({self.price}) [{self.category}]"


def _coerce_price(price: str | float | int | Decimal | None) -> Money:
    if price is None:
        raise ValidationError("Product price is required")
    try:
        return Money.of(price)
    except ValidationError as exc:
        raise ValidationError(f"Product price cannot be negative or invalid: {price!r}") from exc
