"""Cart aggregate — the core of the domain.

The Cart owns a quantity-keyed collection of products, a cart-wide
percentage discount and a set of per-product fixed promotions. Every
figure it reports (subtotal, discount, total) is computed from the
current state on each call; nothing is cached.

Products can be addressed two ways:

- by value: a ``Product`` is looked up directly in the items dict
  (structural equality, O(1));
- by name: a linear, case-sensitive, exact-match scan over the items
  (O(n)). When several distinct products share a name, the one added
  first wins.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import (
    DEFAULT_CURRENCY,
    Money,
    Percentage,
    Quantity,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Presentation constants for the text summary
# ---------------------------------------------------------------------------
EMPTY_CART_MESSAGE = "Cart is empty"
SUMMARY_RULE_WIDTH = 50


class Cart:
    """Aggregate root for a single shopper's cart.

    Not thread-safe: a cart belongs to one caller at a time.
    """

    def __init__(self) -> None:
        self._items: dict[Product, int] = {}
        self._promotions: dict[str, Money] = {}
        self._discount = Percentage.none()

    # --- Adding ---------------------------------------------------------------

    def add_by_name(self, name: str) -> bool:
        """Add a free product known only by name.

        Returns False (and changes nothing) if any item already carries
        that name. Otherwise adds ``Product(name, 0)`` once.
        """
        if not isinstance(name, str) or not name:
            raise ValidationError("Invalid product name")

        if self.contains_name(name):
            return False

        return self.add_product(Product(name, Money.zero()))

    def add_product(self, product: Product, quantity: int = 1) -> bool:
        """Add *quantity* units, accumulating onto an existing entry."""
        self._require_product(product)
        qty = Quantity(quantity)

        self._items[product] = self._items.get(product, 0) + qty.value
        logger.debug("Added %s x%s (now %s)", product.name, qty, self._items[product])
        return True

    # --- Changing quantities ----------------------------------------------------

    def update_quantity(self, product: Product, quantity: int) -> bool:
        """Set (not increment) the quantity of a product already in the cart.

        A quantity of zero removes the product. Returns False if the
        product is not in the cart.
        """
        self._require_product(product)
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(quantity).__name__}"
            )
        if quantity < 0:
            raise ValidationError("Quantity cannot be negative")

        if product not in self._items:
            return False

        if quantity == 0:
            del self._items[product]
        else:
            self._items[product] = quantity
        logger.debug("Set quantity of %s to %s", product.name, quantity)
        return True

    def remove_product_unit(self, product: Product | None) -> bool:
        """Take one unit out; the last unit removes the product."""
        if not self.contains_product(product):
            return False

        if self._items[product] > 1:
            self._items[product] -= 1
        else:
            del self._items[product]
        logger.debug("Removed one %s (now %s)", product.name, self.get_quantity(product))
        return True

    # --- Removing ---------------------------------------------------------------

    def remove_product(self, product: Product | None) -> bool:
        if not isinstance(product, Product):
            return False
        removed = self._items.pop(product, None) is not None
        if removed:
            logger.debug("Removed %s", product.name)
        return removed

    def remove_by_name(self, name: str | None) -> bool:
        """Remove the first item named *name*, whatever its quantity."""
        product = self._find_by_name(name)
        if product is None:
            return False
        return self.remove_product(product)

    def clear_cart(self) -> None:
        """Empty the items. Promotions and the discount are kept."""
        self._items.clear()
        logger.debug("Cart cleared")

    # --- Discounts and promotions -----------------------------------------------

    def apply_discount(self, percentage: str | float | int | Decimal) -> None:
        self._discount = Percentage.of(percentage)
        logger.debug("Cart discount set to %s", self._discount)

    def add_promotion(
        self, name: str, amount: Money | str | float | int | Decimal
    ) -> None:
        """Take a fixed *amount* off every unit of products called *name*.

        A later call for the same name overwrites the earlier one. The
        name does not have to be in the cart.
        """
        if not isinstance(name, str) or not name:
            raise ValidationError("Product name cannot be null or empty")
        value = amount if isinstance(amount, Money) else _coerce_promotion(amount)
        if value.currency != DEFAULT_CURRENCY:
            raise ValidationError(
                f"Discount amount must be in {DEFAULT_CURRENCY}, got {value.currency}"
            )

        self._promotions[name] = value
        logger.debug("Promotion on %s set to %s per unit", name, value)

    def remove_promotion(self, name: str | None) -> None:
        if isinstance(name, str) and self._promotions.pop(name, None) is not None:
            logger.debug("Promotion on %s removed", name)

    def clear_promotions(self) -> None:
        """Drop every promotion and reset the discount percentage."""
        self._promotions.clear()
        self._discount = Percentage.none()
        logger.debug("Promotions cleared and discount reset")

    @property
    def discount_percentage(self) -> Decimal:
        return self._discount.value

    def active_promotions(self) -> dict[str, Money]:
        """A copy of the promotions; changing it does not affect the cart."""
        return dict(self._promotions)

    # --- Queries ------------------------------------------------------------------

    def get_quantity(self, product: Product | None) -> int:
        if not isinstance(product, Product):
            return 0
        return self._items.get(product, 0)

    def contains_product(self, product: Product | None) -> bool:
        return isinstance(product, Product) and product in self._items

    def contains_name(self, name: str | None) -> bool:
        return self._find_by_name(name) is not None

    def item_names(self) -> list[str]:
        """One name per distinct item, in the order they were added."""
        return [product.name for product in self._items]

    def products_with_quantities(self) -> dict[Product, int]:
        """A copy of the items; changing it does not affect the cart."""
        return dict(self._items)

    @property
    def item_count(self) -> int:
        return sum(self._items.values())

    @property
    def unique_product_count(self) -> int:
        return len(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    # --- Pricing ------------------------------------------------------------------

    @property
    def subtotal(self) -> Money:
        result = Money.zero()
        for product, quantity in self._items.items():
            result = result + product.price * quantity
        return result

    @property
    def discount_amount(self) -> Money:
        """Percentage of the subtotal plus every matching promotion.

        Both parts are computed from the same undiscounted subtotal, so
        the order in which they were configured does not matter.
        """
        result = self._discount.applied_to(self.subtotal)
        for product, quantity in self._items.items():
            promotion = self._promotions.get(product.name)
            if promotion is not None:
                result = result + promotion * quantity
        return result

    @property
    def total(self) -> Money:
        """Subtotal less discounts, never below zero."""
        subtotal = self.subtotal
        discount = self.discount_amount
        if discount >= subtotal:
            return Money.zero()
        return subtotal - discount

    def summary(self) -> str:
        if self.is_empty:
            return EMPTY_CART_MESSAGE

        rule = "=" * SUMMARY_RULE_WIDTH
        lines = ["Cart Summary:", rule]
        for product, quantity in self._items.items():
            lines.append(f"{product.name} x{quantity} = {product.price * quantity}")
        lines.append(rule)
        lines.append(f"Subtotal: {self.subtotal}")

        discount = self.discount_amount
        if discount > Money.zero():
            lines.append(f"Discount: -{discount}")

        lines.append(f"Total: {self.total}")
        lines.append(f"Total Items: {self.item_count}")
        return "\n".join(lines)

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _require_product(product: Product | None) -> None:
        if product is None:
            raise ValidationError("Product cannot be null")
        if not isinstance(product, Product):
            raise ValidationError(
                f"Expected a Product, got {type(product).__name__}"
            )

    def _find_by_name(self, name: str | None) -> Product | None:
        if name is None:
            return None
        for product in self._items:
            if product.name == name:
                return product
        return None


def _coerce_promotion(amount: str | float | int | Decimal) -> Money:
    try:
        return Money.of(amount)
    except ValidationError as exc:
        raise ValidationError(
            f"Discount amount cannot be negative or invalid: {amount!r}"
        ) from exc
