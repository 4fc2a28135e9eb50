"""Application service: Quote Cart use case (query).

Builds a throwaway cart from raw line specs, applies the requested
discount and promotions, and reports the priced result. Nothing is
stored: every call starts from an empty cart.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping

from shopcart.application.dto import CartLineDTO, CartLineSpec, CartQuoteDTO
from shopcart.domain.model.cart import Cart
from shopcart.domain.model.product import Product


class QuoteCartHandler:

    def __init__(self, cart_factory: Callable[[], Cart] = Cart) -> None:
        self._cart_factory = cart_factory

    def handle(
        self,
        lines: list[CartLineSpec],
        discount: str | None = None,
        promotions: Mapping[str, str] | None = None,
    ) -> CartQuoteDTO:
        """Price *lines* and return a display-ready quote.

        Identical lines accumulate, exactly as repeated ``add_product``
        calls would. Domain errors propagate to the caller.
        """
        cart = self._cart_factory()

        for spec in lines:
            product = Product(spec.product_name, spec.price, spec.category)
            cart.add_product(product, spec.quantity)

        if discount is not None:
            cart.apply_discount(discount)

        for name, amount in (promotions or {}).items():
            cart.add_promotion(name, amount)

        return self._to_dto(cart)

    @staticmethod
    def _to_dto(cart: Cart) -> CartQuoteDTO:
        return CartQuoteDTO(
            items=[
                CartLineDTO(
                    product_name=product.name,
                    category=product.category,
                    quantity=quantity,
                    unit_price=str(product.price),
                    line_total=str(product.price * quantity),
                )
                for product, quantity in cart.products_with_quantities().items()
            ],
            subtotal=str(cart.subtotal),
            discount_percentage=f"{cart.discount_percentage}%",
            discount=str(cart.discount_amount),
            total=str(cart.total),
            item_count=cart.item_count,
            unique_product_count=cart.unique_product_count,
            summary=cart.summary(),
        )
