"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from shop.application.dto import CartDTO, CartLineDTO
from shop.domain.exceptions import NotFoundError
from shop.domain.repository.cart_store import CartStore
from shop.domain.repository.product_store import ProductStore


class ShowCartHandler:

    def __init__(self, cart_store: CartStore, product_store: ProductStore) -> None:
        self._cart_store = cart_store
        self._product_store = product_store

    def handle(self, cart_id: int) -> CartDTO:
        cart = self._cart_store.get(cart_id)

        lines: list[CartLineDTO] = []
        for item in cart.products:
            try:
                product = self._product_store.get(item.product)
            except NotFoundError:
                # Product was deleted after it went into the cart.
                lines.append(
                    CartLineDTO(
                        product_id=item.product,
                        title="(unavailable)",
                        quantity=item.quantity,
                        unit_price=None,
                        line_total=None,
                    )
                )
                continue

            lines.append(
                CartLineDTO(
                    product_id=product.id,
                    title=product.title,
                    quantity=item.quantity,
                    unit_price=product.price,
                    line_total=product.price * item.quantity,
                )
            )

        total = sum(line.line_total for line in lines if line.line_total is not None)
        return CartDTO(id=cart.id, lines=lines, total=total)
