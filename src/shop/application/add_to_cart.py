"""Application service: Add Product to Cart use case.

Checks the product exists before merging it into the cart. The product
lookup and the cart update are two separate store operations; they are
not atomic together.
"""

from __future__ import annotations

from shop.domain.model.cart import Cart
from shop.domain.repository.cart_store import CartStore
from shop.domain.repository.product_store import ProductStore
from shop.domain.service.line_item_merger import DEFAULT_QUANTITY


class AddToCartHandler:

    def __init__(self, cart_store: CartStore, product_store: ProductStore) -> None:
        self._cart_store = cart_store
        self._product_store = product_store

    def handle(
        self, cart_id: int, product_id: int, quantity: int = DEFAULT_QUANTITY
    ) -> Cart:
        # Raises NotFoundError for both an unknown cart and an unknown product.
        self._cart_store.get(cart_id)
        self._product_store.get(product_id)
        return self._cart_store.add_or_merge_product(cart_id, product_id, quantity)
