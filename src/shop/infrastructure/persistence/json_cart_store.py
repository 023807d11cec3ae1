"""JSON-file-backed implementation of CartStore.

Adding a product goes through ``LineItemMerger`` so a cart never holds
two lines for the same product.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from shop.domain.model.cart import Cart, LineItem
from shop.domain.repository.cart_store import CartStore
from shop.domain.service.line_item_merger import DEFAULT_QUANTITY, LineItemMerger
from shop.infrastructure.persistence.json_collection import JsonCollection

logger = logging.getLogger(__name__)


class JsonCartStore(JsonCollection[Cart], CartStore):

    entity_name = "Cart"

    # --- CartStore interface --------------------------------------------------

    def create(self) -> Cart:
        with self._mutation():
            cart = Cart(id=self._allocate_id())
            self._records[cart.id] = cart

        logger.debug("Created cart #%s", cart.id)
        return self._copy(cart)

    def get(self, cart_id: int) -> Cart:
        with self._lock:
            return self._copy(self._find(cart_id))

    def list_all(self) -> list[Cart]:
        with self._lock:
            return [self._copy(c) for c in self._values()]

    def add_or_merge_product(
        self, cart_id: int, product_id: int, quantity: int = DEFAULT_QUANTITY
    ) -> Cart:
        with self._mutation():
            cart = self._find(cart_id)
            item = LineItemMerger.merge(cart.products, product_id, quantity)
            result = self._copy(cart)

        logger.debug(
            "Cart #%s: product %s now at quantity %s", cart_id, product_id, item.quantity
        )
        return result

    def set_product_quantity(self, cart_id: int, product_id: int, quantity: int) -> Cart:
        with self._mutation():
            cart = self._find(cart_id)
            cart.set_quantity(product_id, quantity)
            result = self._copy(cart)
        return result

    def remove_product(self, cart_id: int, product_id: int) -> Cart:
        with self._mutation():
            cart = self._find(cart_id)
            cart.remove_product(product_id)
            result = self._copy(cart)
        return result

    def replace_products(
        self, cart_id: int, items: Iterable[tuple[int, int]]
    ) -> Cart:
        with self._mutation():
            cart = self._find(cart_id)
            cart.products = LineItemMerger.fold(items)
            result = self._copy(cart)
        return result

    def delete(self, cart_id: int) -> None:
        with self._mutation():
            self._find(cart_id)
            del self._records[cart_id]

        logger.debug("Deleted cart #%s", cart_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: Cart) -> dict[str, Any]:
        return {
            "id": cart.id,
            "products": [
                {"product": item.product, "quantity": item.quantity}
                for item in cart.products
            ],
        }

    @staticmethod
    def _to_domain(raw: dict[str, Any]) -> Cart:
        return Cart(
            id=int(raw["id"]),
            products=[
                LineItem(product=int(i["product"]), quantity=i["quantity"])
                for i in raw.get("products", [])
            ],
        )
