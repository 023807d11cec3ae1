"""Abstract store for Cart records."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from shop.domain.model.cart import Cart
from shop.domain.service.line_item_merger import DEFAULT_QUANTITY


class CartStore(ABC):

    @abstractmethod
    def create(self) -> Cart:
        """Assign the next ID and persist a new, empty cart."""

    @abstractmethod
    def get(self, cart_id: int) -> Cart:
        """Return a cart by its ID; raises NotFoundError if absent."""

    @abstractmethod
    def list_all(self) -> list[Cart]:
        """Return every cart in insertion order."""

    @abstractmethod
    def add_or_merge_product(
        self, cart_id: int, product_id: int, quantity: int = DEFAULT_QUANTITY
    ) -> Cart:
        """Add a product to a cart, merging into an existing line if present."""

    @abstractmethod
    def set_product_quantity(self, cart_id: int, product_id: int, quantity: int) -> Cart:
        """Overwrite the quantity of a line already in the cart."""

    @abstractmethod
    def remove_product(self, cart_id: int, product_id: int) -> Cart:
        """Drop a product's line from the cart."""

    @abstractmethod
    def replace_products(
        self, cart_id: int, items: Iterable[tuple[int, int]]
    ) -> Cart:
        """Replace the cart's contents with ``(product_id, quantity)`` pairs."""

    @abstractmethod
    def delete(self, cart_id: int) -> None:
        """Remove a cart; raises NotFoundError if absent."""
