"""Cart record and its line items.

A cart owns an ordered sequence of line items. Within one cart every
line item references a distinct product; ``LineItemMerger`` keeps it so.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shop.domain.exceptions import NotFoundError


@dataclass
class LineItem:
    product: int
    quantity: int


@dataclass
class Cart:

    id: int
    products: list[LineItem] = field(default_factory=list)

    def find_item(self, product_id: int) -> LineItem | None:
        for item in self.products:
            if item.product == product_id:
                return item
        return None

    def set_quantity(self, product_id: int, quantity: int) -> None:
        """Overwrite the quantity of an existing line."""
        item = self.find_item(product_id)
        if item is None:
            raise NotFoundError(
                f"Product with ID {product_id} not found in cart {self.id}"
            )
        item.quantity = quantity

    def remove_product(self, product_id: int) -> None:
        item = self.find_item(product_id)
        if item is None:
            raise NotFoundError(
                f"Product with ID {product_id} not found in cart {self.id}"
            )
        self.products.remove(item)

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity for item in self.products)
