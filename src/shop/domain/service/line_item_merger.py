"""Domain service: merge-on-insert for cart line items.

Adding a product that is already in the cart increments the existing
line instead of appending a duplicate, so ``product`` values stay unique
within one cart's line items while the sequence keeps insertion order.

Quantities are taken as given. Zero or negative values are applied
unchanged; collaborators validate input before calling in.
"""

from __future__ import annotations

from collections.abc import Iterable

from shop.domain.model.cart import LineItem

DEFAULT_QUANTITY = 1


class LineItemMerger:

    @staticmethod
    def merge(
        items: list[LineItem],
        product_id: int,
        quantity: int = DEFAULT_QUANTITY,
    ) -> LineItem:
        """Add *quantity* of *product_id* to *items* in place.

        Returns the line item that now holds the product.
        """
        for item in items:
            if item.product == product_id:
                item.quantity = item.quantity + quantity
                return item

        item = LineItem(product=product_id, quantity=quantity)
        items.append(item)
        return item

    @classmethod
    def fold(cls, pairs: Iterable[tuple[int, int]]) -> list[LineItem]:
        """Build a fresh line-item sequence from ``(product_id, quantity)`` pairs.

        Repeated product IDs accumulate into the first line for that product.
        """
        items: list[LineItem] = []
        for product_id, quantity in pairs:
            cls.merge(items, product_id, quantity)
        return items
