"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data from the application layer to collaborators (CLI,
HTTP routers) without exposing the store records themselves.
"""

from __future__ import annotations

from dataclasses import dataclass

from shop.domain.model.product import Product


@dataclass(frozen=True)
class ProductPageDTO:
    """Output: one page of the product catalog."""

    items: list[Product]
    page: int
    total_pages: int
    has_prev_page: bool
    has_next_page: bool
    prev_page: int | None
    next_page: int | None


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the user."""

    product_id: int
    title: str
    quantity: int
    unit_price: int | float | None  # None when the product no longer exists
    line_total: int | float | None

    @property
    def available(self) -> bool:
        return self.unit_price is not None


@dataclass(frozen=True)
class CartDTO:
    """Output: a cart with its lines resolved against the catalog."""

    id: int
    lines: list[CartLineDTO]
    total: int | float
