"""Application service: List Products use case (query).

The store always returns the whole catalog; slicing into pages is the
caller's concern and happens here.
"""

from __future__ import annotations

import math

from shop.application.dto import ProductPageDTO
from shop.domain.exceptions import ValidationError
from shop.domain.repository.product_store import ProductStore


class ListProductsHandler:

    def __init__(self, product_store: ProductStore) -> None:
        self._product_store = product_store

    def handle(self, limit: int | None = None, page: int = 1) -> ProductPageDTO:
        """Return one page of at most *limit* products.

        Without a limit the whole catalog is a single page.
        """
        products = self._product_store.list_all()

        if limit is None:
            return ProductPageDTO(
                items=products,
                page=1,
                total_pages=1,
                has_prev_page=False,
                has_next_page=False,
                prev_page=None,
                next_page=None,
            )

        if limit <= 0:
            raise ValidationError("Limit must be positive")
        if page <= 0:
            raise ValidationError("Page must be positive")

        total_pages = max(1, math.ceil(len(products) / limit))
        start = (page - 1) * limit
        has_prev = page > 1
        has_next = page < total_pages
        return ProductPageDTO(
            items=products[start:start + limit],
            page=page,
            total_pages=total_pages,
            has_prev_page=has_prev,
            has_next_page=has_next,
            prev_page=page - 1 if has_prev else None,
            next_page=page + 1 if has_next else None,
        )
