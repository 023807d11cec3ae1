"""JSON-file-backed implementation of ProductStore."""

from __future__ import annotations

import logging
from typing import Any

from shop.domain.exceptions import DuplicateKeyError
from shop.domain.model.product import Product
from shop.domain.repository.product_store import ProductStore
from shop.infrastructure.persistence.json_collection import JsonCollection

logger = logging.getLogger(__name__)


class JsonProductStore(JsonCollection[Product], ProductStore):

    entity_name = "Product"

    # --- ProductStore interface -----------------------------------------------

    def create(self, fields: dict[str, Any]) -> Product:
        with self._mutation():
            product = Product.from_input(self.next_id, fields)
            self._ensure_unique_code(product.code)
            self._allocate_id()
            self._records[product.id] = product

        logger.debug("Created product #%s (code=%s)", product.id, product.code)
        return self._copy(product)

    def get(self, product_id: int) -> Product:
        with self._lock:
            return self._copy(self._find(product_id))

    def list_all(self) -> list[Product]:
        with self._lock:
            return [self._copy(p) for p in self._values()]

    def update(self, product_id: int, patch: dict[str, Any]) -> Product:
        with self._mutation():
            updated = self._find(product_id).patched(patch)
            if "code" in patch:
                self._ensure_unique_code(updated.code, exclude_id=product_id)
            self._records[product_id] = updated

        return self._copy(updated)

    def delete(self, product_id: int) -> None:
        with self._mutation():
            self._find(product_id)
            del self._records[product_id]

        logger.debug("Deleted product #%s", product_id)

    # --- Validation -----------------------------------------------------------

    def _ensure_unique_code(self, code: str, exclude_id: int | None = None) -> None:
        for product in self._records.values():
            if product.id != exclude_id and product.code == code:
                raise DuplicateKeyError(
                    f"Product with code '{code}' already exists (ID {product.id})."
                )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict[str, Any]:
        return {
            "id": product.id,
            "title": product.title,
            "description": product.description,
            "code": product.code,
            "price": product.price,
            "status": product.status,
            "stock": product.stock,
            "category": product.category,
            "thumbnails": list(product.thumbnails),
        }

    @staticmethod
    def _to_domain(raw: dict[str, Any]) -> Product:
        return Product(
            id=int(raw["id"]),
            title=raw["title"],
            description=raw["description"],
            code=raw["code"],
            price=raw["price"],
            status=raw.get("status", True),
            stock=raw["stock"],
            category=raw["category"],
            thumbnails=list(raw.get("thumbnails") or []),
        )
