"""Abstract store for Product records.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON file, document database,
in-memory) live elsewhere and share this contract.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from shop.domain.model.product import Product


class ProductStore(ABC):

    @abstractmethod
    def create(self, fields: dict[str, Any]) -> Product:
        """Validate *fields*, assign the next ID and persist a new product.

        Raises ValidationError for missing required fields and
        DuplicateKeyError when ``code`` is already used.
        """

    @abstractmethod
    def get(self, product_id: int) -> Product:
        """Return a product by its ID; raises NotFoundError if absent."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in insertion order."""

    @abstractmethod
    def update(self, product_id: int, patch: dict[str, Any]) -> Product:
        """Overwrite the fields present in *patch* and persist.

        Raises NotFoundError if the product is absent. Also raises
        ValidationError when *patch* names a field that is not a product
        field, changes ``id``, or carries a non-string ``code``, and
        DuplicateKeyError when the new ``code`` belongs to another product.
        """

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Remove a product; raises NotFoundError if absent."""
