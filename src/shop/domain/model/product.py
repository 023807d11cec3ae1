"""Product record.

Products live independently of carts. A cart only references a product
by its ``id``; deleting a product never touches existing carts.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any

from shop.domain.exceptions import ValidationError

# Fields that must be present and truthy when a product is created.
REQUIRED_FIELDS = ("title", "description", "price", "category", "code", "stock")

# Free-text fields; collaborators must not coerce these to other JSON types.
TEXT_FIELDS = ("title", "description", "code", "category")


@dataclass
class Product:
    """A product in the catalog.

    ``id`` is assigned by the store on creation and never changes.
    ``code`` is unique across all live products in one store.
    """

    id: int
    title: str
    description: str
    code: str
    price: int | float
    stock: int
    category: str
    status: bool = True
    thumbnails: list[str] = field(default_factory=list)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def from_input(product_id: int, data: dict[str, Any]) -> Product:
        """Build a new product from caller input, enforcing required fields."""
        missing = [name for name in REQUIRED_FIELDS if not data.get(name)]
        if missing:
            raise ValidationError.missing(missing)

        status = data.get("status")
        thumbnails = data.get("thumbnails")
        return Product(
            id=product_id,
            title=data["title"],
            description=data["description"],
            code=_checked_code(data["code"]),
            price=data["price"],
            stock=data["stock"],
            category=data["category"],
            status=True if status is None else bool(status),
            thumbnails=_as_thumbnails(thumbnails),
        )

    # --- Mutation -------------------------------------------------------------

    def patched(self, patch: dict[str, Any]) -> Product:
        """Return a copy with the fields in *patch* overwritten.

        Fields absent from *patch* are preserved. The ``id`` cannot be
        changed and unknown field names are rejected.
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(patch) - known)
        if unknown:
            raise ValidationError(f"Unknown product fields: {', '.join(unknown)}")

        if "id" in patch and patch["id"] != self.id:
            raise ValidationError(f"Product id {self.id} cannot be changed")

        changes = {k: v for k, v in patch.items() if k != "id"}
        if "code" in changes:
            changes["code"] = _checked_code(changes["code"])
        if "thumbnails" in changes:
            changes["thumbnails"] = _as_thumbnails(changes["thumbnails"])
        return replace(self, **changes)


def _checked_code(code: Any) -> str:
    # Uniqueness is checked with ==, so every code must be a str.
    if not isinstance(code, str):
        raise ValidationError(
            f"Product code must be a string, got {type(code).__name__}"
        )
    return code


def _as_thumbnails(value: Any) -> list[str]:
    """Normalize a thumbnails value; a bare string is a single thumbnail."""
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return list(value)
    raise ValidationError("Thumbnails must be a list of strings")
