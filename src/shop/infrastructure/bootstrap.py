"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Stores are built per settings instance and handed to their callers;
nothing here is cached at module level.
"""

from __future__ import annotations

from shop.infrastructure.config import ShopSettings
from shop.infrastructure.persistence.json_cart_store import JsonCartStore
from shop.infrastructure.persistence.json_file import JsonFile
from shop.infrastructure.persistence.json_product_store import JsonProductStore


def product_store(settings: ShopSettings) -> JsonProductStore:
    return JsonProductStore(
        JsonFile(settings.products_path, atomic=settings.atomic_writes)
    )


def cart_store(settings: ShopSettings) -> JsonCartStore:
    return JsonCartStore(JsonFile(settings.carts_path, atomic=settings.atomic_writes))
