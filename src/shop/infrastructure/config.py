"""Runtime settings, read from ``SHOP_*`` environment variables or ``.env``."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ShopSettings(BaseSettings):

    data_dir: Path = Field(default=Path("data"), description="Directory holding the JSON data files.")
    products_file: str = "products.json"
    carts_file: str = "carts.json"
    atomic_writes: bool = Field(
        default=True,
        description="Write to a temp file and rename over the data file.",
    )
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="SHOP_",
        env_file=".env",
        extra="ignore",
    )

    @property
    def products_path(self) -> Path:
        return self.data_dir / self.products_file

    @property
    def carts_path(self) -> Path:
        return self.data_dir / self.carts_file
