from __future__ import annotations

from pathlib import Path
from typing import List, Literal, Optional

import yaml
from pydantic_settings import BaseSettings

from shopsphere.schemas import CatalogItem


class Settings(BaseSettings):
    """Runtime configuration sourced from environment variables."""

    apper_project_id: str = ""
    apper_public_key: str = ""
    apper_base_url: str = "https://api.apper.io"
    request_timeout: float = 10.0

    price_min: float = 0.0
    price_max: float = 1000.0
    max_quantity: int = 10
    confirmation_delay: float = 2.0
    max_sessions: int = 1000
    toast_auto_close_ms: int = 2000
    default_theme: Literal["light", "dark"] = "light"
    catalog_path: Optional[str] = None

    log_level: str = "INFO"
    log_format: Literal["rich", "json"] = "rich"
    version: str = "v1.0"

    class Config:
        env_file = "config/.env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def load_settings() -> Settings:
    """Provide a reusable settings singleton."""

    return Settings()


def load_catalog(path: str | Path) -> List[CatalogItem]:
    """Load a product catalog from YAML.

    The file must hold a top-level ``products`` list; each entry is
    validated into a CatalogItem.
    """

    cfg_path = Path(path)
    if not cfg_path.exists():
        raise FileNotFoundError(f"Catalog not found at {cfg_path}")

    with cfg_path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}

    if "products" not in data:
        raise ValueError("catalog file must contain a 'products' list.")

    return [CatalogItem(**entry) for entry in data["products"]]


settings = load_settings()
