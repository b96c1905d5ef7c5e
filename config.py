"""Application configuration objects."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Type

PROJECT_ROOT = Path(__file__).resolve().parent


class BaseConfig:
    """Shared defaults across all environments."""

    APP_NAME = "Images R Us"
    # Older deployments export SECRET_KEY instead.
    DOWNLOAD_SECRET_KEY = os.getenv("DOWNLOAD_SECRET_KEY") or os.getenv("SECRET_KEY", "")
    DOWNLOAD_KEY_DIGEST = os.getenv("DOWNLOAD_KEY_DIGEST", "sha256")
    DOWNLOAD_KEY_FIELD = os.getenv("DOWNLOAD_KEY_FIELD", "key")
    DOWNLOAD_MIMETYPE = "image/jpeg"
    PRIVATE_ASSET_DIR = os.getenv("PRIVATE_ASSET_DIR", str(PROJECT_ROOT / "assets" / "private"))
    THUMBNAIL_DIR = os.getenv("THUMBNAIL_DIR", str(PROJECT_ROOT / "assets" / "thumbnails"))
    ASSET_EXTENSION = ".jpg"
    STORE_CURRENCY_SYMBOL = os.getenv("STORE_CURRENCY_SYMBOL", "£")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
    JSON_SORT_KEYS = False


class DevConfig(BaseConfig):
    DEBUG = True


class ProdConfig(BaseConfig):
    DEBUG = False


class TestConfig(BaseConfig):
    TESTING = True
    DOWNLOAD_SECRET_KEY = "s3cr3t"
    DOWNLOAD_KEY_DIGEST = "sha256"
    DOWNLOAD_KEY_FIELD = "key"


CONFIG_ALIASES: dict[str, Type[BaseConfig]] = {
    "dev": DevConfig,
    "development": DevConfig,
    "prod": ProdConfig,
    "production": ProdConfig,
    "test": TestConfig,
    "testing": TestConfig,
}


@lru_cache
def resolve_config(name_or_class: Any) -> Any:
    """Resolve config argument to the object expected by `app.config.from_object`."""

    if name_or_class is None:
        return DevConfig
    if isinstance(name_or_class, str):
        return CONFIG_ALIASES.get(name_or_class, name_or_class)
    return name_or_class
