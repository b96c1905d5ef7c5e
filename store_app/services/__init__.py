"""Business logic modules (catalog, purchases, asset lookup, downloads)."""

from . import (
    asset_service,
    catalog_service,
    download_service,
    purchase_service,
)

__all__ = [
    "asset_service",
    "catalog_service",
    "download_service",
    "purchase_service",
]
