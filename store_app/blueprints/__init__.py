"""Blueprints (storefront, JSON catalog, metrics)."""

from __future__ import annotations

from .catalog_bp import catalog_bp
from .metrics_bp import metrics_bp
from .store_bp import store_bp

BLUEPRINTS = (
    (store_bp, ""),
    (catalog_bp, "/api/catalog"),
    (metrics_bp, ""),
)

__all__ = [
    "BLUEPRINTS",
    "catalog_bp",
    "metrics_bp",
    "store_bp",
]
