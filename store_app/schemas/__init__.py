"""Marshmallow schemas for the JSON API."""

from .catalog_schema import CatalogItemSchema

__all__ = ["CatalogItemSchema"]
