"""Schemas for catalog listings."""

from __future__ import annotations

from marshmallow import Schema, fields


class CatalogItemSchema(Schema):
    file = fields.String()
    title = fields.String()
    price = fields.Integer()
    entitled = fields.Boolean()
    thumbnail_url = fields.String()
    download_url = fields.String()
    purchase_url = fields.String()
