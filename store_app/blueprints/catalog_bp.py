"""JSON catalog endpoints."""

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, abort, jsonify

from ..errors import PaymentDeclined
from ..schemas import CatalogItemSchema
from ..services import catalog_service, purchase_service

catalog_bp = Blueprint("catalog_bp", __name__)

items_schema = CatalogItemSchema(many=True)


@catalog_bp.errorhandler(PaymentDeclined)
def handle_payment_declined(err: PaymentDeclined):
    return jsonify({"error": err.code, "message": err.payload.get("message")}), HTTPStatus.PAYMENT_REQUIRED


@catalog_bp.get("/ping")
def ping():
    return jsonify({"module": "catalog", "status": "ok"})


@catalog_bp.get("")
def list_catalog():
    return jsonify({"items": items_schema.dump(catalog_service.catalog_view())})


@catalog_bp.post("/<file>/purchase")
def purchase(file: str):
    if catalog_service.get_entry(file) is None:
        abort(404)
    purchase_service.attempt_purchase(file)
