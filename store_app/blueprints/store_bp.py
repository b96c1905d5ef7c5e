"""Storefront: catalog page, purchase attempts and protected downloads.

Everything is dispatched from ``/`` on query parameters so the download links
stay in the ``/?download=<file>&key=<hex>`` shape the catalog emits.
"""

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, abort, current_app, render_template, request, send_file

from ..errors import AssetNotFound, DownloadForbidden, PaymentDeclined
from ..services import asset_service, catalog_service, download_service, purchase_service

store_bp = Blueprint("store_bp", __name__)


def _text(message: str, status: HTTPStatus):
    return message, status, {"Content-Type": "text/plain; charset=utf-8"}


@store_bp.errorhandler(PaymentDeclined)
def handle_payment_declined(err: PaymentDeclined):
    return _text(err.payload["message"], HTTPStatus.PAYMENT_REQUIRED)


@store_bp.errorhandler(DownloadForbidden)
def handle_download_forbidden(err: DownloadForbidden):
    return _text(err.payload["message"], HTTPStatus.FORBIDDEN)


@store_bp.errorhandler(AssetNotFound)
def handle_asset_not_found(err: AssetNotFound):
    return _text("Image not found.", HTTPStatus.NOT_FOUND)


@store_bp.get("/")
def index():
    if "purchase" in request.args:
        purchase_service.attempt_purchase(request.args["purchase"])

    if "download" in request.args:
        # The raw query string is what was signed; request.args is decoded.
        query = request.query_string.decode("utf-8", "surrogateescape")
        path = download_service.authorize_download(query, request.args["download"])
        return send_file(path, mimetype=current_app.config.get("DOWNLOAD_MIMETYPE", "image/jpeg"))

    return render_template(
        "index.html",
        app_name=current_app.config.get("APP_NAME", "Images R Us"),
        currency=current_app.config.get("STORE_CURRENCY_SYMBOL", "£"),
        images=catalog_service.catalog_view(),
    )


@store_bp.get("/thumbnails/<file>.jpg")
def thumbnail(file: str):
    if catalog_service.get_entry(file) is None:
        abort(404)
    path = asset_service.thumbnail_path(file)
    if path is None:
        abort(404)
    return send_file(path, mimetype="image/jpeg")
