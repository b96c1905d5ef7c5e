"""Metrics and health endpoints for scraping and health checks."""

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from ..extensions import download_keys
from ..metrics import latest_metrics
from ..services import catalog_service

metrics_bp = Blueprint("metrics_bp", __name__)


@metrics_bp.get("/metrics")
def metrics():
    payload, content_type = latest_metrics()
    return Response(payload, mimetype=content_type)


@metrics_bp.get("/healthz")
def healthz():
    # Reaching this handler means the signing secret was configured.
    return jsonify(
        {
            "status": "ok",
            "catalog_entries": len(catalog_service.list_entries()),
            "key_digest": download_keys.signer.digest,
        }
    )
