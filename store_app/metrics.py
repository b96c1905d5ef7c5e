"""Prometheus metrics helpers."""

from __future__ import annotations

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST

REQUEST_COUNT = Counter(
    "store_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "store_request_latency_seconds",
    "Latency of HTTP requests in seconds",
    ["endpoint"],
)
DOWNLOAD_VERIFICATIONS = Counter(
    "store_download_verifications_total",
    "Download key verification outcomes",
    ["outcome", "reason"],
)
PURCHASE_ATTEMPTS = Counter(
    "store_purchase_attempts_total",
    "Purchase attempts by asset",
    ["asset"],
)


def record_request(method: str, endpoint: str, status: int, latency: float) -> None:
    REQUEST_COUNT.labels(method=method, endpoint=endpoint, status=status).inc()
    REQUEST_LATENCY.labels(endpoint=endpoint).observe(latency)


def record_verification(accepted: bool, reason: str) -> None:
    outcome = "accepted" if accepted else "rejected"
    DOWNLOAD_VERIFICATIONS.labels(outcome=outcome, reason=reason).inc()


def record_purchase_attempt(asset: str) -> None:
    PURCHASE_ATTEMPTS.labels(asset=asset).inc()


def latest_metrics() -> tuple[bytes, str]:
    data = generate_latest()
    return data, CONTENT_TYPE_LATEST
