from __future__ import annotations

from flask import current_app

from ..errors import PaymentDeclined
from ..metrics import record_purchase_attempt
from . import catalog_service

DECLINE_MESSAGE = "Unable to take sufficient funds from your account."


def attempt_purchase(file: str) -> None:
    """Try to charge for an image. The account never has enough funds."""

    entry = catalog_service.get_entry(file)
    record_purchase_attempt(entry.file if entry else "unknown")
    current_app.logger.info(
        "Purchase declined",
        extra={"asset": entry.file if entry else None, "reason": "insufficient_funds"},
    )
    raise PaymentDeclined(
        "payment_declined",
        {"file": file, "message": DECLINE_MESSAGE},
    )
