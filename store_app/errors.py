"""Exception types shared across the store application."""

from __future__ import annotations


class StoreError(Exception):
    def __init__(self, code: str, payload: dict | None = None):
        super().__init__(code)
        self.code = code
        self.payload = payload or {}


class ConfigurationError(StoreError):
    """Raised at startup when required settings are missing or invalid."""

    def __init__(self, message: str):
        super().__init__("configuration_error", {"message": message})
        self.message = message

    def __str__(self) -> str:
        return self.message


class DuplicateTokenField(StoreError):
    def __init__(self, field: str, occurrences: int):
        super().__init__("duplicate_key", {"field": field, "occurrences": occurrences})
        self.field = field
        self.occurrences = occurrences


class PaymentDeclined(StoreError):
    pass


class AssetNotFound(StoreError):
    pass


class DownloadForbidden(StoreError):
    pass
