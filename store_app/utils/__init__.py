"""Utility helpers (download key signing and query canonicalization)."""

from .download_keys import (
    DownloadKeySigner,
    DownloadKeyVerifier,
    VerificationResult,
    canonicalize,
    redact_token,
)

__all__ = [
    "DownloadKeySigner",
    "DownloadKeyVerifier",
    "VerificationResult",
    "canonicalize",
    "redact_token",
]
