"""Authorization of full-resolution downloads."""

from __future__ import annotations

from pathlib import Path

from flask import current_app

from ..errors import AssetNotFound, DownloadForbidden
from ..extensions import download_keys
from ..metrics import record_verification
from . import asset_service, catalog_service

FORBIDDEN_MESSAGE = "You need to purchase the image before downloading."


def authorize_download(query: str, file: str) -> Path:
    """Return the private file for ``file`` if ``query`` carries a valid key.

    The key is always checked, even for unknown assets, so both branches cost
    one digest. Unknown assets raise :class:`AssetNotFound` regardless of the
    key; every key failure raises the same :class:`DownloadForbidden`.
    """

    result = download_keys.verifier.check(query, file)
    entry = catalog_service.get_entry(file)
    record_verification(result.accepted, result.reason)

    if entry is None:
        current_app.logger.info("Download for unknown asset", extra={"reason": "not_found"})
        raise AssetNotFound("asset_not_found", {"file": file})
    if not result.accepted:
        current_app.logger.warning(
            "Download key rejected", extra={"asset": entry.file, "reason": result.reason}
        )
        raise DownloadForbidden("download_forbidden", {"message": FORBIDDEN_MESSAGE})

    path = asset_service.private_asset_path(entry.file)
    if path is None:
        current_app.logger.error("Private asset missing on disk", extra={"asset": entry.file})
        raise AssetNotFound("asset_not_found", {"file": entry.file})
    current_app.logger.info("Download authorized", extra={"asset": entry.file, "reason": result.reason})
    return path
