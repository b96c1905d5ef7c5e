"""File-system lookups for private (full resolution) and public images."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from flask import current_app
from werkzeug.utils import safe_join


def _asset_path(root_key: str, file: str) -> Optional[Path]:
    cfg = current_app.config
    root = cfg.get(root_key)
    if not root:
        return None
    joined = safe_join(root, f"{file}{cfg.get('ASSET_EXTENSION', '.jpg')}")
    if joined is None:
        return None
    path = Path(joined)
    return path if path.is_file() else None


def private_asset_path(file: str) -> Optional[Path]:
    return _asset_path("PRIVATE_ASSET_DIR", file)


def thumbnail_path(file: str) -> Optional[Path]:
    return _asset_path("THUMBNAIL_DIR", file)
