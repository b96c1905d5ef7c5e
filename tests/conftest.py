"""Pytest configuration for ensuring project modules resolve correctly."""

from __future__ import annotations

import hashlib
import hmac
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from store_app import create_app

TEST_SECRET = b"s3cr3t"
FULL_RES = {"free": b"full-resolution-free", "valuable": b"full-resolution-valuable"}
THUMBS = {"free": b"thumb-free", "valuable": b"thumb-valuable"}


def _expected_key(canonical: str, secret: bytes = TEST_SECRET) -> str:
    return hmac.new(secret, canonical.encode("utf-8"), hashlib.sha256).hexdigest()


@pytest.fixture()
def app(tmp_path):
    private_dir = tmp_path / "private"
    thumbs_dir = tmp_path / "thumbnails"
    private_dir.mkdir()
    thumbs_dir.mkdir()
    for name, data in FULL_RES.items():
        (private_dir / f"{name}.jpg").write_bytes(data)
    for name, data in THUMBS.items():
        (thumbs_dir / f"{name}.jpg").write_bytes(data)

    app = create_app("test")
    app.config["PRIVATE_ASSET_DIR"] = str(private_dir)
    app.config["THUMBNAIL_DIR"] = str(thumbs_dir)
    yield app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def expected_key():
    """HMAC-SHA256 of a canonical string under the test secret."""

    return _expected_key
