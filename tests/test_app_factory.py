"""Smoke tests for the Flask application factory."""

from __future__ import annotations

import pytest

from config import TestConfig
from store_app import create_app
from store_app.errors import ConfigurationError


class MissingSecretConfig(TestConfig):
    DOWNLOAD_SECRET_KEY = ""


class NoneSecretConfig(TestConfig):
    DOWNLOAD_SECRET_KEY = None


class BadDigestConfig(TestConfig):
    DOWNLOAD_KEY_DIGEST = "md5"


def test_app_creation(app):
    assert app is not None
    assert app.config["TESTING"] is True
    assert "download_keys" in app.extensions


@pytest.mark.parametrize("config_class", [MissingSecretConfig, NoneSecretConfig])
def test_missing_secret_refuses_to_start(config_class):
    with pytest.raises(ConfigurationError) as excinfo:
        create_app(config_class)
    assert "DOWNLOAD_SECRET_KEY" in str(excinfo.value)


def test_unsupported_digest_refuses_to_start():
    with pytest.raises(ConfigurationError):
        create_app(BadDigestConfig)


def test_ping_endpoint(client):
    response = client.get("/api/catalog/ping")
    assert response.status_code == 200
    payload = response.get_json()
    assert payload["status"] == "ok"
