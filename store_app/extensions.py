"""Shared Flask extension instances."""

from __future__ import annotations

from flask import Flask, current_app
from flask_cors import CORS

from .errors import ConfigurationError
from .utils.download_keys import DownloadKeySigner, DownloadKeyVerifier


class DownloadKeys:
    """Builds the signer/verifier pair once per app from its configuration."""

    extension_name = "download_keys"

    def __init__(self, app: Flask | None = None) -> None:
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        secret = app.config.get("DOWNLOAD_SECRET_KEY")
        if not secret:
            raise ConfigurationError(
                "DOWNLOAD_SECRET_KEY is not set; refusing to serve protected downloads"
            )
        signer = DownloadKeySigner(
            secret,
            digest=app.config.get("DOWNLOAD_KEY_DIGEST", "sha256"),
            token_field=app.config.get("DOWNLOAD_KEY_FIELD", "key"),
        )
        app.extensions[self.extension_name] = (signer, DownloadKeyVerifier(signer))

    @property
    def signer(self) -> DownloadKeySigner:
        return current_app.extensions[self.extension_name][0]

    @property
    def verifier(self) -> DownloadKeyVerifier:
        return current_app.extensions[self.extension_name][1]


cors: CORS = CORS()
download_keys: DownloadKeys = DownloadKeys()
