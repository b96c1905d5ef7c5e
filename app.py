"""Images R Us application entry point.

Loads environment variables, instantiates the Flask app via the store_app
factory, and exposes `app` for `flask --app app run`. Importing this module
exits the process with a readable message when DOWNLOAD_SECRET_KEY (or the
older SECRET_KEY) is unset, instead of a traceback from the factory.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Ensure `.env` files are loaded before configuration happens inside `create_app`.
PROJECT_ROOT = Path(__file__).resolve().parent
if os.getenv("FLASK_SKIP_DOTENV") not in {"1", "true", "True"}:
    try:
        load_dotenv(PROJECT_ROOT / ".env")
    except PermissionError:
        pass

from store_app import create_app  # noqa: E402  (import after load_dotenv)
from store_app.errors import ConfigurationError  # noqa: E402

try:
    app = create_app()
except ConfigurationError as exc:
    sys.exit(f"Images R Us cannot start: {exc}")


def _resolve_port() -> int:
    """Return the port that should be used when running via `python app.py`."""

    return int(os.getenv("PORT", os.getenv("FLASK_RUN_PORT", 8000)))


if __name__ == "__main__":  # pragma: no cover
    app.run(
        debug=app.config.get("DEBUG", False),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_resolve_port(),
    )
