"""store_app package – application factory and blueprint registration."""

from __future__ import annotations

import os
from time import perf_counter

import click
from flask import Flask, g, request

from config import resolve_config
from .blueprints import BLUEPRINTS
from .errors import ConfigurationError
from .extensions import cors, download_keys
from .logging_config import configure_logging, assign_request_id
from .metrics import record_request


def create_app(config_name: str | None = None) -> Flask:
    """Application factory used by both CLI and runtime servers.

    Raises :class:`ConfigurationError` when no download secret is configured,
    so a misconfigured process never starts serving.
    """

    app = Flask(__name__)
    _configure_app(app, config_name)
    configure_logging(app)
    _register_extensions(app)
    _register_blueprints(app)
    _register_template_filters(app)
    _register_cli(app)
    _register_request_hooks(app)

    return app


def _configure_app(app: Flask, config_name: str | None) -> None:
    env_name = config_name or os.getenv("FLASK_CONFIG")
    config_obj = resolve_config(env_name)
    app.config.from_object(config_obj)


def _register_extensions(app: Flask) -> None:
    try:
        download_keys.init_app(app)
    except ConfigurationError as exc:
        app.logger.critical("Refusing to start: %s", exc)
        raise
    cors.init_app(
        app,
        resources={r"/api/*": {"origins": app.config.get("CORS_ORIGINS", "*")}},
    )


def _register_blueprints(app: Flask) -> None:
    for blueprint, prefix in BLUEPRINTS:
        app.register_blueprint(blueprint, url_prefix=prefix)


def _register_template_filters(app: Flask) -> None:
    @app.template_filter("price")
    def format_price(value) -> str:
        return f"{int(value):,}"


def _register_request_hooks(app: Flask) -> None:
    @app.before_request
    def start_request():
        assign_request_id()
        g.request_started_at = perf_counter()

    @app.after_request
    def finalize(response):
        request_id = getattr(g, "request_id", None)
        if request_id:
            response.headers["X-Request-ID"] = request_id
        started = getattr(g, "request_started_at", None)
        latency = perf_counter() - started if started else 0.0
        endpoint = request.endpoint or "unmatched"
        record_request(request.method, endpoint, response.status_code, latency)
        return response


def _register_cli(app: Flask) -> None:
    @app.cli.command("download-key")
    @click.argument("asset")
    def download_key_command(asset: str) -> None:
        """Print a signed download link for ASSET (operator tooling)."""

        from .services import catalog_service

        if catalog_service.get_entry(asset) is None:
            raise click.ClickException(f"Asset {asset!r} is not in the catalog.")
        click.echo(f"/?{download_keys.signer.link_query(asset)}")

    @app.cli.group("catalog")
    def catalog_group():
        """Catalog inspection commands."""

    @catalog_group.command("list")
    def list_catalog_command() -> None:
        """List catalog entries and whether they are entitled."""

        from .services import catalog_service

        for entry in catalog_service.list_entries():
            status = "entitled" if entry.entitled else "for sale"
            click.echo(f"{entry.file}\t{entry.title}\t{entry.price}\t{status}")
