"""Application logging configuration."""

from __future__ import annotations

import json
import logging
import re
import sys
from typing import Any
from uuid import uuid4

from flask import current_app, g, has_request_context, request

from .utils.download_keys import redact_token

# Query part of a request line, e.g. the werkzeug access log.
_QUERY_IN_MESSAGE = re.compile(r"\?([^\s\"]*)")


def _redacted_query() -> str:
    raw = request.query_string.decode("utf-8", "surrogateescape")
    return redact_token(raw, current_app.config.get("DOWNLOAD_KEY_FIELD", "key"))


class RequestContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if has_request_context():
            record.request_id = getattr(g, "request_id", "n/a")
            record.path = request.path
            record.method = request.method
            record.query = _redacted_query()
        else:
            record.request_id = "-"
            record.path = "-"
            record.method = "-"
            record.query = "-"
        return True


class TokenRedactionFilter(logging.Filter):
    """Masks download keys in any query string embedded in a log message."""

    def __init__(self, token_field: str = "key") -> None:
        super().__init__()
        self.token_field = token_field

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = _QUERY_IN_MESSAGE.sub(
            lambda match: "?" + redact_token(match.group(1), self.token_field), message
        )
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        base: dict[str, Any] = {
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "request_id": getattr(record, "request_id", "-"),
            "path": getattr(record, "path", "-"),
            "method": getattr(record, "method", "-"),
            "query": getattr(record, "query", "-"),
        }
        for extra in ("asset", "reason"):
            if hasattr(record, extra):
                base[extra] = getattr(record, extra)
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False)


def configure_logging(app) -> None:
    level = app.config.get("LOG_LEVEL", "INFO").upper()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())
    handler.addFilter(RequestContextFilter())
    handler.addFilter(TokenRedactionFilter(app.config.get("DOWNLOAD_KEY_FIELD", "key")))
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)


def assign_request_id() -> str:
    req_id = request.headers.get("X-Request-ID") if has_request_context() else None
    if not req_id:
        req_id = uuid4().hex
    g.request_id = req_id
    return req_id
