"""Structured logging configuration with request correlation.

Everything reaching stdout passes through :class:`JSONFormatter`, which
masks Subsonic credential parameters (``p``, ``password``, ``t``, ``s``)
wherever a URL query string ends up in a message, traceback or extra.
"""

from __future__ import annotations

import json
import logging
import re
import sys
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from flask import Flask, g, has_request_context, request

REQUEST_ID_HEADER = "X-Request-ID"
CORRELATION_HEADERS = ("X-Request-ID", "X-Correlation-ID")

# Attributes passed through ``extra=`` that are copied into the JSON payload.
EXTRA_KEYS = ("endpoint", "elapsed_ms", "username", "upstream_url", "upstream_status", "reason")

REDACTED = "***"
_SECRET_QUERY_PARAM = re.compile(r"(?<=[?&])(p|password|t|s)=[^&\s'\"]*")


def redact(text: str) -> str:
    """Mask credential values carried in ``?key=value`` query strings."""

    return _SECRET_QUERY_PARAM.sub(lambda m: f"{m.group(1)}={REDACTED}", text)


class JSONFormatter(logging.Formatter):
    """Render log records as redacted JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "time": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "name": record.name,
            "message": redact(record.getMessage()),
            "request_id": getattr(record, "request_id", None),
        }
        if record.exc_info:
            payload["exc_info"] = redact(self.formatException(record.exc_info))
        for key in EXTRA_KEYS:
            if hasattr(record, key):
                value = getattr(record, key)
                payload[key] = redact(value) if isinstance(value, str) else value
        return json.dumps(payload, default=str)


class RequestIdFilter(logging.Filter):
    """Ensure a ``request_id`` attribute is always present on log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = ensure_request_id() if has_request_context() else None
        return True


def ensure_request_id() -> str:
    """Return the current request identifier, adopting a correlation header."""

    if not has_request_context():
        return str(uuid4())
    if "request_id" not in g:
        supplied = (request.headers.get(header) for header in CORRELATION_HEADERS)
        g.request_id = next((value for value in supplied if value), None) or str(uuid4())
    return g.request_id


def configure_logging(level: str | int = "INFO") -> None:
    """Route the root logger to stdout through the redacting JSON formatter."""

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter())
    handler.addFilter(RequestIdFilter())
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level.upper() if isinstance(level, str) else level)


def init_app(app: Flask) -> None:
    """Seed the request id and echo it back on every response."""

    @app.before_request
    def _seed_request_id() -> None:
        ensure_request_id()

    @app.after_request
    def _inject_response_header(response):
        response.headers.setdefault(REQUEST_ID_HEADER, ensure_request_id())
        return response
