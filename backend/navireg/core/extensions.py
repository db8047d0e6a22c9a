"""Global Flask extension instances and initialization helpers."""

from __future__ import annotations

from flask import Flask
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

# Global singleton (import-safe); storage and strategy come from app config.
limiter = Limiter(key_func=get_remote_address)


def init_app(app: Flask) -> None:
    """Bind flask-limiter to the application.

    Parameters
    ----------
    app: flask.Flask
        Application providing ``RATELIMIT_STORAGE_URI``,
        ``RATELIMIT_STRATEGY`` and ``RATELIMIT_HEADERS_ENABLED``. Every call
        builds a fresh storage, so each app starts with empty counters.
    """
    limiter.init_app(app)


__all__ = ["limiter", "init_app"]
