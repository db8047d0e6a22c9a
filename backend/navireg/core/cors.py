"""CORS policy for the registration front end."""

from __future__ import annotations

from flask import Flask
from flask_cors import CORS


def init_app(app: Flask) -> None:
    """Allow the configured front end to call ``/api/*`` from the browser.

    Parameters
    ----------
    app: flask.Flask
        Application whose ``CORS_ORIGINS`` setting (sourced from
        ``FRONTEND_URL``) is consulted. Several origins may be given
        comma-separated. A blank value or ``"*"`` allows any origin, without
        credential support.
    """
    raw_origins = app.config.get("CORS_ORIGINS") or ""
    origins = [o.strip() for o in raw_origins.split(",") if o.strip()]
    wildcard = not origins or origins == ["*"]

    CORS(
        app,
        resources={r"/api/*": {"origins": "*" if wildcard else origins}},
        supports_credentials=not wildcard,
        max_age=app.config.get("CORS_MAX_AGE", 600),
    )
