"""Reverse-proxy awareness for client addressing."""

from __future__ import annotations

from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix


def init_app(app: Flask) -> None:
    """Trust one hop of ``X-Forwarded-*`` headers when ``USE_PROXYFIX`` is set.

    Off by default: the registration rate limit is keyed on
    ``request.remote_addr``, and a directly exposed app must not let clients
    pick that address through a header. Enable it only behind a reverse proxy
    that overwrites ``X-Forwarded-For``, otherwise every client shares the
    proxy's window.
    """
    if app.config.get("USE_PROXYFIX", False):
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1)
