"""Application factory wiring Flask extensions and blueprints."""

from __future__ import annotations

from flask import Flask

from navireg.core.config import BaseConfig, ensure_required_settings, get_config
from navireg.core.logger import configure_logging, init_app as init_logging


def create_app(
    config: str | type[BaseConfig] | object | None = None,
    *,
    instance_relative_config: bool = True,
    instance_config_filename: str = "config.py",
) -> Flask:
    """Build and configure the Flask application.

    :raises navireg.core.config.ConfigurationError: When the upstream URL or
        admin credentials are missing.
    """

    app = Flask(__name__, instance_relative_config=instance_relative_config)

    app.config.from_object(get_config() if config is None else config)
    if instance_relative_config and instance_config_filename:
        app.config.from_pyfile(instance_config_filename, silent=True)
    app.json.sort_keys = False  # type: ignore[attr-defined]

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))
    ensure_required_settings(app.config)

    # Proxy headers if running behind a reverse proxy
    from navireg.core import proxy

    proxy.init_app(app)

    from navireg.core import extensions

    extensions.init_app(app)

    init_logging(app)

    from navireg.core import cors

    cors.init_app(app)

    from navireg.api import init_app as init_api

    init_api(app)

    from navireg.core import errors

    errors.init_app(app)

    app.logger.info("app.started", extra={"upstream_url": app.config["NAVIDROME_URL"]})
    return app
