"""Application settings with environment-based simple classes."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any, Final

from dotenv import load_dotenv

# Public selector env var (keep neutral name to avoid collisions)
ENV_VAR: Final[str] = "APP_ENV"  # 'development' | 'testing' | 'production'

REQUIRED_SETTINGS: Final[tuple[str, ...]] = (
    "NAVIDROME_URL",
    "NAVIDROME_ADMIN_USER",
    "NAVIDROME_ADMIN_PASSWORD",
)

# Loads .env during development (no-op when the file is missing)
load_dotenv()


class ConfigurationError(RuntimeError):
    """Raised at startup when a required setting is missing."""


def env_bool(name: str, default: bool = False) -> bool:
    """Parse a boolean flag from an environment variable.

    Parameters
    ----------
    name: str
        Environment variable to inspect.
    default: bool, optional
        Value returned when the variable is unset. Defaults to ``False``.

    Returns
    -------
    bool
        ``True`` if the value resembles ``{"1", "true", "yes", "y", "on"}``
        ignoring case; otherwise ``False`` or ``default`` when missing.
    """
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "y", "on"}


def env_float(name: str) -> float | None:
    """Parse an optional positive float (seconds) from the environment."""
    val = os.getenv(name)
    if val is None or not val.strip():
        return None
    try:
        parsed = float(val)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {val!r}") from exc
    return parsed if parsed > 0 else None


class BaseConfig:
    """Base configuration shared across environments.

    Attributes
    ----------
    API_BASE_PREFIX: str
        Root path for registering API blueprints.
    NAVIDROME_URL: str | None
        Base URL of the Subsonic-compatible media server (no trailing
        ``/rest``).
    NAVIDROME_ADMIN_USER: str | None
        Admin account used to authenticate ``createUser`` calls.
    NAVIDROME_ADMIN_PASSWORD: str | None
        Password of the admin account. Only ever sent as a salted token.
    SUBSONIC_API_VERSION: str
        Protocol version reported in the ``v`` query parameter.
    SUBSONIC_CLIENT_NAME: str
        Client identifier reported in the ``c`` query parameter.
    UPSTREAM_TIMEOUT: float | None
        Optional timeout for the upstream call. ``None`` means the HTTP
        client default (no timeout).
    CORS_ORIGINS: str
        Comma-separated list of allowed origins for CORS.
    REGISTER_RATE_LIMIT: str
        flask-limiter expression applied to the registration endpoint.
    RATELIMIT_STORAGE_URI: str
        Counter storage for flask-limiter (``memory://`` or ``redis://...``).
    RATELIMIT_STRATEGY: str
        Windowing strategy used by flask-limiter.
    LOG_LEVEL: str
        Root logging verbosity (``INFO`` by default).
    USE_PROXYFIX: bool
        Trust one hop of ``X-Forwarded-*`` headers. Opt-in; only for
        deployments behind a reverse proxy that sets them.
    PORT: int
        Port used by the development server and gunicorn.

    Notes
    -----
    Values are primarily sourced from environment variables, enabling
    configuration without code changes.
    """

    API_BASE_PREFIX = "/api"

    # Upstream media server
    NAVIDROME_URL = os.getenv("NAVIDROME_URL")
    NAVIDROME_ADMIN_USER = os.getenv("NAVIDROME_ADMIN_USER")
    NAVIDROME_ADMIN_PASSWORD = os.getenv("NAVIDROME_ADMIN_PASSWORD")
    SUBSONIC_API_VERSION = os.getenv("SUBSONIC_API_VERSION", "1.16.1")
    SUBSONIC_CLIENT_NAME = os.getenv("SUBSONIC_CLIENT_NAME", "NavidromeRegistration")
    UPSTREAM_TIMEOUT = env_float("UPSTREAM_TIMEOUT")

    # Flask
    PROPAGATE_EXCEPTIONS = False

    # Logging & CORS
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS = os.getenv("FRONTEND_URL", "*")

    # Rate limiting (flask-limiter)
    REGISTER_RATE_LIMIT = os.getenv("REGISTER_RATE_LIMIT", "5 per 15 minutes")
    RATE_LIMIT_MESSAGE = "Too many registration attempts. Please try again later."
    RATELIMIT_STORAGE_URI = os.getenv("RATELIMIT_STORAGE_URI", "memory://")
    RATELIMIT_STRATEGY = "fixed-window"
    RATELIMIT_HEADERS_ENABLED = True

    USE_PROXYFIX = env_bool("USE_PROXYFIX", False)
    PORT = int(os.getenv("PORT", "3001"))

    # Flask built-ins
    DEBUG = False
    TESTING = False


class DevelopmentConfig(BaseConfig):
    """Configuration tailored for local development."""

    DEBUG = env_bool("FLASK_DEBUG", True)
    CORS_MAX_AGE = 600  # 10 minutes


class TestingConfig(BaseConfig):
    """Configuration for automated test runs.

    Notes
    -----
    - Forces ``TESTING`` mode and disables debug logs.
    - Points at a placeholder upstream unless ``TEST_NAVIDROME_URL`` is set;
      tests mock it with ``responses``.
    """

    TESTING = True
    DEBUG = False
    NAVIDROME_URL = os.getenv("TEST_NAVIDROME_URL", "http://navidrome.test")
    NAVIDROME_ADMIN_USER = "admin"
    NAVIDROME_ADMIN_PASSWORD = "admin-secret"
    RATELIMIT_STORAGE_URI = "memory://"


class ProductionConfig(BaseConfig):
    """Configuration defaults for production deployments.

    Notes
    -----
    Keeps debug disabled while relying on WSGI-level log configuration for
    noise control.
    """

    DEBUG = False
    PROPAGATE_EXCEPTIONS = False


# Map names -> classes (simple, explicit)
CONFIG_MAP: Mapping[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config() -> type[BaseConfig]:
    """Return the configuration class inferred from ``APP_ENV``.

    Returns
    -------
    type[BaseConfig]
        Class to pass to :meth:`flask.Config.from_object`.

    Notes
    -----
    Falls back to :class:`DevelopmentConfig` when ``APP_ENV`` is unset or
    unknown.
    """
    name = os.getenv(ENV_VAR, "development").strip().lower()
    return CONFIG_MAP.get(name, DevelopmentConfig)


def ensure_required_settings(settings: Mapping[str, Any]) -> None:
    """Fail fast when the upstream location or admin credentials are missing.

    :param settings: Loaded application config.
    :raises ConfigurationError: Listing every missing setting.
    """
    missing = [name for name in REQUIRED_SETTINGS if not settings.get(name)]
    if missing:
        raise ConfigurationError(f"Missing required settings: {', '.join(missing)}")
