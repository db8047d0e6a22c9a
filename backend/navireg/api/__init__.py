"""API blueprint package aggregating the public endpoints."""

from __future__ import annotations

from collections.abc import Iterable

from flask import Blueprint, Flask


def register_blueprint_group(
    app: Flask,
    *,
    base_prefix: str,
    entries: Iterable[tuple[Blueprint, str]],
) -> None:
    """Register related blueprints beneath a common prefix.

    Parameters
    ----------
    app:
        Application instance receiving the blueprints.
    base_prefix:
        Prefix applied to all entries, typically ``"/api"``.
    entries:
        Iterable of ``(blueprint, relative_prefix)`` pairs where
        ``relative_prefix`` is appended to ``base_prefix``.

    Notes
    -----
    Empty relative prefixes are supported, allowing a blueprint to mount at the
    prefix root while others extend it with additional path segments.
    """

    for bp, rel_prefix in entries:
        full_prefix = "/".join(
            segment for segment in [base_prefix.rstrip("/"), rel_prefix.strip("/")] if segment
        )
        full_prefix = "/" + full_prefix if not full_prefix.startswith("/") else full_prefix
        app.register_blueprint(bp, url_prefix=full_prefix)


def init_app(app: Flask) -> None:
    """Register the API blueprints on the Flask app."""

    api_base = app.config.get("API_BASE_PREFIX", "/api")

    # Import blueprints *only here* to keep imports localized and avoid cycles.
    from navireg.api.health import bp as health_bp
    from navireg.api.register import bp as register_bp

    registry: list[tuple[Blueprint, str]] = [
        (health_bp, ""),  # -> /api/health
        (register_bp, ""),  # -> /api/register
    ]
    register_blueprint_group(app, base_prefix=api_base, entries=registry)


__all__ = ["init_app", "register_blueprint_group"]
