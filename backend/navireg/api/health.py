"""Health check endpoint."""

from __future__ import annotations

from flask import Blueprint, current_app

from navireg.api.deps import json_response, timing
from navireg.schemas import HealthSchema

bp = Blueprint("health", __name__)

health_schema = HealthSchema()


@bp.get("/health")
@timing
def healthcheck():
    """Report that the gateway is up and which upstream it is configured for.

    The upstream itself is not contacted.
    """

    payload = {
        "status": "ok",
        "message": "Registration service running",
        "upstream_url": current_app.config.get("NAVIDROME_URL"),
    }
    return json_response(health_schema.dump(payload))
