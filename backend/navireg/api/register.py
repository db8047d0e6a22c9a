"""Self-registration endpoint."""

from __future__ import annotations

from flask import Blueprint, current_app

from navireg.api.deps import json_body, json_response, service_context, subsonic_client, timing
from navireg.core.extensions import limiter
from navireg.schemas import RegisterSchema, RegistrationResultSchema
from navireg.services import RegistrationService, ServiceError

bp = Blueprint("register", __name__)

register_schema = RegisterSchema()
result_schema = RegistrationResultSchema()


def _register_rate_limit() -> str:
    return str(current_app.config.get("REGISTER_RATE_LIMIT", "5 per 15 minutes"))


@bp.post("/register")
@limiter.limit(_register_rate_limit, methods=["POST"])
@timing
def register():
    """Create an account on the media server for the submitted credentials."""

    payload = register_schema.load(json_body())
    with subsonic_client() as client:
        service = RegistrationService(client, ctx=service_context())
        try:
            result = service.register(payload)
        except ServiceError as exc:
            raise service.translate_exceptions(exc) from exc
    return json_response(result_schema.dump(result))
