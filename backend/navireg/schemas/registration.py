"""Registration-related Marshmallow schemas."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields


class RegisterSchema(Schema):
    """Input payload for self-registration.

    Fields are loaded raw; presence and shape rules live in
    :func:`navireg.services.registration.validation.validate_registration`
    so they can be reported one at a time, in order.
    """

    class Meta:
        unknown = EXCLUDE

    username = fields.Raw(load_default=None)
    password = fields.Raw(load_default=None, load_only=True)
    email = fields.Raw(load_default=None)


class RegistrationResultSchema(Schema):
    """Response payload after the account was created."""

    success = fields.Boolean(required=True)
    message = fields.String(required=True)
    username = fields.String(required=True)


class HealthSchema(Schema):
    """Response payload of the health endpoint."""

    status = fields.String(required=True)
    message = fields.String(required=True)
    upstream_url = fields.String(allow_none=True, data_key="upstreamUrl")
