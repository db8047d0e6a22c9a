"""
RegistrationService
===================

Process-level service that self-registers an account on the media server:

- Validates the submitted username, password and email.
- Relays one admin-authenticated ``createUser`` call upstream.
- Maps the upstream outcome to a result or a service error.

Nothing is stored locally; the upstream server is the only source of truth,
including username uniqueness. No retries are attempted.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from navireg.infra.subsonic.client import SubsonicClient, SubsonicTransportError
from navireg.services._shared.base import BaseService, ServiceContext
from navireg.services._shared.errors import UpstreamRejectedError, UpstreamUnavailableError
from navireg.services.registration.dto import RegistrationIn, RegistrationOut
from navireg.services.registration.validation import validate_registration

log = logging.getLogger(__name__)

CREATE_FAILED = "Failed to create user"
CREATION_FAILED = "User creation failed"


class RegistrationService(BaseService):
    """
    Orchestrates the self-registration flow against a Subsonic server.

    :param client: Upstream client carrying the admin credentials.
    :type client: :class:`SubsonicClient`
    """

    def __init__(self, client: SubsonicClient, *, ctx: ServiceContext | None = None) -> None:
        super().__init__(ctx=ctx)
        self.client = client

    def register(self, payload: Mapping[str, Any]) -> RegistrationOut:
        """
        Validate ``payload`` and create the account upstream.

        :param payload: Raw ``username``/``password``/``email`` mapping.
        :returns: Success result echoing the submitted username.
        :raises RegistrationValidationError: Input rejected; no upstream call.
        :raises UpstreamRejectedError: The server refused the account.
        :raises UpstreamUnavailableError: The server could not be used.
        """
        dto = validate_registration(payload)
        return self.create_account(dto)

    def create_account(self, dto: RegistrationIn) -> RegistrationOut:
        """
        Issue ``createUser`` for an already validated request.

        :param dto: Validated registration input.
        :type dto: :class:`RegistrationIn`
        :returns: Registration result payload.
        :rtype: :class:`RegistrationOut`
        """
        try:
            envelope = self.client.create_user(dto.username, dto.password, dto.email)
        except SubsonicTransportError as exc:
            error = exc.upstream_error
            if error is not None:
                message = _message_of(error) or CREATION_FAILED
                self._log_rejected(dto, message, exc.status_code)
                raise UpstreamRejectedError(message, _code_of(error)) from exc
            log.error(
                "registration.upstream_error",
                extra={
                    "username": dto.username,
                    "upstream_url": self.client.base_url,
                    "upstream_status": exc.status_code,
                    "reason": str(exc),
                },
            )
            raise UpstreamUnavailableError(str(exc)) from exc

        if envelope.get("status") == "ok":
            log.info("registration.created", extra={"username": dto.username})
            return RegistrationOut(username=dto.username)

        error = envelope.get("error")
        error = error if isinstance(error, Mapping) else {}
        message = _message_of(error) or CREATE_FAILED
        self._log_rejected(dto, message, None)
        raise UpstreamRejectedError(message, _code_of(error))

    def _log_rejected(self, dto: RegistrationIn, message: str, status: int | None) -> None:
        log.warning(
            "registration.rejected",
            extra={"username": dto.username, "reason": message, "upstream_status": status},
        )


def _message_of(error: Mapping[str, Any]) -> str | None:
    message = error.get("message")
    return message if isinstance(message, str) and message else None


def _code_of(error: Mapping[str, Any]) -> int | None:
    code = error.get("code")
    return code if isinstance(code, int) else None
