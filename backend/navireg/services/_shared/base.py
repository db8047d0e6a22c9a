# navireg/services/_shared/base.py
from __future__ import annotations

from dataclasses import dataclass

from navireg.core import errors as api_errors
from navireg.services._shared.errors import (
    RegistrationValidationError,
    ServiceError,
    UpstreamRejectedError,
    UpstreamUnavailableError,
)


@dataclass(slots=True)
class ServiceContext:
    """
    Carry cross-cutting request-scoped data.

    :param request_id: Correlation id for logging/tracing.
    :param remote_addr: Originating client address.
    """

    request_id: str | None = None
    remote_addr: str | None = None


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Centralize error translation.
    * Keep services thin, orchestration-only, no web leakage.
    """

    def __init__(self, *, ctx: ServiceContext | None = None) -> None:
        """
        Initialize the base service.

        :param ctx: Optional request-scoped context (tracing, client address).
        :type ctx: ServiceContext | None
        """
        self.ctx = ctx or ServiceContext()

    # -------------------------- Error handling ------------------------------

    def translate_exceptions(self, exc: Exception) -> Exception:
        """
        Map domain/service-level errors to API-level (HTTP) errors.

        :param exc: Exception raised within the service.
        :type exc: Exception
        :returns: Translated exception ready to be re-raised.
        :rtype: Exception
        """
        if isinstance(exc, RegistrationValidationError):
            # → 400 Bad Request
            return api_errors.BadRequest(exc.message, code=exc.reason)

        if isinstance(exc, UpstreamRejectedError):
            # → 400 Bad Request, upstream message relayed
            return api_errors.BadRequest(exc.message, code="upstream_rejected")

        if isinstance(exc, UpstreamUnavailableError):
            # → 500 with a generic message; detail stays in the logs
            return api_errors.InternalError()

        # Any other ServiceError subclass → 400 Bad Request
        if isinstance(exc, ServiceError):
            return api_errors.BadRequest(str(exc))

        # Fallback: return untouched (will bubble up to Flask handler)
        return exc
