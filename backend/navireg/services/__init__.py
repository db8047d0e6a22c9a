"""Service layer public API.

This package exposes the essential building blocks for the service layer so that
callers can import from :mod:`navireg.services` without knowing internal structure.

Re-exports
----------
- Base primitives (from ``navireg.services._shared.base``)
    * :class:`BaseService`
    * :class:`ServiceContext`

- Service errors (from ``navireg.services._shared.errors``)
    * :class:`ServiceError`, :class:`RegistrationValidationError`,
      :class:`UpstreamRejectedError`, :class:`UpstreamUnavailableError`

- Registration service (from ``navireg.services.registration``)
    * :class:`RegistrationService`
    * DTOs: :class:`RegistrationIn`, :class:`RegistrationOut`
"""

from __future__ import annotations

# Base primitives (service base + request-scoped context)
from ._shared.base import BaseService, ServiceContext
from ._shared.errors import (
    RegistrationValidationError,
    ServiceError,
    UpstreamRejectedError,
    UpstreamUnavailableError,
)

# Registration service + DTOs
from .registration.dto import RegistrationIn, RegistrationOut
from .registration.service import RegistrationService
from .registration.validation import validate_registration

__all__ = [
    # Base
    "BaseService",
    "ServiceContext",
    # Errors
    "ServiceError",
    "RegistrationValidationError",
    "UpstreamRejectedError",
    "UpstreamUnavailableError",
    # Registration
    "RegistrationService",
    "RegistrationIn",
    "RegistrationOut",
    "validate_registration",
]
