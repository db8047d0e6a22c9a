"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and should never import or depend
on Flask or HTTP directly. They serve as stable contracts between the
upstream client, validation rules and application services.

The translation to HTTP responses is handled by ``navireg/core/errors.py``
via ``BaseService.translate_exceptions()``.
"""

from __future__ import annotations

from dataclasses import dataclass

# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - The API layer or BaseService will later translate them to APIError.
    """

    pass


# --------------------------------------------------------------------------- #
# Specific domain-level errors
# --------------------------------------------------------------------------- #


@dataclass(slots=True)
class RegistrationValidationError(ServiceError):
    """
    Raised when a registration payload breaks one of the input rules.

    :param reason: Stable identifier (``missing_fields``, ``invalid_username``,
        ``weak_password``, ``invalid_email``).
    :type reason: str
    :param message: Client-facing explanation.
    :type message: str
    """

    reason: str
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(slots=True)
class UpstreamRejectedError(ServiceError):
    """
    Raised when the media server refused the request (e.g. duplicate user).

    :param message: Message reported by the upstream, safe to relay.
    :type message: str
    :param code: Subsonic error code when one was supplied.
    :type code: int | None
    """

    message: str
    code: int | None = None

    def __str__(self) -> str:
        return self.message


class UpstreamUnavailableError(ServiceError):
    """
    Raised when the media server could not be reached or replied garbage.

    The message is for operators only; clients receive a generic error.
    """

    def __init__(self, message: str = "Upstream media server unavailable") -> None:
        super().__init__(message)
