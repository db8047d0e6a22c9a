"""Input rules for self-registration, checked in order; first failure wins."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from navireg.services._shared.errors import RegistrationValidationError
from navireg.services.registration.dto import RegistrationIn

USERNAME_RE = re.compile(r"[A-Za-z0-9_-]{3,20}")
EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
MIN_PASSWORD_LENGTH = 8

MISSING_FIELDS = "Username, password, and email are required"
INVALID_USERNAME = "Username must be 3-20 characters (letters, numbers, underscore, hyphen only)"
WEAK_PASSWORD = "Password must be at least 8 characters"
INVALID_EMAIL = "Invalid email format"


def _text(value: Any) -> str | None:
    # Non-string JSON values count as absent.
    return value if isinstance(value, str) and value else None


def validate_registration(payload: Mapping[str, Any]) -> RegistrationIn:
    """
    Check a raw payload and return the validated triple.

    :param payload: Mapping with ``username``, ``password`` and ``email``.
    :returns: The validated, unmodified values.
    :raises RegistrationValidationError: On the first rule that fails.
    """
    username = _text(payload.get("username"))
    password = _text(payload.get("password"))
    email = _text(payload.get("email"))

    if username is None or password is None or email is None:
        raise RegistrationValidationError("missing_fields", MISSING_FIELDS)
    if not USERNAME_RE.fullmatch(username):
        raise RegistrationValidationError("invalid_username", INVALID_USERNAME)
    if len(password) < MIN_PASSWORD_LENGTH:
        raise RegistrationValidationError("weak_password", WEAK_PASSWORD)
    if not EMAIL_RE.fullmatch(email):
        raise RegistrationValidationError("invalid_email", INVALID_EMAIL)

    return RegistrationIn(username=username, password=password, email=email)
