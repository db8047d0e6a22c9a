"""
DTOs for RegistrationService.

Contracts for a self-registration request relayed to the media server.
"""

from __future__ import annotations

from dataclasses import dataclass

# --------------------------------------------------------------------------- #
# Input
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class RegistrationIn:
    """
    Validated registration payload.

    Values are kept exactly as submitted: no trimming, no case folding.

    :param username: 3-20 characters of ``[A-Za-z0-9_-]``.
    :type username: str
    :param password: Raw password (at least 8 characters), stored upstream.
    :type password: str
    :param email: Contact email.
    :type email: str
    """

    username: str
    password: str
    email: str

    def __repr__(self) -> str:
        return f"RegistrationIn(username={self.username!r}, email={self.email!r})"


# --------------------------------------------------------------------------- #
# Output
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class RegistrationOut:
    """
    Result returned to the caller after the account was created.

    :param username: The submitted username, echoed back.
    :type username: str
    :param message: Human-readable confirmation.
    :type message: str
    :param success: Always ``True``; failures travel as exceptions.
    :type success: bool
    """

    username: str
    message: str = "Account created successfully"
    success: bool = True
