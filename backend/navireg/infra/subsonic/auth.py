"""Subsonic salted-token authentication.

The Subsonic API (1.13.0+) accepts ``t = md5(password + s)`` together with a
random salt ``s`` in place of the cleartext password, so the admin password
never travels over the wire.
"""

from __future__ import annotations

import hashlib
import secrets
from dataclasses import dataclass

SALT_BYTES = 16


@dataclass(frozen=True, slots=True)
class SubsonicCredential:
    """
    One-time proof of identity for a single upstream call.

    :param salt: 32 lowercase hex characters (16 random bytes).
    :type salt: str
    :param token: Lowercase hex MD5 of ``password + salt``.
    :type token: str
    """

    salt: str
    token: str


def generate_credentials(password: str) -> SubsonicCredential:
    """Derive a fresh salt/token pair for ``password``.

    The salt comes from :mod:`secrets`; nothing is cached, so two calls in
    the same instant still produce different pairs.
    """
    salt = secrets.token_hex(SALT_BYTES)
    token = hashlib.md5((password + salt).encode("utf-8")).hexdigest()
    return SubsonicCredential(salt=salt, token=token)


__all__ = ["SubsonicCredential", "generate_credentials", "SALT_BYTES"]
