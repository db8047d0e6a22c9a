"""Helpers for faking the Subsonic ``createUser`` endpoint with ``responses``."""

from __future__ import annotations

from typing import Any
from urllib.parse import parse_qs, urlsplit

import responses

UPSTREAM_URL = "http://navidrome.test"
CREATE_USER_URL = f"{UPSTREAM_URL}/rest/createUser"


def ok_envelope() -> dict[str, Any]:
    """Return the body Navidrome sends after creating a user."""

    return {"subsonic-response": {"status": "ok", "version": "1.16.1", "type": "navidrome"}}


def failed_envelope(message: str | None = None, code: int = 0) -> dict[str, Any]:
    """Return a ``status: failed`` body, optionally carrying ``error.message``.

    Parameters
    ----------
    message:
        Upstream message; omitted from the error object when ``None``.
    code:
        Subsonic error code.
    """

    error: dict[str, Any] = {"code": code}
    if message is not None:
        error["message"] = message
    return {"subsonic-response": {"status": "failed", "version": "1.16.1", "error": error}}


def stub_create_user(
    rsps: responses.RequestsMock,
    *,
    json: Any = None,
    body: Any = None,
    status: int = 200,
) -> None:
    """Register a single reply for ``GET /rest/createUser``."""

    if body is not None:
        rsps.add(responses.GET, CREATE_USER_URL, body=body, status=status)
    else:
        rsps.add(responses.GET, CREATE_USER_URL, json=json if json is not None else ok_envelope(), status=status)


def query_of(call: Any) -> dict[str, str]:
    """Flatten the query string of a recorded ``responses`` call."""

    parsed = parse_qs(urlsplit(call.request.url).query, keep_blank_values=True)
    return {key: values[0] for key, values in parsed.items()}
