"""Thin client for the Subsonic REST API exposed by Navidrome."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any

import requests

from navireg.infra.subsonic.auth import generate_credentials

ENVELOPE_KEY = "subsonic-response"


@dataclass(frozen=True, slots=True)
class SubsonicRoles:
    """
    Capability flags attached to a created account.

    Field names match the ``createUser`` query parameters. The defaults are
    what every self-registered account receives.
    """

    adminRole: bool = False
    downloadRole: bool = True
    uploadRole: bool = True
    playlistRole: bool = True
    shareRole: bool = True
    commentRole: bool = True
    podcastRole: bool = True
    streamRole: bool = True
    jukeboxRole: bool = False
    settingsRole: bool = False
    coverArtRole: bool = True

    def as_params(self) -> dict[str, str]:
        """Render the flags as ``"true"``/``"false"`` query values."""
        return {name: str(value).lower() for name, value in asdict(self).items()}


SELF_REGISTERED_ROLES = SubsonicRoles()


class SubsonicTransportError(Exception):
    """
    The upstream call did not produce a usable Subsonic envelope.

    Raised for connection failures, non-2xx replies and bodies that are not
    JSON or lack the ``subsonic-response`` key.

    :param message: Operator-facing description (never shown to clients).
    :param status_code: HTTP status of the reply, when there was one.
    :param payload: Decoded JSON body of the reply, when it had one.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload

    @property
    def upstream_error(self) -> Mapping[str, Any] | None:
        """Return the ``subsonic-response.error`` object embedded in the reply."""
        if not isinstance(self.payload, Mapping):
            return None
        envelope = self.payload.get(ENVELOPE_KEY)
        if not isinstance(envelope, Mapping):
            return None
        error = envelope.get("error")
        return error if isinstance(error, Mapping) else None


class SubsonicClient:
    """
    Issue admin-authenticated calls against a Subsonic-compatible server.

    :param base_url: Server root, e.g. ``https://music.example.com``.
    :param admin_user: Admin account name (``u`` parameter).
    :param admin_password: Admin password; only its salted token is sent.
    :param api_version: Protocol version (``v`` parameter).
    :param client_name: Client identifier (``c`` parameter).
    :param timeout: Optional request timeout in seconds; ``None`` waits
        indefinitely, which is the ``requests`` default.
    :param session: Optional :class:`requests.Session` to reuse connections;
        it is left open by :meth:`close`, which only closes a session the
        client created itself.

    Use as a context manager to release the connection pool::

        with SubsonicClient(url, user, password) as client:
            client.create_user(...)
    """

    def __init__(
        self,
        base_url: str,
        admin_user: str,
        admin_password: str,
        *,
        api_version: str = "1.16.1",
        client_name: str = "NavidromeRegistration",
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.admin_user = admin_user
        self.admin_password = admin_password
        self.api_version = api_version
        self.client_name = client_name
        self.timeout = timeout
        self._owns_session = session is None
        self.http = session or requests.Session()

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> SubsonicClient:
        """Build a client from the Flask application config."""
        return cls(
            config["NAVIDROME_URL"],
            config["NAVIDROME_ADMIN_USER"],
            config["NAVIDROME_ADMIN_PASSWORD"],
            api_version=config.get("SUBSONIC_API_VERSION", "1.16.1"),
            client_name=config.get("SUBSONIC_CLIENT_NAME", "NavidromeRegistration"),
            timeout=config.get("UPSTREAM_TIMEOUT"),
        )

    def close(self) -> None:
        if self._owns_session:
            self.http.close()

    def __enter__(self) -> SubsonicClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def endpoint(self, method: str) -> str:
        return f"{self.base_url}/rest/{method}"

    def auth_params(self) -> dict[str, str]:
        """Return the common query parameters with a freshly salted token."""
        credential = generate_credentials(self.admin_password)
        return {
            "u": self.admin_user,
            "t": credential.token,
            "s": credential.salt,
            "v": self.api_version,
            "c": self.client_name,
            "f": "json",
        }

    def call(self, method: str, params: Mapping[str, str]) -> Mapping[str, Any]:
        """
        GET ``/rest/<method>`` and return the ``subsonic-response`` object.

        A returned envelope may still carry ``status: "failed"``; reading that
        is left to the caller.

        :raises SubsonicTransportError: When no valid envelope came back.
        """
        query = {**self.auth_params(), **params}
        try:
            resp = self.http.get(self.endpoint(method), params=query, timeout=self.timeout)
        except requests.RequestException as exc:
            # The exception text embeds the full query string (credentials).
            raise SubsonicTransportError(
                f"{method}: {type(exc).__name__} contacting {self.endpoint(method)}"
            ) from None

        payload = _decode_json(resp)
        if not resp.ok:
            raise SubsonicTransportError(
                f"{method}: upstream replied HTTP {resp.status_code}",
                status_code=resp.status_code,
                payload=payload,
            )
        envelope = payload.get(ENVELOPE_KEY) if isinstance(payload, Mapping) else None
        if not isinstance(envelope, Mapping):
            raise SubsonicTransportError(
                f"{method}: reply is missing the {ENVELOPE_KEY!r} envelope",
                status_code=resp.status_code,
                payload=payload,
            )
        return envelope

    def create_user(
        self,
        username: str,
        password: str,
        email: str,
        roles: SubsonicRoles = SELF_REGISTERED_ROLES,
    ) -> Mapping[str, Any]:
        """Call ``createUser``; the user fields are passed through unmodified."""
        params = {"username": username, "password": password, "email": email}
        params.update(roles.as_params())
        return self.call("createUser", params)


def _decode_json(resp: requests.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return None


__all__ = [
    "SELF_REGISTERED_ROLES",
    "SubsonicClient",
    "SubsonicRoles",
    "SubsonicTransportError",
]
