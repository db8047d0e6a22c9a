"""Centralized JSON error handling for the API.

Every error leaves the service in the same failure envelope the front end
already understands::

    {"success": false, "error": "<human readable message>"}

The correlation id travels in the ``X-Request-ID`` response header rather
than in the body.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from flask import Flask, Response, current_app, jsonify, request
from flask_limiter.errors import RateLimitExceeded
from werkzeug.exceptions import HTTPException

from navireg.core.logger import ensure_request_id

log = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def _failure_response(message: str, status: int) -> tuple[Response, int]:
    """
    Build the ``{success: false, error}`` envelope.

    :param message: Client-safe error summary.
    :param status: HTTP status code.
    :returns: Flask response and status pair.
    """
    return jsonify({"success": False, "error": message}), status


class APIError(Exception):
    """
    Represent a JSON-serializable API error.

    Parameters
    ----------
    message : str
        Human-readable description presented to clients.
    status_code : int, optional
        HTTP status code to return. Defaults to ``400``.
    code : str, optional
        Machine-readable identifier used in logs. Defaults to
        ``"bad_request"``.
    details : dict[str, Any] | None, optional
        Optional structured context, logged but never sent to clients.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 400,
        code: str = "bad_request",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = int(status_code)
        self.code = code
        self.details = details or {}


# Domain conveniences
class BadRequest(APIError):
    """400 for rejected input or upstream domain errors."""

    def __init__(self, message: str, code: str = "bad_request") -> None:
        super().__init__(message, status_code=HTTPStatus.BAD_REQUEST, code=code)


class InternalError(APIError):
    """500 when the upstream cannot be reached or answers garbage."""

    def __init__(self, message: str = INTERNAL_ERROR_MESSAGE) -> None:
        super().__init__(
            message,
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            code="internal_server_error",
        )


def init_app(app: Flask) -> None:
    """
    Attach JSON error handlers to the Flask app.

    Notes
    -----
    - Guarantees the failure envelope for all handled errors.
    - Emits 5xx with ``exc_info`` for traceability; 4xx as warnings.
    """

    @app.errorhandler(APIError)
    def handle_api_error(err: APIError):
        level = log.error if err.status_code >= 500 else log.warning
        level(
            "APIError: code=%s status=%s msg=%s request_id=%s",
            err.code,
            err.status_code,
            err.message,
            ensure_request_id(),
            exc_info=err.__cause__ if err.status_code >= 500 else None,
        )
        return _failure_response(err.message, err.status_code)

    @app.errorhandler(RateLimitExceeded)
    def handle_rate_limited(err: RateLimitExceeded):
        log.warning(
            "RateLimitExceeded: limit=%s remote=%s request_id=%s",
            err.description,
            request.remote_addr,
            ensure_request_id(),
        )
        message = current_app.config.get("RATE_LIMIT_MESSAGE", "Too many requests")
        return _failure_response(message, HTTPStatus.TOO_MANY_REQUESTS)

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        status = int(err.code or HTTPStatus.INTERNAL_SERVER_ERROR)
        message = HTTPStatus(status).phrase
        if status == HTTPStatus.NOT_FOUND:
            message = f"Route '{request.path}' not found"
        level = log.error if status >= 500 else log.warning
        level(
            "HTTPException: status=%s detail=%s request_id=%s",
            status,
            message,
            ensure_request_id(),
        )
        return _failure_response(message, status)

    @app.errorhandler(Exception)
    def handle_unexpected_error(err: Exception):
        # Never leak internal details to the caller
        log.error(
            "Unhandled exception: request_id=%s",
            ensure_request_id(),
            exc_info=err,
        )
        return _failure_response(INTERNAL_ERROR_MESSAGE, HTTPStatus.INTERNAL_SERVER_ERROR)
