"""Global pytest fixtures for the registration gateway."""

from __future__ import annotations

from collections.abc import Generator
from typing import Any

import pytest
import responses
from flask import Flask

from navireg import create_app
from navireg.core.extensions import limiter

from tests.helpers.config import TestConfig


@pytest.fixture()
def app() -> Generator[Flask, None, None]:
    """Create a fresh application (and fresh rate-limit counters) per test."""

    application = create_app(TestConfig)
    with application.app_context():
        limiter.reset()
        yield application


@pytest.fixture()
def client(app: Flask) -> Any:
    """Return a Flask test client."""

    return app.test_client()


@pytest.fixture()
def upstream() -> Generator[responses.RequestsMock, None, None]:
    """Intercept every ``requests`` call; unregistered URLs fail to connect."""

    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture()
def valid_payload() -> dict[str, str]:
    """A registration body that passes every input rule."""

    return {"username": "new_listener", "password": "hunter2hunter2", "email": "listener@example.com"}
