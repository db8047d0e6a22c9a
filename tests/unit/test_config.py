"""Unit tests for configuration selection and startup checks."""

from __future__ import annotations

import pytest

from navireg import create_app
from navireg.core.config import (
    ConfigurationError,
    DevelopmentConfig,
    ProductionConfig,
    TestingConfig,
    ensure_required_settings,
    env_bool,
    get_config,
)


@pytest.mark.parametrize(
    ("env", "expected"),
    [
        ("production", ProductionConfig),
        ("testing", TestingConfig),
        ("  Development ", DevelopmentConfig),
        ("staging", DevelopmentConfig),
    ],
)
def test_get_config_selects_class(monkeypatch, env, expected) -> None:
    monkeypatch.setenv("APP_ENV", env)

    assert get_config() is expected


def test_env_bool(monkeypatch) -> None:
    monkeypatch.setenv("FLAG_ON", "Yes")
    monkeypatch.setenv("FLAG_OFF", "0")
    monkeypatch.delenv("FLAG_MISSING", raising=False)

    assert env_bool("FLAG_ON") is True
    assert env_bool("FLAG_OFF", True) is False
    assert env_bool("FLAG_MISSING", True) is True


def test_ensure_required_settings_lists_every_missing_name() -> None:
    settings = {"NAVIDROME_URL": "http://navidrome.test", "NAVIDROME_ADMIN_USER": ""}

    with pytest.raises(ConfigurationError) as excinfo:
        ensure_required_settings(settings)

    assert "NAVIDROME_ADMIN_USER" in str(excinfo.value)
    assert "NAVIDROME_ADMIN_PASSWORD" in str(excinfo.value)
    assert "NAVIDROME_URL" not in str(excinfo.value)


def test_create_app_fails_fast_without_admin_credentials() -> None:
    """A deployment missing credentials refuses to start."""

    class MissingCredentials(TestingConfig):
        NAVIDROME_ADMIN_PASSWORD = None

    with pytest.raises(ConfigurationError):
        create_app(MissingCredentials)


def test_testing_config_defaults() -> None:
    assert TestingConfig.TESTING is True
    assert TestingConfig.REGISTER_RATE_LIMIT == "5 per 15 minutes"
    assert TestingConfig.RATELIMIT_STRATEGY == "fixed-window"
    assert TestingConfig.SUBSONIC_API_VERSION == "1.16.1"
