"""Input rules for self-registration."""

from __future__ import annotations

import pytest

from navireg.services import RegistrationIn, RegistrationValidationError, validate_registration
from navireg.services.registration.validation import (
    INVALID_EMAIL,
    INVALID_USERNAME,
    MISSING_FIELDS,
    WEAK_PASSWORD,
)

VALID = {"username": "new_listener", "password": "hunter2hunter2", "email": "listener@example.com"}


def _with(**overrides):
    return {**VALID, **overrides}


def _reason(payload) -> str:
    with pytest.raises(RegistrationValidationError) as excinfo:
        validate_registration(payload)
    return excinfo.value.reason


class TestValidateRegistration:
    """Each rule, then the order in which they are applied."""

    def test_valid_payload_is_returned_untouched(self):
        payload = _with(username="Mixed-Case_1", email="Someone@Example.COM")

        dto = validate_registration(payload)

        assert dto == RegistrationIn("Mixed-Case_1", "hunter2hunter2", "Someone@Example.COM")

    @pytest.mark.parametrize("field", ["username", "password", "email"])
    def test_missing_field(self, field):
        payload = dict(VALID)
        del payload[field]

        with pytest.raises(RegistrationValidationError) as excinfo:
            validate_registration(payload)

        assert excinfo.value.reason == "missing_fields"
        assert str(excinfo.value) == MISSING_FIELDS

    @pytest.mark.parametrize("value", ["", None, 12345678, ["a"], {"x": 1}])
    def test_empty_or_non_string_counts_as_missing(self, value):
        assert _reason(_with(password=value)) == "missing_fields"

    @pytest.mark.parametrize(
        "username",
        ["ab", "a" * 21, "has space", "dots.not.ok", "ünïcode", "semi;colon", " padded", "tab\tname"],
    )
    def test_invalid_username(self, username):
        with pytest.raises(RegistrationValidationError) as excinfo:
            validate_registration(_with(username=username))

        assert excinfo.value.reason == "invalid_username"
        assert excinfo.value.message == INVALID_USERNAME

    @pytest.mark.parametrize("username", ["abc", "a" * 20, "under_score", "hy-phen", "0123"])
    def test_username_boundaries_accepted(self, username):
        assert validate_registration(_with(username=username)).username == username

    def test_trailing_newline_username_rejected(self):
        assert _reason(_with(username="listener\n")) == "invalid_username"

    def test_short_password(self):
        with pytest.raises(RegistrationValidationError) as excinfo:
            validate_registration(_with(password="1234567"))

        assert excinfo.value.reason == "weak_password"
        assert excinfo.value.message == WEAK_PASSWORD

    def test_eight_character_password_accepted(self):
        assert validate_registration(_with(password="12345678")).password == "12345678"

    @pytest.mark.parametrize(
        "email",
        ["plainaddress", "no-at.example.com", "a@b", "a@@b.com", "a b@c.com", "a@b .com", "a@b.c d"],
    )
    def test_invalid_email(self, email):
        with pytest.raises(RegistrationValidationError) as excinfo:
            validate_registration(_with(email=email))

        assert excinfo.value.reason == "invalid_email"
        assert excinfo.value.message == INVALID_EMAIL

    @pytest.mark.parametrize("email", ["a@b.co", "first.last+tag@sub.example.org", "x@y.z.w"])
    def test_permissive_email_shapes_accepted(self, email):
        assert validate_registration(_with(email=email)).email == email

    def test_no_trimming_is_performed(self):
        assert _reason(_with(email=" listener@example.com")) == "invalid_email"

    def test_first_failure_wins(self):
        # every field is wrong; the username rule comes first
        assert _reason({"username": "x", "password": "short", "email": "nope"}) == "invalid_username"
        assert _reason({"username": "fine_name", "password": "short", "email": "nope"}) == "weak_password"
        assert _reason({"username": "x", "password": "", "email": "nope"}) == "missing_fields"
