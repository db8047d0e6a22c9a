"""Assertion helper utilities for tests."""

from __future__ import annotations


def assert_json_keys(data: dict, required: set[str]) -> None:
    """Ensure that all required keys are present in ``data``.

    Parameters
    ----------
    data:
        JSON object under test.
    required:
        Set of required keys that must exist in ``data``.

    Raises
    ------
    AssertionError
        If any required key is missing.
    """

    missing = required - data.keys()
    assert not missing, f"Missing keys: {', '.join(sorted(missing))}"


def assert_failure(response, status: int, error: str | None = None) -> dict:
    """Validate the ``{success: false, error}`` envelope and return its body.

    Parameters
    ----------
    response:
        Flask test response.
    status:
        Expected HTTP status.
    error:
        Exact error message expected, when given.
    """

    assert response.status_code == status, response.get_data(as_text=True)
    body = response.get_json()
    assert set(body) == {"success", "error"}
    assert body["success"] is False
    if error is not None:
        assert body["error"] == error
    return body
