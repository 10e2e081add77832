"""
Tests for response discrimination at the API boundary.
"""

from __future__ import annotations

import pytest

from signup_widget.api.types import (
    FALLBACK_ERROR_MESSAGE,
    LOGIN_SUCCESS,
    SIGN_UP_SUCCESS,
    Err,
    ErrorPayload,
    LoginSuccess,
    Ok,
    PinSuccess,
    parse_response,
)


def test_sign_up_success_status_yields_ok():
    result = parse_response(
        201, {"expire_at": "2030-01-01T00:00:00Z"}, SIGN_UP_SUCCESS, PinSuccess.from_payload
    )

    assert result == Ok(value=PinSuccess(expire_at="2030-01-01T00:00:00Z"), status=201)


def test_any_other_status_yields_err_with_message():
    result = parse_response(
        400, {"message": "email already in use"}, SIGN_UP_SUCCESS, PinSuccess.from_payload
    )

    assert isinstance(result, Err)
    assert result.status == 400
    assert result.error == ErrorPayload(message="email already in use")


def test_200_is_not_success_for_sign_up():
    result = parse_response(200, {"expire_at": "x"}, SIGN_UP_SUCCESS, PinSuccess.from_payload)

    assert isinstance(result, Err)


def test_login_success_yields_token():
    result = parse_response(200, {"token": "abc"}, LOGIN_SUCCESS, LoginSuccess.from_payload)

    assert isinstance(result, Ok)
    assert result.value.token == "abc"


@pytest.mark.parametrize(
    "payload",
    [{}, {"message": ""}, {"message": "   "}, {"message": 42}, None, "oops", []],
)
def test_malformed_error_payload_uses_fallback(payload):
    result = parse_response(500, payload, SIGN_UP_SUCCESS, PinSuccess.from_payload)

    assert isinstance(result, Err)
    assert result.error.message == FALLBACK_ERROR_MESSAGE


@pytest.mark.parametrize("payload", [{}, None, {"token": "wrong-shape"}])
def test_success_status_with_malformed_body_is_err(payload):
    result = parse_response(201, payload, SIGN_UP_SUCCESS, PinSuccess.from_payload)

    assert isinstance(result, Err)
    assert result.status == 201
    assert result.error.message == FALLBACK_ERROR_MESSAGE
