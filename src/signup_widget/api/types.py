"""
Result types and the API contract used by the sign-up widget.

The backend answers every call with a status code and a JSON payload. The
payload shape depends on the status: the success status carries the
operation's success body, any other status carries ``{"message": ...}``.
``parse_response`` decides which variant applies exactly once, at the
client boundary, so nothing downstream re-inspects status codes:

    result = parse_response(201, {"expire_at": "..."}, SIGN_UP_SUCCESS, PinSuccess.from_payload)
    if isinstance(result, Ok):
        result.value.expire_at
    else:
        result.error.message
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar, Union

# Success discriminants per operation.
SIGN_UP_SUCCESS = 201
LOGIN_SUCCESS = 200

# Shown when a failure payload has no usable message.
FALLBACK_ERROR_MESSAGE = "Something went wrong. Please try again."

T = TypeVar("T")


@dataclass(frozen=True)
class ErrorPayload:
    """Failure body returned by the backend."""

    message: str

    @classmethod
    def from_payload(cls, data: Any) -> ErrorPayload:
        # A missing, blank or non-string message falls back to generic text.
        message = data.get("message") if isinstance(data, dict) else None
        if not isinstance(message, str) or not message.strip():
            message = FALLBACK_ERROR_MESSAGE
        return cls(message=message)


@dataclass(frozen=True)
class PinSuccess:
    """Sign-up accepted; a verification PIN was issued until ``expire_at``."""

    expire_at: str

    @classmethod
    def from_payload(cls, data: Any) -> PinSuccess:
        return cls(expire_at=str(data["expire_at"]))


@dataclass(frozen=True)
class LoginSuccess:
    """Credentials accepted; ``token`` authenticates later requests."""

    token: str

    @classmethod
    def from_payload(cls, data: Any) -> LoginSuccess:
        return cls(token=str(data["token"]))


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T
    status: int = SIGN_UP_SUCCESS


@dataclass(frozen=True)
class Err:
    error: ErrorPayload
    status: int = 0


Result = Union[Ok[T], Err]


def parse_response(
    status: int,
    data: Any,
    success_status: int,
    build: Callable[[Any], T],
) -> Result[T]:
    """
    Turn a raw ``(status, data)`` pair into ``Ok`` or ``Err``.

    Args:
        status: HTTP status code returned by the backend.
        data: Decoded JSON payload.
        success_status: The only status that denotes success.
        build: Constructor for the success body, e.g. ``PinSuccess.from_payload``.

    Returns:
        ``Ok`` wrapping the success body, or ``Err`` wrapping the error
        payload. A success status with a malformed body is reported as
        ``Err`` with the fallback message.
    """
    if status != success_status:
        return Err(error=ErrorPayload.from_payload(data), status=status)

    try:
        value = build(data)
    except (KeyError, TypeError):
        return Err(error=ErrorPayload(message=FALLBACK_ERROR_MESSAGE), status=status)

    return Ok(value=value, status=status)


class SignUpAPI(Protocol):
    """
    Capability the submission controller depends on.

    Implementations perform exactly one network exchange per call and make
    no retry or idempotency guarantee. Transport failures are raised, not
    returned.
    """

    async def sign_up(
        self,
        first_name: str,
        last_name: str,
        email: str,
        password: str,
    ) -> Result[PinSuccess]: ...
