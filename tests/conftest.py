"""
Shared pytest fixtures for the sign-up widget test suite.

This module provides:
- A scriptable fake of the SignUpAPI contract that records its calls
- A helper to fill the form store with valid values
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any

import pytest

from signup_widget.api.types import Err, ErrorPayload, Ok, PinSuccess, Result
from signup_widget.form import FieldStore

VALID_FORM: dict[str, str] = {
    "first_name": "Ada",
    "last_name": "Lovelace",
    "email": "ada@example.com",
    "password": "analytical-engine",
    "repeat_password": "analytical-engine",
}


class FakeSignUpAPI:
    """
    In-memory stand-in for the authentication API.

    ``respond`` decides what each call returns: a Result, an exception to
    raise, or a coroutine function to await (used to hold a call open).
    """

    def __init__(self, respond: Any = None) -> None:
        self.calls: list[tuple[str, str, str, str]] = []
        self.respond = respond or Ok(value=PinSuccess(expire_at="2030-01-01T00:00:00Z"))

    async def sign_up(
        self,
        first_name: str,
        last_name: str,
        email: str,
        password: str,
    ) -> Result[PinSuccess]:
        self.calls.append((first_name, last_name, email, password))
        if isinstance(self.respond, BaseException):
            raise self.respond
        if callable(self.respond):
            return await self.respond()
        return self.respond


def fill_form(store: FieldStore, **overrides: str) -> None:
    """Populate every field with valid values, then apply overrides."""
    for name, value in {**VALID_FORM, **overrides}.items():
        store.set_field(name, value)


@pytest.fixture
def fake_api() -> FakeSignUpAPI:
    return FakeSignUpAPI()


@pytest.fixture
def failing_api() -> FakeSignUpAPI:
    return FakeSignUpAPI(Err(error=ErrorPayload(message="email already in use"), status=400))


@pytest.fixture
def gate() -> tuple[asyncio.Event, Callable[[], Any]]:
    """An event plus a responder that blocks until the event is set."""
    release = asyncio.Event()

    async def respond() -> Result[PinSuccess]:
        await release.wait()
        return Ok(value=PinSuccess(expire_at="2030-01-01T00:00:00Z"))

    return release, respond


@pytest.fixture
def make_api() -> Callable[..., FakeSignUpAPI]:
    """Factory for fakes with a custom responder."""
    return FakeSignUpAPI


@pytest.fixture(name="fill_form")
def fill_form_fixture() -> Callable[..., None]:
    return fill_form
