"""
Tests for the authentication API client.

Uses respx for mocking HTTP requests.
"""

from __future__ import annotations

import json
from collections.abc import AsyncGenerator

import httpx
import pytest
import respx
from httpx import Response

from signup_widget.api.client import AuthAPIClient, TransportError
from signup_widget.api.types import Err, LoginSuccess, Ok, PinSuccess
from signup_widget.config import Config

# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def config() -> Config:
    """Create a test configuration."""
    return Config(server_url="http://test-server:8000", timeout=10.0)


@pytest.fixture
async def client(config: Config) -> AsyncGenerator[AuthAPIClient, None]:
    """Create an API client for testing."""
    async with AuthAPIClient(config) as client:
        yield client


# =============================================================================
# INITIALIZATION TESTS
# =============================================================================


class TestAuthAPIClientInit:
    def test_client_requires_context_manager(self, config: Config):
        client = AuthAPIClient(config)

        with pytest.raises(RuntimeError, match="async context manager"):
            _ = client.http_client

    async def test_context_manager_closes_client(self, config: Config):
        client = AuthAPIClient(config)
        async with client:
            assert client.http_client is not None

        with pytest.raises(RuntimeError):
            _ = client.http_client


# =============================================================================
# SIGN-UP TESTS
# =============================================================================


class TestSignUp:
    @respx.mock
    async def test_created_returns_pin_success(self, client: AuthAPIClient):
        route = respx.post("http://test-server:8000/signup").mock(
            return_value=Response(201, json={"expire_at": "2030-01-01T00:00:00Z"})
        )

        result = await client.sign_up("Ada", "Lovelace", "ada@example.com", "secret")

        assert result == Ok(value=PinSuccess(expire_at="2030-01-01T00:00:00Z"), status=201)
        assert route.call_count == 1
        assert json.loads(route.calls.last.request.content) == {
            "first_name": "Ada",
            "last_name": "Lovelace",
            "email": "ada@example.com",
            "password": "secret",
        }

    @respx.mock
    async def test_rejection_returns_err(self, client: AuthAPIClient):
        respx.post("http://test-server:8000/signup").mock(
            return_value=Response(400, json={"message": "email already in use"})
        )

        result = await client.sign_up("Ada", "Lovelace", "ada@example.com", "secret")

        assert isinstance(result, Err)
        assert result.status == 400
        assert result.error.message == "email already in use"

    @respx.mock
    async def test_connection_error_raises_transport_error(self, client: AuthAPIClient):
        respx.post("http://test-server:8000/signup").mock(
            side_effect=httpx.ConnectError("Connection refused")
        )

        with pytest.raises(TransportError) as exc_info:
            await client.sign_up("Ada", "Lovelace", "ada@example.com", "secret")

        assert exc_info.value.status_code == 0
        assert "Cannot connect" in exc_info.value.detail

    @respx.mock
    async def test_non_json_response_raises_transport_error(self, client: AuthAPIClient):
        respx.post("http://test-server:8000/signup").mock(
            return_value=Response(502, text="<html>Bad Gateway</html>")
        )

        with pytest.raises(TransportError) as exc_info:
            await client.sign_up("Ada", "Lovelace", "ada@example.com", "secret")

        assert exc_info.value.status_code == 502
        assert str(exc_info.value).startswith("Sign-up failed: ")


# =============================================================================
# LOGIN TESTS
# =============================================================================


class TestLogin:
    @respx.mock
    async def test_ok_returns_token(self, client: AuthAPIClient):
        respx.post("http://test-server:8000/login").mock(
            return_value=Response(200, json={"token": "jwt-token"})
        )

        result = await client.login("ada@example.com", "secret")

        assert result == Ok(value=LoginSuccess(token="jwt-token"), status=200)

    @respx.mock
    async def test_invalid_credentials_returns_err(self, client: AuthAPIClient):
        respx.post("http://test-server:8000/login").mock(
            return_value=Response(401, json={"message": "Invalid credentials"})
        )

        result = await client.login("ada@example.com", "wrong")

        assert isinstance(result, Err)
        assert result.error.message == "Invalid credentials"


def test_transport_error_str_without_detail():
    assert str(TransportError(message="Sign-up failed")) == "Sign-up failed"
