"""
HTTP client for the authentication backend.

This module provides an async HTTP client that satisfies the
:class:`~signup_widget.api.types.SignUpAPI` contract. Backend answers,
whether successful or not, come back as ``Ok``/``Err`` results. Only
transport problems (connection failures, timeouts, non-JSON bodies) raise,
as :class:`TransportError`.

The client is designed to be used as an async context manager to ensure
proper resource cleanup:

    async with AuthAPIClient(config) as client:
        result = await client.sign_up("Ada", "Lovelace", "ada@example.com", "s3cret!")

Key Features:
    - Async HTTP requests using httpx
    - Discriminated results decided once per response
    - Custom exception for transport failures
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from signup_widget.api.types import (
    LOGIN_SUCCESS,
    SIGN_UP_SUCCESS,
    LoginSuccess,
    PinSuccess,
    Result,
    parse_response,
)
from signup_widget.config import Config

logger = logging.getLogger(__name__)

# =============================================================================
# CUSTOM EXCEPTIONS
# =============================================================================


@dataclass
class TransportError(Exception):
    """
    Exception raised when no usable answer came back from the server.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code, or 0 if no response was received.
        detail: Additional detail about the failure.

    Example:
        try:
            await client.sign_up(...)
        except TransportError as e:
            print(f"Network problem: {e}")
    """

    message: str
    status_code: int = 0
    detail: str = ""

    def __str__(self) -> str:
        """Return a formatted error message."""
        if self.detail:
            return f"{self.message}: {self.detail}"
        return self.message


# =============================================================================
# API CLIENT
# =============================================================================


@dataclass
class AuthAPIClient:
    """
    Async HTTP client for the authentication API.

    Attributes:
        config: Configuration object with server URL and timeout settings.

    Example:
        config = Config(server_url="http://localhost:8000", timeout=10.0)

        async with AuthAPIClient(config) as client:
            result = await client.login("ada@example.com", "s3cret!")
            if isinstance(result, Ok):
                print(result.value.token)
    """

    config: Config

    _http_client: httpx.AsyncClient | None = field(default=None, repr=False)

    # -------------------------------------------------------------------------
    # Context Manager Protocol
    # -------------------------------------------------------------------------

    async def __aenter__(self) -> AuthAPIClient:
        """Create the underlying httpx.AsyncClient with the configured timeout."""
        self._http_client = httpx.AsyncClient(
            base_url=self.config.server_url,
            timeout=self.config.timeout,
        )
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Close the underlying HTTP client connection pool."""
        if self._http_client:
            await self._http_client.aclose()
            self._http_client = None

    @property
    def http_client(self) -> httpx.AsyncClient:
        """
        Get the HTTP client, ensuring it's been initialized.

        Raises:
            RuntimeError: If accessed outside of async context manager.
        """
        if self._http_client is None:
            raise RuntimeError(
                "AuthAPIClient must be used as an async context manager. "
                "Use 'async with AuthAPIClient(config) as client:'"
            )
        return self._http_client

    # -------------------------------------------------------------------------
    # Account Methods
    # -------------------------------------------------------------------------

    async def sign_up(
        self,
        first_name: str,
        last_name: str,
        email: str,
        password: str,
    ) -> Result[PinSuccess]:
        """
        Register a new account.

        Args:
            first_name: Given name.
            last_name: Family name.
            email: Address the verification PIN is sent to.
            password: Plain text password.

        Returns:
            ``Ok(PinSuccess)`` on status 201, otherwise ``Err(ErrorPayload)``.

        Raises:
            TransportError: If the server cannot be reached or does not
                answer with JSON.
        """
        status, data = await self._post(
            "/signup",
            {
                "first_name": first_name,
                "last_name": last_name,
                "email": email,
                "password": password,
            },
            action="Sign-up",
        )
        return parse_response(status, data, SIGN_UP_SUCCESS, PinSuccess.from_payload)

    async def login(self, email: str, password: str) -> Result[LoginSuccess]:
        """
        Exchange credentials for an access token.

        Returns:
            ``Ok(LoginSuccess)`` on status 200, otherwise ``Err(ErrorPayload)``.

        Raises:
            TransportError: If the server cannot be reached or does not
                answer with JSON.
        """
        status, data = await self._post(
            "/login",
            {"email": email, "password": password},
            action="Login",
        )
        return parse_response(status, data, LOGIN_SUCCESS, LoginSuccess.from_payload)

    # -------------------------------------------------------------------------
    # Internal Helpers
    # -------------------------------------------------------------------------

    async def _post(self, path: str, payload: dict[str, Any], action: str) -> tuple[int, Any]:
        """Send one POST request and return ``(status, decoded JSON)``."""
        try:
            response = await self.http_client.post(path, json=payload)
        except httpx.HTTPError as e:
            raise TransportError(
                message=f"{action} failed",
                status_code=0,
                detail=f"Cannot connect to server at {self.config.server_url}: {e}",
            ) from e

        # Try to parse JSON response, handle non-JSON gracefully
        try:
            data = response.json()
        except ValueError as e:
            raise TransportError(
                message=f"{action} failed",
                status_code=response.status_code,
                detail=f"Server returned invalid response (status {response.status_code})",
            ) from e

        logger.debug("%s %s -> %s", action, path, response.status_code)
        return response.status_code, data
