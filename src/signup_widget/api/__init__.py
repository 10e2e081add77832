"""
API contract and HTTP client for the sign-up widget.

The widget core depends only on the ``SignUpAPI`` protocol and the result
types; ``AuthAPIClient`` is the httpx implementation used by the standalone
app.

Example:
    from signup_widget.api import AuthAPIClient, Ok

    async with AuthAPIClient(config) as client:
        result = await client.sign_up("Ada", "Lovelace", "ada@example.com", "pw")
        if isinstance(result, Ok):
            print(result.value.expire_at)
"""

from signup_widget.api.client import AuthAPIClient, TransportError
from signup_widget.api.types import (
    FALLBACK_ERROR_MESSAGE,
    Err,
    ErrorPayload,
    LoginSuccess,
    Ok,
    PinSuccess,
    Result,
    SignUpAPI,
    parse_response,
)

__all__ = [
    "FALLBACK_ERROR_MESSAGE",
    "AuthAPIClient",
    "Err",
    "ErrorPayload",
    "LoginSuccess",
    "Ok",
    "PinSuccess",
    "Result",
    "SignUpAPI",
    "TransportError",
    "parse_response",
]
