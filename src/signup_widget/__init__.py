"""
Sign-up widget - an embeddable account-creation form.

The widget collects a new user's name, e-mail and password, submits them to
an authentication backend and reports success or the backend's error
message. The state machine lives in plain Python
(:class:`SubmissionController`); :class:`SignUpScreen` renders it with
Textual and :class:`AuthAPIClient` talks to the backend over httpx.

Example:
    # Run the standalone widget
    signup-widget --server http://localhost:8000

    # Or embed the screen in your own Textual app
    screen = SignUpScreen(api_client, on_success=app.exit)
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from signup_widget.app import SignUpApp, main
from signup_widget.config import Config
from signup_widget.controller import SubmissionController, SubmissionState
from signup_widget.screens.sign_up import SignUpScreen
from signup_widget.theme import Theme

__all__ = [
    "Config",
    "SignUpApp",
    "SignUpScreen",
    "SubmissionController",
    "SubmissionState",
    "Theme",
    "main",
]

try:
    __version__: str = version("signup-widget")
except PackageNotFoundError:
    __version__ = "0.1.0"
