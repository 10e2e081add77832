"""
Standalone host application for the sign-up widget.

This module defines SignUpApp, a minimal Textual application that embeds
the SignUpScreen against a real backend. It manages:
- API client lifecycle
- Theme loading
- What happens after a successful sign-up (the success callback)

Entry Point:
    The main() function serves as the CLI entry point, configured in
    pyproject.toml as the "signup-widget" console script.

Example:
    # Run from command line
    signup-widget --server http://localhost:8000

    # Or programmatically
    from signup_widget import Config, SignUpApp

    app = SignUpApp(Config.from_args())
    app.run()
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from textual.app import App
from textual.binding import Binding

from signup_widget.api.client import AuthAPIClient
from signup_widget.config import Config
from signup_widget.screens.sign_up import SignUpScreen
from signup_widget.theme import Theme

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Account created. Check your e-mail for the verification PIN."


class SignUpApp(App[bool]):
    """
    Textual application hosting the sign-up form.

    Attributes:
        config: Application configuration (server URL, timeouts, theme path).
        api_client: HTTP client for server communication. Created on mount.
        signed_up: True once the success callback has fired.

    Lifecycle:
        1. on_mount: Creates API client, pushes SignUpScreen
        2. handle_success: Records success and exits with return value True
        3. on_unmount: Closes API client
    """

    TITLE = "Create Account"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", priority=True, show=False),
        Binding("ctrl+q", "quit", "Quit", priority=True, show=False),
    ]

    CSS = """
    Screen {
        background: $surface;
    }
    """

    def __init__(self, config: Config) -> None:
        super().__init__()
        self.config = config
        self.form_theme = Theme.load(config.theme_path)
        self.api_client: AuthAPIClient | None = None
        self.signed_up = False

    async def on_mount(self) -> None:
        self.api_client = AuthAPIClient(self.config)
        await self.api_client.__aenter__()

        await self.push_screen(
            SignUpScreen(
                self.api_client,
                on_success=self.handle_success,
                theme=self.form_theme,
                submit_timeout=self.config.submit_timeout,
            )
        )

    async def on_unmount(self) -> None:
        if self.api_client:
            await self.api_client.__aexit__(None, None, None)
            self.api_client = None

    def handle_success(self) -> None:
        """Success callback handed to the sign-up screen."""
        logger.info("Account created via %s", self.config.server_url)
        self.signed_up = True
        self.exit(True, message=SUCCESS_MESSAGE)


def configure_logging(log_file: Path | None) -> None:
    """
    Send diagnostics to ``log_file``.

    The Textual app owns the terminal, so nothing is logged when no file
    is configured.
    """
    if log_file is None:
        logging.getLogger("signup_widget").addHandler(logging.NullHandler())
        return

    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(args: Sequence[str] | None = None) -> int:
    """
    Main entry point for the sign-up widget.

    Returns:
        Exit code (0 for success or user exit, non-zero for errors).
    """
    try:
        config = Config.from_args(args)
        configure_logging(config.log_file)

        app = SignUpApp(config)
        app.run()

        return 0

    except KeyboardInterrupt:
        return 130

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
