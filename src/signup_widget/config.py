"""
Configuration management for the sign-up widget.

This module handles configuration from multiple sources with the following
precedence (highest to lowest):

1. Command-line arguments (--server, --timeout, --submit-timeout, ...)
2. Environment variables (SIGNUP_SERVER_URL, SIGNUP_REQUEST_TIMEOUT, ...)
3. Default values

The configuration is immutable once created, ensuring consistent behavior
throughout the widget lifecycle.

Example:
    # Create config from CLI args
    config = Config.from_args(["--server", "http://localhost:8000"])

    # Access configuration
    print(config.server_url)      # "http://localhost:8000"
    print(config.submit_timeout)  # 30.0 (default)
"""

from __future__ import annotations

import argparse
import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

# =============================================================================
# DEFAULT CONFIGURATION VALUES
# =============================================================================

# Default authentication backend URL.
DEFAULT_SERVER_URL = "http://localhost:8000"

# Default HTTP request timeout in seconds, applied by httpx to every request.
DEFAULT_TIMEOUT = 10.0

# Upper bound on how long a single sign-up attempt may stay in flight before
# the controller gives up and reports a failure.
DEFAULT_SUBMIT_TIMEOUT = 30.0

# Environment variable names for configuration.
ENV_SERVER_URL = "SIGNUP_SERVER_URL"
ENV_TIMEOUT = "SIGNUP_REQUEST_TIMEOUT"
ENV_SUBMIT_TIMEOUT = "SIGNUP_SUBMIT_TIMEOUT"
ENV_THEME_PATH = "SIGNUP_THEME_PATH"
ENV_LOG_FILE = "SIGNUP_LOG_FILE"


# =============================================================================
# CONFIGURATION DATACLASS
# =============================================================================


@dataclass(frozen=True)
class Config:
    """
    Immutable configuration container for the sign-up widget.

    Attributes:
        server_url: Base URL of the authentication API (no trailing slash).
        timeout: HTTP request timeout in seconds.
        submit_timeout: Maximum seconds a submission may remain in flight.
        theme_path: Optional JSON file with theme color overrides.
        log_file: Optional file that receives diagnostic log output.

    Example:
        config = Config(server_url="http://localhost:8000", timeout=10.0)
    """

    server_url: str
    timeout: float = DEFAULT_TIMEOUT
    submit_timeout: float = DEFAULT_SUBMIT_TIMEOUT
    theme_path: Path | None = None
    log_file: Path | None = None

    def __post_init__(self) -> None:
        """
        Validate configuration values after initialization.

        Raises:
            ValueError: If server_url is empty or a timeout is not positive.
        """
        if not self.server_url:
            raise ValueError("server_url cannot be empty")

        if self.timeout <= 0:
            raise ValueError("timeout must be a positive number")

        if self.submit_timeout <= 0:
            raise ValueError("submit_timeout must be a positive number")

    @classmethod
    def from_args(cls, args: Sequence[str] | None = None) -> Config:
        """
        Create a Config instance from command-line arguments.

        Unspecified options fall back to environment variables and then to
        the module defaults.

        Args:
            args: Command-line arguments to parse. If None, uses sys.argv[1:].

        Returns:
            Config: A fully populated configuration object.
        """
        parser = argparse.ArgumentParser(
            prog="signup-widget",
            description="Terminal account-creation form backed by an auth API",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  signup-widget                                  # Use localhost:8000
  signup-widget --server https://auth.example.com
  SIGNUP_SERVER_URL=https://auth.example.com signup-widget

Environment Variables:
  SIGNUP_SERVER_URL       Server URL (default: http://localhost:8000)
  SIGNUP_REQUEST_TIMEOUT  HTTP timeout in seconds (default: 10)
  SIGNUP_SUBMIT_TIMEOUT   Submission timeout in seconds (default: 30)
  SIGNUP_THEME_PATH       JSON theme overrides
  SIGNUP_LOG_FILE         Write diagnostics to this file
            """,
        )

        parser.add_argument(
            "--server",
            "-s",
            dest="server_url",
            default=None,  # None means "check env var, then use default"
            help=f"Authentication server URL (default: {DEFAULT_SERVER_URL})",
        )
        parser.add_argument(
            "--timeout",
            "-t",
            type=float,
            default=None,
            help=f"HTTP request timeout in seconds (default: {DEFAULT_TIMEOUT})",
        )
        parser.add_argument(
            "--submit-timeout",
            dest="submit_timeout",
            type=float,
            default=None,
            help=f"Sign-up submission timeout in seconds (default: {DEFAULT_SUBMIT_TIMEOUT})",
        )
        parser.add_argument(
            "--theme",
            dest="theme_path",
            default=None,
            help="Path to a JSON file with theme color overrides",
        )
        parser.add_argument(
            "--log-file",
            dest="log_file",
            default=None,
            help="Write diagnostic logs to this file",
        )

        parsed = parser.parse_args(args)

        # Resolve server_url with precedence: CLI > ENV > DEFAULT
        server_url = parsed.server_url or os.environ.get(ENV_SERVER_URL) or DEFAULT_SERVER_URL
        server_url = server_url.rstrip("/")

        timeout = _resolve_float(parsed.timeout, ENV_TIMEOUT, DEFAULT_TIMEOUT)
        submit_timeout = _resolve_float(
            parsed.submit_timeout, ENV_SUBMIT_TIMEOUT, DEFAULT_SUBMIT_TIMEOUT
        )

        theme_path = parsed.theme_path or os.environ.get(ENV_THEME_PATH)
        log_file = parsed.log_file or os.environ.get(ENV_LOG_FILE)

        return cls(
            server_url=server_url,
            timeout=timeout,
            submit_timeout=submit_timeout,
            theme_path=Path(theme_path) if theme_path else None,
            log_file=Path(log_file) if log_file else None,
        )


def _resolve_float(cli_value: float | None, env_name: str, default: float) -> float:
    """Resolve a numeric option with precedence CLI > ENV > DEFAULT."""
    if cli_value is not None:
        return cli_value
    if env_name in os.environ:
        return float(os.environ[env_name])
    return default
