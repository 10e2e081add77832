"""
Color theme for the sign-up widget.

The theme is a flat mapping of named color tokens. It is passed explicitly
to the sign-up screen at construction time and consumed read-only; the only
place where widget logic picks a color conditionally is the repeat-password
border, which switches to ``mismatch_border_color`` while the two password
fields differ.

Themes can be customized through an optional JSON file:
    { "theme": { "button_background": "#24D07E" } }
or:
    { "button_background": "#24D07E" }

Unknown tokens and values that are not valid colors are ignored, and
invalid files fall back to the defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from textual.color import Color, ColorParseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Theme:
    """
    Immutable set of color tokens used by the sign-up screen.

    Values are color strings Textual understands (``#rrggbb`` or named
    colors such as ``red``).
    """

    text_color: str = "#ffffff"
    input_label_color: str = "#b5b5b5"
    input_text_color: str = "#ffffff"
    input_background: str = "#1e1e1e"
    input_border_color: str = "#3a3a3a"
    mismatch_border_color: str = "red"
    button_background: str = "#24D07E"
    button_text_color: str = "#000000"
    error_color: str = "#fa4747"
    error_background: str = "#ffb8b8"

    @classmethod
    def load(cls, path: Path | None) -> Theme:
        """
        Load a theme from JSON, merged over the defaults.

        A missing path or an unreadable/malformed file yields the default
        theme; the problem is logged rather than raised.
        """
        if path is None:
            return cls()

        if not path.exists():
            logger.warning("Theme file %s does not exist; using defaults", path)
            return cls()

        try:
            overrides = _load_overrides(path)
        except Exception as exc:
            logger.warning("Failed to load theme from %s: %s", path, exc)
            return cls()

        return replace(cls(), **overrides)

    def repeat_password_border(self, passwords_match: bool) -> str:
        """Border color for the repeat-password input given the match state."""
        if passwords_match:
            return self.input_border_color
        return self.mismatch_border_color


def _load_overrides(path: Path) -> dict[str, str]:
    """Read override tokens from a JSON file, keeping only known string values."""
    with path.open("r", encoding="utf-8") as handle:
        raw: Any = json.load(handle)

    if isinstance(raw, dict) and "theme" in raw:
        raw = raw.get("theme")

    if not isinstance(raw, dict):
        raise ValueError("Theme JSON must be a mapping")

    known = {item.name for item in fields(Theme)}
    overrides: dict[str, str] = {}
    for token, value in raw.items():
        if token not in known:
            logger.debug("Ignoring unknown theme token %r", token)
            continue
        if not isinstance(value, str) or not value.strip():
            continue
        try:
            Color.parse(value.strip())
        except ColorParseError as exc:
            logger.warning("Ignoring theme token %r: %s", token, exc)
            continue
        overrides[token] = value.strip()

    return overrides
