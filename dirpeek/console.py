"""Diagnostics written to the error stream."""

from __future__ import annotations

import sys
from typing import TextIO

from .render.text import display_text
from .ui_theme import DEFAULT_THEME, UITheme


def report_error(message: str, stream: TextIO | None = None, theme: UITheme = DEFAULT_THEME) -> None:
    """Write ``message`` behind a colored ``ERROR>`` marker."""
    out = stream if stream is not None else sys.stderr
    out.write(f"{theme.error}ERROR{theme.reset}> {display_text(message)}\n")


__all__ = ["report_error"]
