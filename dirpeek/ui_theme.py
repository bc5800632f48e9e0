"""Fixed ANSI palette for listing and diagnostics output.

Escape sequences come from Pygments' console code table and are mapped to
semantic roles once at import time. There is no runtime reconfiguration.
"""

from __future__ import annotations

from dataclasses import dataclass

from pygments.console import codes, esc


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    directory: str
    file: str
    error: str
    reset: str


DEFAULT_THEME = UITheme(
    directory=codes["cyan"],
    file=esc + "39m",
    error=codes["bold"] + codes["red"],
    reset=codes["reset"],
)

PLAIN_THEME = UITheme(
    directory="",
    file="",
    error="",
    reset="",
)


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "PLAIN_THEME",
]
