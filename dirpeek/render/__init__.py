"""Presentation helpers: byte labels, listing/info lines, usage text."""

from __future__ import annotations

from .units import format_bytes
from .text import display_text
from .listing import render_info, render_listing
from .help import usage_lines

__all__ = [
    "display_text",
    "format_bytes",
    "render_info",
    "render_listing",
    "usage_lines",
]
