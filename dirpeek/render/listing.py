"""Text rendering for directory listings and path metadata.

Rendering helpers here are presentation-only and side-effect free.
"""

from __future__ import annotations

from ..path_model import DirectoryListing, PathInfo, PathKind
from ..ui_theme import DEFAULT_THEME, UITheme
from .text import display_text
from .units import format_bytes


def render_info(info: PathInfo, indent: str = "") -> str:
    """Render one metadata line such as ``Type: `Dir` - ... - ReadOnly: false``."""
    parts = [f"{indent}Type: `{info.kind.value}`"]
    if info.kind is PathKind.DIR:
        count = "???" if info.entry_count is None else str(info.entry_count)
        parts.append(f"Entries Count: {count}")
    parts.append(f"Size: {format_bytes(info.size)}")
    parts.append(f"ReadOnly: {str(info.read_only).lower()}")
    return " - ".join(parts)


def render_listing(listing: DirectoryListing, indent: str = "", theme: UITheme = DEFAULT_THEME) -> list[str]:
    """Render directories first, then files, one colored path per line.

    Undecodable name bytes are shown as U+FFFD.
    """
    lines = [f"{indent}{theme.directory}{display_text(path)}{theme.reset}" for path in listing.directories]
    lines.extend(f"{indent}{theme.file}{display_text(path)}{theme.reset}" for path in listing.files)
    return lines


__all__ = [
    "render_info",
    "render_listing",
]
