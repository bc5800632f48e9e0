"""Usage text printed for ``--help`` and after flag errors."""

from __future__ import annotations

OPTION_LINES: tuple[tuple[str, str], ...] = (
    ("-a", "Option to display entries that start with `.`"),
    ("-i", "Option to display only the information about a directory instead of its contents"),
    ("-I", "Option to display the information about a directory before its contents"),
    ("DIR", "Provide directories to list contents of"),
    ("--help", "Display this help message"),
)


def usage_lines(program: str) -> list[str]:
    """Build usage lines for ``program``."""
    lines = ["Usage:", f"  {program} [OPTION] [DIR...]"]
    lines.extend(f"    {name:<10} {text}" for name, text in OPTION_LINES)
    return lines


__all__ = ["OPTION_LINES", "usage_lines"]
