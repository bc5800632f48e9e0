"""Human-scaled byte count labels using decimal units."""

from __future__ import annotations

KILOBYTE = 1_000
MEGABYTE = 1_000_000
GIGABYTE = 1_000_000_000
TERABYTE = 1_000_000_000_000

_SCALES: tuple[tuple[int, str], ...] = (
    (TERABYTE, "TB"),
    (GIGABYTE, "GB"),
    (MEGABYTE, "MB"),
    (KILOBYTE, "KB"),
)


def format_bytes(size: int) -> str:
    """Return ``size`` as ``"{n:.3f}{unit}"`` for the largest unit it reaches.

    Values under one kilobyte stay integral: ``999`` -> ``"999B"``.
    """
    for threshold, unit in _SCALES:
        if size >= threshold:
            return f"{size / threshold:.3f}{unit}"
    return f"{size}B"


__all__ = [
    "KILOBYTE",
    "MEGABYTE",
    "GIGABYTE",
    "TERABYTE",
    "format_bytes",
]
