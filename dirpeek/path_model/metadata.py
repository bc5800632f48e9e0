"""Path kind classification and metadata summaries."""

from __future__ import annotations

import os
import stat

from .size import size_of
from .types import PathInfo, PathKind

_WRITE_BITS = stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH


def classify(path: str | os.PathLike[str]) -> PathKind:
    """Return the first matching kind in Dir, File, Symlink order.

    Dir and File checks follow symlinks, so only a dangling link reports
    ``PathKind.SYMLINK``.
    """
    if os.path.isdir(path):
        return PathKind.DIR
    if os.path.isfile(path):
        return PathKind.FILE
    if os.path.islink(path):
        return PathKind.SYMLINK
    return PathKind.UNKNOWN


def count_entries(directory: str | os.PathLike[str]) -> int | None:
    """Count every child of ``directory`` or return ``None`` if unreadable."""
    try:
        with os.scandir(directory) as entries:
            return sum(1 for _entry in entries)
    except OSError:
        return None


def is_read_only(path: str | os.PathLike[str]) -> bool:
    """Return whether ``path`` itself (not a link target) has no write bits."""
    return not (os.lstat(path).st_mode & _WRITE_BITS)


def describe(path: str | os.PathLike[str]) -> PathInfo:
    """Collect kind, entry count, recursive size and read-only flag.

    Size and read-only failures propagate as ``OSError``; an unreadable
    directory only degrades its entry count.
    """
    kind = classify(path)
    entry_count = count_entries(path) if kind is PathKind.DIR else None
    size = size_of(path)
    return PathInfo(
        kind=kind,
        size=size,
        read_only=is_read_only(path),
        entry_count=entry_count,
    )


__all__ = [
    "classify",
    "count_entries",
    "is_read_only",
    "describe",
]
