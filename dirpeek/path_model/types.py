"""Domain datatypes for path classification and metadata."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class PathKind(enum.Enum):
    """What a path resolves to at observation time."""

    DIR = "Dir"
    FILE = "File"
    SYMLINK = "Sym"
    UNKNOWN = "???"


@dataclass(frozen=True)
class PathInfo:
    """Metadata summary for one path.

    ``entry_count`` is only meaningful for directories. For a directory it is
    ``None`` when the children could not be enumerated.
    """

    kind: PathKind
    size: int
    read_only: bool
    entry_count: int | None = None


@dataclass(frozen=True)
class DirectoryListing:
    """Immediate children of one directory, split by file type.

    Both sequences keep filesystem enumeration order.
    """

    directories: tuple[str, ...] = ()
    files: tuple[str, ...] = ()


__all__ = [
    "PathKind",
    "PathInfo",
    "DirectoryListing",
]
