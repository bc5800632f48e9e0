"""Filesystem primitives behind the listing CLI.

This package contains non-UI helpers:
- path kind classification and metadata summaries
- recursive apparent-size computation
- immediate-children scans split by file type
"""

from __future__ import annotations

from .types import DirectoryListing, PathInfo, PathKind
from .size import size_of
from .metadata import classify, count_entries, describe, is_read_only
from .listing import list_directory

__all__ = [
    "DirectoryListing",
    "PathInfo",
    "PathKind",
    "size_of",
    "classify",
    "count_entries",
    "describe",
    "is_read_only",
    "list_directory",
]
