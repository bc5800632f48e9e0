"""Immediate-children scan split into directories and files."""

from __future__ import annotations

import os

from .types import DirectoryListing


def list_directory(directory: str | os.PathLike[str], show_hidden: bool) -> DirectoryListing:
    """Partition visible children of ``directory`` by their own file type.

    Names starting with ``.`` are skipped unless ``show_hidden``. Symlinks are
    not followed, so a link to a directory lands with the files. A child whose
    type cannot be read is dropped; failing to open ``directory`` raises.
    """
    directories: list[str] = []
    files: list[str] = []
    with os.scandir(directory) as entries:
        for child in entries:
            if not show_hidden and child.name.startswith("."):
                continue
            try:
                is_dir = child.is_dir(follow_symlinks=False)
            except OSError:
                continue
            if is_dir:
                directories.append(child.path)
            else:
                files.append(child.path)
    return DirectoryListing(directories=tuple(directories), files=tuple(files))


__all__ = ["list_directory"]
