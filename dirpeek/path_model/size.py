"""Recursive apparent-size computation for files and directory trees."""

from __future__ import annotations

import os


def size_of(path: str | os.PathLike[str]) -> int:
    """Return apparent byte length of ``path`` or of every file under it.

    Directories (symlinked ones included) are descended into; every other
    child contributes its own ``lstat`` size. A non-directory ``path``
    reports its ``stat`` size. Any ``OSError`` aborts the walk.

    There is no cycle detection: a symlink loop back into an ancestor keeps
    descending until the OS rejects the path (``ELOOP``/``ENAMETOOLONG``).
    """
    if not os.path.isdir(path):
        return int(os.stat(path).st_size)

    total = 0
    pending: list[str | os.PathLike[str]] = [path]
    while pending:
        directory = pending.pop()
        with os.scandir(directory) as entries:
            for entry in entries:
                if entry.is_dir():
                    pending.append(entry.path)
                    continue
                total += int(entry.stat(follow_symlinks=False).st_size)
    return total


__all__ = ["size_of"]
