"""Terminal-safe text for filesystem names."""

from __future__ import annotations

import os


def display_text(text: str) -> str:
    """Return ``text`` with undecodable filename bytes replaced by U+FFFD.

    ``os.scandir`` and ``sys.argv`` smuggle non-UTF-8 name bytes through as
    lone surrogates, which a strict output stream refuses to encode.
    """
    return os.fsencode(text).decode("utf-8", "replace")


__all__ = ["display_text"]
