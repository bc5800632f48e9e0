"""Exception types raised by the command runner."""

from __future__ import annotations


class UsageError(Exception):
    """Unrecognized flag character inside a ``-`` flag cluster."""

    def __init__(self, flag: str, token: str) -> None:
        super().__init__(f"Unknown flag used. Don't recognize flag `{flag}` from `{token}`")
        self.flag = flag
        self.token = token


class TargetError(Exception):
    """Processing one target path failed; ``str(exc)`` is the user message."""


class NotFoundError(TargetError):
    """Target path does not exist."""

    def __init__(self) -> None:
        super().__init__("Item doesn't exist!")


__all__ = ["UsageError", "TargetError", "NotFoundError"]
