"""Command-line front door for dirpeek.

Tokenizes flags and target paths, then prints either a colored listing of
each directory's children or a metadata line for each target.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from typing import TextIO

from .console import report_error
from .errors import NotFoundError, TargetError, UsageError
from .path_model import PathInfo, describe, list_directory
from .render import display_text, render_info, render_listing, usage_lines

BATCH_INDENT = "  "


@dataclass
class Options:
    """Parsed command-line state."""

    show_hidden: bool = False
    only_info: bool = False
    append_info: bool = False
    show_help: bool = False
    targets: list[str] = field(default_factory=list)


def default_target() -> str:
    """Return the current directory spelled with a trailing separator."""
    return os.curdir + os.sep


def parse_args(args: list[str]) -> Options:
    """Parse ``args`` left to right.

    ``--help`` stops parsing immediately. Any other token starting with ``-``
    is a cluster of single-character flags. ``-I`` clears ``-i`` and keeps a
    later ``-i`` from taking effect; ``-i`` never clears ``-I``.
    """
    options = Options()
    for arg in args:
        if arg == "--help":
            options.show_help = True
            return options
        if not arg.startswith("-"):
            options.targets.append(arg)
            continue
        for ch in arg[1:]:
            if ch == "a":
                options.show_hidden = True
            elif ch == "i":
                if not options.append_info:
                    options.only_info = True
            elif ch == "I":
                options.append_info = True
                options.only_info = False
            else:
                raise UsageError(ch, arg)
    return options


def _describe(path: str) -> PathInfo:
    try:
        return describe(path)
    except OSError as exc:
        raise TargetError(f"Failed to get metadata: {exc}") from exc


def show_target(
    path: str,
    options: Options,
    out: TextIO,
    err: TextIO,
    indent: str = "",
    label: bool = False,
) -> None:
    """Print the info line or the listing for one target.

    Raises ``TargetError`` when the step that decides the target's outcome
    fails. With ``append_info`` a metadata failure is only reported to ``err``
    and the listing still runs. ``label`` prefixes the info line with the path.
    """
    if not os.path.exists(path):
        raise NotFoundError()

    if options.only_info or not os.path.isdir(path):
        line = render_info(_describe(path), indent)
        out.write(f"{display_text(path)}: {line}\n" if label else f"{line}\n")
        return

    if options.append_info:
        try:
            out.write(render_info(_describe(path), indent) + "\n")
        except TargetError as exc:
            report_error(str(exc), err)

    try:
        listing = list_directory(path, options.show_hidden)
    except OSError as exc:
        raise TargetError(f"Problem happened while attempting to read directory: {exc}") from exc
    for line in render_listing(listing, indent):
        out.write(line + "\n")


def run(program: str, args: list[str], out: TextIO | None = None, err: TextIO | None = None) -> bool:
    """Run one invocation and return overall success.

    A single target fails the run on any error. With several targets each one
    is attempted independently and the run succeeds if at least one did.
    Raises ``UsageError`` for an unknown flag character.
    """
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr

    options = parse_args(args)
    if options.show_help:
        out.write("\n".join(usage_lines(program)) + "\n")
        return True

    targets = options.targets or [default_target()]
    if len(targets) == 1:
        try:
            show_target(targets[0], options, out, err, label=True)
        except TargetError as exc:
            report_error(str(exc), err)
            return False
        return True

    succeeded = 0
    for path in targets:
        out.write(f"{display_text(path)}:\n")
        try:
            show_target(path, options, out, err, indent=BATCH_INDENT)
        except TargetError as exc:
            report_error(str(exc), err)
            continue
        succeeded += 1
    return succeeded > 0


def main(argv: list[str] | None = None) -> None:
    """Entry point: run with ``sys.argv`` and exit 0 on success, 1 otherwise."""
    argv = list(sys.argv if argv is None else argv)
    program = os.path.basename(argv[0]) if argv else "dirpeek"
    try:
        ok = run(program, argv[1:])
    except UsageError as exc:
        report_error(str(exc))
        sys.stdout.write("\n".join(usage_lines(program)) + "\n")
        raise SystemExit(1) from None
    raise SystemExit(0 if ok else 1)


if __name__ == "__main__":
    main()
