"""Tests for listing and metadata line rendering."""

from __future__ import annotations

import re
import unittest

from dirpeek.path_model import DirectoryListing, PathInfo, PathKind
from dirpeek.render import render_info, render_listing
from dirpeek.ui_theme import DEFAULT_THEME, PLAIN_THEME

ANSI_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def strip_ansi(text: str) -> str:
    return ANSI_RE.sub("", text)


class RenderInfoTests(unittest.TestCase):
    def test_directory_line_includes_entry_count(self) -> None:
        info = PathInfo(kind=PathKind.DIR, size=2_048, read_only=False, entry_count=4)
        self.assertEqual(
            render_info(info),
            "Type: `Dir` - Entries Count: 4 - Size: 2.048KB - ReadOnly: false",
        )

    def test_unknown_directory_count_uses_marker(self) -> None:
        info = PathInfo(kind=PathKind.DIR, size=0, read_only=True, entry_count=None)
        self.assertEqual(
            render_info(info, indent="  "),
            "  Type: `Dir` - Entries Count: ??? - Size: 0B - ReadOnly: true",
        )

    def test_non_directories_omit_entry_count(self) -> None:
        for kind, label in ((PathKind.FILE, "File"), (PathKind.SYMLINK, "Sym"), (PathKind.UNKNOWN, "???")):
            info = PathInfo(kind=kind, size=12, read_only=False)
            self.assertEqual(render_info(info), f"Type: `{label}` - Size: 12B - ReadOnly: false")


class RenderListingTests(unittest.TestCase):
    def test_directories_precede_files_in_given_order(self) -> None:
        listing = DirectoryListing(directories=("./b", "./a"), files=("./z.txt", "./c.txt"))

        lines = render_listing(listing, theme=PLAIN_THEME)

        self.assertEqual(lines, ["./b", "./a", "./z.txt", "./c.txt"])

    def test_directories_and_files_use_distinct_colors(self) -> None:
        listing = DirectoryListing(directories=("d",), files=("f",))

        lines = render_listing(listing, indent="  ")

        self.assertEqual(lines[0], f"  {DEFAULT_THEME.directory}d{DEFAULT_THEME.reset}")
        self.assertEqual(lines[1], f"  {DEFAULT_THEME.file}f{DEFAULT_THEME.reset}")
        self.assertNotEqual(DEFAULT_THEME.directory, DEFAULT_THEME.file)
        self.assertEqual([strip_ansi(line) for line in lines], ["  d", "  f"])

    def test_empty_listing_renders_nothing(self) -> None:
        self.assertEqual(render_listing(DirectoryListing()), [])


if __name__ == "__main__":
    unittest.main()
