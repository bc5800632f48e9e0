"""Tests for terminal-safe filename text."""

from __future__ import annotations

import os
import unittest

from dirpeek.path_model import DirectoryListing
from dirpeek.render import display_text, render_listing
from dirpeek.ui_theme import PLAIN_THEME


class DisplayTextTests(unittest.TestCase):
    def test_plain_names_pass_through(self) -> None:
        self.assertEqual(display_text("./docs/naïve.txt"), "./docs/naïve.txt")

    @unittest.skipUnless(os.name == "posix", "surrogateescape filenames are POSIX-only")
    def test_undecodable_bytes_become_replacement_character(self) -> None:
        smuggled = os.fsdecode(b"caf\xe9.txt")
        shown = display_text(smuggled)
        self.assertEqual(shown, "caf\ufffd.txt")
        self.assertEqual(shown.encode("utf-8"), b"caf\xef\xbf\xbd.txt")

    @unittest.skipUnless(os.name == "posix", "surrogateescape filenames are POSIX-only")
    def test_listing_lines_are_encodable(self) -> None:
        listing = DirectoryListing(files=(os.fsdecode(b"./caf\xe9.txt"),))
        self.assertEqual(render_listing(listing, theme=PLAIN_THEME), ["./caf\ufffd.txt"])


if __name__ == "__main__":
    unittest.main()
