"""dirpeek: colored directory listings and path metadata summaries.

``main`` runs the command line (``dirpeek [-a] [-i|-I] [PATH...]``).
Filesystem helpers (``size_of``, ``describe``, ``list_directory``) live in
``dirpeek.path_model``; text rendering lives in ``dirpeek.render``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Run the CLI; imported on first call so ``import dirpeek`` stays cheap."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
