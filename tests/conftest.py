"""Make ``import dirpeek`` resolve to this checkout under the pytest script."""

from __future__ import annotations

import sys
from pathlib import Path


PROJECT_ROOT = str(Path(__file__).resolve().parent.parent)

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)
