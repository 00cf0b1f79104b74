"""Make ``import lazytree`` resolve to this checkout.

Running the ``pytest`` console script from an uninstalled tree can leave the
repository root off ``sys.path``.
"""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = str(Path(__file__).resolve().parent.parent)

if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)
