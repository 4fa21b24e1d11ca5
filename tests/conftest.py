from __future__ import annotations

from pathlib import Path
import sys


# Make the repository root importable when the package is not installed.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))
