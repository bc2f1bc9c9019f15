#!/usr/bin/env python3
"""Run the receipt calculator straight from a source checkout.

The package lives under ``src`` and is not importable until installed, so
the ``src`` directory is added to ``sys.path`` before importing the CLI.
"""

from __future__ import annotations

import sys
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
_SRC_PATH = _PROJECT_ROOT / "src"
if str(_SRC_PATH) not in sys.path:
    sys.path.insert(0, str(_SRC_PATH))

from receipt.cli import main

if __name__ == "__main__":  # pragma: no cover - direct execution
    raise SystemExit(main())
