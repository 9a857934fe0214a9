#!/usr/bin/env python3
"""N-puzzle terminal tool, runnable from a source checkout.

Usage::

    python main.py new -s 3 --seed 1
    python main.py check "0 1 2 3 4 5 7 6 8"
    python main.py replay "0 1 2 3 4 5 6 7 8" "5 2"
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from npuzzle.cli.app import app  # noqa: E402

if __name__ == "__main__":
    app()
