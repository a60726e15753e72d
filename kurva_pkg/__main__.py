"""Main entry point for running kurva_pkg as a module.

This allows running Kurva with:
    python -m kurva_pkg "1/sin(x)" "[-5, 5]"
    python -m kurva_pkg "x^2" "[0, 10]" --step 0.5 --format json

This is equivalent to running:
    python -m kurva_pkg.cli
    kurva
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
