"""Centralized configuration for Kurva.

This module defines:
- Sampling defaults (step between evaluated points)
- Input validation limits (length, nesting depth, tree height)
- Output and chart settings
- Regex patterns used by the lexer

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with KURVA_)
"""

import os
import re

# Version is defined in pyproject.toml [project] section
try:
    import importlib.metadata

    VERSION = importlib.metadata.version("kurva")
except Exception:
    # Fallback if package not installed
    VERSION = "0.1.0"

# Sampling
STEP = float(os.getenv("KURVA_STEP", "0.05"))  # distance between samples

# Output
OUTPUT_PRECISION = int(os.getenv("KURVA_OUTPUT_PRECISION", "6"))

# Input validation limits
MAX_INPUT_LENGTH = int(os.getenv("KURVA_MAX_INPUT_LENGTH", "10000"))  # characters
MAX_EXPRESSION_DEPTH = int(
    os.getenv("KURVA_MAX_EXPRESSION_DEPTH", "100")
)  # nested parens, functions and powers
MAX_TREE_HEIGHT = int(
    os.getenv("KURVA_MAX_TREE_HEIGHT", "500")
)  # longest root-to-leaf path

# Chart configuration
PLOT_WIDTH = int(os.getenv("KURVA_PLOT_WIDTH", "800"))  # pixels
PLOT_HEIGHT = int(os.getenv("KURVA_PLOT_HEIGHT", "600"))  # pixels
PLOT_DPI = 100
PLOT_X_LABELS = 10
PLOT_Y_LABELS = 5

# ASCII chart dimensions in characters
ASCII_ROWS = int(os.getenv("KURVA_ASCII_ROWS", "20"))
ASCII_COLS = int(os.getenv("KURVA_ASCII_COLS", "60"))

WHITESPACE_RE = re.compile(r"\s*")
NUMBER_RE = re.compile(r"[0-9]+(?:\.[0-9]+)?")
IDENT_RE = re.compile(r"[A-Za-z][A-Za-z0-9]*")
INT_RE = re.compile(r"[+-]?[0-9]+")
