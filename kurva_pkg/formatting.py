"""Text rendering of trees, variable lists and sweep results."""

from __future__ import annotations

import re
from typing import Any

from . import config
from .nodes import FloatLiteral, IntLiteral, Node, Variable, children
from .types import EvalResult, Sample


def superscriptify(input_str: str) -> str:
    """Convert numeric string to Unicode superscript characters.

    Args:
        input_str: Input string with digits and '-' (e.g., "123", "-5")

    Returns:
        String with superscript Unicode characters (e.g., "¹²³", "⁻⁵")
    """
    mapping = {
        "0": "⁰",
        "1": "¹",
        "2": "²",
        "3": "³",
        "4": "⁴",
        "5": "⁵",
        "6": "⁶",
        "7": "⁷",
        "8": "⁸",
        "9": "⁹",
        "-": "⁻",
    }
    return "".join(mapping.get(char, char) for char in input_str)


def format_superscript(expr_str: str) -> str:
    """Replace Python power notation (**) with Unicode superscripts.

    Args:
        expr_str: Expression string (e.g., "x**2", "x**-3")

    Returns:
        String with superscripts (e.g., "x²", "x⁻³")
    """
    return re.sub(r"\*\*(\-?\d+)", lambda m: superscriptify(m.group(1)), expr_str)


def format_number(val: Any, precision: int | None = None) -> str:
    """Format a numeric value with specified precision.

    Args:
        val: Numeric value to format
        precision: Number of significant digits (default: config.OUTPUT_PRECISION)

    Returns:
        Formatted string representation of the number
    """
    if precision is None:
        precision = config.OUTPUT_PRECISION
    try:
        fmt = "{:." + str(int(precision)) + "g}"
        return fmt.format(float(val))
    except (ValueError, TypeError, OverflowError):
        return str(val)


def _node_label(node: Node) -> str:
    if isinstance(node, IntLiteral):
        return str(node.value)
    if isinstance(node, FloatLiteral):
        return f"{node.value:g}"
    if isinstance(node, Variable):
        return node.name
    return str(node.kind)


def format_tree(node: Node | None, level: int = 0) -> str:
    """Render the tree one node per line, children indented under ``|-> ``.

    Example for ``1/sin(x)``::

        /
        |-> 1
        |-> sin
         |-> x
    """
    lines: list[str] = []
    _append_tree(node, level, lines)
    return "\n".join(lines)


def _append_tree(node: Node | None, level: int, lines: list[str]) -> None:
    if node is None:
        return
    prefix = "".join("|-> " if i == level - 1 else " " for i in range(level))
    lines.append(prefix + _node_label(node))
    for child in children(node):
        _append_tree(child, level + 1, lines)


def format_variables(names: list[str]) -> str:
    return "[" + ", ".join(names) + "]"


def format_result(result: EvalResult, precision: int | None = None) -> str:
    if result.ok:
        return format_number(result.value, precision)
    return f"error: {result.message}"


def format_sample(s: Sample, precision: int | None = None) -> str:
    return f"x = {format_number(s.x, precision)} -> {format_result(s.result, precision)}"


def format_samples(samples: list[Sample], precision: int | None = None) -> str:
    """One line per sample; evaluation errors are reported inline."""
    return "\n".join(format_sample(s, precision) for s in samples)
