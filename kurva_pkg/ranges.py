"""Parsing of the textual range specification.

Syntax: ``('[' | '(') <int> ',' <int> (']' | ')')`` with whitespace allowed
around every part. Bracket flags follow the established mapping, which is
easy to misread: ``[`` marks x_min inclusive, but ``]`` marks x_max
*exclusive* and ``)`` marks it non-exclusive.
"""

from __future__ import annotations

import math

from . import config
from .config import INT_RE, WHITESPACE_RE
from .logging_config import get_logger
from .types import Range, ValidationError

logger = get_logger("ranges")

FORMAT_MESSAGE = "Range must be in format [a,b] or (a,b)"

# bounds are C ints
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _skip_space(text: str, pos: int) -> int:
    return WHITESPACE_RE.match(text, pos).end()


def _read_int(text: str, pos: int) -> tuple[int, int]:
    match = INT_RE.match(text, pos)
    if not match:
        raise ValidationError(
            f"{FORMAT_MESSAGE}: expected integer at position {pos}",
            code="RANGE_FORMAT",
        )
    literal = match.group(0)
    sign = "-" if literal.startswith("-") else ""
    digits = literal.lstrip("+-").lstrip("0") or "0"
    # compare lengths first so int() never sees an over-long digit string
    value = int(sign + digits) if len(digits) <= 10 else None
    if value is None or not INT_MIN <= value <= INT_MAX:
        raise ValidationError(
            f"{FORMAT_MESSAGE}: bound at position {pos} is outside [{INT_MIN}, {INT_MAX}]",
            code="RANGE_FORMAT",
        )
    return value, match.end()


def validate_step(step: float) -> float:
    """Reject steps that would never advance the sweep."""
    if not isinstance(step, (int, float)) or not math.isfinite(step) or step <= 0:
        raise ValidationError(
            f"Step must be a positive number, got {step!r}", code="INVALID_STEP"
        )
    return float(step)


def parse_range(text: str, step: float | None = None) -> Range:
    """Parse a range such as ``"[-5, 5]"``.

    Args:
        text: Range specification
        step: Sampling step (default: config.STEP)

    Returns:
        Range with bounds, step and bracket flags

    Raises:
        ValidationError: Malformed syntax (RANGE_FORMAT), a separator other
            than a comma (RANGE_SEPARATOR), x_min > x_max (RANGE_BOUNDS) or a
            non-positive step (INVALID_STEP)
    """
    step = validate_step(config.STEP if step is None else step)
    text = text or ""
    pos = _skip_space(text, 0)

    if pos >= len(text) or text[pos] not in "[(":
        logger.warning("Rejected range %r: missing opening bracket", text)
        raise ValidationError(FORMAT_MESSAGE, code="RANGE_FORMAT")
    x_min_inclusive = text[pos] == "["

    x_min, pos = _read_int(text, _skip_space(text, pos + 1))

    pos = _skip_space(text, pos)
    if pos >= len(text) or text[pos] != ",":
        logger.warning("Rejected range %r: bad separator", text)
        raise ValidationError("Separator must be comma", code="RANGE_SEPARATOR")

    x_max, pos = _read_int(text, _skip_space(text, pos + 1))

    pos = _skip_space(text, pos)
    if pos >= len(text) or text[pos] not in "])":
        logger.warning("Rejected range %r: missing closing bracket", text)
        raise ValidationError(FORMAT_MESSAGE, code="RANGE_FORMAT")
    x_max_exclusive = text[pos] == "]"

    if _skip_space(text, pos + 1) != len(text):
        raise ValidationError(
            f"{FORMAT_MESSAGE}: unexpected text after closing bracket",
            code="RANGE_FORMAT",
        )

    if x_min > x_max:
        raise ValidationError(
            "x_min cannot be greater than x_max", code="RANGE_BOUNDS"
        )

    return Range(
        x_min=x_min,
        x_max=x_max,
        step=step,
        x_min_inclusive=x_min_inclusive,
        x_max_exclusive=x_max_exclusive,
    )
