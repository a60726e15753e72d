"""Type definitions and result dataclasses for consistent API responses."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Union


class TokenKind(enum.Enum):
    """Lexical token kinds. The value is the name shown in error messages."""

    OPEN_PAREN = "("
    CLOSE_PAREN = ")"
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    VARIABLE = "t_var"
    PLUS = "+"
    TIMES = "*"
    DIVIDE = "/"
    MINUS = "-"
    INT = "t_int"
    DECIMAL_POINT = "."  # never emitted; a stray '.' lexes as UNKNOWN
    FLOAT = "t_float"
    POWER = "^"
    UNKNOWN = "t_unknown"
    END = "t_end"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    """A classified lexical unit and its span in the source text."""

    kind: TokenKind
    start: int
    length: int
    value: int | float | str | None = None

    @property
    def end(self) -> int:
        return self.start + self.length


@dataclass(frozen=True)
class EvalValue:
    """Successful evaluation of an expression."""

    value: float

    @property
    def ok(self) -> bool:
        return True

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"ok": True, "value": self.value}

    def __repr__(self) -> str:
        return f"EvalValue({self.value!r})"


@dataclass(frozen=True)
class EvalError:
    """Failed evaluation, carrying a human-readable message and an error code."""

    message: str
    code: str = "EVAL_ERROR"

    @property
    def ok(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"ok": False, "error": self.message, "code": self.code}

    def __repr__(self) -> str:
        return f"EvalError({self.message!r}, code={self.code!r})"


# Exactly one of value or error, never both
EvalResult = Union[EvalValue, EvalError]


@dataclass(frozen=True)
class Range:
    """Interval swept by the sampler.

    The flags record the bracket characters of the textual form:
    '[' sets x_min_inclusive, ']' sets x_max_exclusive. The sampler
    does not consult them.
    """

    x_min: int
    x_max: int
    step: float
    x_min_inclusive: bool = False
    x_max_exclusive: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "x_min": self.x_min,
            "x_max": self.x_max,
            "step": self.step,
            "x_min_inclusive": self.x_min_inclusive,
            "x_max_exclusive": self.x_max_exclusive,
        }


@dataclass(frozen=True)
class Sample:
    """One evaluation outcome of a range sweep."""

    index: int
    x: float
    result: EvalResult

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"index": self.index, "x": self.x}
        result_dict.update(self.result.to_dict())
        return result_dict


@dataclass
class SweepResult:
    """Result of parsing an expression and sweeping it over a range."""

    ok: bool
    expression: str
    variables: list[str] | None = None
    range: Range | None = None
    samples: list[Sample] | None = None
    error: str | None = None
    code: str | None = None

    @property
    def error_count(self) -> int:
        if not self.samples:
            return 0
        return sum(1 for s in self.samples if not s.result.ok)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok, "expression": self.expression}
        if self.variables is not None:
            result_dict["variables"] = self.variables
        if self.range is not None:
            result_dict["range"] = self.range.to_dict()
        if self.samples is not None:
            result_dict["samples"] = [s.to_dict() for s in self.samples]
        if self.error is not None:
            result_dict["error"] = self.error
        if self.code is not None:
            result_dict["code"] = self.code
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return f"SweepResult(ok=False, error={self.error!r}, code={self.code!r})"
        parts = [f"ok={self.ok}", f"expression={self.expression!r}"]
        if self.variables is not None:
            parts.append(f"variables={self.variables!r}")
        if self.samples is not None:
            parts.append(f"samples={len(self.samples)}")
        return f"SweepResult({', '.join(parts)})"


@dataclass
class PlotResult:
    """Result of rendering a chart."""

    ok: bool
    result: str | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.result is not None:
            result_dict["result"] = self.result
        if self.error is not None:
            result_dict["error"] = self.error
        return result_dict


class ValidationError(Exception):
    """Raised when input validation fails."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class ParseError(Exception):
    """Raised when parsing fails."""

    def __init__(
        self, message: str, code: str = "PARSE_ERROR", position: int | None = None
    ):
        self.message = message
        self.code = code
        self.position = position
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message
