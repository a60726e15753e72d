"""Public API for Kurva - returns structured objects without side effects."""

from __future__ import annotations

from .evaluator import evaluate as _evaluate
from .logging_config import get_logger
from .parser import parse_expression
from .plotting import ascii_plot, plot_samples
from .ranges import parse_range
from .sampler import sample
from .types import (
    EvalError,
    EvalResult,
    ParseError,
    PlotResult,
    SweepResult,
    ValidationError,
)
from .variables import collect_variables, require_single_variable

logger = get_logger("api")


def evaluate(expression: str, x: float = 0.0) -> EvalResult:
    """Evaluate an expression at a single value of its variable.

    Args:
        expression: Expression string (e.g., "2+3*4", "1/sin(x)")
        x: Value substituted for the variable

    Returns:
        EvalValue, or EvalError (parse failures carry the parser's code)

    Example:
        >>> from kurva_pkg.api import evaluate
        >>> evaluate("2+3*4").value
        14.0
        >>> evaluate("1/(x-x)", 3.0).code
        'DIVISION_BY_ZERO'
    """
    try:
        ast = parse_expression(expression)
        require_single_variable(collect_variables(ast))
    except (ParseError, ValidationError) as e:
        return EvalError(e.message, code=e.code)
    return _evaluate(ast, x)


def sweep(expression: str, range_text: str, step: float | None = None) -> SweepResult:
    """Parse an expression and evaluate it across a range.

    Args:
        expression: Expression string with at most one variable
        range_text: Range such as "[-5, 5]"
        step: Distance between samples (default: config.STEP)

    Returns:
        SweepResult with variables and samples, or the structural error

    Example:
        >>> from kurva_pkg.api import sweep
        >>> result = sweep("x*2", "[0, 10]", step=1)
        >>> len(result.samples)
        10
    """
    try:
        ast = parse_expression(expression)
        variables = collect_variables(ast)
        require_single_variable(variables)
        r = parse_range(range_text, step)
    except (ParseError, ValidationError) as e:
        logger.info(f"Sweep of {expression!r} rejected: {e.code}")
        return SweepResult(ok=False, expression=expression, error=e.message, code=e.code)
    return SweepResult(
        ok=True,
        expression=expression,
        variables=variables,
        range=r,
        samples=sample(ast, r),
    )


def validate_expression(expression: str) -> tuple[bool, str | None]:
    """Validate an expression without evaluating it.

    Args:
        expression: Expression string to validate

    Returns:
        Tuple of (is_valid, error_message)

    Example:
        >>> from kurva_pkg.api import validate_expression
        >>> validate_expression("sin(x) + 1")
        (True, None)
        >>> validate_expression("(x + 1")
        (False, 'Expected closing parenthesis at position 6')
    """
    try:
        ast = parse_expression(expression)
        require_single_variable(collect_variables(ast))
        return True, None
    except (ParseError, ValidationError) as e:
        return False, str(e)


def plot(
    expression: str,
    range_text: str,
    step: float | None = None,
    output: str | None = None,
    ascii: bool = False,
) -> PlotResult:
    """Sweep an expression and chart the result.

    Args:
        expression: Function expression
        range_text: Range such as "[-5, 5]"
        step: Distance between samples (default: config.STEP)
        output: PNG destination (default: temporary file)
        ascii: Return an ASCII chart instead of writing an image

    Returns:
        PlotResult with the chart text or the saved file path

    Example:
        >>> from kurva_pkg.api import plot
        >>> plot("sin(x)", "[-3, 3]", ascii=True).ok
        True
    """
    result = sweep(expression, range_text, step)
    if not result.ok:
        return PlotResult(ok=False, error=result.error)
    if ascii:
        return ascii_plot(result.samples)
    return plot_samples(result.samples, result.range, expression, output=output)
