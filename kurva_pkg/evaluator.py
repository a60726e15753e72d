"""Tree-walking evaluator.

Arithmetic runs in single precision (``numpy.float32``). Errors are values,
not exceptions: the first one found in a left-to-right, depth-first walk is
returned and its sibling subtrees are never evaluated.
"""

from __future__ import annotations

import numpy as np

from .nodes import BinaryOp, FloatLiteral, IntLiteral, Node, UnaryFunc, Variable
from .types import EvalError, EvalResult, EvalValue, TokenKind

BINARY_OPS = {
    TokenKind.PLUS: np.add,
    TokenKind.MINUS: np.subtract,
    TokenKind.TIMES: np.multiply,
    TokenKind.DIVIDE: np.divide,
    TokenKind.POWER: np.power,
}

FUNCTIONS = {
    TokenKind.SIN: np.sin,
    TokenKind.COS: np.cos,
    TokenKind.TAN: np.tan,
}

NULL_NODE = EvalError("Null node encountered", code="NULL_NODE")
DIVISION_BY_ZERO = EvalError("Division by zero", code="DIVISION_BY_ZERO")
UNKNOWN_OPERATOR = EvalError("Unknown operator", code="UNKNOWN_OPERATOR")


def _narrow(value: float) -> np.float32:
    try:
        return np.float32(value)
    except OverflowError:
        # ints beyond double range
        return np.float32(np.inf if value > 0 else -np.inf)


def _walk(node: Node | None, x: np.float32) -> np.float32 | EvalError:
    if node is None:
        return NULL_NODE

    if isinstance(node, BinaryOp):
        op = BINARY_OPS.get(node.kind)
        if op is None:
            return UNKNOWN_OPERATOR
        left = _walk(node.left, x)
        if isinstance(left, EvalError):
            return left
        right = _walk(node.right, x)
        if isinstance(right, EvalError):
            return right
        if node.kind is TokenKind.DIVIDE and right == 0:
            return DIVISION_BY_ZERO
        return op(left, right)

    if isinstance(node, UnaryFunc):
        func = FUNCTIONS.get(node.kind)
        if func is None:
            return UNKNOWN_OPERATOR
        arg = _walk(node.arg, x)
        if isinstance(arg, EvalError):
            return arg
        return func(arg)

    if isinstance(node, (IntLiteral, FloatLiteral)):
        return _narrow(node.value)

    if isinstance(node, Variable):
        # every variable name stands for the same injected x
        return x

    return UNKNOWN_OPERATOR


def evaluate(node: Node | None, x: float = 0.0) -> EvalResult:
    """Evaluate ``node`` with the free variable bound to ``x``.

    Args:
        node: Root of the tree (None yields a NULL_NODE error)
        x: Value of the free variable, narrowed to single precision

    Returns:
        EvalValue with the result, or EvalError describing the first failure
    """
    # float32 overflow, 0^-1 and domain errors follow IEEE rules silently
    with np.errstate(all="ignore"):
        outcome = _walk(node, _narrow(x))
    if isinstance(outcome, EvalError):
        return outcome
    return EvalValue(float(outcome))
