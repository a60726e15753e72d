"""SymPy view of a parsed expression, used for display."""

from __future__ import annotations

import sympy as sp

from .formatting import format_superscript
from .logging_config import get_logger
from .nodes import BinaryOp, FloatLiteral, IntLiteral, Node, UnaryFunc, Variable
from .types import TokenKind, ValidationError

logger = get_logger("symbolic")

SYMPY_FUNCTIONS = {
    TokenKind.SIN: sp.sin,
    TokenKind.COS: sp.cos,
    TokenKind.TAN: sp.tan,
}


def to_sympy(node: Node) -> sp.Expr:
    """Convert an AST to an unevaluated SymPy expression.

    The tree shape is preserved: ``2+3*4`` stays a sum of 2 and a product,
    and ``1/0`` is not folded to ``zoo``.

    Raises:
        ValueError: The node is not part of the expression grammar
    """
    if isinstance(node, IntLiteral):
        if isinstance(node.value, int):
            return sp.Integer(node.value)
        return sp.Float(node.value)
    if isinstance(node, FloatLiteral):
        return sp.Float(node.value)
    if isinstance(node, Variable):
        return sp.Symbol(node.name)
    if isinstance(node, UnaryFunc):
        return SYMPY_FUNCTIONS[node.kind](to_sympy(node.arg), evaluate=False)
    if isinstance(node, BinaryOp):
        left = to_sympy(node.left)
        right = to_sympy(node.right)
        if node.kind is TokenKind.PLUS:
            return sp.Add(left, right, evaluate=False)
        if node.kind is TokenKind.MINUS:
            return sp.Add(left, sp.Mul(-1, right, evaluate=False), evaluate=False)
        if node.kind is TokenKind.TIMES:
            return sp.Mul(left, right, evaluate=False)
        if node.kind is TokenKind.DIVIDE:
            return sp.Mul(left, sp.Pow(right, -1, evaluate=False), evaluate=False)
        if node.kind is TokenKind.POWER:
            return sp.Pow(left, right, evaluate=False)
    raise ValueError(f"Cannot convert node to SymPy: {node!r}")


def symbolic_form(node: Node) -> str:
    """Return the unevaluated expression as SymPy prints it.

    Raises:
        ValidationError: The tree is too deep for SymPy (SYMBOLIC_UNAVAILABLE)
    """
    try:
        return sp.sstr(to_sympy(node))
    except RecursionError:
        raise _unavailable() from None


def simplified_form(node: Node) -> str:
    """Return the simplified expression with superscript exponents.

    Example:
        ``x*x + 0`` becomes ``x²``

    Raises:
        ValidationError: The tree is too deep for SymPy (SYMBOLIC_UNAVAILABLE)
    """
    try:
        expr = to_sympy(node).doit()
        try:
            expr = sp.simplify(expr)
        except (TypeError, ValueError, NotImplementedError):
            logger.debug("simplify failed for %s", expr, exc_info=True)
        return format_superscript(sp.sstr(expr))
    except RecursionError:
        raise _unavailable() from None


def _unavailable() -> ValidationError:
    logger.info("Symbolic form skipped: expression too deep for SymPy")
    return ValidationError(
        "Symbolic form unavailable: expression too deep", code="SYMBOLIC_UNAVAILABLE"
    )
