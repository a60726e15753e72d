"""Abstract syntax tree for parsed expressions.

Every node type is a frozen dataclass carrying only the fields valid for it.
``Node`` is the closed union of all of them; consumers dispatch with
``isinstance`` and treat anything else as an unknown operator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .types import TokenKind

BINARY_KINDS = frozenset(
    {
        TokenKind.PLUS,
        TokenKind.MINUS,
        TokenKind.TIMES,
        TokenKind.DIVIDE,
        TokenKind.POWER,
    }
)
UNARY_KINDS = frozenset({TokenKind.SIN, TokenKind.COS, TokenKind.TAN})


@dataclass(frozen=True)
class IntLiteral:
    value: int | float  # float only past the int-from-str digit limit

    @property
    def kind(self) -> TokenKind:
        return TokenKind.INT


@dataclass(frozen=True)
class FloatLiteral:
    value: float

    @property
    def kind(self) -> TokenKind:
        return TokenKind.FLOAT


@dataclass(frozen=True)
class Variable:
    name: str

    @property
    def kind(self) -> TokenKind:
        return TokenKind.VARIABLE


@dataclass(frozen=True)
class BinaryOp:
    """Arithmetic operator with two operands."""

    kind: TokenKind
    left: "Node"
    right: "Node"

    def __post_init__(self) -> None:
        if self.kind not in BINARY_KINDS:
            raise ValueError(f"Not a binary operator: {self.kind}")


@dataclass(frozen=True)
class UnaryFunc:
    """Trigonometric function applied to a single argument."""

    kind: TokenKind
    arg: "Node"

    def __post_init__(self) -> None:
        if self.kind not in UNARY_KINDS:
            raise ValueError(f"Not a function: {self.kind}")


Node = Union[IntLiteral, FloatLiteral, Variable, BinaryOp, UnaryFunc]


def children(node: Node) -> tuple[Node, ...]:
    """Return the child nodes of ``node``, left before right."""
    if isinstance(node, BinaryOp):
        return (node.left, node.right)
    if isinstance(node, UnaryFunc):
        return (node.arg,)
    return ()


def tree_height(node: Node | None) -> int:
    """Length of the longest root-to-leaf path, counted in nodes.

    Iterative so that it can vet trees too deep for the recursive walkers.
    """
    if node is None:
        return 0
    height = 0
    stack = [(node, 1)]
    while stack:
        current, depth = stack.pop()
        height = max(height, depth)
        for child in children(current):
            stack.append((child, depth + 1))
    return height
