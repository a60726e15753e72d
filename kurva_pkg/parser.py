"""Recursive-descent parser producing an AST.

Grammar, loosest to tightest binding::

    expression := term ( ('+' | '-') term )*
    term       := power ( ('*' | '/') power )*
    power      := factor ( '^' power )?
    factor     := INT | FLOAT | VARIABLE
                | '(' expression ')'
                | ('sin' | 'cos' | 'tan') factor

``+ - * /`` fold to the left, ``^`` nests to the right. Every failure raises
``ParseError``; there is no recovery and no partial tree.
"""

from __future__ import annotations

from . import config
from .lexer import Lexer
from .logging_config import get_logger
from .nodes import (
    BinaryOp,
    FloatLiteral,
    IntLiteral,
    Node,
    UnaryFunc,
    Variable,
    tree_height,
)
from .types import ParseError, Token, TokenKind, ValidationError

logger = get_logger("parser")

ADDITIVE = (TokenKind.PLUS, TokenKind.MINUS)
MULTIPLICATIVE = (TokenKind.TIMES, TokenKind.DIVIDE)
FUNCTIONS = (TokenKind.SIN, TokenKind.COS, TokenKind.TAN)


class Parser:
    """Builds an AST from a single expression string."""

    def __init__(self, text: str):
        self.lexer = Lexer(text)
        self.depth = 0

    def parse(self) -> Node:
        node = self.expression()
        token = self.lexer.peek()
        if token.kind is not TokenKind.END:
            raise ParseError(
                f"Unexpected token: {token.kind} at position {token.start}",
                code="TRAILING_INPUT",
                position=token.start,
            )
        return node

    def expression(self) -> Node:
        left = self.term()
        while self.lexer.peek().kind in ADDITIVE:
            op = self.lexer.consume()
            left = BinaryOp(op.kind, left, self.term())
        return left

    def term(self) -> Node:
        left = self.power()
        while self.lexer.peek().kind in MULTIPLICATIVE:
            op = self.lexer.consume()
            left = BinaryOp(op.kind, left, self.power())
        return left

    def power(self) -> Node:
        base = self.factor()
        if self.lexer.peek().kind is TokenKind.POWER:
            op = self.lexer.consume()
            self._enter(op)
            try:
                exponent = self.power()
            finally:
                self.depth -= 1
            return BinaryOp(TokenKind.POWER, base, exponent)
        return base

    def factor(self) -> Node:
        token = self.lexer.peek()

        if token.kind is TokenKind.INT:
            self.lexer.consume()
            return IntLiteral(token.value)

        if token.kind is TokenKind.FLOAT:
            self.lexer.consume()
            return FloatLiteral(token.value)

        if token.kind is TokenKind.VARIABLE:
            self.lexer.consume()
            return Variable(token.value)

        if token.kind is TokenKind.OPEN_PAREN:
            self.lexer.consume()
            self._enter(token)
            try:
                node = self.expression()
            finally:
                self.depth -= 1
            closing = self.lexer.consume()
            if closing.kind is not TokenKind.CLOSE_PAREN:
                raise ParseError(
                    f"Expected closing parenthesis at position {closing.start}",
                    code="MISSING_CLOSE_PAREN",
                    position=closing.start,
                )
            return node

        if token.kind in FUNCTIONS:
            self.lexer.consume()
            self._enter(token)
            try:
                arg = self.factor()
            finally:
                self.depth -= 1
            return UnaryFunc(token.kind, arg)

        raise ParseError(
            f"Unexpected token: {token.kind} at position {token.start}",
            code="UNEXPECTED_TOKEN",
            position=token.start,
        )

    def _enter(self, token: Token) -> None:
        self.depth += 1
        if self.depth > config.MAX_EXPRESSION_DEPTH:
            raise ParseError(
                f"Expression nested too deeply (max {config.MAX_EXPRESSION_DEPTH})",
                code="TOO_DEEP",
                position=token.start,
            )


def validate_input(text: str) -> str:
    """Reject input that cannot be an expression before tokenizing it."""
    if text is None or not text.strip():
        raise ValidationError("Empty expression", code="EMPTY_INPUT")
    if len(text) > config.MAX_INPUT_LENGTH:
        raise ValidationError(
            f"Input too long (max {config.MAX_INPUT_LENGTH} characters)",
            code="TOO_LONG",
        )
    return text


def parse_expression(text: str) -> Node:
    """Parse ``text`` into an AST.

    Args:
        text: Expression such as ``"1/sin(x)"``

    Returns:
        Root node of the tree

    Raises:
        ValidationError: Empty or overly long input
        ParseError: Unexpected token, missing ')', trailing input, or a
            tree too deep to evaluate
    """
    validate_input(text)
    try:
        node = Parser(text).parse()
    except ParseError as e:
        logger.warning("Failed to parse %r: %s", text, e)
        raise
    height = tree_height(node)
    if height > config.MAX_TREE_HEIGHT:
        raise ParseError(
            f"Expression too deep to evaluate: tree height {height} exceeds the "
            f"limit of {config.MAX_TREE_HEIGHT} (set KURVA_MAX_TREE_HEIGHT to change it)",
            code="TOO_DEEP",
        )
    logger.debug("Parsed %r (tree height %d)", text, height)
    return node
