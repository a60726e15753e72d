"""Tokenizer for expression text.

Tokens are produced lazily from a position in the input. ``peek_token`` is a
pure function of ``(text, pos)``; ``Lexer`` wraps it with a cursor that
``consume`` advances by the token's span. Tokenization never fails:
characters that do not start a token come back as ``TokenKind.UNKNOWN``.
"""

from __future__ import annotations

from collections.abc import Iterator

from .config import IDENT_RE, NUMBER_RE, WHITESPACE_RE
from .types import Token, TokenKind

SINGLE_CHAR_TOKENS = {
    "(": TokenKind.OPEN_PAREN,
    ")": TokenKind.CLOSE_PAREN,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.TIMES,
    "/": TokenKind.DIVIDE,
    "^": TokenKind.POWER,
}

FUNCTION_TOKENS = {
    "sin": TokenKind.SIN,
    "cos": TokenKind.COS,
    "tan": TokenKind.TAN,
}


def peek_token(text: str, pos: int = 0) -> Token:
    """Return the token starting at or after ``pos`` without consuming it.

    Leading whitespace is skipped; the returned span starts at the first
    non-whitespace character.
    """
    start = WHITESPACE_RE.match(text, pos).end()

    if start >= len(text):
        return Token(TokenKind.END, start, 0)

    char = text[start]
    kind = SINGLE_CHAR_TOKENS.get(char)
    if kind is not None:
        return Token(kind, start, 1)

    match = NUMBER_RE.match(text, start)
    if match:
        literal = match.group(0)
        if "." in literal:
            return Token(TokenKind.FLOAT, start, len(literal), float(literal))
        try:
            value = int(literal)
        except ValueError:
            # beyond the interpreter's int-from-str digit limit; evaluates to inf anyway
            value = float(literal)
        return Token(TokenKind.INT, start, len(literal), value)

    match = IDENT_RE.match(text, start)
    if match:
        name = match.group(0)
        kind = FUNCTION_TOKENS.get(name)
        if kind is not None:
            return Token(kind, start, len(name))
        return Token(TokenKind.VARIABLE, start, len(name), name)

    return Token(TokenKind.UNKNOWN, start, 1, char)


class Lexer:
    """Cursor over expression text."""

    def __init__(self, text: str, pos: int = 0):
        self.text = text
        self.pos = pos

    def peek(self) -> Token:
        return peek_token(self.text, self.pos)

    def consume(self) -> Token:
        token = peek_token(self.text, self.pos)
        self.pos = token.end
        return token

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.consume()
            yield token
            if token.kind is TokenKind.END:
                return


def tokenize(text: str) -> list[Token]:
    """Split ``text`` into tokens, ending with a single END token."""
    return list(Lexer(text))
