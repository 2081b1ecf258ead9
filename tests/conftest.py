"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from nfacalc.ast import FloatLiteral
from nfacalc.lexer import tokenize
from nfacalc.parser import parse
from nfacalc.tokens import Position, Span, Token, TokenType

# Convenience span for hand-built tokens and nodes
S = Span(Position(1, 1, 0), Position(1, 1, 0))


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns tokens (excluding EOF)."""

    def _lex(source: str) -> list[Token]:
        tokens = tokenize(source)
        # Strip trailing EOF for convenience
        return [t for t in tokens if t.type != TokenType.EOF]

    return _lex


@pytest.fixture
def parse_source():
    """Return a helper that parses source with the standard token table."""

    def _parse(source: str):
        return parse(source)

    return _parse


def num(value: float) -> FloatLiteral:
    return FloatLiteral(value)


def tok(tt: TokenType, lexeme: str) -> Token:
    return Token(tt, lexeme, S)


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_lexemes(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token lexemes match the expected list."""
    actual = [t.lexeme for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"
