"""Token types and positioned token data structures."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    # Literals
    NUM = auto()  # [0-9]* . [0-9]+

    # Operators
    PLUS = auto()  # +
    MINUS = auto()  # -
    TIMES = auto()  # *
    DIV = auto()  # /

    # Grouping
    LPAREN = auto()  # (
    RPAREN = auto()  # )

    # Whitespace (one or more of space, \n, \r, \t)
    WHITE_SPACE = auto()

    EOF = auto()


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based character offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token: its kind, the matched source text, and where it sits."""

    type: TokenType
    lexeme: str
    span: Span


def advance_position(pos: Position, text: str) -> Position:
    """Return the position reached after reading *text* starting at *pos*."""
    line = pos.line
    column = pos.column
    for ch in text:
        if ch == "\n":
            line += 1
            column = 1
        else:
            column += 1
    return Position(line, column, pos.offset + len(text))


def describe(token: Token | None) -> str:
    """Human-readable token description for error messages."""
    if token is None or token.type == TokenType.EOF:
        return "end of input"
    return f"{token.type.name} {token.lexeme!r}"


START = Position(1, 1, 0)
