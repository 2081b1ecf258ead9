"""Expression tree node types.

Spans are carried for diagnostics but ignored by equality, so trees built
by hand in tests compare equal to parsed ones.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from nfacalc.tokens import Span


@dataclass(frozen=True, slots=True)
class FloatLiteral:
    """Numeric literal."""

    value: float
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Add:
    left: Expr
    right: Expr
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Sub:
    left: Expr
    right: Expr
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Mul:
    left: Expr
    right: Expr
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Div:
    left: Expr
    right: Expr
    span: Span | None = field(default=None, compare=False, repr=False)


Expr = FloatLiteral | Add | Sub | Mul | Div
BinaryOp = Add | Sub | Mul | Div
