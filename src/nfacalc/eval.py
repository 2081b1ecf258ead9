"""Evaluate an expression tree to a float."""

from __future__ import annotations

from nfacalc.ast import Add, BinaryOp, Div, Expr, FloatLiteral, Mul, Sub
from nfacalc.errors import EvalError
from nfacalc.tokens import START, Span

_NO_SPAN = Span(START, START)


def evaluate(expr: Expr, source: str = "") -> float:
    """Compute the value of *expr*.

    Walks the tree with an explicit stack, left operand first, so long
    operator chains do not hit the recursion limit.

    Raises EvalError on division by zero, pointing at the whole division.
    """
    values: list[float] = []
    # (node, operands already scheduled)
    pending: list[tuple[Expr, bool]] = [(expr, False)]
    while pending:
        node, scheduled = pending.pop()
        match node:
            case FloatLiteral(value=value):
                values.append(value)
            case Add() | Sub() | Mul() | Div() if not scheduled:
                pending.append((node, True))
                pending.append((node.right, False))
                pending.append((node.left, False))
            case Add() | Sub() | Mul() | Div():
                right = values.pop()
                left = values.pop()
                values.append(_apply(node, left, right, source))
            case _:
                raise TypeError(f"not an expression node: {type(node).__name__}")
    return values[0]


def _apply(node: BinaryOp, left: float, right: float, source: str) -> float:
    match node:
        case Add():
            return left + right
        case Sub():
            return left - right
        case Mul():
            return left * right
        case Div():
            if right == 0.0:
                raise EvalError("division by zero", node.span or _NO_SPAN, source)
            return left / right
    raise TypeError(f"not an operator node: {type(node).__name__}")
