"""--debug tree and token dumps to stderr."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from nfacalc.ast import Add, Div, Expr, FloatLiteral, Mul, Sub
from nfacalc.tokens import Token


def dump_ast(expr: Expr, *, file: TextIO = sys.stderr) -> None:
    """Print a human-readable expression tree to *file*."""
    _dump(expr, 0, file)


def dump_tokens(tokens: Iterable[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one line per token: kind, lexeme, line:column."""
    for tok in tokens:
        start = tok.span.start
        file.write(f"{tok.type.name} {tok.lexeme!r} {start.line}:{start.column}\n")


def _indent(depth: int) -> str:
    return "  " * depth


def _dump(root: Expr, depth: int, f: TextIO) -> None:
    # Explicit stack: long operator chains nest one level per operator.
    stack: list[tuple[Expr, int]] = [(root, depth)]
    while stack:
        node, level = stack.pop()
        if isinstance(node, FloatLiteral):
            f.write(f"{_indent(level)}FloatLiteral({node.value!r})\n")
        elif isinstance(node, (Add, Sub, Mul, Div)):
            f.write(f"{_indent(level)}{type(node).__name__}\n")
            stack.append((node.right, level + 1))
            stack.append((node.left, level + 1))
