"""Arithmetic expression front end: NFA-driven lexer and recursive-descent parser."""

from __future__ import annotations

__version__ = "0.1.0"


def calculate(source: str) -> float:
    """Tokenize, parse, and evaluate an arithmetic expression."""
    from nfacalc.eval import evaluate
    from nfacalc.parser import parse

    expr = parse(source)
    return evaluate(expr, source)
