"""Recursive-descent parser for arithmetic token streams.

Grammar, one function per precedence layer, all operators left-associative:

    T   -> F ( (PLUS | MINUS) F )*
    F   -> Lit ( (TIMES | DIV) Lit )*
    Lit -> NUM | LPAREN T RPAREN
"""

from __future__ import annotations

from collections.abc import Iterable

from nfacalc.ast import Add, Div, Expr, FloatLiteral, Mul, Sub
from nfacalc.errors import ParseError
from nfacalc.lexer import Lexer, TokenStream
from nfacalc.tokens import Span, Token, TokenType, describe


class Parser:
    """Parse one expression from a token stream that has no whitespace tokens."""

    def __init__(self, tokens: TokenStream | Iterable[Token], source: str = "") -> None:
        if not isinstance(tokens, TokenStream):
            tokens = TokenStream(tokens)
        self._tokens = tokens
        self._source = source

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def _peek(self, kind: TokenType, offset: int = 0) -> bool:
        return self._tokens.peek(kind, offset)

    def _at_end(self) -> bool:
        tok = self._tokens.lookahead()
        return tok is None or tok.type == TokenType.EOF

    def _consume(self, kind: TokenType) -> Token:
        tok = self._tokens.lookahead()
        if tok is None or tok.type != kind:
            raise self._error(f"expected {kind.name}, found {describe(tok)}", (kind,), tok)
        self._tokens.next()
        return tok

    # ------------------------------------------------------------------
    # Grammar
    # ------------------------------------------------------------------

    def parse(self) -> Expr:
        expr = self._parse_t()
        if not self._at_end():
            tok = self._tokens.lookahead()
            raise self._error(f"unexpected {describe(tok)} after expression", (TokenType.EOF,), tok)
        return expr

    def _parse_t(self) -> Expr:
        expr = self._parse_f()
        while self._peek(TokenType.PLUS) or self._peek(TokenType.MINUS):
            op = self._tokens.next()
            assert op is not None
            right = self._parse_f()
            span = _join(expr, right)
            if op.type == TokenType.PLUS:
                expr = Add(expr, right, span)
            else:
                expr = Sub(expr, right, span)
        return expr

    def _parse_f(self) -> Expr:
        expr = self._parse_lit()
        while self._peek(TokenType.TIMES) or self._peek(TokenType.DIV):
            op = self._tokens.next()
            assert op is not None
            right = self._parse_lit()
            span = _join(expr, right)
            if op.type == TokenType.TIMES:
                expr = Mul(expr, right, span)
            else:
                expr = Div(expr, right, span)
        return expr

    def _parse_lit(self) -> Expr:
        if self._peek(TokenType.NUM):
            tok = self._consume(TokenType.NUM)
            try:
                value = float(tok.lexeme)
            except ValueError:
                raise self._error(
                    f"malformed number {tok.lexeme!r}", (TokenType.NUM,), tok
                ) from None
            return FloatLiteral(value, tok.span)

        if self._peek(TokenType.LPAREN):
            self._consume(TokenType.LPAREN)
            inner = self._parse_t()
            self._consume(TokenType.RPAREN)
            return inner

        tok = self._tokens.lookahead()
        raise self._error(
            f"expected NUM or LPAREN, found {describe(tok)}",
            (TokenType.NUM, TokenType.LPAREN),
            tok,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _error(
        self,
        message: str,
        expected: tuple[TokenType, ...],
        found: Token | None,
    ) -> ParseError:
        if found is not None:
            span = found.span
        else:
            end = self._tokens.last_end
            span = Span(end, end)
        return ParseError(message, span, self._source, expected, found)


def _join(left: Expr, right: Expr) -> Span | None:
    if left.span is None or right.span is None:
        return None
    return Span(left.span.start, right.span.end)


def parse(source: str, lexer: Lexer | None = None) -> Expr:
    """Convenience function: tokenize source text and return the expression tree."""
    if lexer is None:
        from nfacalc.definitions import build_lexer

        lexer = build_lexer()
    return Parser(lexer.tokenize(source), source).parse()
