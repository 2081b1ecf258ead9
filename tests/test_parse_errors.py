"""Parser error messages, expected kinds, and positions."""

from __future__ import annotations

import pytest

from nfacalc.errors import LexError, ParseError
from nfacalc.parser import Parser, parse
from nfacalc.tokens import Position, Span, Token, TokenType

from .conftest import S, tok


class TestUnbalanced:
    def test_missing_rparen(self):
        with pytest.raises(ParseError, match="expected RPAREN, found end of input") as exc_info:
            parse("(1.0+2.0")
        err = exc_info.value
        assert err.expected == (TokenType.RPAREN,)
        assert err.found is not None
        assert err.found.type == TokenType.EOF
        assert err.found_description == "end of input"

    def test_trailing_rparen(self):
        with pytest.raises(ParseError, match="unexpected RPAREN") as exc_info:
            parse("1.0+2.0)")
        err = exc_info.value
        assert err.found.type == TokenType.RPAREN
        assert err.span.start.column == 8

    def test_empty_parens(self):
        with pytest.raises(ParseError, match="expected NUM or LPAREN, found RPAREN"):
            parse("()")


class TestMissingOperand:
    def test_empty_input(self):
        with pytest.raises(ParseError) as exc_info:
            parse("")
        err = exc_info.value
        assert err.expected == (TokenType.NUM, TokenType.LPAREN)
        assert "end of input" in err.message

    def test_whitespace_only_input(self):
        with pytest.raises(ParseError, match="end of input"):
            parse("   ")

    def test_dangling_operator(self):
        with pytest.raises(ParseError, match="found end of input"):
            parse("1.0+")

    def test_leading_operator(self):
        with pytest.raises(ParseError, match="found TIMES") as exc_info:
            parse("*1.0")
        assert exc_info.value.found.lexeme == "*"

    def test_double_operator(self):
        with pytest.raises(ParseError, match="found PLUS"):
            parse("1.0++2.0")


class TestTrailingTokens:
    def test_two_numbers(self):
        with pytest.raises(ParseError, match="unexpected NUM '2.0'") as exc_info:
            parse("1.0 2.0")
        assert exc_info.value.span.start.column == 5
        assert exc_info.value.expected == (TokenType.EOF,)

    def test_trailing_whitespace_is_fine(self):
        parse("1.0   \n")


class TestHandBuiltTokens:
    def test_malformed_number(self):
        tokens = [tok(TokenType.NUM, "1..2"), tok(TokenType.EOF, "")]
        with pytest.raises(ParseError, match="malformed number '1..2'"):
            Parser(tokens).parse()

    def test_stream_without_eof_runs_out(self):
        end = Position(1, 5, 4)
        tokens = [
            tok(TokenType.NUM, "1.0"),
            Token(TokenType.PLUS, "+", Span(Position(1, 4, 3), end)),
        ]
        with pytest.raises(ParseError) as exc_info:
            Parser(tokens).parse()
        err = exc_info.value
        assert err.found is None
        assert err.found_description == "end of input"
        assert err.span == Span(end, end)

    def test_missing_rparen_without_eof(self):
        tokens = [tok(TokenType.LPAREN, "("), tok(TokenType.NUM, "1.0")]
        with pytest.raises(ParseError, match="expected RPAREN"):
            Parser(tokens).parse()


class TestLexErrorsPropagate:
    def test_lex_error_through_parse(self):
        with pytest.raises(LexError, match="'@'"):
            parse("1.0 + @")

    def test_parse_error_before_lex_error(self):
        # Lexing is lazy: the parser fails on ')' before '@' is reached.
        with pytest.raises(ParseError):
            parse(") @")


class TestErrorFormat:
    def test_format_contains_arrow(self):
        with pytest.raises(ParseError) as exc_info:
            parse("(1.0")
        formatted = exc_info.value.format("calc.txt")
        assert "-->" in formatted
        assert "calc.txt:1:5" in formatted

    def test_format_contains_carets(self):
        with pytest.raises(ParseError) as exc_info:
            parse("1.0 2.0")
        formatted = exc_info.value.format()
        assert formatted.endswith("^^^")

    def test_hand_built_span(self):
        err = ParseError("test error", S, "1.0")
        assert err.format().startswith("error: test error")
