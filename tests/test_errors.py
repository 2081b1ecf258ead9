"""Error messages, position accuracy, and context snippets."""

import pytest

from nfacalc.errors import LexError, ParseError
from nfacalc.lexer import tokenize
from nfacalc.tokens import Position, Span


class TestLexErrorFormat:
    def test_exact_snippet(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("1.0 @ 2.0")
        assert exc_info.value.format() == (
            "error: unrecognized character '@'\n"
            "  --> <expr>:1:5\n"
            "  |\n"
            "1 | 1.0 @ 2.0\n"
            "  |     ^"
        )

    def test_str_is_formatted(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("#")
        assert str(exc_info.value) == exc_info.value.format()

    def test_custom_filename(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("#")
        assert "expr.calc:1:1" in exc_info.value.format("expr.calc")

    def test_multiline_position(self):
        source = "1.0 +\n2.0 *\n  !"
        with pytest.raises(LexError) as exc_info:
            tokenize(source)
        formatted = exc_info.value.format()
        assert "3:3" in formatted
        assert "3 |   !" in formatted

    def test_char_at_end_of_source(self):
        err = LexError("unexpected end", Position(1, 4, 3), "abc")
        assert err.char == ""


class TestParseErrorFormat:
    def test_format_multiline_span(self):
        """ParseError with a span crossing lines uses end-of-line underline."""
        err = ParseError(
            "test error",
            Span(Position(1, 1, 0), Position(2, 5, 10)),
            "first line\nsecond line",
        )
        formatted = err.format("test.calc")
        assert "error: test error" in formatted
        assert formatted.endswith("^" * len("first line"))

    def test_out_of_range_line(self):
        err = ParseError("past the end", Span(Position(3, 1, 9), Position(3, 1, 9)), "1.0")
        assert err.format().endswith("^")


class TestCarriageReturn:
    def test_lone_cr_does_not_start_a_line(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("1.0\r@")
        err = exc_info.value
        assert err.position.line == 1
        assert err.position.column == 5
        formatted = err.format()
        assert "1 | 1.0\r@" in formatted
        assert formatted.endswith("  |     ^")

    def test_crlf_line_is_displayed_without_cr(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("1.0 +\r\n  @")
        formatted = exc_info.value.format()
        assert "2:3" in formatted
        assert "2 |   @\n" in formatted
