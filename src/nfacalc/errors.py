"""Error types with formatted source context."""

from __future__ import annotations

from nfacalc.tokens import Position, Span, Token, TokenType, describe


def _snippet(message: str, start: Position, underline_len: int, source: str, filename: str) -> str:
    # Lines break on "\n" only, matching how positions count lines.
    lines = source.split("\n")
    line_idx = start.line - 1
    col = start.column

    # Build the source line (strip a CRLF remainder for display)
    if 0 <= line_idx < len(lines):
        source_line = lines[line_idx].rstrip("\r")
    else:
        source_line = ""

    pad = " " * (col - 1)
    carets = "^" * max(1, underline_len)

    line_num = str(start.line)
    gutter_width = len(line_num) + 1

    blank_gutter = " " * gutter_width + "|"
    line_gutter = f"{line_num:>{gutter_width - 1}} |"

    return (
        f"error: {message}\n"
        f"{' ' * gutter_width}--> {filename}:{start.line}:{col}\n"
        f"{blank_gutter}\n"
        f"{line_gutter} {source_line}\n"
        f"{blank_gutter} {pad}{carets}"
    )


def _span_underline(span: Span, source: str) -> int:
    """Underline the full span when on one line, otherwise to end of line."""
    if span.end.line == span.start.line:
        return max(1, span.end.column - span.start.column)
    lines = source.split("\n")
    line_idx = span.start.line - 1
    line = lines[line_idx].rstrip("\r") if 0 <= line_idx < len(lines) else ""
    return max(1, len(line) - span.start.column + 1)


class LexError(Exception):
    """Raised when no registered automaton matches at some input position."""

    def __init__(self, message: str, position: Position, source: str) -> None:
        self.message = message
        self.position = position
        self.source = source
        super().__init__(self.format())

    @property
    def offset(self) -> int:
        return self.position.offset

    @property
    def char(self) -> str:
        """The offending character, or '' when the error is at end of input."""
        if self.position.offset < len(self.source):
            return self.source[self.position.offset]
        return ""

    def format(self, filename: str = "<expr>") -> str:
        return _snippet(self.message, self.position, 1, self.source, filename)


class ParseError(Exception):
    """Raised on the first token that does not fit the grammar."""

    def __init__(
        self,
        message: str,
        span: Span,
        source: str,
        expected: tuple[TokenType, ...] = (),
        found: Token | None = None,
    ) -> None:
        self.message = message
        self.span = span
        self.source = source
        self.expected = expected
        self.found = found
        super().__init__(self.format())

    @property
    def found_description(self) -> str:
        return describe(self.found)

    def format(self, filename: str = "<expr>") -> str:
        underline = _span_underline(self.span, self.source)
        return _snippet(self.message, self.span.start, underline, self.source, filename)


class EvalError(Exception):
    """Raised when a well-formed expression cannot be evaluated."""

    def __init__(self, message: str, span: Span, source: str) -> None:
        self.message = message
        self.span = span
        self.source = source
        super().__init__(self.format())

    def format(self, filename: str = "<expr>") -> str:
        underline = _span_underline(self.span, self.source)
        return _snippet(self.message, self.span.start, underline, self.source, filename)
