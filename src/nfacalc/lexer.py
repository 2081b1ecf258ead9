"""Maximal-munch lexer driving a registry of token automata in lock-step."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from nfacalc.errors import LexError
from nfacalc.tokens import START, Position, Span, Token, TokenType, advance_position

if TYPE_CHECKING:
    from nfacalc.automaton import Automaton


class Lexer:
    """Tokenize source text with every registered (kind, automaton) pair.

    At each token start all automata are reset and fed characters together
    until none can move. The longest accepted prefix wins; on equal length
    the earliest registered kind wins.
    """

    def __init__(self, skip: Iterable[TokenType] = (TokenType.WHITE_SPACE,)) -> None:
        self._entries: list[tuple[TokenType, Automaton]] = []
        self._skip = frozenset(skip)

    @property
    def kinds(self) -> tuple[TokenType, ...]:
        """Registered kinds in priority order."""
        return tuple(kind for kind, _ in self._entries)

    @property
    def skip(self) -> frozenset[TokenType]:
        return self._skip

    def register(self, kind: TokenType, automaton: Automaton) -> None:
        """Append *kind* to the registry; earlier registrations win ties."""
        if kind == TokenType.EOF:
            raise ValueError("EOF is reserved for the end of the token stream")
        if any(a is automaton for _, a in self._entries):
            raise ValueError(f"automaton already registered for another kind: {automaton!r}")
        self._entries.append((kind, automaton))

    def scan(self, source: str) -> Iterator[Token]:
        """Yield every token, skipped kinds included, followed by EOF."""
        pos = 0
        here = START
        while pos < len(source):
            end, kind = self._longest_match(source, pos)
            if kind is None:
                raise self._error(source, pos, end, here)
            lexeme = source[pos:end]
            after = advance_position(here, lexeme)
            yield Token(kind, lexeme, Span(here, after))
            pos = end
            here = after
        yield Token(TokenType.EOF, "", Span(here, here))

    def tokenize(self, source: str) -> TokenStream:
        """Lazy token stream for the parser, with skipped kinds filtered out."""
        return TokenStream(t for t in self.scan(source) if t.type not in self._skip)

    # ------------------------------------------------------------------
    # Matching
    # ------------------------------------------------------------------

    def _longest_match(self, source: str, pos: int) -> tuple[int, TokenType | None]:
        """Run all automata from *pos*.

        Returns (best_end, best_kind); best_kind is None when nothing accepted,
        in which case best_end is how far the automata got.
        """
        for _, automaton in self._entries:
            automaton.reset()

        best_end = pos
        best_kind: TokenType | None = None
        i = pos
        while i < len(source):
            ch = source[i]
            if not any(a.has_transitions(ch) for _, a in self._entries):
                break
            for _, automaton in self._entries:
                if automaton.is_alive():
                    automaton.apply(ch)
            i += 1
            for kind, automaton in self._entries:
                # Strictly greater: an earlier kind accepting at i keeps it.
                if automaton.accepts() and (best_kind is None or i > best_end):
                    best_end = i
                    best_kind = kind

        if best_kind is None:
            return i, None
        return best_end, best_kind

    def _error(self, source: str, pos: int, reached: int, here: Position) -> LexError:
        if reached <= pos:
            message = f"unrecognized character {source[pos]!r}"
        else:
            message = f"no token matches {source[pos:reached]!r}"
        return LexError(message, here, source)


class TokenStream:
    """Forward-only token sequence with bounded lookahead.

    Wraps any token iterable. Tokens are pulled from the underlying iterator
    only when looked at, so a lexing error surfaces when the parser reaches it.
    """

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._it = iter(tokens)
        self._buffer: deque[Token] = deque()
        self._last_end = START

    def lookahead(self, offset: int = 0) -> Token | None:
        """The token *offset* places ahead, or None past the end of the stream."""
        while len(self._buffer) <= offset:
            tok = next(self._it, None)
            if tok is None:
                return None
            self._buffer.append(tok)
        return self._buffer[offset]

    def peek(self, kind: TokenType, offset: int = 0) -> bool:
        tok = self.lookahead(offset)
        return tok is not None and tok.type == kind

    def next(self) -> Token | None:
        """Remove and return the current token, or None at the end of the stream."""
        tok = self.lookahead()
        if tok is None:
            return None
        self._buffer.popleft()
        self._last_end = tok.span.end
        return tok

    @property
    def last_end(self) -> Position:
        """End position of the most recently consumed token."""
        return self._last_end

    def __iter__(self) -> Iterator[Token]:
        while True:
            tok = self.next()
            if tok is None:
                return
            yield tok


def tokenize(source: str, lexer: Lexer | None = None) -> list[Token]:
    """Convenience function: tokenize with the standard table and return a list.

    Skipped kinds are filtered out; the trailing EOF token is kept.
    """
    if lexer is None:
        from nfacalc.definitions import build_lexer

        lexer = build_lexer()
    return list(lexer.tokenize(source))
