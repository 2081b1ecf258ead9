"""Standard token-definition table for arithmetic expressions.

    NUM          [0-9]* '.' [0-9]+
    PLUS         +
    MINUS        -
    TIMES        *
    DIV          /
    LPAREN       (
    RPAREN       )
    WHITE_SPACE  (' ' | \\n | \\r | \\t)+

Table order is registration order, so it is also the tie-break priority.
"""

from __future__ import annotations

from collections.abc import Callable

from nfacalc.automaton import Automaton, single_char_automaton
from nfacalc.lexer import Lexer
from nfacalc.tokens import TokenType

DIGITS = "0123456789"
WHITESPACE = " \n\r\t"


def number_automaton() -> Automaton:
    """Zero or more digits, a dot, then one or more digits."""
    a = Automaton()
    a.add_state(0, is_start=True)
    a.add_state(1)  # leading digits
    a.add_state(2)  # after the dot, no fraction digit yet
    a.add_state(3, is_accept=True)  # fraction digits
    a.add_transitions(0, DIGITS, 1)
    a.add_transitions(1, DIGITS, 1)
    a.add_transition(0, ".", 2)
    a.add_transition(1, ".", 2)
    a.add_transitions(2, DIGITS, 3)
    a.add_transitions(3, DIGITS, 3)
    return a


def whitespace_automaton() -> Automaton:
    """One or more whitespace characters.

    Must not accept the empty string: an empty match would never advance
    the lexer.
    """
    a = Automaton()
    a.add_state(0, is_start=True)
    a.add_state(1, is_accept=True)
    a.add_transitions(0, WHITESPACE, 1)
    a.add_transitions(1, WHITESPACE, 1)
    return a


def _char(ch: str) -> Callable[[], Automaton]:
    return lambda: single_char_automaton(ch)


TOKEN_DEFINITIONS: tuple[tuple[TokenType, Callable[[], Automaton]], ...] = (
    (TokenType.NUM, number_automaton),
    (TokenType.PLUS, _char("+")),
    (TokenType.MINUS, _char("-")),
    (TokenType.TIMES, _char("*")),
    (TokenType.DIV, _char("/")),
    (TokenType.LPAREN, _char("(")),
    (TokenType.RPAREN, _char(")")),
    (TokenType.WHITE_SPACE, whitespace_automaton),
)


def build_lexer() -> Lexer:
    """Return a new Lexer with fresh automata for every standard token kind."""
    lexer = Lexer(skip=(TokenType.WHITE_SPACE,))
    for kind, build in TOKEN_DEFINITIONS:
        lexer.register(kind, build())
    return lexer
