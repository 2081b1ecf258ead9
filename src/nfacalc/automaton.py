"""Nondeterministic finite automaton over single characters."""

from __future__ import annotations

from collections.abc import Iterable


class Automaton:
    """An NFA simulated as a set of active states.

    States are small integers that only mean something inside one automaton.
    States never marked as start or accept exist implicitly once a transition
    mentions them.
    """

    def __init__(self) -> None:
        self._start: set[int] = set()
        self._accept: set[int] = set()
        self._transitions: dict[tuple[int, str], set[int]] = {}
        self._active: set[int] = set()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_state(self, state: int, is_start: bool = False, is_accept: bool = False) -> None:
        if is_start:
            self._start.add(state)
        if is_accept:
            self._accept.add(state)

    def add_transition(self, source: int, symbol: str, target: int) -> None:
        """Add *target* to the destinations of (*source*, *symbol*).

        Repeated calls for the same pair accumulate nondeterministic branches.
        """
        if len(symbol) != 1:
            raise ValueError(f"transition symbol must be a single character, got {symbol!r}")
        self._transitions.setdefault((source, symbol), set()).add(target)

    def add_transitions(self, source: int, symbols: Iterable[str], target: int) -> None:
        """Add one (*source*, symbol) -> *target* edge per symbol."""
        for symbol in symbols:
            self.add_transition(source, symbol, target)

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def reset(self) -> None:
        self._active = set(self._start)

    def apply(self, symbol: str) -> None:
        """Step every active state on *symbol*; states without an edge drop out."""
        following: set[int] = set()
        for state in self._active:
            targets = self._transitions.get((state, symbol))
            if targets:
                following |= targets
        self._active = following

    def accepts(self) -> bool:
        return not self._active.isdisjoint(self._accept)

    def has_transitions(self, symbol: str) -> bool:
        """True if feeding *symbol* would leave at least one state active."""
        return any(self._transitions.get((state, symbol)) for state in self._active)

    def is_alive(self) -> bool:
        return bool(self._active)

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def start_states(self) -> frozenset[int]:
        return frozenset(self._start)

    @property
    def accept_states(self) -> frozenset[int]:
        return frozenset(self._accept)

    @property
    def active_states(self) -> frozenset[int]:
        return frozenset(self._active)

    def __repr__(self) -> str:
        return (
            f"Automaton(start={sorted(self._start)}, accept={sorted(self._accept)}, "
            f"transitions={len(self._transitions)})"
        )


def single_char_automaton(ch: str) -> Automaton:
    """Automaton accepting exactly the one-character string *ch*."""
    a = Automaton()
    a.add_state(0, is_start=True)
    a.add_state(1, is_accept=True)
    a.add_transition(0, ch, 1)
    return a
