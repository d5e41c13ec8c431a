"""Deterministic finite automaton.

Same state model as :class:`~nfakit.automaton.nfa.NFA` (dense integer ids,
state 0 initial) but each ``(state, symbol)`` pair has at most one
destination and there are no epsilon moves.  A missing move means the input
is rejected; no dead state is added implicitly.
"""

from __future__ import annotations

from collections.abc import Iterator

from nfakit.automaton.symbols import EPSILON, Symbol, check_symbol
from nfakit.automaton.transitions import TransitionRelation


class DFA:
    """Deterministic automaton with partial transition function.

    Args:
        n: Initial number of states. Must be at least 1.

    Raises:
        ValueError: If ``n < 1``.
    """

    initial_state = 0

    def __init__(self, n: int = 1) -> None:
        if n < 1:
            raise ValueError(f"An automaton needs at least one state, got n={n}")
        self._number_of_states = n
        self._final_states: set[int] = set()
        self._transitions = TransitionRelation()

    @property
    def number_of_states(self) -> int:
        return self._number_of_states

    @property
    def final_states(self) -> frozenset[int]:
        return frozenset(self._final_states)

    @property
    def transitions(self) -> TransitionRelation:
        """The transition relation. Treat as read-only; mutate through :meth:`set_move`."""
        return self._transitions

    def states(self) -> range:
        return range(self._number_of_states)

    def new_state(self) -> int:
        state = self._number_of_states
        self._number_of_states += 1
        return state

    def valid_state(self, p: int) -> bool:
        return 0 <= p < self._number_of_states

    def final_state(self, p: int) -> bool:
        return p in self._final_states

    def add_final_state(self, p: int) -> bool:
        if not self.valid_state(p):
            return False
        self._final_states.add(p)
        return True

    def set_move(self, p: int, symbol: Symbol, q: int) -> bool:
        """Set the destination of ``(p, symbol)`` to ``q``, replacing any previous one.

        Returns:
            ``True`` if both states are valid, ``False`` otherwise (nothing
            changes in that case).

        Raises:
            ValueError: If ``symbol`` is ``EPSILON`` or not a single character.
        """
        if symbol is EPSILON:
            raise ValueError("A DFA cannot have epsilon moves")
        check_symbol(symbol)
        if not (self.valid_state(p) and self.valid_state(q)):
            return False
        self._transitions.replace(p, symbol, q)
        return True

    def move(self, p: int, symbol: Symbol) -> int | None:
        """Destination of ``(p, symbol)``, or ``None`` when undefined."""
        targets = self._transitions.targets(p, symbol)
        if not targets:
            return None
        (q,) = targets
        return q

    def alphabet(self) -> set[str]:
        return self._transitions.symbols()

    def walk(self, text: str, start_state: int | None = None) -> int | None:
        """Run the DFA over ``text``.

        Args:
            text: Input string.
            start_state: State to start from (defaults to state 0).

        Returns:
            The state reached after the last character, or ``None`` if some
            character had no move.
        """
        state = self.initial_state if start_state is None else start_state
        for ch in text:
            nxt = self.move(state, ch)
            if nxt is None:
                return None
            state = nxt
        return state

    def accepts(self, text: str) -> bool:
        state = self.walk(text)
        return state is not None and state in self._final_states

    def __len__(self) -> int:
        return self._number_of_states

    def __iter__(self) -> Iterator[int]:
        return iter(self.states())

    def __repr__(self) -> str:
        return (
            f"DFA(states={self._number_of_states}, "
            f"final={sorted(self._final_states)}, moves={len(self._transitions)})"
        )
