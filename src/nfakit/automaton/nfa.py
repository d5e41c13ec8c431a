"""Nondeterministic finite automaton with epsilon moves.

States are the integers ``0 .. number_of_states - 1``; state 0 is the
initial state.  The automaton only grows: :meth:`NFA.new_state` and
:meth:`NFA.append` allocate ids after the existing ones and never renumber
them.  Operations that reference an out-of-range state return ``False``
and leave the automaton untouched.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from nfakit.automaton.subset import epsilon_closure, subset_construction
from nfakit.automaton.symbols import Symbol, check_symbol
from nfakit.automaton.transitions import TransitionRelation

if TYPE_CHECKING:
    from nfakit.automaton.dfa import DFA


class NFA:
    """NFA-ε over single-character symbols.

    Args:
        n: Initial number of states. Must be at least 1.

    Raises:
        ValueError: If ``n < 1``.
    """

    def __init__(self, n: int = 1) -> None:
        if n < 1:
            raise ValueError(f"An automaton needs at least one state, got n={n}")
        self._number_of_states = n
        self._final_states: set[int] = set()
        self._transitions = TransitionRelation()

    # ------------------------------------------------------------------
    # States
    # ------------------------------------------------------------------

    @property
    def number_of_states(self) -> int:
        return self._number_of_states

    @property
    def final_states(self) -> frozenset[int]:
        return frozenset(self._final_states)

    @property
    def transitions(self) -> TransitionRelation:
        """The transition relation. Treat as read-only; mutate through :meth:`add_move`."""
        return self._transitions

    def states(self) -> range:
        return range(self._number_of_states)

    def new_state(self) -> int:
        """Allocate a new state and return its id."""
        state = self._number_of_states
        self._number_of_states += 1
        return state

    def valid_state(self, p: int) -> bool:
        return 0 <= p < self._number_of_states

    def final_state(self, p: int) -> bool:
        return p in self._final_states

    def add_final_state(self, p: int) -> bool:
        """Mark ``p`` as final.

        Returns:
            ``True`` on success, ``False`` if ``p`` is not a valid state.
        """
        if not self.valid_state(p):
            return False
        self._final_states.add(p)
        return True

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def add_move(self, p: int, symbol: Symbol, q: int) -> bool:
        """Add the transition ``p --symbol--> q``.

        Adding the same transition twice has no further effect.

        Args:
            p: Source state.
            symbol: A single character or ``EPSILON``.
            q: Destination state.

        Returns:
            ``True`` if both states are valid, ``False`` otherwise (nothing
            is added in that case).

        Raises:
            TypeError: If ``symbol`` is not a string or ``EPSILON``.
            ValueError: If ``symbol`` is a string of length other than one.
        """
        check_symbol(symbol)
        if not (self.valid_state(p) and self.valid_state(q)):
            return False
        self._transitions.add(p, symbol, q)
        return True

    def alphabet(self) -> set[str]:
        """Labels of all non-epsilon moves."""
        return self._transitions.symbols()

    def move(self, states: int | Iterable[int], symbol: Symbol) -> set[int]:
        """States reachable on exactly one ``symbol`` move.

        Args:
            states: A single state or a collection of states.
            symbol: The label to follow.

        Returns:
            The destination states; empty when there is no such move.
        """
        if isinstance(states, int):
            return self._transitions.targets(states, symbol)
        result: set[int] = set()
        for p in states:
            result |= self._transitions.targets(p, symbol)
        return result

    def epsilon_closure(self, states: int | Iterable[int]) -> frozenset[int]:
        """States reachable through zero or more epsilon moves.

        A valid state is always part of its own closure.  Invalid states
        contribute nothing.
        """
        if isinstance(states, int):
            states = (states,)
        return epsilon_closure(self, states)

    def epsilon_targets(self, p: int) -> set[int]:
        return self._transitions.epsilon_targets(p)

    def final_state_in(self, states: Iterable[int]) -> bool:
        """Whether any state in ``states`` is final."""
        return any(p in self._final_states for p in states)

    # ------------------------------------------------------------------
    # Composition and conversion
    # ------------------------------------------------------------------

    def append(self, other: NFA) -> int:
        """Embed a copy of ``other`` after the existing states.

        Every state of ``other`` is renumbered by ``offset`` (this
        automaton's state count before the call) and each of its moves is
        copied under the new numbering.  Final states of ``other`` are not
        copied; callers wire acceptance themselves.

        Args:
            other: The automaton to embed. It is not modified, and it may be
                ``self``.

        Returns:
            ``offset``, the id that ``other``'s state 0 has in this automaton.
        """
        offset = self._number_of_states
        edges = other._transitions.shifted(offset)
        self._number_of_states += other._number_of_states
        for p, symbol, q in edges:
            self._transitions.add(p, symbol, q)
        return offset

    def dfa(self) -> DFA:
        """Equivalent DFA obtained by subset construction."""
        return subset_construction(self)

    def accepts(self, text: str) -> bool:
        """Simulate the automaton on ``text`` without building a DFA."""
        current = self.epsilon_closure(0)
        for ch in text:
            current = self.epsilon_closure(self.move(current, ch))
            if not current:
                return False
        return self.final_state_in(current)

    def copy(self) -> NFA:
        other = NFA(self._number_of_states)
        other._final_states = set(self._final_states)
        other._transitions = self._transitions.copy()
        return other

    def __len__(self) -> int:
        return self._number_of_states

    def __iter__(self) -> Iterator[int]:
        return iter(self.states())

    def __repr__(self) -> str:
        return (
            f"NFA(states={self._number_of_states}, "
            f"final={sorted(self._final_states)}, moves={len(self._transitions)})"
        )
