"""Transition relation shared by NFA and DFA.

Maps a :class:`Move` (source state, label) to the set of destination states.
A key is present only while its destination set is non-empty.  The relation
does not know how many states its owner has; owners check endpoints before
calling :meth:`TransitionRelation.add`.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from nfakit.automaton.symbols import EPSILON, Symbol, sort_key


@dataclass(frozen=True)
class Move:
    """Transition key: a source state and the label read from it.

    Attributes:
        start: Source state ID.
        symbol: Single character or ``EPSILON``.
    """

    start: int
    symbol: Symbol


class TransitionRelation:
    """Set-valued mapping from moves to destination states."""

    def __init__(self) -> None:
        self._table: dict[Move, set[int]] = {}

    def add(self, p: int, symbol: Symbol, q: int) -> None:
        """Insert ``q`` into the destinations of ``(p, symbol)``. Idempotent."""
        self._table.setdefault(Move(p, symbol), set()).add(q)

    def replace(self, p: int, symbol: Symbol, q: int) -> None:
        """Make ``q`` the only destination of ``(p, symbol)``."""
        self._table[Move(p, symbol)] = {q}

    def targets(self, p: int, symbol: Symbol) -> set[int]:
        """Destinations of ``(p, symbol)`` as a fresh set (empty if none)."""
        return set(self._table.get(Move(p, symbol), ()))

    def epsilon_targets(self, p: int) -> set[int]:
        """Destinations of the epsilon move out of ``p``."""
        return self.targets(p, EPSILON)

    def symbols(self) -> set[str]:
        """Distinct non-epsilon labels appearing on any move."""
        return {m.symbol for m in self._table if isinstance(m.symbol, str)}

    def moves(self) -> Iterator[tuple[Move, frozenset[int]]]:
        """Iterate ``(move, destinations)`` pairs ordered by source then label."""
        for move in sorted(self._table, key=lambda m: (m.start, sort_key(m.symbol))):
            yield move, frozenset(self._table[move])

    def edges(self) -> Iterator[tuple[int, Symbol, int]]:
        """Iterate every ``(p, symbol, q)`` triple in a stable order."""
        for move, dests in self.moves():
            for q in sorted(dests):
                yield move.start, move.symbol, q

    def shifted(self, offset: int) -> Iterable[tuple[int, Symbol, int]]:
        """Every edge with source and destination renumbered by ``offset``."""
        return [(p + offset, symbol, q + offset) for p, symbol, q in self.edges()]

    def copy(self) -> TransitionRelation:
        other = TransitionRelation()
        other._table = {m: set(d) for m, d in self._table.items()}
        return other

    def __contains__(self, move: object) -> bool:
        return move in self._table

    def __len__(self) -> int:
        return len(self._table)

    def __iter__(self) -> Iterator[Move]:
        return iter(self._table)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TransitionRelation):
            return NotImplemented
        return self._table == other._table

    def __repr__(self) -> str:
        return f"TransitionRelation({len(self._table)} moves)"
