"""Read-only structural interface shared by NFA and DFA."""

from __future__ import annotations

from typing import Protocol

from nfakit.automaton.transitions import TransitionRelation


class AutomatonView(Protocol):
    """What presentation and serialization code may read from an automaton.

    Both :class:`~nfakit.automaton.nfa.NFA` and
    :class:`~nfakit.automaton.dfa.DFA` satisfy this protocol.  Consumers
    must not mutate ``transitions``.
    """

    @property
    def number_of_states(self) -> int: ...

    @property
    def final_states(self) -> frozenset[int]: ...

    @property
    def transitions(self) -> TransitionRelation: ...

    def final_state(self, p: int) -> bool: ...

    def alphabet(self) -> set[str]: ...
