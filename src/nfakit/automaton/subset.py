"""Epsilon closure and NFA to DFA conversion (subset construction).

Each DFA state stands for one set of NFA states.  Two tables kept in step
record that correspondence in both directions while a work-list drives the
exploration:

- ``index_of_set``: frozenset of NFA states -> DFA state
- ``set_of_index``: DFA state -> frozenset of NFA states

Every subset that is reached gets a DFA state, the empty subset included.
No dead state is created for subsets that are never reached.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from nfakit.automaton.dfa import DFA

if TYPE_CHECKING:
    from nfakit.automaton.nfa import NFA

logger = logging.getLogger(__name__)


def epsilon_closure(nfa: NFA, states: Iterable[int]) -> frozenset[int]:
    """Compute the epsilon closure of a set of NFA states.

    Breadth-first search over epsilon moves.  Each state enters the queue at
    most once, so epsilon cycles terminate.

    Args:
        nfa: The automaton.
        states: Seed states. Invalid ids are ignored.

    Returns:
        All states reachable from the seeds by zero or more epsilon moves.
    """
    seen = {p for p in states if nfa.valid_state(p)}
    frontier = deque(seen)
    while frontier:
        p = frontier.popleft()
        for q in nfa.epsilon_targets(p):
            if q not in seen:
                seen.add(q)
                frontier.append(q)
    return frozenset(seen)


@dataclass
class SubsetConstruction:
    """DFA together with the NFA subset each DFA state represents.

    Attributes:
        dfa: The constructed DFA.
        set_of_index: DFA state -> NFA states it stands for.
    """

    dfa: DFA
    set_of_index: dict[int, frozenset[int]]

    @property
    def index_of_set(self) -> dict[frozenset[int], int]:
        return {s: p for p, s in self.set_of_index.items()}


def explore(nfa: NFA) -> SubsetConstruction:
    """Run subset construction and keep the state correspondence.

    Args:
        nfa: The automaton to determinize. It is not modified.

    Returns:
        A :class:`SubsetConstruction` whose ``dfa`` accepts the same language
        as ``nfa``.
    """
    alphabet = sorted(nfa.alphabet())
    start = nfa.epsilon_closure(0)

    dfa = DFA(1)
    index_of_set: dict[frozenset[int], int] = {start: 0}
    set_of_index: dict[int, frozenset[int]] = {0: start}
    worklist: list[int] = [0]

    while worklist:
        p = worklist.pop()
        pset = set_of_index[p]
        for ch in alphabet:
            qset = nfa.epsilon_closure(nfa.move(pset, ch))
            q = index_of_set.get(qset)
            if q is None:
                q = dfa.new_state()
                index_of_set[qset] = q
                set_of_index[q] = qset
                worklist.append(q)
            dfa.set_move(p, ch, q)

    for p in range(dfa.number_of_states):
        if nfa.final_state_in(set_of_index[p]):
            dfa.add_final_state(p)

    logger.debug(
        "subset construction: %d NFA states, %d symbols -> %d DFA states",
        nfa.number_of_states,
        len(alphabet),
        dfa.number_of_states,
    )
    return SubsetConstruction(dfa=dfa, set_of_index=set_of_index)


def subset_construction(nfa: NFA) -> DFA:
    """Convert an NFA to an equivalent DFA.

    Args:
        nfa: The automaton to determinize.

    Returns:
        The DFA; its state 0 corresponds to the epsilon closure of the NFA's
        state 0.
    """
    return explore(nfa).dfa
