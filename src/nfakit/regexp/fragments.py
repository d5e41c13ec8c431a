"""Thompson construction helpers.

Every fragment returned here is a fresh NFA with start state 0 and exactly
one final state (its accept state).  Composite builders never modify their
operands: they embed copies with :meth:`NFA.append` and splice the copies
together with epsilon moves.
"""

from __future__ import annotations

from collections.abc import Iterable

from nfakit.automaton import EPSILON, NFA


def accept_state(fragment: NFA) -> int:
    """The single final state of a fragment.

    Raises:
        ValueError: If the fragment does not have exactly one final state.
    """
    finals = fragment.final_states
    if len(finals) != 1:
        raise ValueError(f"Fragment must have exactly one final state, got {sorted(finals)}")
    (accept,) = finals
    return accept


def _seed(fragment: NFA) -> NFA:
    """Fresh NFA holding ``fragment``'s moves under the same numbering, no final states."""
    nfa = NFA(fragment.number_of_states)
    for p, symbol, q in fragment.transitions.edges():
        nfa.add_move(p, symbol, q)
    return nfa


def epsilon_nfa() -> NFA:
    """NFA that matches the empty string."""
    nfa = NFA(2)
    nfa.add_move(0, EPSILON, 1)
    nfa.add_final_state(1)
    return nfa


def char_nfa(ch: str) -> NFA:
    """NFA that matches a single character."""
    nfa = NFA(2)
    nfa.add_move(0, ch, 1)
    nfa.add_final_state(1)
    return nfa


def chars_nfa(chars: Iterable[str]) -> NFA:
    """NFA that matches any one of the given characters (nothing if empty)."""
    nfa = NFA(2)
    for ch in sorted(set(chars)):
        nfa.add_move(0, ch, 1)
    nfa.add_final_state(1)
    return nfa


def concat_nfa(a: NFA, b: NFA) -> NFA:
    """Concatenation: L(a) followed by L(b)."""
    nfa = _seed(a)
    b_start = nfa.append(b)
    nfa.add_move(accept_state(a), EPSILON, b_start)
    nfa.add_final_state(b_start + accept_state(b))
    return nfa


def alternate_nfa(a: NFA, b: NFA) -> NFA:
    """Alternation: L(a) | L(b)."""
    nfa = NFA(1)
    a_start = nfa.append(a)
    b_start = nfa.append(b)
    accept = nfa.new_state()

    nfa.add_move(0, EPSILON, a_start)
    nfa.add_move(0, EPSILON, b_start)
    nfa.add_move(a_start + accept_state(a), EPSILON, accept)
    nfa.add_move(b_start + accept_state(b), EPSILON, accept)
    nfa.add_final_state(accept)
    return nfa


def _wrap(inner: NFA, *, loop: bool, skip: bool) -> NFA:
    """New start/accept around ``inner`` with optional loop-back and bypass."""
    nfa = NFA(1)
    start = nfa.append(inner)
    end = start + accept_state(inner)
    accept = nfa.new_state()

    nfa.add_move(0, EPSILON, start)
    if loop:
        nfa.add_move(end, EPSILON, start)
    if skip:
        nfa.add_move(0, EPSILON, accept)
    nfa.add_move(end, EPSILON, accept)
    nfa.add_final_state(accept)
    return nfa


def kleene_star_nfa(inner: NFA) -> NFA:
    """Kleene star: L(inner)*."""
    return _wrap(inner, loop=True, skip=True)


def kleene_plus_nfa(inner: NFA) -> NFA:
    """Kleene plus: L(inner)+. At least one occurrence."""
    return _wrap(inner, loop=True, skip=False)


def optional_nfa(inner: NFA) -> NFA:
    """Optional: L(inner)?. Zero or one occurrence."""
    return _wrap(inner, loop=False, skip=True)
