"""Generators for well-known automaton families."""

from __future__ import annotations

from nfakit.automaton import NFA


def nth(n: int) -> NFA:
    """NFA over ``{0, 1}`` for strings whose n-th symbol from the right is ``1``.

    The automaton has ``n + 1`` states: state 0 loops on both symbols and
    guesses, on a ``1``, that exactly ``n - 1`` symbols remain.  Its
    determinization needs ``2**n`` states, which makes it the usual worst
    case for subset construction.

    Args:
        n: Position from the right, counting from 1.

    Returns:
        The NFA, with state ``n`` as its only final state.

    Raises:
        ValueError: If ``n < 1``.
    """
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    nfa = NFA(n + 1)
    nfa.add_move(0, "0", 0)
    nfa.add_move(0, "1", 0)
    nfa.add_move(0, "1", 1)
    for i in range(1, n):
        nfa.add_move(i, "0", i + 1)
        nfa.add_move(i, "1", i + 1)
    nfa.add_final_state(n)
    return nfa
