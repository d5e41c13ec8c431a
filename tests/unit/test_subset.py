"""Unit tests for the DFA and subset construction."""

from __future__ import annotations

import itertools

import pytest

from nfakit.automaton import DFA, EPSILON, NFA, explore, subset_construction
from nfakit.families import nth

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _strings(alphabet: str, max_len: int) -> list[str]:
    """Every string over ``alphabet`` up to ``max_len`` characters."""
    out: list[str] = []
    for n in range(max_len + 1):
        out.extend("".join(t) for t in itertools.product(alphabet, repeat=n))
    return out


def _assert_equivalent(nfa: NFA, alphabet: str, max_len: int = 6) -> DFA:
    dfa = nfa.dfa()
    for text in _strings(alphabet, max_len):
        assert dfa.accepts(text) == nfa.accepts(text), text
    return dfa


def _assert_deterministic(dfa: DFA) -> None:
    for move in dfa.transitions:
        assert move.symbol is not EPSILON
        assert len(dfa.transitions.targets(move.start, move.symbol)) == 1


def _ends_with_ab() -> NFA:
    """(a|b)*ab with an epsilon detour."""
    nfa = NFA(4)
    nfa.add_move(0, "a", 0)
    nfa.add_move(0, "b", 0)
    nfa.add_move(0, EPSILON, 1)
    nfa.add_move(1, "a", 2)
    nfa.add_move(2, "b", 3)
    nfa.add_final_state(3)
    return nfa


# ---------------------------------------------------------------------------
# DFA primitives
# ---------------------------------------------------------------------------


class TestDFA:
    def test_set_move_overwrites(self) -> None:
        dfa = DFA(3)
        assert dfa.set_move(0, "a", 1)
        assert dfa.set_move(0, "a", 2)
        assert dfa.move(0, "a") == 2

    def test_set_move_invalid_state_fails_without_mutation(self) -> None:
        dfa = DFA(2)
        dfa.set_move(0, "a", 1)
        assert not dfa.set_move(0, "a", 2)
        assert not dfa.set_move(2, "a", 0)
        assert dfa.move(0, "a") == 1
        assert len(dfa.transitions) == 1

    def test_set_move_rejects_epsilon(self) -> None:
        dfa = DFA(2)
        with pytest.raises(ValueError, match="epsilon"):
            dfa.set_move(0, EPSILON, 1)

    def test_missing_move_is_none(self) -> None:
        dfa = DFA(1)
        assert dfa.move(0, "a") is None
        assert dfa.walk("a") is None
        assert not dfa.accepts("a")

    def test_zero_states_rejected(self) -> None:
        with pytest.raises(ValueError):
            DFA(0)

    def test_final_states(self) -> None:
        dfa = DFA(2)
        assert dfa.add_final_state(1)
        assert not dfa.add_final_state(2)
        assert dfa.final_states == {1}

    def test_walk_from_state(self) -> None:
        dfa = DFA(3)
        dfa.set_move(0, "a", 1)
        dfa.set_move(1, "b", 2)
        dfa.add_final_state(2)
        assert dfa.walk("a") == 1
        assert dfa.walk("b", start_state=1) == 2
        assert dfa.walk("") == 0
        assert dfa.accepts("ab")
        assert not dfa.accepts("a")


# ---------------------------------------------------------------------------
# Subset construction
# ---------------------------------------------------------------------------


class TestSubsetConstruction:
    def test_single_move(self) -> None:
        nfa = NFA(2)
        nfa.add_move(0, "a", 1)
        nfa.add_final_state(1)

        dfa = nfa.dfa()

        assert dfa.move(0, "a") == 1
        assert dfa.final_state(1)
        assert not dfa.final_state(0)
        # The empty subset reached from state 1 is a non-final sink.
        sink = dfa.move(1, "a")
        assert sink is not None
        assert sink not in (0, 1)
        assert not dfa.final_state(sink)
        assert dfa.move(sink, "a") == sink
        assert dfa.accepts("a")
        assert not dfa.accepts("")
        assert not dfa.accepts("aa")

    def test_empty_alphabet_non_final(self) -> None:
        nfa = NFA(2)
        nfa.add_move(0, EPSILON, 1)
        dfa = nfa.dfa()
        assert dfa.number_of_states == 1
        assert not dfa.final_state(0)
        assert len(dfa.transitions) == 0

    def test_empty_alphabet_final(self) -> None:
        nfa = NFA(2)
        nfa.add_move(0, EPSILON, 1)
        nfa.add_final_state(1)
        dfa = nfa.dfa()
        assert dfa.number_of_states == 1
        assert dfa.final_state(0)
        assert dfa.accepts("")

    def test_single_state_no_moves(self) -> None:
        dfa = NFA(1).dfa()
        assert dfa.number_of_states == 1
        assert dfa.final_states == frozenset()

    def test_start_state_maps_to_closure_of_zero(self) -> None:
        nfa = _ends_with_ab()
        result = explore(nfa)
        assert result.set_of_index[0] == nfa.epsilon_closure(0)

    def test_bijection(self) -> None:
        result = explore(_ends_with_ab())
        assert len(result.set_of_index) == result.dfa.number_of_states
        assert len(set(result.set_of_index.values())) == len(result.set_of_index)
        for subset, p in result.index_of_set.items():
            assert result.set_of_index[p] == subset

    def test_finality_follows_subsets(self) -> None:
        nfa = _ends_with_ab()
        result = explore(nfa)
        for p, subset in result.set_of_index.items():
            assert result.dfa.final_state(p) == any(nfa.final_state(q) for q in subset)

    def test_determinism(self) -> None:
        _assert_deterministic(_ends_with_ab().dfa())

    def test_language_preserved(self) -> None:
        dfa = _assert_equivalent(_ends_with_ab(), "ab")
        assert dfa.accepts("ab")
        assert dfa.accepts("bbab")
        assert not dfa.accepts("ba")

    def test_language_preserved_with_epsilon_cycle(self) -> None:
        nfa = NFA(4)
        nfa.add_move(0, EPSILON, 1)
        nfa.add_move(1, EPSILON, 0)
        nfa.add_move(1, "a", 2)
        nfa.add_move(2, EPSILON, 0)
        nfa.add_move(2, "b", 3)
        nfa.add_final_state(2)
        nfa.add_final_state(3)
        _assert_equivalent(nfa, "ab")

    def test_is_deterministic_in_numbering(self) -> None:
        first = _ends_with_ab().dfa()
        second = _ends_with_ab().dfa()
        assert first.transitions == second.transitions
        assert first.final_states == second.final_states

    def test_nfa_not_modified(self) -> None:
        nfa = _ends_with_ab()
        edges = list(nfa.transitions.edges())
        subset_construction(nfa)
        assert list(nfa.transitions.edges()) == edges
        assert nfa.number_of_states == 4


# ---------------------------------------------------------------------------
# nth-symbol-from-the-right family
# ---------------------------------------------------------------------------


class TestNth:
    def test_shape(self) -> None:
        nfa = nth(3)
        assert nfa.number_of_states == 4
        assert nfa.final_states == {3}
        assert nfa.alphabet() == {"0", "1"}

    def test_language(self) -> None:
        nfa = nth(2)
        assert nfa.accepts("10")
        assert nfa.accepts("0011")
        assert not nfa.accepts("01")
        assert not nfa.accepts("1")

    @pytest.mark.parametrize("n", [1, 2, 3, 4])
    def test_dfa_has_exponential_states(self, n: int) -> None:
        dfa = _assert_equivalent(nth(n), "01", max_len=n + 3)
        assert dfa.number_of_states == 2**n

    def test_invalid_n(self) -> None:
        with pytest.raises(ValueError, match="n must be >= 1"):
            nth(0)
