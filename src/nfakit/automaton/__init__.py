"""Automaton subpackage: NFA, DFA, epsilon closure and subset construction."""

from nfakit.automaton.dfa import DFA
from nfakit.automaton.nfa import NFA
from nfakit.automaton.protocol import AutomatonView
from nfakit.automaton.subset import (
    SubsetConstruction,
    epsilon_closure,
    explore,
    subset_construction,
)
from nfakit.automaton.symbols import EPSILON, EpsilonType, Symbol, check_symbol, is_epsilon
from nfakit.automaton.transitions import Move, TransitionRelation

__all__ = [
    "DFA",
    "EPSILON",
    "NFA",
    "AutomatonView",
    "EpsilonType",
    "Move",
    "SubsetConstruction",
    "Symbol",
    "TransitionRelation",
    "check_symbol",
    "epsilon_closure",
    "explore",
    "is_epsilon",
    "subset_construction",
]
