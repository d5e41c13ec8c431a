"""JSON documents for automata.

Document shape::

    {
      "kind": "nfa",
      "states": 3,
      "final_states": [2],
      "moves": [
        {"source": 0, "symbol": "a", "target": 1},
        {"source": 1, "symbol": null, "target": 2}
      ]
    }

State ids must be JSON integers (no booleans or numeric strings).  A ``null``
symbol is an epsilon move.  DFA documents may not contain
epsilon moves or two moves with the same source and symbol.
"""

from __future__ import annotations

import logging
from typing import Literal

import orjson
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from nfakit.automaton import DFA, EPSILON, NFA, is_epsilon

logger = logging.getLogger(__name__)


class MoveModel(BaseModel):
    """One transition in a document."""

    model_config = ConfigDict(extra="forbid", strict=True)

    source: int
    symbol: str | None
    target: int

    @field_validator("symbol")
    @classmethod
    def single_character(cls, v: str | None) -> str | None:
        if v is not None and len(v) != 1:
            raise ValueError(f"symbol must be a single character or null, got {v!r}")
        return v


class AutomatonModel(BaseModel):
    """A whole automaton document."""

    model_config = ConfigDict(extra="forbid", strict=True)

    kind: Literal["nfa", "dfa"]
    states: int
    final_states: list[int] = []
    moves: list[MoveModel] = []

    @field_validator("states")
    @classmethod
    def at_least_one_state(cls, v: int) -> int:
        if v < 1:
            raise ValueError("states must be >= 1")
        return v

    @model_validator(mode="after")
    def states_in_range(self) -> AutomatonModel:
        def check(p: int, what: str) -> None:
            if not 0 <= p < self.states:
                raise ValueError(f"{what} {p} out of range for {self.states} states")

        for p in self.final_states:
            check(p, "final state")
        seen: set[tuple[int, str | None]] = set()
        for m in self.moves:
            check(m.source, "move source")
            check(m.target, "move target")
            if self.kind == "dfa":
                if m.symbol is None:
                    raise ValueError("dfa documents cannot contain epsilon moves")
                if (m.source, m.symbol) in seen:
                    raise ValueError(
                        f"dfa documents need at most one move per (state, symbol), "
                        f"got two for ({m.source}, {m.symbol!r})"
                    )
                seen.add((m.source, m.symbol))
        return self


def to_model(automaton: NFA | DFA) -> AutomatonModel:
    """Describe an automaton as a document model."""
    moves = [
        MoveModel(source=p, symbol=None if is_epsilon(symbol) else str(symbol), target=q)
        for p, symbol, q in automaton.transitions.edges()
    ]
    return AutomatonModel(
        kind="dfa" if isinstance(automaton, DFA) else "nfa",
        states=automaton.number_of_states,
        final_states=sorted(automaton.final_states),
        moves=moves,
    )


def from_model(model: AutomatonModel) -> NFA | DFA:
    """Build the automaton a validated document describes."""
    if model.kind == "dfa":
        dfa = DFA(model.states)
        for m in model.moves:
            dfa.set_move(m.source, m.symbol, m.target)  # type: ignore[arg-type]
        for p in model.final_states:
            dfa.add_final_state(p)
        return dfa

    nfa = NFA(model.states)
    for m in model.moves:
        nfa.add_move(m.source, EPSILON if m.symbol is None else m.symbol, m.target)
    for p in model.final_states:
        nfa.add_final_state(p)
    return nfa


def dumps(automaton: NFA | DFA, *, indent: bool = False) -> bytes:
    """Serialize an automaton to JSON bytes.

    Args:
        automaton: NFA or DFA.
        indent: Pretty-print with two-space indentation.
    """
    option = orjson.OPT_INDENT_2 if indent else 0
    return orjson.dumps(to_model(automaton).model_dump(), option=option)


def loads(data: bytes | str) -> NFA | DFA:
    """Parse a JSON document into an NFA or DFA.

    Raises:
        ValueError: If the data is not valid JSON or does not describe a
            valid automaton (``pydantic.ValidationError`` and
            ``orjson.JSONDecodeError`` are both ``ValueError`` subclasses).
    """
    model = AutomatonModel.model_validate(orjson.loads(data))
    logger.debug("loaded %s with %d states, %d moves", model.kind, model.states, len(model.moves))
    return from_model(model)
