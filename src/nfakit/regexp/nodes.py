"""Regular-expression syntax trees and their compilation to NFAs.

Nodes are immutable.  ``node.compile()`` builds a fresh, independently
numbered NFA fragment every time it is called; children are compiled first
and embedded into the parent (Thompson construction).

``RegExp`` is the closed union of node types.  :func:`compile_regexp`
handles every member and ends in ``assert_never``, so a type checker flags
any node kind added to the union but not to the compiler.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol, TypeAlias, assert_never

from nfakit.automaton import NFA, check_symbol
from nfakit.regexp.fragments import (
    alternate_nfa,
    char_nfa,
    chars_nfa,
    concat_nfa,
    epsilon_nfa,
    kleene_plus_nfa,
    kleene_star_nfa,
    optional_nfa,
)

logger = logging.getLogger(__name__)


class RegExpNode(Protocol):
    """Anything that compiles to an NFA fragment."""

    def compile(self) -> NFA: ...


# ---------------------------------------------------------------------------
# Node types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Epsilon:
    """Matches the empty string."""

    def compile(self) -> NFA:
        return compile_regexp(self)


@dataclass(frozen=True)
class Literal:
    """Matches exactly one character.

    Attributes:
        symbol: The character. Must be a string of length one.
    """

    symbol: str

    def __post_init__(self) -> None:
        if not isinstance(self.symbol, str):
            raise TypeError(f"Literal symbol must be a str, got {type(self.symbol).__name__}")
        check_symbol(self.symbol)

    def compile(self) -> NFA:
        return compile_regexp(self)


@dataclass(frozen=True)
class CharSet:
    """Matches any one character from ``symbols``; matches nothing if empty."""

    symbols: frozenset[str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "symbols", frozenset(self.symbols))
        for ch in self.symbols:
            if not isinstance(ch, str):
                raise TypeError(f"CharSet members must be str, got {type(ch).__name__}")
            check_symbol(ch)

    def compile(self) -> NFA:
        return compile_regexp(self)


@dataclass(frozen=True)
class Concatenation:
    """L(left) followed by L(right)."""

    left: RegExp
    right: RegExp

    def compile(self) -> NFA:
        return compile_regexp(self)


@dataclass(frozen=True)
class Alternation:
    """L(left) | L(right)."""

    left: RegExp
    right: RegExp

    def compile(self) -> NFA:
        return compile_regexp(self)


@dataclass(frozen=True)
class Closure:
    """Kleene star: zero or more repetitions of ``inner``."""

    inner: RegExp

    def compile(self) -> NFA:
        return compile_regexp(self)


@dataclass(frozen=True)
class Plus:
    """One or more repetitions of ``inner``."""

    inner: RegExp

    def compile(self) -> NFA:
        return compile_regexp(self)


@dataclass(frozen=True)
class Optional:
    """Zero or one occurrence of ``inner``."""

    inner: RegExp

    def compile(self) -> NFA:
        return compile_regexp(self)


@dataclass(frozen=True)
class Repeat:
    """Bounded repetition ``inner{min_count,max_count}``.

    ``max_count=None`` means no upper bound (``{n,}``).
    """

    inner: RegExp
    min_count: int
    max_count: int | None = None

    def __post_init__(self) -> None:
        if self.min_count < 0:
            raise ValueError(f"min_count must be >= 0, got {self.min_count}")
        if self.max_count is not None and self.max_count < self.min_count:
            raise ValueError(
                f"max_count must be >= min_count ({self.min_count}) or None, got {self.max_count}"
            )

    def expand(self) -> RegExp:
        """Equivalent tree using only the basic operators."""
        parts: list[RegExp] = [self.inner] * self.min_count
        if self.max_count is None:
            parts.append(Closure(self.inner))
        else:
            parts.extend(Optional(self.inner) for _ in range(self.max_count - self.min_count))
        return concat(*parts)

    def compile(self) -> NFA:
        return compile_regexp(self)


RegExp: TypeAlias = (
    Epsilon
    | Literal
    | CharSet
    | Concatenation
    | Alternation
    | Closure
    | Plus
    | Optional
    | Repeat
)


# ---------------------------------------------------------------------------
# Compiler
# ---------------------------------------------------------------------------


def compile_regexp(node: RegExp) -> NFA:
    """Compile a syntax tree into a fresh NFA fragment.

    Args:
        node: Root of the tree.

    Returns:
        An NFA whose state 0 is the start state and which has exactly one
        final state.
    """
    match node:
        case Epsilon():
            nfa = epsilon_nfa()
        case Literal(symbol=ch):
            nfa = char_nfa(ch)
        case CharSet(symbols=chars):
            nfa = chars_nfa(chars)
        case Concatenation(left=left, right=right):
            nfa = concat_nfa(compile_regexp(left), compile_regexp(right))
        case Alternation(left=left, right=right):
            nfa = alternate_nfa(compile_regexp(left), compile_regexp(right))
        case Closure(inner=inner):
            nfa = kleene_star_nfa(compile_regexp(inner))
        case Plus(inner=inner):
            nfa = kleene_plus_nfa(compile_regexp(inner))
        case Optional(inner=inner):
            nfa = optional_nfa(compile_regexp(inner))
        case Repeat():
            nfa = compile_regexp(node.expand())
        case _:
            assert_never(node)
    logger.debug("compiled %s into %d states", type(node).__name__, nfa.number_of_states)
    return nfa


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def concat(*nodes: RegExp) -> RegExp:
    """Left-nested concatenation of ``nodes``; ``Epsilon()`` if there are none."""
    if not nodes:
        return Epsilon()
    result = nodes[0]
    for node in nodes[1:]:
        result = Concatenation(result, node)
    return result


def alternate(*nodes: RegExp) -> RegExp:
    """Left-nested alternation of ``nodes``.

    Raises:
        ValueError: If no nodes are given.
    """
    if not nodes:
        raise ValueError("alternate() needs at least one alternative")
    result = nodes[0]
    for node in nodes[1:]:
        result = Alternation(result, node)
    return result


def string(text: str) -> RegExp:
    """Concatenation of one :class:`Literal` per character of ``text``."""
    return concat(*(Literal(ch) for ch in text))
