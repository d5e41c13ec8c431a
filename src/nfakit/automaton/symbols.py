"""Transition labels.

A label is either a single-character string or the :data:`EPSILON` marker.
``EPSILON`` is an enum member rather than a reserved character, so no input
character can ever be mistaken for an empty move.
"""

from __future__ import annotations

import enum
from typing import Final, TypeAlias


class EpsilonType(enum.Enum):
    """Type of the empty-move marker. Has exactly one member."""

    EPSILON = "ε"

    def __repr__(self) -> str:
        return "EPSILON"


EPSILON: Final = EpsilonType.EPSILON

Symbol: TypeAlias = "str | EpsilonType"


def is_epsilon(symbol: Symbol) -> bool:
    """Return True if ``symbol`` is the empty-move marker."""
    return symbol is EPSILON


def check_symbol(symbol: Symbol) -> Symbol:
    """Validate a transition label and return it unchanged.

    Args:
        symbol: ``EPSILON`` or a string of length one.

    Returns:
        The same symbol.

    Raises:
        TypeError: If ``symbol`` is neither a string nor ``EPSILON``.
        ValueError: If ``symbol`` is a string of length other than one.
    """
    if symbol is EPSILON:
        return symbol
    if not isinstance(symbol, str):
        raise TypeError(f"Symbol must be a str or EPSILON, got {type(symbol).__name__}")
    if len(symbol) != 1:
        raise ValueError(f"Symbol must be a single character, got {symbol!r}")
    return symbol


def sort_key(symbol: Symbol) -> tuple[int, str]:
    """Ordering key placing ``EPSILON`` before every character."""
    if symbol is EPSILON:
        return (0, "")
    return (1, symbol)
