"""Regexp subpackage: syntax-tree nodes compiled to NFAs by Thompson construction."""

from nfakit.regexp.fragments import accept_state
from nfakit.regexp.nodes import (
    Alternation,
    CharSet,
    Closure,
    Concatenation,
    Epsilon,
    Literal,
    Optional,
    Plus,
    RegExp,
    RegExpNode,
    Repeat,
    alternate,
    compile_regexp,
    concat,
    string,
)

__all__ = [
    "Alternation",
    "CharSet",
    "Closure",
    "Concatenation",
    "Epsilon",
    "Literal",
    "Optional",
    "Plus",
    "RegExp",
    "RegExpNode",
    "Repeat",
    "accept_state",
    "alternate",
    "compile_regexp",
    "concat",
    "string",
]
