"""Graphviz DOT rendering of automata."""

from __future__ import annotations

from nfakit.automaton import AutomatonView, Symbol, is_epsilon
from nfakit.config import DotConfig


def _label(symbol: Symbol, config: DotConfig) -> str:
    if is_epsilon(symbol):
        return config.epsilon_label
    text = str(symbol)
    if text == ",":
        return "','"
    return text.replace("\\", "\\\\").replace('"', '\\"')


def to_dot(
    automaton: AutomatonView,
    name: str = "automaton",
    config: DotConfig | None = None,
) -> str:
    """Render an NFA or DFA as a Graphviz ``digraph``.

    Final states are drawn as double circles.  Parallel moves between the
    same pair of states are merged into one edge with comma-separated labels;
    a comma symbol is written as ``','``.

    Args:
        automaton: The automaton to draw.
        name: Graph name.
        config: Rendering options (defaults to :class:`DotConfig`).

    Returns:
        DOT source text ending in a newline.

    Raises:
        ValueError: If ``name`` is not a valid identifier.
    """
    if not name.isidentifier():
        raise ValueError(f"name must be a valid identifier, got {name!r}")
    config = config or DotConfig()
    prefix = config.state_prefix

    lines = [f"digraph {name} {{", f"  rankdir={config.rankdir};"]
    finals = sorted(automaton.final_states)
    if finals:
        names = " ".join(f"{prefix}{p}" for p in finals)
        lines.append(f"  node [shape = doublecircle]; {names};")
    lines.append("  node [shape = circle];")
    lines.append(f"  __start [shape = point]; __start -> {prefix}0;")

    edges: dict[tuple[int, int], list[str]] = {}
    for p, symbol, q in automaton.transitions.edges():
        edges.setdefault((p, q), []).append(_label(symbol, config))
    for (p, q), labels in sorted(edges.items()):
        lines.append(f'  {prefix}{p} -> {prefix}{q} [ label = "{",".join(labels)}" ];')

    lines.append("}")
    return "\n".join(lines) + "\n"
