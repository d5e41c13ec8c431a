"""Plain-text transition tables."""

from __future__ import annotations

from nfakit.automaton import EPSILON, AutomatonView, Symbol


def _cell(dests: set[int]) -> str:
    if not dests:
        return "-"
    if len(dests) == 1:
        (q,) = dests
        return str(q)
    return "{" + ",".join(str(q) for q in sorted(dests)) + "}"


def format_table(automaton: AutomatonView, epsilon_label: str = "ε") -> str:
    """Format an automaton's transitions as an aligned table.

    One row per state and one column per symbol (epsilon first, when any
    epsilon move exists).  The start state is marked ``->`` and final states
    ``*``.  Cells hold the destination, a ``{...}`` set when there are
    several, or ``-`` when there is no move.

    Args:
        automaton: NFA or DFA to format.
        epsilon_label: Column header for epsilon moves.

    Returns:
        A multi-line string with aligned columns.
    """
    columns: list[Symbol] = sorted(automaton.alphabet())
    if any(m.symbol is EPSILON for m in automaton.transitions):
        columns.insert(0, EPSILON)

    cells: dict[tuple[int, Symbol], set[int]] = {}
    for p, symbol, q in automaton.transitions.edges():
        cells.setdefault((p, symbol), set()).add(q)

    headers = ["State"] + [epsilon_label if c is EPSILON else repr(c)[1:-1] for c in columns]
    rows: list[list[str]] = []
    for p in range(automaton.number_of_states):
        marker = ("->" if p == 0 else "  ") + ("*" if automaton.final_state(p) else " ")
        row = [f"{marker} {p}"]
        row.extend(_cell(cells.get((p, c), set())) for c in columns)
        rows.append(row)

    widths = [max(len(r[i]) for r in [headers, *rows]) for i in range(len(headers))]

    def _row(values: list[str]) -> str:
        return " | ".join(v.ljust(w) for v, w in zip(values, widths)).rstrip()

    header = _row(headers)
    lines = [header, "-" * len(header)]
    lines.extend(_row(r) for r in rows)
    return "\n".join(lines)
