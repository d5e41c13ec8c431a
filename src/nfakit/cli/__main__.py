"""CLI entry point: ``python -m nfakit.cli``.

Reads a JSON automaton document, determinizes it unless told otherwise, and
prints it as Graphviz DOT, a transition table, or JSON.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from nfakit.automaton import NFA
from nfakit.config import CLIConfig, DotConfig
from nfakit.export import format_table, to_dot
from nfakit.serialize import dumps, loads

logger = logging.getLogger("nfakit.cli")


def parse_args(argv: list[str] | None = None) -> CLIConfig:
    parser = argparse.ArgumentParser(description="nfakit subset construction driver")
    parser.add_argument("input", help="JSON automaton document, or - for stdin")
    parser.add_argument(
        "--format",
        default="dot",
        choices=["dot", "table", "json"],
        help="output format (default: dot)",
    )
    parser.add_argument("--name", default="automaton", help="graph name for DOT output")
    parser.add_argument(
        "--no-determinize",
        action="store_true",
        default=False,
        help="print the input automaton as is instead of its DFA",
    )
    parser.add_argument("--rankdir", default="LR", choices=["LR", "RL", "TB", "BT"])
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    return CLIConfig(
        input_path=args.input,
        output_format=args.format,
        name=args.name,
        determinize=not args.no_determinize,
        log_level=args.log_level,
        dot=DotConfig(rankdir=args.rankdir),
    )


def run(config: CLIConfig) -> str:
    """Load, optionally determinize, and render according to ``config``.

    Raises:
        OSError: If the input cannot be read.
        ValueError: If the input is not a valid automaton document.
    """
    if config.input_path == "-":
        data = sys.stdin.buffer.read()
    else:
        data = Path(config.input_path).read_bytes()

    automaton = loads(data)
    if config.determinize and isinstance(automaton, NFA):
        before = automaton.number_of_states
        automaton = automaton.dfa()
        logger.info(
            "determinized %d NFA states into %d DFA states", before, automaton.number_of_states
        )

    if config.output_format == "dot":
        return to_dot(automaton, config.name, config.dot)
    if config.output_format == "table":
        return format_table(automaton, epsilon_label=config.dot.epsilon_label) + "\n"
    return dumps(automaton, indent=True).decode() + "\n"


def main(argv: list[str] | None = None) -> int:
    try:
        config = parse_args(argv)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        output = run(config)
    except OSError as exc:
        print(f"error: cannot read {config.input_path}: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"error: invalid automaton document: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
