"""Configuration for rendering and the command-line driver."""

from __future__ import annotations

from dataclasses import dataclass, field

_VALID_RANKDIRS = {"LR", "RL", "TB", "BT"}
_VALID_OUTPUT_FORMATS = {"dot", "table", "json"}
_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class DotConfig:
    """Options for Graphviz output.

    Attributes:
        rankdir: Graph layout direction.
        state_prefix: Prefix put before each state number in node names.
        epsilon_label: Edge label used for epsilon moves.
    """

    rankdir: str = "LR"
    state_prefix: str = "q"
    epsilon_label: str = "ε"

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate configuration values, raising ``ValueError`` on invalid settings."""
        if self.rankdir not in _VALID_RANKDIRS:
            raise ValueError(
                f"Unsupported rankdir: {self.rankdir!r}. Choose from {sorted(_VALID_RANKDIRS)}"
            )
        if not self.state_prefix.isidentifier():
            raise ValueError(
                f"state_prefix must be a valid identifier, got {self.state_prefix!r}"
            )
        if not self.epsilon_label:
            raise ValueError("epsilon_label must not be empty")


@dataclass
class CLIConfig:
    """Settings for ``python -m nfakit.cli``.

    Attributes:
        input_path: JSON automaton document to read (``-`` for stdin).
        output_format: ``"dot"``, ``"table"`` or ``"json"``.
        name: Graph name used by the DOT renderer.
        determinize: Convert NFA input to a DFA before rendering.
        log_level: Standard ``logging`` level name.
        dot: Options passed to the DOT renderer.
    """

    input_path: str
    output_format: str = "dot"
    name: str = "automaton"
    determinize: bool = True
    log_level: str = "WARNING"
    dot: DotConfig = field(default_factory=DotConfig)

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate configuration values, raising ``ValueError`` on invalid settings."""
        if self.output_format not in _VALID_OUTPUT_FORMATS:
            raise ValueError(
                f"Unsupported output_format: {self.output_format!r}. "
                f"Choose from {sorted(_VALID_OUTPUT_FORMATS)}"
            )
        if self.log_level not in _VALID_LOG_LEVELS:
            raise ValueError(
                f"Unsupported log_level: {self.log_level!r}. "
                f"Choose from {sorted(_VALID_LOG_LEVELS)}"
            )
        if not self.name.isidentifier():
            raise ValueError(f"name must be a valid identifier, got {self.name!r}")
        if not self.input_path:
            raise ValueError("input_path must not be empty")
