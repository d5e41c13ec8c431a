"""Export subpackage: Graphviz and text-table renderings of automata."""

from nfakit.export.dot import to_dot
from nfakit.export.table import format_table

__all__ = ["format_table", "to_dot"]
