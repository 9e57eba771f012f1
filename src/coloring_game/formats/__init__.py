"""Text encodings of graphs."""

from .graph6 import (
    GraphFormatError,
    count_graph_lines,
    parse_graph,
    read_graph_file,
    to_graph6,
)

__all__ = [
    "GraphFormatError",
    "count_graph_lines",
    "parse_graph",
    "read_graph_file",
    "to_graph6",
]
