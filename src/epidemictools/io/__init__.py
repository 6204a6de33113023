from .matrix import parse_matrix, format_matrix
from .graph6 import strip_graph6_header, g6_to_nx, nx_to_graph, g6_to_graph
from .catalog import parse_catalog_line, count_catalog_lines, iter_catalog

__all__ = [
    "parse_matrix",
    "format_matrix",
    "strip_graph6_header",
    "g6_to_nx",
    "nx_to_graph",
    "g6_to_graph",
    "parse_catalog_line",
    "count_catalog_lines",
    "iter_catalog",
]
