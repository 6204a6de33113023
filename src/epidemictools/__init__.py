"""
epidemictools: exact outbreak probabilities on small contact graphs, with a
catalog search for graphs that hit a target probability.
"""

from .errors import (
    EpidemicToolsError,
    GraphFormatError,
    SizeExceededError,
    ShapeMismatchError,
    InvalidCharacterError,
    UnknownAlgorithmError,
    CatalogError,
    CatalogReadError,
    InvalidCatalogEntryError,
)
from .graph.adjacency import MAX_VERTICES, Graph
from .io.matrix import parse_matrix, format_matrix
from .io.graph6 import g6_to_nx, g6_to_graph
from .io.catalog import iter_catalog, parse_catalog_line

# Probability engine
from .spread import (
    ALGORITHMS,
    Transition,
    compute,
    compute_dp,
    compute_recursive,
    enumerate_next_states,
    full_state,
    single_vertex_state,
)
from .search.target import SearchResult, solve_catalog
from .utils.reachability import reachable_mask, can_saturate

__all__ = [
    # Errors
    "EpidemicToolsError",
    "GraphFormatError",
    "SizeExceededError",
    "ShapeMismatchError",
    "InvalidCharacterError",
    "UnknownAlgorithmError",
    "CatalogError",
    "CatalogReadError",
    "InvalidCatalogEntryError",
    # Graph + IO
    "MAX_VERTICES",
    "Graph",
    "parse_matrix",
    "format_matrix",
    "g6_to_nx",
    "g6_to_graph",
    "iter_catalog",
    "parse_catalog_line",
    # Engine
    "ALGORITHMS",
    "Transition",
    "compute",
    "compute_dp",
    "compute_recursive",
    "enumerate_next_states",
    "full_state",
    "single_vertex_state",
    # Search
    "SearchResult",
    "solve_catalog",
    # Utils
    "reachable_mask",
    "can_saturate",
]
