from .adjacency import MAX_VERTICES, Graph

__all__ = [
    "MAX_VERTICES",
    "Graph",
]
