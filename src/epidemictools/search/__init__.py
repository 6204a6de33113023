from .target import SearchResult, solve_catalog

__all__ = [
    "SearchResult",
    "solve_catalog",
]
