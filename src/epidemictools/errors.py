"""Exception hierarchy for epidemictools.

Every error the package raises on bad input derives from EpidemicToolsError,
so a front end can report it and exit without catching unrelated bugs.
"""
from __future__ import annotations

from typing import Optional


class EpidemicToolsError(Exception):
    """Base class for all epidemictools errors."""


class GraphFormatError(EpidemicToolsError, ValueError):
    """An adjacency description does not describe a valid graph."""


class SizeExceededError(GraphFormatError):
    """The graph has more vertices than a state bitmask can hold."""


class ShapeMismatchError(GraphFormatError):
    """The adjacency matrix is not square."""


class InvalidCharacterError(GraphFormatError):
    """An adjacency matrix cell is neither '0' nor '1'."""


class UnknownAlgorithmError(EpidemicToolsError, ValueError):
    """The requested solver name is not registered."""


class CatalogError(EpidemicToolsError):
    """Base class for failures while scanning a graph catalog."""


class CatalogReadError(CatalogError):
    """The catalog could not be read."""


class InvalidCatalogEntryError(CatalogError):
    """A catalog line does not decode to a valid graph."""

    def __init__(self, message: str, *, source: Optional[str] = None,
                 lineno: Optional[int] = None, line: Optional[str] = None):
        where = ""
        if source is not None:
            where = f"{source}:"
        if lineno is not None:
            where += f"{lineno}:"
        super().__init__(f"{where} {message}" if where else message)
        self.source = source
        self.lineno = lineno
        self.line = line
