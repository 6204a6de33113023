"""Line-oriented catalogs of candidate graphs.

Each non-blank line holds one graph, either as a graph6 token (an optional
'>>graph6<<' header is accepted) or as comma separated matrix rows such as
"011,100,010". graph6 never uses digits or commas, so any line holding one
is read as a matrix.
"""
from __future__ import annotations

import logging
from typing import Iterator

from epidemictools.errors import CatalogReadError, GraphFormatError, InvalidCatalogEntryError
from epidemictools.graph.adjacency import Graph
from epidemictools.io.graph6 import g6_to_graph, strip_graph6_header
from epidemictools.io.matrix import parse_matrix

logger = logging.getLogger(__name__)


def _looks_like_matrix(line: str) -> bool:
    return any(ch.isdigit() or ch == "," for ch in line)


def parse_catalog_line(line: str) -> Graph:
    """Decode one catalog line; raises GraphFormatError on bad input."""
    s = strip_graph6_header(line)
    if not s:
        raise GraphFormatError("empty catalog entry")
    if _looks_like_matrix(s):
        return parse_matrix(s)
    return g6_to_graph(s)


def count_catalog_lines(path: str) -> int:
    """Number of non-blank lines, used for progress estimates."""
    try:
        with open(path, "rb") as fh:
            return sum(1 for line in fh if line.strip())
    except OSError as e:
        raise CatalogReadError(f"cannot read catalog {path}: {e}") from e


def iter_catalog(path: str) -> Iterator[Graph]:
    """
    Stream graphs from a catalog file.

    Blank lines are skipped. The first malformed line, including one that
    is not ASCII, raises InvalidCatalogEntryError; I/O failures raise
    CatalogReadError.
    """
    try:
        fh = open(path, "rb")
    except OSError as e:
        raise CatalogReadError(f"cannot open catalog {path}: {e}") from e

    with fh:
        lineno = 0
        while True:
            try:
                raw = fh.readline()
            except OSError as e:
                raise CatalogReadError(f"{path}:{lineno + 1}: read failed: {e}") from e
            if not raw:
                break
            lineno += 1
            if not raw.strip():
                continue
            try:
                line = raw.decode("ascii")
                g = parse_catalog_line(line)
            except UnicodeDecodeError as e:
                raise InvalidCatalogEntryError(
                    f"non-ASCII catalog entry: {e}", source=path, lineno=lineno,
                    line=raw.decode("ascii", errors="replace").rstrip("\r\n"),
                ) from e
            except GraphFormatError as e:
                raise InvalidCatalogEntryError(
                    str(e), source=path, lineno=lineno, line=line.rstrip("\r\n")
                ) from e
            logger.debug("%s:%d: %d vertices", path, lineno, g.size)
            yield g
