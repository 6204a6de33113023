from __future__ import annotations

from epidemictools.errors import InvalidCharacterError, ShapeMismatchError, SizeExceededError
from epidemictools.graph.adjacency import MAX_VERTICES, Graph


def parse_matrix(matrix: str) -> Graph:
    """
    Parse comma separated rows of an adjacency matrix, e.g. "011,100,010".

    Raises:
      SizeExceededError     more than MAX_VERTICES rows
      ShapeMismatchError    a row length differs from the row count
      InvalidCharacterError a cell is not '0' or '1'
    """
    rows = [r.strip() for r in matrix.split(",")]
    n = len(rows)
    if n > MAX_VERTICES:
        raise SizeExceededError(f"matrix size is too large: {n} > {MAX_VERTICES}")

    for i, row in enumerate(rows):
        if len(row) != n:
            raise ShapeMismatchError(f"row {i} has length {len(row)} but expecting {n}")

    g = Graph(n)
    for i, row in enumerate(rows):
        for j, ch in enumerate(row):
            if ch == "1":
                g.add_edge(i, j)
            elif ch != "0":
                raise InvalidCharacterError(f"unknown character in matrix: {ch!r}")
    return g


def format_matrix(g: Graph) -> str:
    """One line of '0'/'1' per row, no trailing newline."""
    return "\n".join(g.matrix_rows())
