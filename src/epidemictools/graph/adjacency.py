"""Fixed-size directed graph on at most 8 vertices.

Row u of the adjacency is an int bitset: bit v is set iff the matrix has a
'1' at row u, column v. A healthy vertex v can catch the infection from
every vertex j with has_edge(v, j).
"""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import networkx as nx

from epidemictools.errors import GraphFormatError, SizeExceededError

MAX_VERTICES = 8


class Graph:
    """Adjacency bitsets for a graph with ``1 <= size <= MAX_VERTICES``."""

    __slots__ = ("size", "rows")

    def __init__(self, size: int, rows: Optional[Sequence[int]] = None):
        if size > MAX_VERTICES:
            raise SizeExceededError(f"matrix size is too large: {size} > {MAX_VERTICES}")
        if size < 1:
            raise GraphFormatError(f"graph needs at least one vertex, got {size}")
        self.size = size
        if rows is None:
            self.rows: List[int] = [0] * size
        else:
            if len(rows) != size:
                raise ValueError(f"expected {size} adjacency rows, got {len(rows)}")
            mask = (1 << size) - 1
            self.rows = [r & mask for r in rows]

    def add_edge(self, u: int, v: int) -> None:
        self.rows[u] |= 1 << v

    def has_edge(self, u: int, v: int) -> bool:
        return bool(self.rows[u] >> v & 1)

    def edges(self) -> List[Tuple[int, int]]:
        """Return stored edges as (row, column) pairs in row-major order."""
        return [(u, v) for u in range(self.size) for v in range(self.size) if self.has_edge(u, v)]

    def pivot(self, target: int) -> "Graph":
        """
        Return a relabelled copy in which ``target`` is vertex 0.

        Vertices labelled below ``target`` move up by one; the rest keep
        their label. Only used to print a canonical form of a solution.
        """
        if not 0 <= target < self.size:
            raise IndexError(f"vertex {target} out of range for size {self.size}")

        def relabel(x: int) -> int:
            if x == target:
                return 0
            if x < target:
                return x + 1
            return x

        out = Graph(self.size)
        for u, v in self.edges():
            out.add_edge(relabel(u), relabel(v))
        return out

    def matrix_rows(self) -> List[str]:
        return [
            "".join("1" if self.has_edge(u, v) else "0" for v in range(self.size))
            for u in range(self.size)
        ]

    def to_nx(self) -> nx.DiGraph:
        """Directed NetworkX view with an arc u -> v for every stored edge."""
        G = nx.DiGraph()
        G.add_nodes_from(range(self.size))
        G.add_edges_from(self.edges())
        return G

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self.size == other.size and self.rows == other.rows

    def __repr__(self) -> str:
        return f"Graph(size={self.size}, rows={','.join(self.matrix_rows())!r})"
