from __future__ import annotations

from epidemictools.graph.adjacency import Graph
from epidemictools.spread.states import full_state


def reachable_mask(g: Graph, origin: int) -> int:
    """Bitmask of vertices that can ever be infected starting from ``origin``.

    Vertex v becomes reachable once some reachable j has has_edge(v, j).
    """
    reached = 1 << origin
    stack = [origin]
    while stack:
        j = stack.pop()
        for v in range(g.size):
            if not reached >> v & 1 and g.has_edge(v, j):
                reached |= 1 << v
                stack.append(v)
    return reached


def can_saturate(g: Graph, origin: int) -> bool:
    """True iff full infection from ``origin`` has non-zero probability for a positive rate."""
    return reachable_mask(g, origin) == full_state(g.size)
