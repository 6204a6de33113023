from __future__ import annotations

from typing import List

from epidemictools.graph.adjacency import Graph
from epidemictools.spread.states import State, full_state, single_vertex_state
from epidemictools.spread.transitions import enumerate_next_states


def _saturation_probability(g: Graph, days: int, rate: float, state: State, full: State) -> float:
    if state == full:
        return 1.0
    if days == 0:
        return 0.0

    total = 0.0
    for nxt, p in enumerate_next_states(g, state, rate):
        total += _saturation_probability(g, days - 1, rate, nxt, full) * p
    return total


def compute_recursive(g: Graph, days: int, rate: float, first_only: bool = False) -> List[float]:
    """
    Probability that a single infected vertex infects everyone within ``days``.

    Direct recursion over every daily outcome with no memoization, so the
    cost grows exponentially in ``days``. Returns one value per origin
    vertex, or only vertex 0's when ``first_only`` is set.
    """
    full = full_state(g.size)
    origins = [0] if first_only else range(g.size)
    return [
        _saturation_probability(g, days, rate, single_vertex_state(v), full)
        for v in origins
    ]
