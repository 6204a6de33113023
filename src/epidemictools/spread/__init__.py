from __future__ import annotations

from typing import Callable, Dict, List

from epidemictools.errors import UnknownAlgorithmError
from epidemictools.graph.adjacency import Graph

from .states import (
    State,
    single_vertex_state,
    full_state,
    infected_count,
    infected_vertices,
)
from .transitions import Transition, exposure_count, enumerate_next_states
from .recursive import compute_recursive
from .dp import build_transition_table, build_probability_table, compute_dp

Solver = Callable[[Graph, int, float, bool], List[float]]

ALGORITHMS: Dict[str, Solver] = {
    "recursive": compute_recursive,
    "dp": compute_dp,
}


def compute(g: Graph, algorithm: str, days: int, rate: float, first_only: bool = False) -> List[float]:
    """Run the named solver; one probability per origin vertex."""
    try:
        solver = ALGORITHMS[algorithm]
    except KeyError:
        raise UnknownAlgorithmError(
            f"unknown algorithm: {algorithm!r} (expected one of {', '.join(ALGORITHMS)})"
        ) from None
    return solver(g, days, rate, first_only)


__all__ = [
    "State",
    "single_vertex_state",
    "full_state",
    "infected_count",
    "infected_vertices",
    "Transition",
    "exposure_count",
    "enumerate_next_states",
    "compute_recursive",
    "build_transition_table",
    "build_probability_table",
    "compute_dp",
    "ALGORITHMS",
    "compute",
    "Solver",
]
