"""One-day evolution of an infection state.

Each infected neighbour of a healthy vertex transmits independently with
probability ``rate``, so a vertex with k infected neighbours stays healthy
with probability (1 - rate)**k. Vertices are independent of each other
within a day, which makes the next-day distribution the cross product of
per-vertex outcomes.
"""
from __future__ import annotations

from typing import List, NamedTuple

from epidemictools.graph.adjacency import Graph
from epidemictools.spread.states import State, infected_count


class Transition(NamedTuple):
    state: State
    probability: float


def exposure_count(g: Graph, state: State, v: int) -> int:
    """Number of infected vertices that vertex v can catch the infection from."""
    return infected_count(g.rows[v] & state)


def enumerate_next_states(g: Graph, state: State, rate: float) -> List[Transition]:
    """
    Return every possible next-day state with its probability.

    The probabilities sum to 1. A state where no healthy vertex has an
    infected neighbour (including the fully infected state) maps to itself
    with probability 1.
    """
    branches: List[Transition] = [Transition(state, 1.0)]
    for v in range(g.size):
        bit = 1 << v
        if state & bit:
            continue
        k = exposure_count(g, state, v)
        if k == 0:
            continue

        stay = (1.0 - rate) ** k
        caught = 1.0 - stay
        doubled: List[Transition] = []
        for s, p in branches:
            doubled.append(Transition(s, p * stay))
            doubled.append(Transition(s | bit, p * caught))
        branches = doubled
    return branches
