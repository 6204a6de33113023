"""Dynamic-programming solver over (days left, state).

table[t][s] is the probability that a population in state s becomes fully
infected within t more days. Row 0 is 1.0 for the fully infected state and
0.0 elsewhere; row t sums row t-1 over the transitions of each state. The
transition list of every state is enumerated once and shared by all rows.
"""
from __future__ import annotations

import logging
from typing import List

from epidemictools.graph.adjacency import Graph
from epidemictools.spread.states import full_state, single_vertex_state
from epidemictools.spread.transitions import Transition, enumerate_next_states

logger = logging.getLogger(__name__)


def build_transition_table(g: Graph, rate: float) -> List[List[Transition]]:
    """transitions[s] = enumerate_next_states(g, s, rate) for all 2**size states."""
    return [enumerate_next_states(g, s, rate) for s in range(1 << g.size)]


def build_probability_table(
    g: Graph,
    days: int,
    rate: float,
    transitions: List[List[Transition]] | None = None,
) -> List[List[float]]:
    """Return the (days + 1) x 2**size table described in the module docstring."""
    if transitions is None:
        transitions = build_transition_table(g, rate)

    n_states = 1 << g.size
    row = [0.0] * n_states
    row[full_state(g.size)] = 1.0
    table = [row]

    for _t in range(1, days + 1):
        prev = table[-1]
        row = [0.0] * n_states
        for s in range(n_states):
            p = 0.0
            for nxt, q in transitions[s]:
                p += q * prev[nxt]
            row[s] = p
        table.append(row)

    logger.debug(
        "dp table: %d rows x %d states, %d transitions",
        len(table), n_states, sum(len(t) for t in transitions),
    )
    return table


def compute_dp(g: Graph, days: int, rate: float, first_only: bool = False) -> List[float]:
    """
    Same result as compute_recursive, read off the last row of the table.
    """
    last = build_probability_table(g, days, rate)[days]
    origins = [0] if first_only else range(g.size)
    return [last[single_vertex_state(v)] for v in origins]
