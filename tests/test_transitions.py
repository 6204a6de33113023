"""Tests for the one-day transition enumerator."""
import math
import random

import pytest

from epidemictools.graph.adjacency import Graph
from epidemictools.io.matrix import parse_matrix
from epidemictools.spread.states import full_state, infected_count, infected_vertices, single_vertex_state
from epidemictools.spread.transitions import Transition, enumerate_next_states, exposure_count


def _random_graph(rng, n, density=0.5):
    g = Graph(n)
    for u in range(n):
        for v in range(n):
            if u != v and rng.random() < density:
                g.add_edge(u, v)
    return g


# --- states ---

def test_state_helpers():
    assert single_vertex_state(3) == 0b1000
    assert full_state(3) == 0b111
    assert infected_count(0b1011) == 3
    assert infected_vertices(0b1010) == [1, 3]


# --- probability mass ---

@pytest.mark.parametrize("rate", [0.0, 0.1, 0.37, 0.5, 1.0])
def test_transitions_sum_to_one(rate):
    rng = random.Random(20200401)
    for n in range(1, 9):
        g = _random_graph(rng, n)
        for _ in range(10):
            state = rng.randrange(1 << n)
            total = sum(p for _, p in enumerate_next_states(g, state, rate))
            assert math.isclose(total, 1.0, abs_tol=1e-9)


def test_transitions_only_add_infections():
    rng = random.Random(7)
    g = _random_graph(rng, 6)
    for state in range(1 << 6):
        for nxt, _ in enumerate_next_states(g, state, 0.3):
            assert nxt & state == state


# --- absorbing states ---

@pytest.mark.parametrize("rate", [0.0, 0.1, 1.0])
def test_full_state_is_absorbing(rate):
    g = parse_matrix("0111,1011,1101,1110")
    full = full_state(4)
    assert enumerate_next_states(g, full, rate) == [Transition(full, 1.0)]


def test_no_exposed_vertex_maps_to_itself():
    # vertex 0 infected, nobody can catch from 0
    g = parse_matrix("011,001,000")
    assert enumerate_next_states(g, 0b001, 0.5) == [Transition(0b001, 1.0)]


def test_isolated_vertex_never_infected():
    rng = random.Random(11)
    for n in range(2, 9):
        g = _random_graph(rng, n, density=0.3)
        for state in range(1, 1 << n):
            for v in range(n):
                if state >> v & 1 or exposure_count(g, state, v) > 0:
                    continue
                for nxt, p in enumerate_next_states(g, state, 0.4):
                    assert not (nxt >> v & 1 and p > 0)


# --- closed form per vertex ---

def test_binomial_collapse():
    # vertex 3 catches from 0, 1 and 2, all infected
    g = parse_matrix("0000,0000,0000,1110")
    out = dict(enumerate_next_states(g, 0b0111, 0.1))
    assert math.isclose(out[0b0111], 0.9 ** 3)
    assert math.isclose(out[0b1111], 1 - 0.9 ** 3)


def test_branch_count_doubles_per_exposed_vertex():
    g = parse_matrix("0000,1000,1000,1000")
    assert len(enumerate_next_states(g, 0b0001, 0.2)) == 8


def test_example_day_one():
    g = parse_matrix("011,100,010")
    out = dict(enumerate_next_states(g, single_vertex_state(0), 0.10))
    # vertex 1 (row 100) catches from 0; vertex 2 (row 010) does not
    assert set(out) == {0b001, 0b011}
    assert math.isclose(out[0b011], 0.1)
    assert math.isclose(out[0b001], 0.9)
    assert full_state(3) not in out
