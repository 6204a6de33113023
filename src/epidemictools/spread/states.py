"""Infection states as int bitmasks: bit v set iff vertex v is infected."""
from __future__ import annotations

State = int


def single_vertex_state(v: int) -> State:
    return 1 << v


def full_state(size: int) -> State:
    """State with all ``size`` vertices infected."""
    return (1 << size) - 1


def infected_count(state: State) -> int:
    return bin(state).count("1")


def infected_vertices(state: State) -> list[int]:
    out = []
    while state:
        lsb = state & -state
        out.append(lsb.bit_length() - 1)
        state ^= lsb
    return out
