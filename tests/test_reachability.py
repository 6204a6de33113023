"""Tests for epidemictools.utils.reachability."""
from epidemictools.io.matrix import parse_matrix
from epidemictools.utils.reachability import can_saturate, reachable_mask


def test_reachable_follows_rows():
    g = parse_matrix("011,100,010")
    # 1 catches from 0, 2 catches from 1
    assert reachable_mask(g, 0) == 0b111
    # 0 catches from 2, then 1 catches from 0
    assert reachable_mask(g, 2) == 0b111


def test_unreachable_vertices_stay_out():
    # only vertex 0 lists 1 in its row; nobody catches from 0
    g = parse_matrix("010,000,000")
    assert reachable_mask(g, 1) == 0b011
    assert reachable_mask(g, 0) == 0b001
    assert reachable_mask(g, 2) == 0b100


def test_can_saturate():
    g = parse_matrix("001,001,000")
    assert can_saturate(g, 2)
    assert not can_saturate(g, 0)


def test_single_vertex():
    assert can_saturate(parse_matrix("0"), 0)
