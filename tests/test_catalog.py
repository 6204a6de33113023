"""Tests for graph6 decoding and catalog scanning."""
import pytest

from epidemictools.errors import (
    CatalogReadError,
    GraphFormatError,
    InvalidCatalogEntryError,
    SizeExceededError,
)
from epidemictools.io.catalog import count_catalog_lines, iter_catalog, parse_catalog_line
from epidemictools.io.graph6 import g6_to_graph, g6_to_nx, strip_graph6_header
from epidemictools.io.matrix import format_matrix, parse_matrix


# --- graph6 ---

def test_strip_header():
    assert strip_graph6_header(">>graph6<<Bw\n") == "Bw"


def test_g6_triangle():
    g = g6_to_graph("Bw")
    assert format_matrix(g) == "011\n101\n110"


def test_g6_path_is_symmetric():
    g = g6_to_graph("Bg")  # 0-1-2
    assert g.has_edge(0, 1) and g.has_edge(1, 0)
    assert g.has_edge(1, 2) and g.has_edge(2, 1)
    assert not g.has_edge(0, 2)


def test_g6_to_nx_node_count():
    assert g6_to_nx("A_").number_of_nodes() == 2


def test_g6_truncated():
    with pytest.raises(GraphFormatError):
        g6_to_graph("A")


def test_g6_nine_vertices():
    with pytest.raises(SizeExceededError):
        g6_to_graph("H??????")


# --- catalog lines ---

def test_parse_catalog_line_matrix_and_g6():
    assert parse_catalog_line("011,101,110\n") == g6_to_graph("Bw")


def test_parse_catalog_line_with_header():
    assert parse_catalog_line(">>graph6<<Bw\n") == g6_to_graph("Bw")


def test_parse_catalog_line_blank():
    with pytest.raises(GraphFormatError):
        parse_catalog_line("   \n")


# --- catalog files ---

def test_iter_catalog(tmp_path):
    p = tmp_path / "graphs.g6"
    p.write_text("Bw\n\nA_\n011,100,010\n")
    graphs = list(iter_catalog(str(p)))
    assert [g.size for g in graphs] == [3, 2, 3]
    assert graphs[2] == parse_matrix("011,100,010")
    assert count_catalog_lines(str(p)) == 3


def test_iter_catalog_last_line_without_newline(tmp_path):
    p = tmp_path / "graphs.g6"
    p.write_text("Bw\nA_")
    assert len(list(iter_catalog(str(p)))) == 2


def test_iter_catalog_bad_line(tmp_path):
    p = tmp_path / "graphs.g6"
    p.write_text("Bw\n\n011,10\nA_\n")
    it = iter_catalog(str(p))
    assert next(it).size == 3
    with pytest.raises(InvalidCatalogEntryError) as exc:
        next(it)
    assert exc.value.lineno == 3
    assert exc.value.line == "011,10"
    assert "graphs.g6:3:" in str(exc.value)


def test_iter_catalog_too_large(tmp_path):
    p = tmp_path / "big.g6"
    p.write_text("H??????\n")
    with pytest.raises(InvalidCatalogEntryError) as exc:
        list(iter_catalog(str(p)))
    assert isinstance(exc.value.__cause__, SizeExceededError)


def test_iter_catalog_missing_file(tmp_path):
    with pytest.raises(CatalogReadError):
        list(iter_catalog(str(tmp_path / "nope.g6")))
    with pytest.raises(CatalogReadError):
        count_catalog_lines(str(tmp_path / "nope.g6"))


def test_iter_catalog_non_ascii_line(tmp_path):
    p = tmp_path / "graphs.g6"
    p.write_bytes(b"Bw\nA\xc3\xa9\nA_\n")
    assert count_catalog_lines(str(p)) == 3
    it = iter_catalog(str(p))
    assert next(it).size == 3
    with pytest.raises(InvalidCatalogEntryError) as exc:
        next(it)
    assert exc.value.lineno == 2
    assert isinstance(exc.value.__cause__, UnicodeDecodeError)
