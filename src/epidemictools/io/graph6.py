from __future__ import annotations

import networkx as nx

from epidemictools.graph.adjacency import MAX_VERTICES, Graph
from epidemictools.errors import GraphFormatError, SizeExceededError


def strip_graph6_header(g6: str) -> str:
    """
    Remove optional '>>graph6<<' header and whitespace.
    """
    s = g6.strip()
    if s.startswith(">>graph6<<"):
        s = s[len(">>graph6<<") :].strip()
    return s


def g6_to_nx(g6: str) -> nx.Graph:
    """
    Parse a graph6 string into a simple undirected NetworkX Graph.

    Raises GraphFormatError if the token is not valid graph6.
    """
    s = strip_graph6_header(g6)
    try:
        G = nx.from_graph6_bytes(s.encode("ascii"))
    except (nx.NetworkXError, UnicodeEncodeError, ValueError, IndexError) as e:
        raise GraphFormatError(f"invalid graph6: {s!r}") from e
    if isinstance(G, (nx.MultiGraph, nx.MultiDiGraph)):
        G = nx.Graph(G)
    return G


def nx_to_graph(G: nx.Graph) -> Graph:
    """
    Convert a NetworkX graph with nodes 0..n-1 into a Graph.

    Undirected edges are stored in both directions.
    """
    n = G.number_of_nodes()
    if n > MAX_VERTICES:
        raise SizeExceededError(f"matrix size is too large: {n} > {MAX_VERTICES}")
    g = Graph(n)
    for u, v in G.edges():
        g.add_edge(u, v)
        if not G.is_directed():
            g.add_edge(v, u)
    return g


def g6_to_graph(g6: str) -> Graph:
    return nx_to_graph(g6_to_nx(g6))
