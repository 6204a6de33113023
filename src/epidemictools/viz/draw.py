from __future__ import annotations

import networkx as nx
import matplotlib.pyplot as plt

from epidemictools.graph.adjacency import Graph


def base_layout(G: nx.DiGraph, seed: int = 7):
    """
    planar_layout when the underlying undirected graph is planar,
    otherwise spring_layout.
    """
    U = G.to_undirected()
    is_planar, _ = nx.check_planarity(U)
    if is_planar:
        return nx.planar_layout(U)
    return nx.spring_layout(G, seed=seed, iterations=300)


def draw_graph(
    g: Graph,
    *,
    origin: int = 0,
    title: str | None = None,
    seed: int = 7,
    node_size: int = 500,
    edge_width: float = 1.2,
    save_path: str | None = None,
):
    """
    Draw the contact graph with the initially infected vertex highlighted.

    An arc u -> v means u can catch the infection from v. If save_path is
    set the figure is written there and closed, otherwise it is shown.
    Returns the matplotlib Figure.
    """
    G = g.to_nx()
    pos = base_layout(G, seed=seed)
    colors = ["tab:red" if v == origin else "tab:blue" for v in G.nodes()]

    fig, ax = plt.subplots(figsize=(6, 6))
    ax.set_axis_off()
    ax.set_title(title or f"|V|={g.size}  |E|={G.number_of_edges()}  origin={origin}")
    nx.draw_networkx(
        G,
        pos=pos,
        ax=ax,
        node_color=colors,
        node_size=node_size,
        width=edge_width,
        arrows=True,
    )
    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=200)
        plt.close(fig)
    else:
        plt.show()
    return fig
