from __future__ import annotations

import networkx as nx
import matplotlib.pyplot as plt

from funkdigen.func.digraphs import Func
from funkdigen.io.digraph6 import to_digraph6, to_networkx
from .layouts import base_layout, cycle_vertices


def draw_digraph(
    g: Func,
    *,
    loopless: bool = False,
    seed: int = 7,
    node_size: int = 140,
    edge_width: float = 1.2,
    ax=None,
    save_path: str | None = None,
):
    """
    Draw a functional digraph, cycle vertices highlighted.

    If ax is None a new figure is created. If save_path is set the figure
    is written there (PNG, 200 dpi) and closed; otherwise it is shown
    when a new figure was created.

    Returns the NetworkX DiGraph that was drawn.
    """
    G = to_networkx(g, loopless=loopless)
    pos = base_layout(G, seed=seed)
    on_cycle = set(cycle_vertices(g))
    colors = ["tab:red" if v in on_cycle else "tab:blue" for v in G.nodes()]

    own_figure = ax is None
    if own_figure:
        fig, ax = plt.subplots(figsize=(6, 6))
    else:
        fig = ax.figure

    ax.set_title(f"{to_digraph6(g, loopless=loopless)}   |V|={G.number_of_nodes()}")
    ax.set_axis_off()
    nx.draw_networkx(
        G,
        pos=pos,
        ax=ax,
        with_labels=G.number_of_nodes() <= 30,
        node_size=node_size,
        node_color=colors,
        width=edge_width,
        arrows=True,
    )

    if save_path:
        fig.savefig(save_path, dpi=200)
        plt.close(fig)
    elif own_figure:
        plt.show()

    return G
