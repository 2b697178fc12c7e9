from __future__ import annotations

from typing import List

import networkx as nx

from funkdigen.func.digraphs import Func


def base_layout(G: nx.DiGraph, seed: int = 7):
    """
    Choose a reasonable layout for a functional digraph:
      - planar_layout of the underlying simple graph if it is planar
        (always the case for a single cycle per component)
      - otherwise spring_layout
    """
    H = nx.Graph(G)
    H.remove_edges_from(list(nx.selfloop_edges(H)))
    is_planar, _ = nx.check_planarity(H)
    if is_planar and H.number_of_nodes() > 2:
        return nx.planar_layout(H)
    return nx.spring_layout(H, seed=seed, iterations=300)


def cycle_vertices(g: Func) -> List[int]:
    """Vertices lying on a cycle, numbered as in functional_array(g)."""
    out: List[int] = []
    k = 0
    for c in g:
        for t in c:
            out.append(k)
            k += len(t)
    return out
