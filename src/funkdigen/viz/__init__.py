from .layouts import base_layout, cycle_vertices
from .draw import draw_digraph

__all__ = [
    "base_layout",
    "cycle_vertices",
    "draw_digraph",
]
