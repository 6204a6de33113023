from .draw import base_layout, draw_graph

__all__ = [
    "base_layout",
    "draw_graph",
]
