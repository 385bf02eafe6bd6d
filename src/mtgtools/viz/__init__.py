from .layouts import base_layout, tree_layout
from .draw import draw_scale

__all__ = [
    "base_layout",
    "tree_layout",
    "draw_scale",
]
