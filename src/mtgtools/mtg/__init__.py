from .graph import MTG
from .traversal import post_order, pre_order

__all__ = [
    "MTG",
    "post_order",
    "pre_order",
]
