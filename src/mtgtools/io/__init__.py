from .nx import tree_to_nx, mtg_to_nx, scale_quotient_nx

__all__ = [
    "tree_to_nx",
    "mtg_to_nx",
    "scale_quotient_nx",
]
