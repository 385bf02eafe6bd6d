"""
mtgtools: multi-scale tree graphs (MTG), a rooted tree of integer vertex ids
with a scale per vertex and complex / components relations between scales.
"""

import logging

from .config import MTGTOOLS_LOG_LEVEL, log_level
from .errors import (
    MTGError,
    VertexNotFoundError,
    InvalidScaleQueryError,
    StructuralPreconditionError,
)
from .tree.rooted import RootedTree
from .mtg.graph import MTG
from .mtg.traversal import post_order, pre_order
from .io.nx import tree_to_nx, mtg_to_nx, scale_quotient_nx
from .viz.draw import draw_scale

logging.getLogger(__name__).addHandler(logging.NullHandler())
_level = log_level(MTGTOOLS_LOG_LEVEL)
if _level is not None:
    logging.getLogger(__name__).setLevel(_level)

__all__ = [
    # Errors
    "MTGError",
    "VertexNotFoundError",
    "InvalidScaleQueryError",
    "StructuralPreconditionError",
    # Structures
    "RootedTree",
    "MTG",
    # Traversal
    "post_order",
    "pre_order",
    # IO
    "tree_to_nx",
    "mtg_to_nx",
    "scale_quotient_nx",
    # Viz
    "draw_scale",
]
