"""Bounded tree traversals used to enumerate the components of a vertex.

Both traversals are iterative, so their stack use does not depend on the
depth of the tree.  When *complex_id* is given, the descent stops at any
child that carries an explicit complex entry other than *complex_id*: such a
child roots another decomposition.  Children without an explicit entry
inherit the complex of their parent and are always entered.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

if TYPE_CHECKING:
    from mtgtools.mtg.graph import MTG


def _entered_children(g: MTG, vid: int, complex_id: Optional[int]) -> List[int]:
    kids = g.tree.children(vid)
    if complex_id is None:
        return kids
    direct = g.complex_map
    return [c for c in kids if direct.get(c, complex_id) == complex_id]


def post_order(g: MTG, vid: int, complex_id: Optional[int] = None) -> Iterator[int]:
    """Yield the subtree of *vid* in post-order (children before parent).

    Children are visited in insertion order.
    """
    stack: List[Tuple[int, Iterator[int]]] = [
        (vid, iter(_entered_children(g, vid, complex_id)))
    ]
    while stack:
        node, kids = stack[-1]
        child = next(kids, None)
        if child is None:
            stack.pop()
            yield node
        else:
            stack.append((child, iter(_entered_children(g, child, complex_id))))


def pre_order(g: MTG, vid: int, complex_id: Optional[int] = None) -> Iterator[int]:
    """Yield the subtree of *vid* in pre-order (parent before children)."""
    stack = [vid]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(_entered_children(g, node, complex_id)))
