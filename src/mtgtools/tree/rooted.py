"""Mutable rooted forest over integer vertex ids.

Only ids and adjacency are stored here: any per-vertex data lives in an
external table keyed on the ids.  Vertex 0 is the root and exists from
construction onward.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional

from mtgtools.config import ROOT_ID
from mtgtools.errors import StructuralPreconditionError, VertexNotFoundError

logger = logging.getLogger(__name__)


class RootedTree:
    """A rooted tree (a forest once parentless vertices are added).

    parent[v] is None for a root.  children[v] lists the children of v in
    insertion order, which is also the order in which they are visited.

    Iterators returned by this class read the live maps: consuming one
    across a mutation is undefined.
    """

    def __init__(self) -> None:
        self.root = ROOT_ID
        self._last_id = ROOT_ID
        self._parent: Dict[int, Optional[int]] = {ROOT_ID: None}
        self._children: Dict[int, List[int]] = {ROOT_ID: []}

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._parent)

    def __contains__(self, vid: object) -> bool:
        return vid in self._parent

    def __iter__(self) -> Iterator[int]:
        return iter(self._parent)

    def count(self) -> int:
        """Number of vertices in the tree."""
        return len(self._parent)

    def nb_vertices(self) -> int:
        return len(self._parent)

    def has_vertex(self, vid: int) -> bool:
        return vid in self._parent

    @property
    def parents(self) -> Mapping[int, Optional[int]]:
        """Read-only view of the child -> parent map."""
        return MappingProxyType(self._parent)

    @property
    def children_map(self) -> Mapping[int, List[int]]:
        """Read-only view of the parent -> children map."""
        return MappingProxyType(self._children)

    def parent(self, vid: int) -> Optional[int]:
        """Return the parent of *vid*, or None if *vid* is a root.

        Raises VertexNotFoundError if *vid* is not in the tree.
        """
        try:
            return self._parent[vid]
        except KeyError:
            raise VertexNotFoundError(vid) from None

    def children(self, vid: int) -> List[int]:
        """Return a copy of the ordered children of *vid* (empty for a leaf)."""
        if vid not in self._parent:
            raise VertexNotFoundError(vid)
        return list(self._children.get(vid, ()))

    def nb_children(self, vid: int) -> int:
        if vid not in self._parent:
            raise VertexNotFoundError(vid)
        return len(self._children.get(vid, ()))

    def roots(self) -> Iterator[int]:
        """Iterate over the parentless vertices, in insertion order."""
        return (v for v, p in self._parent.items() if p is None)

    def ancestors(self, vid: int) -> Iterator[int]:
        """Iterate from the parent of *vid* up to its root."""
        p = self.parent(vid)
        while p is not None:
            yield p
            p = self._parent[p]

    def is_ancestor(self, ancestor: int, vid: int) -> bool:
        """True iff *ancestor* is *vid* itself or lies on its path to the root."""
        if ancestor == vid:
            return vid in self._parent
        return any(a == ancestor for a in self.ancestors(vid))

    # ------------------------------------------------------------------
    # Edition
    # ------------------------------------------------------------------

    def _new_id(self) -> int:
        # Scans upward from the last issued id; ids inserted out of band are
        # skipped, so this is linear in the number of colliding ids.
        vid = self._last_id + 1
        while vid in self._parent:
            vid += 1
        self._last_id = vid
        return vid

    def add_vertex(self, vid: int | None = None) -> int:
        """Insert a parentless vertex and return its id.

        A new id is allocated if *vid* is None.
        """
        if vid is None:
            vid = self._new_id()
        elif vid in self._parent:
            raise StructuralPreconditionError(f"vertex {vid!r} already exists")
        elif vid < 0:
            raise StructuralPreconditionError(f"vertex ids are non-negative, got {vid!r}")
        self._parent[vid] = None
        self._children[vid] = []
        logger.debug("added root vertex %d", vid)
        return vid

    def add_child(self, parent_id: int, child_id: int | None = None) -> int:
        """Add *child_id* under *parent_id* and return the child id.

        - child_id None: a fresh id is allocated and inserted as a leaf.
        - child_id absent from the tree: inserted as a leaf.
        - child_id already present: it is moved under *parent_id*, taking
          its subtree along.

        Raises StructuralPreconditionError if *parent_id* is absent or if the
        move would create a cycle.  Nothing is modified on failure.
        """
        if parent_id not in self._parent:
            raise StructuralPreconditionError(f"parent {parent_id!r} does not exist")

        if child_id is not None and child_id in self._parent:
            self._reparent(parent_id, child_id)
            return child_id

        if child_id is None:
            child_id = self._new_id()
        elif child_id < 0:
            raise StructuralPreconditionError(f"vertex ids are non-negative, got {child_id!r}")

        self._children[parent_id].append(child_id)
        self._parent[child_id] = parent_id
        self._children[child_id] = []
        logger.debug("added vertex %d under %d", child_id, parent_id)
        return child_id

    def _reparent(self, parent_id: int, child_id: int) -> None:
        """Detach *child_id* from its parent and attach it under *parent_id*."""
        if self.is_ancestor(child_id, parent_id):
            raise StructuralPreconditionError(
                f"cannot move {child_id!r} under {parent_id!r}: would create a cycle"
            )
        old = self._parent[child_id]
        # Both maps are updated only once every check has passed.
        if old is not None:
            self._children[old].remove(child_id)
        self._children[parent_id].append(child_id)
        self._parent[child_id] = parent_id
        logger.debug("moved vertex %d from %s to %d", child_id, old, parent_id)
