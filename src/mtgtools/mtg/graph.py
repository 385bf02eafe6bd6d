"""Multi-scale tree graph built on top of a RootedTree.

A vertex at scale k may decompose into a tree of vertices at scale k+1, its
*components*; each of those points back to it as their *complex*.  Complex
entries are sparse: a vertex without one inherits the complex of its nearest
ancestor that has one.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Set, Tuple

from mtgtools.config import ROOT_ID, ROOT_SCALE
from mtgtools.errors import (
    InvalidScaleQueryError,
    StructuralPreconditionError,
    VertexNotFoundError,
)
from mtgtools.mtg.traversal import post_order
from mtgtools.tree.rooted import RootedTree

logger = logging.getLogger(__name__)

Edge = Tuple[int, int]


class MTG:
    """Multi-scale tree graph.

    A vertex belongs to the MTG iff it has a scale.  All queries are pure
    reads of the current maps; iterators are lazy, and consuming one across
    a mutation is undefined.

    Parameters
    ----------
    tree : RootedTree, optional
        Tree to build on.  Defaults to a fresh tree holding only the root.
    """

    def __init__(self, tree: Optional[RootedTree] = None) -> None:
        self.tree = tree if tree is not None else RootedTree()
        self._scale: Dict[int, int] = {ROOT_ID: ROOT_SCALE}
        self._complex: Dict[int, int] = {}
        self._components: Dict[int, List[int]] = {}

    def __len__(self) -> int:
        return len(self._scale)

    def __contains__(self, vid: object) -> bool:
        return vid in self._scale

    def __iter__(self) -> Iterator[int]:
        return iter(self._scale)

    @property
    def scale_map(self) -> Mapping[int, int]:
        return MappingProxyType(self._scale)

    @property
    def complex_map(self) -> Mapping[int, int]:
        """Explicitly recorded complexes only (no inheritance)."""
        return MappingProxyType(self._complex)

    @property
    def components_map(self) -> Mapping[int, List[int]]:
        """Candidate components per vertex; roots are derived at query time."""
        return MappingProxyType(self._components)

    def _require(self, vid: int) -> int:
        try:
            return self._scale[vid]
        except KeyError:
            raise VertexNotFoundError(vid, "mtg") from None

    # --- scales ---

    def scales(self) -> Set[int]:
        """Distinct scale values present."""
        return set(self._scale.values())

    def scale(self, vid: int) -> Optional[int]:
        """Scale of *vid*, or None if *vid* is not in the MTG."""
        return self._scale.get(vid)

    def nb_scales(self) -> int:
        return len(self.scales())

    def max_scale(self) -> Optional[int]:
        return max(self._scale.values(), default=None)

    # --- vertices ---

    def vertices_iter(self, scale: Optional[int] = None) -> Iterator[int]:
        """Iterate over vertex ids, optionally restricted to one scale."""
        if scale is None:
            yield from self._scale
        else:
            for vid, s in self._scale.items():
                if s == scale:
                    yield vid

    def vertices(self, scale: Optional[int] = None) -> List[int]:
        return list(self.vertices_iter(scale))

    def nb_vertices(self, scale: Optional[int] = None) -> int:
        if scale is None:
            return len(self._scale)
        return sum(1 for _ in self.vertices_iter(scale))

    def has_vertex(self, vid: int) -> bool:
        return vid in self._scale

    # --- edges and roots ---

    def edges_iter(self, scale: Optional[int] = None) -> Iterator[Edge]:
        """Iterate over (parent, child) pairs.

        With *scale*, only pairs whose parent lies at that scale are kept.
        """
        for child, parent in self.tree.parents.items():
            if parent is None:
                continue
            if scale is None or self._scale.get(parent) == scale:
                yield parent, child

    def edges(self, scale: Optional[int] = None) -> List[Edge]:
        return list(self.edges_iter(scale))

    def roots_iter(self, scale: int = ROOT_SCALE) -> Iterator[int]:
        """Iterate over the parentless vertices of *scale*."""
        for vid in self.vertices_iter(scale):
            if self.tree.parent(vid) is None:
                yield vid

    def roots(self, scale: int = ROOT_SCALE) -> List[int]:
        return list(self.roots_iter(scale))

    # --- complex ---

    def _resolve_complex(self, vid: int) -> Optional[int]:
        complex_id = self._complex.get(vid)
        while complex_id is None:
            vid = self.tree.parent(vid)
            if vid is None:
                return None
            complex_id = self._complex.get(vid)
        return complex_id

    def complex(self, vid: int) -> Optional[int]:
        """Return the complex of *vid*, or None if it has none.

        The direct entry is used when present, otherwise the nearest
        ancestor's entry.  Raises VertexNotFoundError if *vid* is not in
        the MTG.
        """
        self._require(vid)
        return self._resolve_complex(vid)

    def complex_at_scale(self, vid: int, scale: int) -> int:
        """Return the complex of *vid* at the coarser (or equal) *scale*.

        Climbs one scale per step, scale(vid) - scale steps in total.

        Raises
        ------
        VertexNotFoundError
            If *vid* is not in the MTG.
        InvalidScaleQueryError
            If *scale* is negative or finer than scale(vid), or if the chain
            of complexes ends before reaching *scale*.
        """
        current = self._require(vid)
        if scale > current:
            raise InvalidScaleQueryError(
                vid, scale, f"target is finer than the vertex scale {current}"
            )
        if scale < 0:
            raise InvalidScaleQueryError(vid, scale, "scales are non-negative")

        complex_id = vid
        for _ in range(current - scale):
            nxt = self._resolve_complex(complex_id)
            if nxt is None:
                raise InvalidScaleQueryError(
                    vid, scale, f"vertex {complex_id} has no complex"
                )
            complex_id = nxt
        return complex_id

    # --- components ---

    def component_roots_iter(self, vid: int) -> Iterator[int]:
        """Iterate over the roots of the trees that compose *vid*."""
        for c in self._components.get(vid, ()):
            p = self.tree.parent(c)
            if p is None or self._resolve_complex(p) != vid:
                yield c

    def component_roots(self, vid: int) -> List[int]:
        self._require(vid)
        return list(self.component_roots_iter(vid))

    def components_iter(self, vid: int) -> Iterator[int]:
        """Iterate over the components of *vid*, tree by tree, in post-order.

        Raises VertexNotFoundError (eagerly) if *vid* is not in the MTG.
        """
        self._require(vid)
        return self._iter_components(vid)

    def _iter_components(self, vid: int) -> Iterator[int]:
        for root in self.component_roots_iter(vid):
            yield from post_order(self, root, complex_id=vid)

    def components(self, vid: int) -> List[int]:
        return list(self.components_iter(vid))

    def nb_components(self, vid: int) -> int:
        return sum(1 for _ in self.components_iter(vid))

    # --- edition ---

    def add_child(self, parent_id: int, child_id: Optional[int] = None) -> int:
        """Add (or move) *child_id* under *parent_id*, at the parent's scale.

        Returns the child id, allocated when *child_id* is None.
        """
        scale = self._require(parent_id)
        if child_id is not None and self._scale.get(child_id, scale) != scale:
            raise StructuralPreconditionError(
                f"cannot attach vertex {child_id!r} of scale {self._scale[child_id]} "
                f"under scale {scale}"
            )
        child_id = self.tree.add_child(parent_id, child_id)
        self._scale[child_id] = scale
        return child_id

    def add_component(self, complex_id: int, component_id: Optional[int] = None) -> int:
        """Register *component_id* as a component of *complex_id*.

        A new (or omitted) id becomes a parentless vertex one scale finer
        than *complex_id*.  An existing vertex must already sit at that
        scale and have no other explicit complex.  Returns the component id.
        """
        scale = self._require(complex_id) + 1
        if component_id is not None and component_id in self.tree:
            if self._scale.get(component_id, scale) != scale:
                raise StructuralPreconditionError(
                    f"component {component_id!r} must lie at scale {scale}, one finer than its complex"
                )
            if self._complex.get(component_id, complex_id) != complex_id:
                raise StructuralPreconditionError(
                    f"vertex {component_id!r} is already a component of "
                    f"{self._complex[component_id]!r}"
                )
        else:
            component_id = self.tree.add_vertex(component_id)

        self._scale[component_id] = scale
        self._complex[component_id] = complex_id
        comps = self._components.setdefault(complex_id, [])
        if component_id not in comps:
            comps.append(component_id)
        logger.debug("vertex %d is a component of %d (scale %d)", component_id, complex_id, scale)
        return component_id

    def add_child_and_complex(
        self,
        parent_id: int,
        child_id: Optional[int] = None,
        complex_id: Optional[int] = None,
    ) -> int:
        """Add a child under *parent_id*, possibly in another complex.

        If *complex_id* differs from the parent's complex, the child starts a
        new decomposition: it records *complex_id* explicitly and becomes a
        component root of it.
        """
        if complex_id is None:
            return self.add_child(parent_id, child_id)

        scale = self._require(parent_id)
        complex_scale = self._require(complex_id)
        if complex_scale != scale - 1:
            raise StructuralPreconditionError(
                f"complex {complex_id!r} lies at scale {complex_scale}, expected {scale - 1}"
            )
        if child_id is not None and self._complex.get(child_id, complex_id) != complex_id:
            raise StructuralPreconditionError(
                f"vertex {child_id!r} is already a component of {self._complex[child_id]!r}"
            )

        child_id = self.add_child(parent_id, child_id)
        if self._resolve_complex(parent_id) != complex_id:
            self._complex[child_id] = complex_id
            comps = self._components.setdefault(complex_id, [])
            if child_id not in comps:
                comps.append(child_id)
            logger.debug("vertex %d starts a new component of %d", child_id, complex_id)
        return child_id
