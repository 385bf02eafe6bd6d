"""Tests for mtgtools.tree module."""
import pytest

from mtgtools.errors import StructuralPreconditionError, VertexNotFoundError
from mtgtools.tree.rooted import RootedTree


def _snapshot(t):
    return dict(t.parents), {v: list(c) for v, c in t.children_map.items()}


# --- construction ---

def test_fresh_tree_has_only_root():
    t = RootedTree()
    assert t.count() == 1
    assert t.nb_vertices() == 1
    assert len(t) == 1
    assert list(t) == [0]
    assert t.parent(0) is None
    assert t.children(0) == []
    assert t.nb_children(0) == 0


# --- queries ---

def test_parent_of_absent_vertex_raises():
    t = RootedTree()
    with pytest.raises(VertexNotFoundError) as exc:
        t.parent(42)
    assert exc.value.vid == 42
    # also a KeyError, so mapping-style callers can catch it
    assert isinstance(exc.value, KeyError)


def test_children_and_nb_children_of_absent_vertex_raise():
    t = RootedTree()
    with pytest.raises(VertexNotFoundError):
        t.children(7)
    with pytest.raises(VertexNotFoundError):
        t.nb_children(7)


def test_children_returns_a_copy():
    t = RootedTree()
    t.add_child(0)
    kids = t.children(0)
    kids.append(99)
    assert t.children(0) == [1]


def test_children_keep_insertion_order():
    t = RootedTree()
    for vid in (5, 3, 9):
        t.add_child(0, vid)
    assert t.children(0) == [5, 3, 9]
    assert t.nb_children(0) == 3


def test_ancestors_and_is_ancestor():
    t = RootedTree()
    a = t.add_child(0)
    b = t.add_child(a)
    c = t.add_child(b)
    assert list(t.ancestors(c)) == [b, a, 0]
    assert t.is_ancestor(0, c)
    assert t.is_ancestor(c, c)
    assert not t.is_ancestor(c, a)


def test_read_only_views():
    t = RootedTree()
    with pytest.raises(TypeError):
        t.parents[3] = 0  # type: ignore[index]


# --- id allocation ---

def test_allocated_ids_are_distinct_and_new():
    t = RootedTree()
    seen = {0}
    for _ in range(50):
        before = set(t)
        vid = t.add_child(0)
        assert vid not in before
        assert vid not in seen
        seen.add(vid)
    assert t.count() == 51


def test_allocation_skips_externally_supplied_ids():
    t = RootedTree()
    t.add_child(0, 2)
    t.add_child(0, 3)
    assert t.add_child(0) == 1
    assert t.add_child(0) == 4


def test_allocation_is_monotonic():
    t = RootedTree()
    a = t.add_child(0)
    t.add_child(0, 100)
    b = t.add_child(0)
    assert b == a + 1


# --- add_child ---

def test_add_child_absent_parent_fails_without_mutation():
    t = RootedTree()
    t.add_child(0)
    before = _snapshot(t)
    with pytest.raises(StructuralPreconditionError):
        t.add_child(12)
    with pytest.raises(StructuralPreconditionError):
        t.add_child(12, 13)
    assert _snapshot(t) == before
    assert t.count() == 2


def test_add_child_with_new_id_inserts_leaf():
    t = RootedTree()
    assert t.add_child(0, 10) == 10
    assert t.parent(10) == 0
    assert t.children(10) == []


def test_add_child_rejects_negative_id():
    t = RootedTree()
    with pytest.raises(StructuralPreconditionError):
        t.add_child(0, -1)
    assert t.count() == 1


# --- re-parenting ---

def test_reparenting_law():
    t = RootedTree()
    old = t.add_child(0)
    new = t.add_child(0)
    child = t.add_child(old)
    grandchild = t.add_child(child)

    assert t.add_child(new, child) == child
    assert child not in t.children(old)
    assert t.children(new) == [child]
    assert t.parent(child) == new
    # the subtree follows
    assert t.parent(grandchild) == child
    assert t.count() == 5


def test_reparent_under_same_parent_moves_to_end():
    t = RootedTree()
    a = t.add_child(0)
    b = t.add_child(0)
    t.add_child(0, a)
    assert t.children(0) == [b, a]


def test_reparent_into_own_subtree_is_rejected():
    t = RootedTree()
    a = t.add_child(0)
    b = t.add_child(a)
    c = t.add_child(b)
    before = _snapshot(t)
    with pytest.raises(StructuralPreconditionError):
        t.add_child(c, a)
    with pytest.raises(StructuralPreconditionError):
        t.add_child(a, a)
    assert _snapshot(t) == before


def test_reparent_a_root():
    t = RootedTree()
    r = t.add_vertex()
    t.add_child(0, r)
    assert t.parent(r) == 0
    assert list(t.roots()) == [0]


# --- forest ---

def test_add_vertex_creates_new_root():
    t = RootedTree()
    r = t.add_vertex()
    assert r == 1
    assert t.parent(r) is None
    assert list(t.roots()) == [0, 1]
    assert t.add_vertex(20) == 20


def test_add_vertex_existing_id_fails():
    t = RootedTree()
    t.add_child(0, 4)
    with pytest.raises(StructuralPreconditionError):
        t.add_vertex(4)
    assert t.parent(4) == 0
