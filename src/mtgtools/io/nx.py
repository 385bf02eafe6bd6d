"""NetworkX views of a tree or MTG.

Node attribute dicts of the returned graphs can serve as the per-vertex
property table that the core structures do not store.
"""
from __future__ import annotations

from typing import Optional

import networkx as nx

from mtgtools.mtg.graph import MTG
from mtgtools.tree.rooted import RootedTree


def tree_to_nx(tree: RootedTree) -> nx.DiGraph:
    """
    Return a DiGraph with one node per vertex and parent -> child edges.
    Children are added in their insertion order.
    """
    G = nx.DiGraph()
    G.add_nodes_from(tree)
    for vid in tree:
        for child in tree.children(vid):
            G.add_edge(vid, child)
    return G


def mtg_to_nx(g: MTG, scale: Optional[int] = None) -> nx.DiGraph:
    """
    Return a DiGraph of the MTG vertices (all, or those of one scale).

    Node attributes:
      scale:   the vertex scale
      complex: the resolved complex, or None
    Edges are the parent -> child pairs whose endpoints are both kept.
    """
    G = nx.DiGraph()
    for vid in g.vertices_iter(scale):
        G.add_node(vid, scale=g.scale(vid), complex=g.complex(vid))
    for parent, child in g.edges_iter(scale):
        if child in G:
            G.add_edge(parent, child)
    return G


def scale_quotient_nx(g: MTG, scale: int) -> nx.DiGraph:
    """
    Graph of one scale whose edges join vertices of *scale* to their
    children at the same scale, plus a `components` node attribute holding
    the finer-scale vertices each one decomposes into.
    """
    G = mtg_to_nx(g, scale)
    for vid in G.nodes:
        G.nodes[vid]["components"] = g.components(vid)
    return G
