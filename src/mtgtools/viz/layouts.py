from __future__ import annotations

import networkx as nx


def tree_layout(G: nx.DiGraph) -> dict:
    """
    Layered layout for a directed forest:
      - y = -depth below the nearest root (in-degree 0)
      - leaves get consecutive x positions, internal nodes sit above the
        mean x of their children
    """
    roots = [v for v in G.nodes if G.in_degree(v) == 0]
    pos: dict = {}
    next_x = 0.0

    for root in roots:
        # iterative post-order so that children are placed before parents
        stack = [(root, 0, False)]
        while stack:
            node, d, expanded = stack.pop()
            kids = list(G.successors(node))
            if expanded or not kids:
                if kids:
                    x = sum(pos[k][0] for k in kids) / len(kids)
                else:
                    x = next_x
                    next_x += 1.0
                pos[node] = (x, -float(d))
                continue
            stack.append((node, d, True))
            for k in reversed(kids):
                stack.append((k, d + 1, False))
        next_x += 1.0

    return pos


def base_layout(G: nx.DiGraph, seed: int = 7) -> dict:
    """
    Use the layered tree layout when G is a forest, spring_layout otherwise.
    """
    if G.number_of_nodes() > 0 and nx.is_forest(G):
        return tree_layout(G)
    return nx.spring_layout(G, seed=seed, iterations=300)
