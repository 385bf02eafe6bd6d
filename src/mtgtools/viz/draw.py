from __future__ import annotations

import logging

import networkx as nx
import matplotlib.pyplot as plt

from mtgtools import config
from mtgtools.io.nx import mtg_to_nx
from mtgtools.mtg.graph import MTG
from .layouts import base_layout

logger = logging.getLogger(__name__)


def draw_scale(
    g: MTG,
    scale: int,
    *,
    ax=None,
    seed: int | None = None,
    node_size: int = 300,
    edge_width: float = 1.2,
    with_labels: bool = True,
    max_nodes_to_draw: int | None = None,
    save_path: str | None = None,
) -> nx.DiGraph:
    """
    Draw the vertices of one scale and their parent -> child edges,
    one color per complex.

    If ax is None a new figure is created; it is saved to save_path when
    given, shown otherwise.  Returns the graph that was drawn.
    seed and max_nodes_to_draw default to the MTGTOOLS_LAYOUT_SEED and
    MTGTOOLS_MAX_NODES_TO_DRAW environment settings.
    """
    if seed is None:
        seed = config.env_int(config.MTGTOOLS_LAYOUT_SEED, config.DEFAULT_LAYOUT_SEED)
    if max_nodes_to_draw is None:
        max_nodes_to_draw = config.env_int(
            config.MTGTOOLS_MAX_NODES_TO_DRAW, config.DEFAULT_MAX_NODES_TO_DRAW
        )

    H = mtg_to_nx(g, scale)

    own_fig = ax is None
    if own_fig:
        fig, ax = plt.subplots(figsize=(8, 6))
    else:
        fig = ax.figure

    ax.set_title(f"scale {scale}   |V|={H.number_of_nodes()}  |E|={H.number_of_edges()}")
    ax.set_axis_off()

    if H.number_of_nodes() <= max_nodes_to_draw:
        complexes = sorted({c for _, c in H.nodes(data="complex") if c is not None})
        index = {c: i + 1 for i, c in enumerate(complexes)}
        colors = [index.get(c, 0) for _, c in H.nodes(data="complex")]
        nx.draw_networkx(
            H,
            pos=base_layout(H, seed=seed),
            ax=ax,
            with_labels=with_labels,
            node_size=node_size,
            width=edge_width,
            node_color=colors,
            cmap=plt.cm.tab10,
            vmin=0,
            vmax=max(len(complexes), 1),
        )
    else:
        logger.info("scale %d has %d vertices, not drawn", scale, H.number_of_nodes())
        ax.text(
            0.5,
            0.5,
            f"Too large to draw\n(|V|={H.number_of_nodes()})",
            ha="center",
            va="center",
            transform=ax.transAxes,
        )

    if own_fig:
        plt.tight_layout()
        if save_path:
            plt.savefig(save_path, dpi=200)
            plt.close(fig)
        else:
            plt.show()

    return H
