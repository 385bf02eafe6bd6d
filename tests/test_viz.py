"""Tests for mtgtools.viz (Agg backend, nothing shown)."""
import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt

from mtgtools.mtg.graph import MTG
from mtgtools.viz.draw import draw_scale
from mtgtools.viz.layouts import tree_layout
from mtgtools.io.nx import mtg_to_nx


def _mtg():
    g = MTG()
    g.add_child(0, 1)
    g.add_component(0, 10)
    g.add_child(10, 11)
    g.add_child(10, 12)
    return g


def test_tree_layout_layers():
    pos = tree_layout(mtg_to_nx(_mtg(), scale=1))
    assert pos[10][1] == 0.0
    assert pos[11][1] == pos[12][1] == -1.0
    # parent centered above its children
    assert pos[10][0] == (pos[11][0] + pos[12][0]) / 2


def test_draw_scale_saves_png(tmp_path):
    out = tmp_path / "scale1.png"
    H = draw_scale(_mtg(), 1, save_path=str(out))
    assert set(H.nodes) == {10, 11, 12}
    assert out.exists()


def test_draw_scale_on_given_axes():
    fig, ax = plt.subplots()
    H = draw_scale(_mtg(), 0, ax=ax)
    assert set(H.nodes) == {0, 1}
    assert ax.get_title().startswith("scale 0")
    plt.close(fig)


def test_draw_scale_too_large():
    fig, ax = plt.subplots()
    draw_scale(_mtg(), 1, ax=ax, max_nodes_to_draw=1)
    assert any("Too large" in t.get_text() for t in ax.texts)
    plt.close(fig)
