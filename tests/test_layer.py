"""Tests for the spring layer, polyline stroking and the legend key."""

import matplotlib.pyplot as plt
import numpy as np
import pytest
from matplotlib.collections import LineCollection
from matplotlib.lines import Line2D
from matplotlib.transforms import IdentityTransform

from springplot.errors import InvalidParameter, MissingAesthetic
from springplot.layer import HandlerSpring, SpringLayer
from springplot.paths import stroke_paths
from springplot.spring import generate_spring
from springplot.theme import SPRING

ROWS = {"x": [0, 2], "y": [0, 0], "xend": [1, 2], "yend": [0, 3]}


def test_setup_params_fills_theme_defaults() -> None:
    layer = SpringLayer()
    assert layer.params == {
        "n": SPRING["n"],
        "diameter": SPRING["diameter"],
        "tension": SPRING["tension"],
    }


@pytest.mark.parametrize("params", [{"tension": 0}, {"n": 0}, {"diameter": 0}])
def test_setup_params_validates(params) -> None:
    with pytest.raises(InvalidParameter):
        SpringLayer(**params)


def test_setup_data_requires_columns() -> None:
    with pytest.raises(MissingAesthetic):
        SpringLayer().setup_data({"x": [0], "y": [0]})


def test_setup_data_adds_shape_columns() -> None:
    data = SpringLayer(diameter=0.3).setup_data(ROWS)
    assert list(data["diameter"]) == [0.3, 0.3]
    assert list(data["tension"]) == [SPRING["tension"]] * 2


def test_draw_uses_injected_dependencies() -> None:
    generated = []
    stroked = {}

    def generator(start, end, **kwargs):
        generated.append((start, end, kwargs))
        return generate_spring(start, end, **kwargs)

    def stroke(ax, polylines, **kwargs):
        stroked["polylines"] = polylines
        stroked["kwargs"] = kwargs
        return LineCollection([])

    layer = SpringLayer(generator=generator, stroke=stroke, n=10, color="black")
    layer.draw(plt.gca(), ROWS)

    assert len(generated) == 2
    assert generated[0][2]["n"] == 10
    assert len(stroked["polylines"]) == 2
    assert stroked["kwargs"]["colors"] == "black"
    assert "color" not in stroked["kwargs"]


def test_draw_adds_collection_to_axes() -> None:
    fig, ax = plt.subplots()
    collection = SpringLayer(n=20).draw(ax, {**ROWS, "color": ["red", "blue"]})

    assert collection in ax.collections
    assert len(collection.get_segments()) == 2
    assert collection.get_colors() == pytest.approx(
        np.array([[1, 0, 0, 1], [0, 0, 1, 1]], dtype=float)
    )
    x0, x1 = ax.get_xlim()
    xs = np.concatenate([seg[:, 0] for seg in collection.get_segments()])
    assert x0 <= xs.min() and x1 >= xs.max()


def test_stroke_paths_empty() -> None:
    fig, ax = plt.subplots()
    collection = stroke_paths(ax, [])
    assert collection.get_segments() == []


def test_stroke_paths_label_and_style() -> None:
    fig, ax = plt.subplots()
    collection = stroke_paths(
        ax, [[(0, 0), (1, 1)]], colors="green", linewidths=2.5, label="a", zorder=4,
    )
    assert collection.get_label() == "a"
    assert collection.get_linewidths()[0] == 2.5
    assert collection.get_zorder() == 4


def test_legend_handler_draws_spring_key() -> None:
    fig, ax = plt.subplots()
    handle = Line2D([], [], color="purple", linewidth=3, label="spring")
    legend = ax.legend(handles=[handle], handler_map={handle: HandlerSpring()})
    fig.canvas.draw()

    keys = [a for a in legend.get_children()[0].findobj(Line2D) if len(a.get_xdata()) > 2]
    assert keys
    assert keys[0].get_color() == "purple"
    assert keys[0].get_linewidth() == 3


def test_legend_key_fits_narrow_box() -> None:
    """A key box narrower than its height still gets a short coil."""
    fig, ax = plt.subplots()
    handle = Line2D([], [], color="black", label="spring")
    legend = ax.legend(handles=[handle])
    width, height = 2.0, 7.0

    (key,) = HandlerSpring().create_artists(
        legend, handle, 0.0, 0.0, width, height, 10.0, IdentityTransform(),
    )

    xs = np.asarray(key.get_xdata())
    assert 2 < len(xs) < 100
    assert xs.min() >= -1e-9 and xs.max() <= width + 1e-9
