"""Tests for batch spring computation and the tension scale."""

import numpy as np
import pytest

from springplot.errors import InvalidParameter, MissingAesthetic
from springplot.scale import rescale_tension
from springplot.spring import generate_spring
from springplot.stat import fill_defaults, first_per_group, spring_paths, split_groups
from springplot.theme import SPRING


def _rows():
    return {
        "x": [0.0, 5.0],
        "y": [0.0, 1.0],
        "xend": [10.0, 5.0],
        "yend": [0.0, 4.0],
        "color": ["red", "blue"],
    }


def test_one_group_per_row() -> None:
    paths = spring_paths(_rows())
    first = generate_spring((0, 0), (10, 0))
    second = generate_spring((5, 1), (5, 4))

    assert set(np.unique(paths["group"])) == {0, 1}
    assert len(paths["x"]) == len(first) + len(second)

    pieces = split_groups(paths)
    assert len(pieces) == 2
    assert np.array_equal(pieces[0], first)
    assert np.array_equal(pieces[1], second)


def test_extra_columns_carried_per_point() -> None:
    paths = spring_paths(_rows())
    assert list(first_per_group(paths, "color")) == ["red", "blue"]
    assert len(paths["color"]) == len(paths["x"])
    assert np.all(paths["tension"] == SPRING["tension"])


def test_row_shape_columns_override_keywords() -> None:
    rows = _rows()
    rows["tension"] = [0.5, 2.0]
    paths = spring_paths(rows, tension=1.0, diameter=0.4)
    assert list(first_per_group(paths, "tension")) == [0.5, 2.0]
    assert np.all(paths["diameter"] == 0.4)

    expected = generate_spring((0, 0), (10, 0), diameter=0.4, tension=0.5)
    assert np.array_equal(split_groups(paths)[0], expected)


def test_missing_required_column() -> None:
    rows = _rows()
    del rows["yend"]
    with pytest.raises(MissingAesthetic, match="yend"):
        spring_paths(rows)


def test_unequal_columns_rejected() -> None:
    rows = _rows()
    rows["x"] = [0.0]
    with pytest.raises(InvalidParameter):
        fill_defaults(rows)


def test_n_validated_before_rows() -> None:
    calls = []

    def generator(*args, **kwargs):
        calls.append(args)
        return generate_spring(*args, **kwargs)

    with pytest.raises(InvalidParameter):
        spring_paths(_rows(), n=0, generator=generator)
    assert calls == []


def test_bad_row_tension_raises() -> None:
    rows = _rows()
    rows["tension"] = [0.75, 0.0]
    with pytest.raises(InvalidParameter, match="tension"):
        spring_paths(rows)


def test_empty_table() -> None:
    paths = spring_paths({"x": [], "y": [], "xend": [], "yend": []})
    assert len(paths["x"]) == 0
    assert len(paths["group"]) == 0
    assert split_groups(paths) == []


def test_rescale_tension_linear() -> None:
    out = rescale_tension([0, 5, 10], output_range=(0.1, 1.0))
    assert out == pytest.approx([0.1, 0.55, 1.0])


def test_rescale_tension_constant_maps_to_midpoint() -> None:
    out = rescale_tension([3, 3, 3], output_range=(0.2, 0.6))
    assert out == pytest.approx([0.4, 0.4, 0.4])


def test_rescale_tension_rejects_non_positive_range() -> None:
    with pytest.raises(InvalidParameter):
        rescale_tension([1, 2], output_range=(0.0, 1.0))
