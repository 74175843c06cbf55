"""Turn a table of endpoint rows into one concatenated table of spring paths."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from .errors import InvalidParameter, MissingAesthetic
from .spring import check_points_per_revolution, check_tension, generate_spring
from .theme import SPRING

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("x", "y", "xend", "yend")
SHAPE_COLUMNS = ("diameter", "tension")


def _as_columns(data: Mapping[str, ArrayLike]) -> dict[str, np.ndarray]:
    columns = {name: np.atleast_1d(np.asarray(values)) for name, values in data.items()}
    lengths = {name: len(values) for name, values in columns.items()}
    if len(set(lengths.values())) > 1:
        raise InvalidParameter(f"columns must have equal lengths, got {lengths}")
    return columns


def _row_count(columns: Mapping[str, np.ndarray]) -> int:
    return len(next(iter(columns.values()))) if columns else 0


def fill_defaults(
    data: Mapping[str, ArrayLike],
    *,
    diameter: float | None = None,
    tension: float | None = None,
) -> dict[str, np.ndarray]:
    """Validate required columns and add any missing shape columns.

    Keyword values win over theme defaults; columns already present in
    ``data`` are left as they are.
    """
    columns = _as_columns(data)
    missing = [name for name in REQUIRED_COLUMNS if name not in columns]
    if missing:
        raise MissingAesthetic(f"springs require the columns: {', '.join(missing)}")

    rows = _row_count(columns)
    defaults = {
        "diameter": SPRING["diameter"] if diameter is None else diameter,
        "tension": SPRING["tension"] if tension is None else tension,
    }
    for name in SHAPE_COLUMNS:
        if name not in columns:
            columns[name] = np.full(rows, defaults[name], dtype=float)
    return columns


def spring_paths(
    data: Mapping[str, ArrayLike],
    *,
    n: int = SPRING["n"],
    diameter: float | None = None,
    tension: float | None = None,
    generator: Callable[..., np.ndarray] = generate_spring,
) -> dict[str, np.ndarray]:
    """Compute one spring per row and stack them.

    Returns columns ``x``, ``y`` and ``group`` (the source row index), plus
    every non-positional input column repeated once per point.
    """
    check_points_per_revolution(n)
    if tension is not None:
        check_tension(tension)

    columns = fill_defaults(data, diameter=diameter, tension=tension)
    carried = [
        name for name in columns
        if name not in REQUIRED_COLUMNS and name not in SHAPE_COLUMNS
    ]

    paths: list[np.ndarray] = []
    for i in range(_row_count(columns)):
        paths.append(generator(
            (columns["x"][i], columns["y"][i]),
            (columns["xend"][i], columns["yend"][i]),
            diameter=float(columns["diameter"][i]),
            tension=float(columns["tension"][i]),
            n=n,
        ))

    sizes = np.array([len(p) for p in paths], dtype=int)
    out: dict[str, Any] = {}
    if paths:
        stacked = np.concatenate(paths)
        out["x"] = stacked[:, 0]
        out["y"] = stacked[:, 1]
    else:
        out["x"] = np.empty(0)
        out["y"] = np.empty(0)
    out["group"] = np.repeat(np.arange(len(paths)), sizes)
    for name in carried + list(SHAPE_COLUMNS):
        out[name] = np.repeat(columns[name], sizes)

    logger.debug("computed %d springs, %d points", len(paths), int(sizes.sum()))
    return out


def split_groups(paths: Mapping[str, np.ndarray]) -> list[np.ndarray]:
    """Split stacked spring columns back into one ``(N, 2)`` array per group."""
    group = np.asarray(paths["group"])
    if group.size == 0:
        return []
    xy = np.column_stack((paths["x"], paths["y"]))
    # Groups are contiguous and ascending, so boundaries are where it changes
    cuts = np.flatnonzero(np.diff(group)) + 1
    return np.split(xy, cuts)


def first_per_group(paths: Mapping[str, np.ndarray], name: str) -> np.ndarray:
    """Value of column ``name`` at the first point of each group."""
    group = np.asarray(paths["group"])
    if group.size == 0:
        return np.asarray(paths[name])[:0]
    starts = np.concatenate(([0], np.flatnonzero(np.diff(group)) + 1))
    return np.asarray(paths[name])[starts]
