"""Stroke arbitrary polylines onto an Axes as a single collection."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.collections import LineCollection
from numpy.typing import ArrayLike


def stroke_paths(
    ax: plt.Axes,
    polylines: Sequence[ArrayLike],
    *,
    colors: Any = None,
    linewidths: Any = None,
    linestyle: str = "solid",
    capstyle: str = "round",
    alpha: float | None = None,
    label: str | None = None,
    zorder: float | None = None,
) -> LineCollection:
    """Add ``polylines`` to ``ax`` and rescale the view to include them.

    ``colors`` and ``linewidths`` may be a single value or one per polyline.
    """
    segments = [np.asarray(p, dtype=float) for p in polylines]
    collection = LineCollection(
        segments,
        colors=colors,
        linewidths=linewidths,
        linestyles=linestyle,
        capstyle=capstyle,
        alpha=alpha,
        label=label,
    )
    if zorder is not None:
        collection.set_zorder(zorder)

    ax.add_collection(collection)
    if segments:
        ax.autoscale_view()
    return collection
