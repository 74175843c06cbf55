"""Convenience chart functions: spring(), figure(), save()."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt
from matplotlib.lines import Line2D
from numpy.typing import ArrayLike

from .layer import SpringLayer
from .style import apply
from .theme import COLOR_CYCLE, SPRING

logger = logging.getLogger(__name__)

Table = Mapping[str, ArrayLike]


def _charts_dir() -> Path:
    """Default output directory: $SPRINGPLOT_CHARTS_DIR or ./charts."""
    return Path(os.environ.get("SPRINGPLOT_CHARTS_DIR", Path.cwd() / "charts"))


def _ensure_style() -> None:
    apply()


def figure(
    figsize: tuple[float, float] | None = None,
) -> tuple[plt.Figure, plt.Axes]:
    """Create a styled (fig, ax) pair. Escape hatch for custom charts."""
    _ensure_style()
    fig, ax = plt.subplots(figsize=figsize)
    return fig, ax


def save(
    fig: plt.Figure,
    filename: str,
    output_dir: str | Path | None = None,
) -> Path:
    """Save a figure to the charts directory (or a custom directory).

    Returns the path to the saved file.
    """
    dest = Path(output_dir) if output_dir else _charts_dir()
    dest.mkdir(parents=True, exist_ok=True)
    path = dest / filename
    fig.savefig(path)
    plt.close(fig)
    logger.info("saved chart to %s", path)
    return path


def _is_series(data: Mapping[str, Any]) -> bool:
    return bool(data) and all(isinstance(v, Mapping) for v in data.values())


def spring(
    data: Table | dict[str, Table],
    *,
    title: str | None = None,
    xlabel: str | None = None,
    ylabel: str | None = None,
    filename: str | None = None,
    output_dir: str | Path | None = None,
    figsize: tuple[float, float] | None = None,
    n: int = SPRING["n"],
    diameter: float | None = None,
    tension: float | None = None,
    **kwargs: Any,
) -> tuple[plt.Figure, plt.Axes]:
    """Spring chart. Pass a dict of {label: table} for multiple series.

    A table maps column names to equal-length values and must hold
    ``x``, ``y``, ``xend`` and ``yend``; ``diameter``, ``tension``,
    ``color`` and ``linewidth`` columns are optional.
    """
    layer = SpringLayer(n=n, diameter=diameter, tension=tension, **kwargs)
    fig, ax = figure(figsize=figsize)

    if _is_series(data):
        handles = []
        for i, (label, table) in enumerate(data.items()):
            color = COLOR_CYCLE[i % len(COLOR_CYCLE)]
            collection = layer.draw(ax, table, color=color, label=label)
            # A per-row color column wins over the cycle; the key follows the lines
            drawn = collection.get_colors()
            handles.append(Line2D(
                [], [],
                color=tuple(drawn[0]) if len(drawn) else color,
                linewidth=collection.get_linewidths()[0],
                label=label,
            ))
        handler = layer.legend_handler()
        ax.legend(handles=handles, handler_map={h: handler for h in handles})
    else:
        layer.draw(ax, data)

    if title:
        ax.set_title(title)
    if xlabel:
        ax.set_xlabel(xlabel)
    if ylabel:
        ax.set_ylabel(ylabel)

    if filename:
        save(fig, filename, output_dir)

    return fig, ax
