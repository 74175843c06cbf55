"""Translate theme.py constants into matplotlib rcParams."""

import matplotlib as mpl
import matplotlib.pyplot as plt

from .theme import COLORS, COLOR_CYCLE, FONTS, LAYOUT, SPRING


def _canvas() -> dict:
    return {
        "figure.figsize": LAYOUT["figsize"],
        "figure.dpi": LAYOUT["dpi"],
        "figure.facecolor": COLORS["bg"],
        "savefig.dpi": LAYOUT["dpi"],
        "savefig.facecolor": COLORS["bg"],
        "savefig.bbox": "tight",
        "font.family": "sans-serif",
        "font.sans-serif": FONTS["sans"],
        "font.size": LAYOUT["tick_size"],
    }


def _axes() -> dict:
    # No grid: the coils themselves fill the plot area
    return {
        "axes.facecolor": COLORS["bg"],
        "axes.edgecolor": COLORS["border"],
        "axes.linewidth": LAYOUT["spine_width"],
        "axes.titlesize": LAYOUT["title_size"],
        "axes.titleweight": "bold",
        "axes.titlecolor": COLORS["text"],
        "axes.labelsize": LAYOUT["label_size"],
        "axes.labelcolor": COLORS["text"],
        "axes.prop_cycle": mpl.cycler(color=COLOR_CYCLE),
        "axes.spines.top": False,
        "axes.spines.right": False,
        "axes.grid": False,
        "axes.xmargin": LAYOUT["margin"],
        "axes.ymargin": LAYOUT["margin"],
        "xtick.labelsize": LAYOUT["tick_size"],
        "ytick.labelsize": LAYOUT["tick_size"],
        "xtick.color": COLORS["muted"],
        "ytick.color": COLORS["muted"],
    }


def _springs() -> dict:
    return {
        "lines.linewidth": SPRING["line_width"],
        "lines.solid_capstyle": SPRING["capstyle"],
        "lines.solid_joinstyle": SPRING["joinstyle"],
        "legend.frameon": True,
        "legend.facecolor": COLORS["surface"],
        "legend.edgecolor": COLORS["border"],
        "legend.framealpha": LAYOUT["legend_alpha"],
        "legend.fontsize": LAYOUT["tick_size"],
        "legend.handlelength": LAYOUT["legend_key_length"],
        "legend.handleheight": LAYOUT["legend_key_height"],
    }


STYLE: dict = {**_canvas(), **_axes(), **_springs()}


def apply() -> None:
    """Apply the spring chart style to matplotlib globally."""
    plt.rcParams.update(STYLE)
