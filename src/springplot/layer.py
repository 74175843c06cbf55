"""Spring layer: wires the path generator into matplotlib drawing.

The layer exposes three hooks, ``setup_params``, ``setup_data`` and
``draw``. The generator and the stroke routine are plain callables so a
different host (or a test) can swap either one out.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.collections import LineCollection
from matplotlib.legend_handler import HandlerBase
from matplotlib.lines import Line2D
from numpy.typing import ArrayLike

from .paths import stroke_paths
from .spring import check_diameter, check_points_per_revolution, check_tension, generate_spring
from .stat import fill_defaults, first_per_group, split_groups, spring_paths
from .theme import SPRING

logger = logging.getLogger(__name__)


class HandlerSpring(HandlerBase):
    """Legend handler drawing a short horizontal spring as the key."""

    def __init__(
        self,
        revolutions: float = SPRING["key_revolutions"],
        n: int = SPRING["key_n"],
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.revolutions = revolutions
        self.n = n

    def create_artists(self, legend, orig_handle, xdescent, ydescent,
                       width, height, fontsize, trans):
        # Keep the coil narrower than the key so both ends stay apart
        diameter = min(0.8 * height, width / 2)
        if diameter <= 0:
            key = Line2D([-xdescent, width - xdescent], [height / 2 - ydescent] * 2)
        else:
            # Tension chosen so the key shows `revolutions` turns over its width
            tension = (width - diameter) / (diameter * self.revolutions)
            points = generate_spring(
                (diameter / 2 - xdescent, height / 2 - ydescent),
                (width - diameter / 2 - xdescent, height / 2 - ydescent),
                diameter=diameter,
                tension=tension,
                n=self.n,
            )
            key = Line2D(points[:, 0], points[:, 1])
        self.update_prop(key, orig_handle, legend)
        key.set_transform(trans)
        return [key]


class SpringLayer:
    """Draw one spring per data row on a matplotlib Axes."""

    def __init__(
        self,
        generator: Callable[..., np.ndarray] = generate_spring,
        stroke: Callable[..., LineCollection] = stroke_paths,
        *,
        n: int = SPRING["n"],
        diameter: float | None = None,
        tension: float | None = None,
        **style: Any,
    ) -> None:
        self.generator = generator
        self.stroke = stroke
        self.params = self.setup_params({"n": n, "diameter": diameter, "tension": tension})
        self.style = style

    def setup_params(self, params: Mapping[str, Any]) -> dict[str, Any]:
        """Fill unset shape parameters from the theme and validate them."""
        merged = {
            "n": SPRING["n"],
            "diameter": SPRING["diameter"],
            "tension": SPRING["tension"],
        }
        merged.update({k: v for k, v in params.items() if v is not None})
        check_points_per_revolution(merged["n"])
        check_tension(merged["tension"])
        check_diameter(merged["diameter"])
        return merged

    def setup_data(self, data: Mapping[str, ArrayLike]) -> dict[str, np.ndarray]:
        """Check the required columns and add default diameter/tension columns."""
        return fill_defaults(
            data,
            diameter=self.params["diameter"],
            tension=self.params["tension"],
        )

    def compute(self, data: Mapping[str, ArrayLike]) -> dict[str, np.ndarray]:
        return spring_paths(
            self.setup_data(data),
            n=self.params["n"],
            generator=self.generator,
        )

    def draw(self, ax: plt.Axes, data: Mapping[str, ArrayLike], **style: Any) -> LineCollection:
        """Compute the springs for ``data`` and stroke them onto ``ax``.

        Per-row ``color`` and ``linewidth`` columns, when present, override
        the layer style for that spring.
        """
        paths = self.compute(data)
        kwargs = {**self.style, **style}
        if "color" in paths:
            kwargs["colors"] = list(first_per_group(paths, "color"))
        elif "color" in kwargs:
            kwargs["colors"] = kwargs.pop("color")
        kwargs.pop("color", None)
        if "linewidth" in paths:
            kwargs["linewidths"] = first_per_group(paths, "linewidth")
        elif "linewidth" in kwargs:
            kwargs["linewidths"] = kwargs.pop("linewidth")
        kwargs.pop("linewidth", None)
        kwargs.setdefault("linewidths", SPRING["line_width"])
        kwargs.setdefault("capstyle", SPRING["capstyle"])

        polylines = split_groups(paths)
        logger.debug("drawing %d springs", len(polylines))
        return self.stroke(ax, polylines, **kwargs)

    def legend_handler(self) -> HandlerSpring:
        return HandlerSpring()
