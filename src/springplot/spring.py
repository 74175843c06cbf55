"""Spring path generation: two endpoints in, a coil polyline out."""

from __future__ import annotations

import logging
import math
import numbers

import numpy as np
from numpy.typing import ArrayLike

from .errors import InvalidParameter
from .theme import SPRING

logger = logging.getLogger(__name__)

# Never emit a single-point path, even when start == end
MIN_POINTS = 2


def check_tension(tension: float) -> None:
    """Raise InvalidParameter unless ``tension`` is strictly positive."""
    if not tension > 0:
        raise InvalidParameter(f"`tension` must be larger than zero, got {tension!r}")


def check_points_per_revolution(n: int) -> None:
    """Raise InvalidParameter unless ``n`` is a positive integer."""
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise InvalidParameter(f"`n` must be an integer, got {n!r}")
    if n <= 0:
        raise InvalidParameter(f"`n` must be larger than zero, got {n!r}")


def check_diameter(diameter: float) -> None:
    """Raise InvalidParameter for a zero or non-finite ``diameter``."""
    # Negative diameters draw an inverted coil; only zero is undefined
    if diameter == 0 or not math.isfinite(diameter):
        raise InvalidParameter(f"`diameter` must be finite and non-zero, got {diameter!r}")


def check_endpoint(name: str, point: tuple[float, float]) -> None:
    """Raise InvalidParameter if either coordinate of ``point`` is not finite."""
    if not all(math.isfinite(v) for v in point):
        raise InvalidParameter(f"`{name}` must have finite coordinates, got {point!r}")


def spring_point_count(length: float, diameter: float, tension: float, n: int) -> int:
    """Number of points used for a spring spanning ``length``.

    The sign of ``diameter`` only flips the coil, so it does not change
    the count.
    """
    revolutions = abs(length / (diameter * tension))
    return max(MIN_POINTS, math.ceil(n * revolutions))


def generate_spring(
    start: ArrayLike,
    end: ArrayLike,
    diameter: float = SPRING["diameter"],
    tension: float = SPRING["tension"],
    n: int = SPRING["n"],
) -> np.ndarray:
    """Sample a coil running from ``start`` to ``end``.

    The coil's center moves linearly between the endpoints while a circle
    of radius ``diameter / 2`` sweeps ``length / (diameter * tension)``
    revolutions around it. Larger ``tension`` or ``diameter`` means fewer
    turns for the same distance.

    Args:
        start: ``(x, y)`` of the first endpoint.
        end: ``(x, y)`` of the second endpoint.
        diameter: Coil width in data units.
        tension: How loosely the coil winds. Must be > 0.
        n: Points sampled per revolution. Must be a positive integer.

    Returns:
        A read-only ``(N, 2)`` float array, ``N >= 2``.

    Raises:
        InvalidParameter: if ``tension``, ``n``, ``diameter`` or an endpoint
            coordinate is invalid.
    """
    check_tension(tension)
    check_points_per_revolution(n)
    check_diameter(diameter)

    x0, y0 = (float(v) for v in start)
    x1, y1 = (float(v) for v in end)
    check_endpoint("start", (x0, y0))
    check_endpoint("end", (x1, y1))

    length = math.hypot(x1 - x0, y1 - y0)
    revolutions = length / (diameter * tension)
    count = spring_point_count(length, diameter, tension, n)
    radius = diameter / 2

    t = np.linspace(0.0, revolutions * 2 * np.pi, count)
    cx = np.linspace(x0, x1, count)
    cy = np.linspace(y0, y1, count)

    points = np.column_stack((np.cos(t) * radius + cx, np.sin(t) * radius + cy))
    points.flags.writeable = False

    logger.debug(
        "spring (%g, %g) -> (%g, %g): %.3f revolutions, %d points",
        x0, y0, x1, y1, revolutions, count,
    )
    return points
