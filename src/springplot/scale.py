"""Continuous scale for the tension aesthetic."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from .errors import InvalidParameter
from .theme import SPRING


def rescale_tension(
    values: ArrayLike,
    output_range: tuple[float, float] = SPRING["tension_range"],
) -> np.ndarray:
    """Map raw tension values linearly onto ``output_range``.

    A constant input maps to the middle of ``output_range``.
    """
    low, high = output_range
    if not low > 0 or not high > 0:
        raise InvalidParameter(f"tension range must be strictly positive, got {output_range!r}")

    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        return arr.copy()

    vmin, vmax = np.nanmin(arr), np.nanmax(arr)
    if vmax == vmin:
        return np.full_like(arr, (low + high) / 2)
    return low + (arr - vmin) / (vmax - vmin) * (high - low)
