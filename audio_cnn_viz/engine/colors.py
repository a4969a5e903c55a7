"""
Diverging Color Mapper
======================
Maps a normalized scalar in [-1, 1] to an RGB triple.

Negative values fade from white towards the warm anchor, positive values
towards the cool anchor. The scale is symmetric: ``get_color(-x)`` is
``get_color(x)`` with the red and blue channels swapped. Inputs outside
[-1, 1] are linearly extrapolated, not clamped.
"""
from __future__ import annotations

import numpy as np


RGB = tuple[int, int, int]

WARM_RGB: RGB = (255, 128, 51)
NEUTRAL_RGB: RGB = (255, 255, 255)
COOL_RGB: RGB = (51, 128, 255)

_NEUTRAL = np.array(NEUTRAL_RGB, dtype=np.float64)
_WARM = np.array(WARM_RGB, dtype=np.float64)
_COOL = np.array(COOL_RGB, dtype=np.float64)


def color_array(normalized: np.ndarray) -> np.ndarray:
    """
    Vectorized color mapping.

    Parameters
    ----------
    normalized : np.ndarray
        Any-shape array of values, expected in [-1, 1].

    Returns
    -------
    np.ndarray
        ``normalized.shape + (3,)`` int64 array of RGB channels.
    """
    values = np.asarray(normalized, dtype=np.float64)[..., None]
    anchor = np.where(values >= 0, _COOL, _WARM)
    t = np.abs(values)
    channels = _NEUTRAL + (anchor - _NEUTRAL) * t
    return np.rint(channels).astype(np.int64)


def get_color(value: float) -> RGB:
    """Map one normalized value to ``(r, g, b)``."""
    r, g, b = color_array(np.float64(value))
    return int(r), int(g), int(b)


def rgb_string(color: RGB) -> str:
    """CSS ``rgb(...)`` notation."""
    r, g, b = color
    return f"rgb({r}, {g}, {b})"
