"""Oklab (Cartesian) <-> Oklch (polar). Hue is expressed in degrees here."""
import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import Triple
from ..types.constants import HUE_360


def oklab_to_oklch(l: float, a: float, b: float) -> Triple:
    """
    Output:
        l unchanged
        c = hypot(a, b) >= 0
        h in [0, 360), 0 for achromatic input
    """
    c = math.hypot(a, b)
    if c == 0.0:
        return l, 0.0, 0.0
    h = math.degrees(math.atan2(b, a))
    if h < 0.0:
        h += HUE_360
    if h >= HUE_360:
        h = 0.0
    return l, c, h


def oklch_to_oklab(l: float, c: float, h: float) -> Triple:
    rad = math.radians(h)
    return l, c * math.cos(rad), c * math.sin(rad)


def np_oklab_to_oklch(lab: NDArray) -> NDArray:
    """Vectorized: (..., 3) Oklab to (..., 3) Oklch with hue in degrees."""
    lab = np.asarray(lab, dtype=float)
    l, a, b = lab[..., 0], lab[..., 1], lab[..., 2]
    c = np.hypot(a, b)
    h = np.degrees(np.arctan2(b, a))
    h = np.where(h < 0.0, h + HUE_360, h)
    h = np.where((c == 0.0) | (h >= HUE_360), 0.0, h)
    return np.stack([l, c, h], axis=-1)


def np_oklch_to_oklab(lch: NDArray) -> NDArray:
    """Vectorized: (..., 3) Oklch with hue in degrees to (..., 3) Oklab."""
    lch = np.asarray(lch, dtype=float)
    l, c, h = lch[..., 0], lch[..., 1], np.radians(lch[..., 2])
    return np.stack([l, c * np.cos(h), c * np.sin(h)], axis=-1)
