"""Linear RGB <-> CIE XYZ for the sRGB primaries under D65."""
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import Triple

RGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])

XYZ_TO_RGB = np.array([
    [ 3.2404542, -1.5371385, -0.4985314],
    [-0.9692660,  1.8760108,  0.0415560],
    [ 0.0556434, -0.2040259,  1.0572252],
])


def linear_rgb_to_xyz(r: float, g: float, b: float) -> Triple:
    x, y, z = RGB_TO_XYZ @ np.array([r, g, b], dtype=float)
    return float(x), float(y), float(z)


def xyz_to_linear_rgb(x: float, y: float, z: float) -> Triple:
    r, g, b = XYZ_TO_RGB @ np.array([x, y, z], dtype=float)
    return float(r), float(g), float(b)


def np_linear_rgb_to_xyz(rgb: NDArray) -> NDArray:
    """Vectorized: (..., 3) linear RGB to (..., 3) XYZ."""
    return np.asarray(rgb, dtype=float) @ RGB_TO_XYZ.T


def np_xyz_to_linear_rgb(xyz: NDArray) -> NDArray:
    """Vectorized: (..., 3) XYZ to (..., 3) linear RGB."""
    return np.asarray(xyz, dtype=float) @ XYZ_TO_RGB.T
