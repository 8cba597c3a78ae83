r"""
CIE XYZ <-> Oklab.

Pipeline (Björn Ottosson, "A perceptual color space for image processing"):

1. ``XYZ_TO_LMS`` maps XYZ to an approximate cone response (l, m, s)
2. signed cube root per channel
3. ``LMS_TO_OKLAB`` maps (l', m', s') to (L, a, b)

The inverse undoes the steps in reverse order, cubing instead of taking
the cube root. All four matrices are the published constants.
"""
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import Triple

XYZ_TO_LMS = np.array([
    [0.8189330101, 0.3618667424, -0.1288597137],
    [0.0329845436, 0.9293118715,  0.0361456387],
    [0.0482003018, 0.2643662691,  0.6338517070],
])

LMS_TO_OKLAB = np.array([
    [0.2104542553,  0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050,  0.4505937099],
    [0.0259040371,  0.7827717662, -0.8086757660],
])

OKLAB_TO_LMS = np.array([
    [1.0,  0.3963377774,  0.2158037573],
    [1.0, -0.1055613458, -0.0638541728],
    [1.0, -0.0894841775, -1.2914855480],
])

LMS_TO_XYZ = np.array([
    [ 1.2270138511, -0.5577999807,  0.2812561490],
    [-0.0405801784,  1.1122568696, -0.0716766787],
    [-0.0763812845, -0.4214819784,  1.5861632204],
])


def np_xyz_to_oklab(xyz: NDArray) -> NDArray:
    """Vectorized: (..., 3) XYZ to (..., 3) Oklab."""
    lms = np.asarray(xyz, dtype=float) @ XYZ_TO_LMS.T
    # cbrt keeps the sign of slightly negative responses
    return np.cbrt(lms) @ LMS_TO_OKLAB.T


def np_oklab_to_xyz(lab: NDArray) -> NDArray:
    """Vectorized: (..., 3) Oklab to (..., 3) XYZ."""
    lms_ = np.asarray(lab, dtype=float) @ OKLAB_TO_LMS.T
    return (lms_ ** 3) @ LMS_TO_XYZ.T


def xyz_to_oklab(x: float, y: float, z: float) -> Triple:
    l, a, b = np_xyz_to_oklab(np.array([x, y, z], dtype=float))
    return float(l), float(a), float(b)


def oklab_to_xyz(l: float, a: float, b: float) -> Triple:
    x, y, z = np_oklab_to_xyz(np.array([l, a, b], dtype=float))
    return float(x), float(y), float(z)
