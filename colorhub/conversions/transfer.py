"""sRGB transfer curve (IEC 61966-2-1).

Negative inputs are mirrored through the origin so the curve stays total and
odd-symmetric: ``f(-x) == -f(x)``.
"""
import math
import numpy as np
from numpy import ndarray as NDArray

# Decode threshold (encoded side) and encode threshold (linear side)
SRGB_DECODE_THRESHOLD = 0.04045
SRGB_ENCODE_THRESHOLD = 0.0031308
SRGB_LINEAR_SLOPE = 12.92
SRGB_GAMMA = 2.4
SRGB_OFFSET = 0.055
SRGB_SCALE = 1.055


def srgb_to_linear(c: float) -> float:
    """Convert gamma-encoded sRGB to linear-light RGB."""
    magnitude = abs(c)
    if magnitude <= SRGB_DECODE_THRESHOLD:
        linear = magnitude / SRGB_LINEAR_SLOPE
    else:
        linear = ((magnitude + SRGB_OFFSET) / SRGB_SCALE) ** SRGB_GAMMA
    return math.copysign(linear, c)


def linear_to_srgb(c: float) -> float:
    """Convert linear-light RGB to gamma-encoded sRGB."""
    magnitude = abs(c)
    if magnitude <= SRGB_ENCODE_THRESHOLD:
        encoded = SRGB_LINEAR_SLOPE * magnitude
    else:
        encoded = SRGB_SCALE * (magnitude ** (1 / SRGB_GAMMA)) - SRGB_OFFSET
    return math.copysign(encoded, c)


def np_srgb_to_linear(c: NDArray) -> NDArray:
    """Vectorized: Convert gamma-encoded sRGB to linear-light RGB."""
    c = np.asarray(c, dtype=float)
    magnitude = np.abs(c)
    result = np.where(
        magnitude <= SRGB_DECODE_THRESHOLD,
        magnitude / SRGB_LINEAR_SLOPE,
        ((magnitude + SRGB_OFFSET) / SRGB_SCALE) ** SRGB_GAMMA
    )
    return np.copysign(result, c)


def np_linear_to_srgb(c: NDArray) -> NDArray:
    """Vectorized: Convert linear-light RGB to gamma-encoded sRGB."""
    c = np.asarray(c, dtype=float)
    magnitude = np.abs(c)
    result = np.where(
        magnitude <= SRGB_ENCODE_THRESHOLD,
        SRGB_LINEAR_SLOPE * magnitude,
        SRGB_SCALE * (magnitude ** (1 / SRGB_GAMMA)) - SRGB_OFFSET
    )
    return np.copysign(result, c)
