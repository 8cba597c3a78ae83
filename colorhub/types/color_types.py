from __future__ import annotations
from typing import Literal, Optional, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
Triple = Tuple[float, float, float]
ByteTriple = Tuple[int, int, int]
ChannelBounds = Optional[Tuple[float, float]]
ColorArray = Union[ndarray, Tuple[Triple, ...]]

CoreSpace = Literal["xyz", "linear_rgb", "oklab"]
VariantSpace = Literal["srgb", "oklch", "hex"]
ColorSpace = Literal["xyz", "linear_rgb", "oklab", "srgb", "oklch", "hex"]

CORE_SPACES = {"xyz", "linear_rgb", "oklab"}

# variant -> the core space it is one hop away from
VARIANT_PARENTS = {
    "srgb": "linear_rgb",
    "oklch": "oklab",
    "hex": "srgb",
}


def element_to_array(element: Union[Triple, ndarray], dtype=float) -> ndarray:
    """
    Convert a channel triple (or stack of triples) to a float numpy array.

    Args:
        element: Tuple, list, or already an ndarray with last dimension 3

    Returns:
        numpy array of shape (..., 3)
    """
    arr = np.asarray(element, dtype=dtype)
    if arr.ndim == 0 or arr.shape[-1] != 3:
        raise ValueError(f"expected last dimension to be 3, got shape {arr.shape}")
    return arr


def is_core_space(color_space: str) -> bool:
    """Check if the given space converts to and from Xyz directly."""
    return color_space.lower() in CORE_SPACES
