import logging
from typing import Callable, Dict, cast

from numpy import ndarray as NDArray

from ..types.color_types import (
    CORE_SPACES,
    ColorArray,
    Triple,
    VARIANT_PARENTS,
    element_to_array,
    is_core_space,
)
from ..types.constants import default_float_dtype
from .oklab_xyz import np_oklab_to_xyz, np_xyz_to_oklab
from .polar import np_oklab_to_oklch, np_oklch_to_oklab
from .rgb_xyz import np_linear_rgb_to_xyz, np_xyz_to_linear_rgb
from .transfer import np_linear_to_srgb, np_srgb_to_linear

logger = logging.getLogger(__name__)

ArrayFn = Callable[[NDArray], NDArray]

# Hub: every core space to and from Xyz
TO_XYZ: Dict[str, ArrayFn] = {
    "xyz": lambda xyz: xyz,
    "linear_rgb": np_linear_rgb_to_xyz,
    "oklab": np_oklab_to_xyz,
}

FROM_XYZ: Dict[str, ArrayFn] = {
    "xyz": lambda xyz: xyz,
    "linear_rgb": np_xyz_to_linear_rgb,
    "oklab": np_xyz_to_oklab,
}

# One hop between a numeric variant and its core space
TO_CORE: Dict[str, ArrayFn] = {
    "srgb": np_srgb_to_linear,
    "oklch": np_oklch_to_oklab,
}

FROM_CORE: Dict[str, ArrayFn] = {
    "srgb": np_linear_to_srgb,
    "oklch": np_oklab_to_oklch,
}

NUMERIC_SPACES = CORE_SPACES | set(TO_CORE)


def _check_space(space: str) -> str:
    space = space.lower()
    if space not in NUMERIC_SPACES:
        raise ValueError(f"Unknown space: {space}")
    return space


def _core_of(space: str) -> str:
    return space if is_core_space(space) else VARIANT_PARENTS[space]


def _convert_core(color: NDArray, from_space: str, to_space: str) -> NDArray:
    core_in, core_out = _core_of(from_space), _core_of(to_space)

    # variant → core → Xyz → core → variant
    base = TO_CORE[from_space](color) if from_space != core_in else color
    if core_in != core_out:
        base = FROM_XYZ[core_out](TO_XYZ[core_in](base))
    return FROM_CORE[to_space](base) if to_space != core_out else base


def np_convert(
    color: ColorArray,
    from_space: str,
    to_space: str,
    dtype=default_float_dtype,
) -> NDArray:
    """
    Vectorized conversion of (..., 3) arrays between any numeric spaces.

    Args:
        color: Array (or nested sequence) with last dimension 3. For "oklch"
            the third channel is the hue in degrees.
        from_space, to_space: "xyz", "linear_rgb", "oklab", "srgb" or "oklch"
        dtype: Output dtype, float32 by default

    Returns:
        Array of the same shape in the target space.
    """
    fs, ts = _check_space(from_space), _check_space(to_space)
    arr = element_to_array(color)
    if fs == ts:
        return arr.astype(dtype)  # No conversion needed
    logger.debug("np_convert %s from %s to %s", arr.shape, fs, ts)
    return _convert_core(arr, fs, ts).astype(dtype)


def convert_triple(color: Triple, from_space: str, to_space: str) -> Triple:
    """Scalar form of :func:`np_convert`, returning a float tuple."""
    fs, ts = _check_space(from_space), _check_space(to_space)
    if fs == ts:
        return cast(Triple, tuple(float(v) for v in color))
    result = _convert_core(element_to_array(color), fs, ts)
    return cast(Triple, tuple(float(v) for v in result))
