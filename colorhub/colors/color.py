from __future__ import annotations
from typing import Union

from ..types.color_types import CORE_SPACES
from .color_base import ColorBase, CoreColorSpace, build_registry
from .hex import Hex
from .oklab import Oklab, Oklch
from .rgb import LinearRgb, Srgb
from .xyz import Xyz


unified_registry: dict[str, type[ColorBase]] = build_registry(
    Xyz, LinearRgb, Oklab, Srgb, Oklch, Hex,
)


def get_color_class(color_space: str) -> type[ColorBase]:
    color_class = unified_registry.get(color_space.lower())
    if color_class is None:
        raise ValueError(f"Unsupported color space: {color_space}")
    return color_class


def get_core_class(color_space: Union[str, type]) -> type[CoreColorSpace]:
    if isinstance(color_space, str):
        cls = get_color_class(color_space)
    else:
        cls = color_space
    if not (isinstance(cls, type) and issubclass(cls, CoreColorSpace)):
        raise ValueError(
            f"{color_space!r} is not a core color space; expected one of {sorted(CORE_SPACES)}"
        )
    return cls


def convert(color: CoreColorSpace, to_space: Union[str, type[CoreColorSpace]]) -> CoreColorSpace:
    """
    Convert a core color to another core space through the Xyz hub.

    Args:
        color: Xyz, LinearRgb or Oklab instance
        to_space: Target class, or its mode name ("xyz", "linear_rgb", "oklab")

    Returns:
        ``to_space.from_xyz(color.to_xyz())``, or ``color`` itself when it
        already is in the target space.
    """
    if not isinstance(color, CoreColorSpace):
        raise ValueError(
            f"convert() expects a core color, got {type(color).__name__}; "
            "map variants to their core space first"
        )
    target = get_core_class(to_space)
    if type(color) is target:
        return color  # No conversion needed
    return target.from_xyz(color.to_xyz())


def color_convert(self: CoreColorSpace, to_space: Union[str, type[CoreColorSpace]]) -> CoreColorSpace:
    """Method form of :func:`convert`."""
    return convert(self, to_space)


CoreColorSpace.convert = color_convert
