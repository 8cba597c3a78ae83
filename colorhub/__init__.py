"""colorhub: conversions between XYZ, linear RGB, sRGB, hex, Oklab and Oklch."""
import logging

from .colors import (
    ColorBase,
    CoreColorSpace,
    Hue,
    Xyz,
    LinearRgb,
    Srgb,
    Oklab,
    Oklch,
    Hex,
    convert,
    get_color_class,
)
from .conversions import np_convert, convert_triple
from .errors import ColorhubError, HueRangeError, HexFormatError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # value types
    "ColorBase",
    "CoreColorSpace",
    "Hue",
    "Xyz",
    "LinearRgb",
    "Srgb",
    "Oklab",
    "Oklch",
    "Hex",
    # conversions
    "convert",
    "get_color_class",
    "np_convert",
    "convert_triple",
    # errors
    "ColorhubError",
    "HueRangeError",
    "HexFormatError",
]
