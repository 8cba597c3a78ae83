from __future__ import annotations
from typing import ClassVar, Tuple

from ..conversions.rgb_xyz import linear_rgb_to_xyz, xyz_to_linear_rgb
from ..conversions.transfer import linear_to_srgb, srgb_to_linear
from ..types.color_types import ChannelBounds
from .color_base import ColorBase, CoreColorSpace, channel
from .xyz import Xyz

UNIT_BOUNDS: Tuple[ChannelBounds, ...] = ((0.0, 1.0), (0.0, 1.0), (0.0, 1.0))


class LinearRgb(ColorBase, CoreColorSpace):
    """Light-linear (gamma-uncorrected) RGB with the sRGB primaries."""
    __slots__ = ()

    mode:     ClassVar[str] = "linear_rgb"
    channels: ClassVar[Tuple[str, ...]] = ("r", "g", "b")
    bounds:   ClassVar[Tuple[ChannelBounds, ...]] = UNIT_BOUNDS

    r = channel(0)
    g = channel(1)
    b = channel(2)

    def __init__(self, r: float, g: float, b: float) -> None:
        super().__init__((r, g, b))

    @classmethod
    def from_xyz(cls, xyz: Xyz) -> LinearRgb:
        return cls(*xyz_to_linear_rgb(*xyz.value))

    def to_xyz(self) -> Xyz:
        return Xyz(*linear_rgb_to_xyz(*self._value))

    def to_srgb(self) -> Srgb:
        return Srgb.from_linear_rgb(self)


class Srgb(ColorBase):
    """
    Gamma-encoded, display-ready RGB.

    Not a core space: it only maps to and from LinearRgb. Both directions
    are exact up to float rounding.
    """
    __slots__ = ()

    mode:     ClassVar[str] = "srgb"
    channels: ClassVar[Tuple[str, ...]] = ("r", "g", "b")
    bounds:   ClassVar[Tuple[ChannelBounds, ...]] = UNIT_BOUNDS

    r = channel(0)
    g = channel(1)
    b = channel(2)

    def __init__(self, r: float, g: float, b: float) -> None:
        super().__init__((r, g, b))

    @classmethod
    def from_linear_rgb(cls, rgb: LinearRgb) -> Srgb:
        return cls(*(linear_to_srgb(c) for c in rgb.value))

    def to_linear_rgb(self) -> LinearRgb:
        return LinearRgb(*(srgb_to_linear(c) for c in self._value))


LinearRgb.BLACK = LinearRgb(0.0, 0.0, 0.0)
LinearRgb.WHITE = LinearRgb(1.0, 1.0, 1.0)
Srgb.BLACK = Srgb(0.0, 0.0, 0.0)
Srgb.WHITE = Srgb(1.0, 1.0, 1.0)
