from __future__ import annotations
from typing import ClassVar, Tuple

from ..types.color_types import ChannelBounds
from ..types.constants import D65_WHITE
from .color_base import ColorBase, CoreColorSpace, channel


class Xyz(ColorBase, CoreColorSpace):
    """
    CIE 1931 XYZ under the D65 illuminant and the 2 degree observer.

    Every other core space converts through Xyz, so its own hub
    conversion is the identity.
    """
    __slots__ = ()

    mode:     ClassVar[str] = "xyz"
    channels: ClassVar[Tuple[str, ...]] = ("x", "y", "z")
    bounds:   ClassVar[Tuple[ChannelBounds, ...]] = (
        (0.0, D65_WHITE[0]),
        (0.0, D65_WHITE[1]),
        (0.0, D65_WHITE[2]),
    )

    x = channel(0, "Mixture of cone responses, 0 to 0.95047.")
    y = channel(1, "Luminance, 0 is black and 1 the reference white.")
    z = channel(2, "Roughly the blueness, 0 to 1.08883.")

    def __init__(self, x: float, y: float, z: float) -> None:
        super().__init__((x, y, z))

    @classmethod
    def from_xyz(cls, xyz: Xyz) -> Xyz:
        return xyz

    def to_xyz(self) -> Xyz:
        return self


Xyz.BLACK = Xyz(0.0, 0.0, 0.0)
Xyz.WHITE = Xyz(*D65_WHITE)
