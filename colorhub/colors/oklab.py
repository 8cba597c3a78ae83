from __future__ import annotations
import math
from typing import Any, ClassVar, Tuple, Union

import numpy as np
from numpy import ndarray

from ..conversions.oklab_xyz import oklab_to_xyz, xyz_to_oklab
from ..types.color_types import ChannelBounds
from ..types.constants import default_float_dtype
from .color_base import ColorBase, CoreColorSpace, channel
from .hue import Hue, ZERO_HUE
from .xyz import Xyz



class Oklab(ColorBase, CoreColorSpace):
    """
    Perceptually uniform Oklab.

    Only lightness is bounded. The a and b axes are always treated as
    in bounds; for display colors they stay roughly within [-0.4, 0.4].
    """
    __slots__ = ()

    mode:     ClassVar[str] = "oklab"
    channels: ClassVar[Tuple[str, ...]] = ("l", "a", "b")
    bounds:   ClassVar[Tuple[ChannelBounds, ...]] = ((0.0, 1.0), None, None)

    l = channel(0, "Perceived lightness, 0 to 1.")
    a = channel(1, "Green (negative) to red (positive).")
    b = channel(2, "Blue (negative) to yellow (positive).")

    def __init__(self, l: float, a: float, b: float) -> None:
        super().__init__((l, a, b))

    @classmethod
    def from_xyz(cls, xyz: Xyz) -> Oklab:
        return cls(*xyz_to_oklab(*xyz.value))

    def to_xyz(self) -> Xyz:
        return Xyz(*oklab_to_xyz(*self._value))

    def to_oklch(self) -> Oklch:
        return Oklch.from_oklab(self)


class Oklch(ColorBase):
    """
    Polar Oklab: lightness, chroma and a :class:`Hue`.

    ``a = c * cos(h)`` and ``b = c * sin(h)``; lightness is shared. An
    achromatic color (``c == 0``) gets the 0 degree hue.
    """
    __slots__ = ()

    mode:     ClassVar[str] = "oklch"
    channels: ClassVar[Tuple[str, ...]] = ("l", "c", "h")
    bounds:   ClassVar[Tuple[ChannelBounds, ...]] = ((0.0, 1.0), (0.0, math.inf), None)

    l = channel(0, "Perceived lightness, 0 to 1.")
    c = channel(1, "Chroma, distance from the neutral axis.")
    h = channel(2, "Hue angle.")

    def __init__(self, l: float, c: float, h: Hue) -> None:
        super().__init__((l, c, h))

    @classmethod
    def _coerce(cls, index: int, v: Any) -> Any:
        if index == 2:
            if not isinstance(v, Hue):
                raise TypeError(f"oklch channel 'h' expects a Hue, got {v!r}")
            return v
        return super()._coerce(index, v)

    @classmethod
    def from_oklab(cls, lab: Oklab) -> Oklch:
        l, a, b = lab.value
        c = math.hypot(a, b)
        # atan2 already lands in (-pi, pi], the stored hue range
        h = Hue.from_radians(math.atan2(b, a)) if c != 0.0 else ZERO_HUE
        return cls(l, c, h)

    def to_oklab(self) -> Oklab:
        l, c, h = self._value
        return Oklab(l, c * math.cos(h.to_radians()), c * math.sin(h.to_radians()))

    def to_array(self, dtype=default_float_dtype) -> ndarray:
        """(l, c, hue in degrees)."""
        l, c, h = self._value
        return np.array([l, c, h.to_degrees()], dtype=dtype)

    @classmethod
    def from_array(cls, arr: Union[ndarray, Tuple[float, ...]]) -> Oklch:
        l, c, h = (float(v) for v in cls._array_values(arr))
        return cls(l, c, Hue.from_degrees_wrapped(h))


Oklab.BLACK = Oklab(0.0, 0.0, 0.0)
Oklab.WHITE = Oklab(1.0, 0.0, 0.0)
Oklch.BLACK = Oklch(0.0, 0.0, ZERO_HUE)
Oklch.WHITE = Oklch(1.0, 0.0, ZERO_HUE)
