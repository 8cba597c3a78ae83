"""
Hue
===

An angle on the color wheel. The angle is stored in radians shifted into
``(-pi, pi]`` so trigonometry stays continuous across the 0/360 degree
seam: 359.999 and 0.001 degrees are stored as two nearby small numbers
rather than at opposite ends of the range.

Construction policy
-------------------
``Hue.from_degrees`` validates: anything outside ``[0, 360]`` (or NaN)
raises :class:`~colorhub.errors.HueRangeError`. Use
``Hue.from_degrees_wrapped`` to normalize arbitrary angles instead.
"""
from __future__ import annotations
import logging
import math
from typing import Any

from boundednumbers.functions import cyclic_wrap_float

from ..errors import HueRangeError
from ..types.constants import HUE_360, HUE_HALF_TURN

logger = logging.getLogger(__name__)

_TAU = 2.0 * math.pi


class Hue:
    __slots__ = ('_radians', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, radians: float) -> None:
        radians = float(radians)
        # stored angle always lies in (-pi, pi]
        if not -math.pi < radians <= math.pi:
            radians = math.remainder(radians, _TAU)
            if radians <= -math.pi:
                radians = math.pi
        self._radians = radians
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_degrees(cls, degrees: float) -> Hue:
        """
        Create a hue from degrees in ``[0, 360]``.

        Raises:
            HueRangeError: if ``degrees`` is outside ``[0, 360]`` or NaN.
        """
        if not 0.0 <= degrees <= HUE_360:
            logger.debug("rejected hue of %r degrees", degrees)
            raise HueRangeError(degrees)
        unnormalized = degrees - HUE_360 if degrees > HUE_HALF_TURN else degrees
        return cls(math.radians(unnormalized))

    @classmethod
    def from_degrees_wrapped(cls, degrees: float) -> Hue:
        """Create a hue from any finite angle, wrapping it into ``[0, 360)``."""
        if math.isfinite(degrees):
            degrees = cyclic_wrap_float(degrees, 0.0, HUE_360)
        return cls.from_degrees(degrees)

    @classmethod
    def from_radians(cls, radians: float) -> Hue:
        """Create a hue from any finite angle in radians."""
        return cls(radians)

    # ------------------ READ-ONLY VIEWS ------------------
    @property
    def unnormalized_radians(self) -> float:
        return self._radians

    def to_radians(self) -> float:
        return self._radians

    def to_degrees(self) -> float:
        """The hue in degrees, always in ``[0, 360)``."""
        degrees = math.degrees(self._radians)
        if degrees < 0.0:
            degrees += HUE_360
        # -1e-15 + 360 rounds to 360.0
        if degrees >= HUE_360:
            degrees = 0.0
        return degrees

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Hue):
            return NotImplemented
        return self._radians == other._radians

    def __lt__(self, other: Hue) -> bool:
        if not isinstance(other, Hue):
            return NotImplemented
        return self._radians < other._radians

    def __le__(self, other: Hue) -> bool:
        if not isinstance(other, Hue):
            return NotImplemented
        return self._radians <= other._radians

    def __gt__(self, other: Hue) -> bool:
        if not isinstance(other, Hue):
            return NotImplemented
        return self._radians > other._radians

    def __ge__(self, other: Hue) -> bool:
        if not isinstance(other, Hue):
            return NotImplemented
        return self._radians >= other._radians

    def __hash__(self) -> int:
        return hash(('Hue', self._radians))

    def __repr__(self) -> str:
        return f"Hue.from_degrees({self.to_degrees()!r})"


ZERO_HUE = Hue(0.0)
