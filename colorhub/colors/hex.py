"""
Hex
===

An sRGB color quantized to 8 bits per channel, written as ``#rrggbb``.

This is the only lossy step in colorhub: ``Srgb -> Hex -> Srgb`` is
accurate only to within 1/255 per channel (half that for in-gamut
input). Out-of-range channels are clamped to [0, 255] on the way in.
"""
from __future__ import annotations
from typing import Any, ClassVar, Tuple
from numbers import Integral

import numpy as np
from numpy import ndarray
from boundednumbers.functions import clamp

from ..conversions.hex_codec import (
    format_hex,
    hex_bytes_to_srgb,
    parse_hex,
    srgb_to_hex_bytes,
)
from ..types.color_types import ChannelBounds
from ..types.constants import HEX_MAX
from .color_base import ColorBase, channel
from .rgb import Srgb


class Hex(ColorBase):
    __slots__ = ()

    mode:     ClassVar[str] = "hex"
    channels: ClassVar[Tuple[str, ...]] = ("r", "g", "b")
    bounds:   ClassVar[Tuple[ChannelBounds, ...]] = ((0, HEX_MAX),) * 3

    r = channel(0)
    g = channel(1)
    b = channel(2)

    def __init__(self, r: int, g: int, b: int) -> None:
        super().__init__((r, g, b))

    @classmethod
    def _coerce(cls, index: int, v: Any) -> int:
        if isinstance(v, bool) or not isinstance(v, Integral):
            raise TypeError(f"hex channel {cls.channels[index]!r} expects an integer byte, got {v!r}")
        return int(clamp(int(v), 0, HEX_MAX))

    @classmethod
    def parse(cls, text: str) -> Hex:
        """
        Parse ``"rrggbb"`` or ``"#rrggbb"``, case-insensitive.

        Raises:
            HexFormatError: on any other input.
        """
        return cls(*parse_hex(text))

    @classmethod
    def from_srgb(cls, srgb: Srgb) -> Hex:
        return cls(*srgb_to_hex_bytes(*srgb.value))

    def to_srgb(self) -> Srgb:
        return Srgb(*hex_bytes_to_srgb(*self._value))

    def to_array(self, dtype=np.uint8) -> ndarray:
        return np.array(self._value, dtype=dtype)

    @property
    def digits(self) -> str:
        """The six lower-case hex digits, without ``#``."""
        return format_hex(*self._value, prefix="")

    def __str__(self) -> str:
        return format_hex(*self._value)

    def __repr__(self) -> str:
        return f"Hex.parse({str(self)!r})"


Hex.BLACK = Hex(0, 0, 0)
Hex.WHITE = Hex(HEX_MAX, HEX_MAX, HEX_MAX)
