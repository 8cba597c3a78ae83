"""sRGB <-> 8-bit hex triples. The only lossy step in colorhub."""
import logging
import math
import re

from boundednumbers.functions import clamp

from ..errors import HexFormatError
from ..types.color_types import ByteTriple, Triple
from ..types.constants import HEX_MAX

logger = logging.getLogger(__name__)

_HEX_PATTERN = re.compile(r"#?([0-9a-fA-F]{6})")


def quantize_channel(c: float) -> int:
    """
    Round half up to the nearest byte, clamping out-of-range input.

    NaN maps to 0 and infinities clamp to the nearest end of [0, 255].
    """
    if math.isnan(c):
        return 0
    return int(math.floor(clamp(c, 0.0, 1.0) * HEX_MAX + 0.5))


def srgb_to_hex_bytes(r: float, g: float, b: float) -> ByteTriple:
    return quantize_channel(r), quantize_channel(g), quantize_channel(b)


def hex_bytes_to_srgb(r: int, g: int, b: int) -> Triple:
    return r / HEX_MAX, g / HEX_MAX, b / HEX_MAX


def parse_hex(text: str) -> ByteTriple:
    """
    Parse ``"rrggbb"`` or ``"#rrggbb"`` (case-insensitive) into three bytes.

    Raises:
        HexFormatError: the input is not a string of exactly 6 hex digits
            after an optional leading ``#``.
    """
    match = _HEX_PATTERN.fullmatch(text) if isinstance(text, str) else None
    if match is None:
        logger.debug("rejected hex input %r", text)
        raise HexFormatError(text)
    digits = match.group(1)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def format_hex(r: int, g: int, b: int, prefix: str = "#") -> str:
    return f"{prefix}{r:02x}{g:02x}{b:02x}"
