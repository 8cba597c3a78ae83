import math

import pytest

from colorhub.conversions.hex_codec import (
    format_hex,
    hex_bytes_to_srgb,
    parse_hex,
    quantize_channel,
    srgb_to_hex_bytes,
)
from colorhub.errors import ColorhubError, HexFormatError


def test_quantize_channel():
    assert quantize_channel(0.0) == 0
    assert quantize_channel(1.0) == 255
    assert quantize_channel(0.5) == 128
    assert quantize_channel(0.5 / 255) == 1
    assert quantize_channel(0.49 / 255) == 0
    assert quantize_channel(-3.0) == 0
    assert quantize_channel(42.0) == 255

def test_quantize_non_finite_channel():
    assert quantize_channel(math.nan) == 0
    assert quantize_channel(math.inf) == 255
    assert quantize_channel(-math.inf) == 0
    assert srgb_to_hex_bytes(math.nan, math.inf, 0.5) == (0, 255, 128)

def test_bytes_round_trip():
    assert srgb_to_hex_bytes(*hex_bytes_to_srgb(12, 200, 255)) == (12, 200, 255)

def test_parse_and_format():
    assert parse_hex("#0A0b0C") == (10, 11, 12)
    assert format_hex(10, 11, 12) == "#0a0b0c"
    assert format_hex(10, 11, 12, prefix="") == "0a0b0c"

def test_parse_error_hierarchy():
    with pytest.raises(HexFormatError) as info:
        parse_hex("#12345")
    assert isinstance(info.value, ColorhubError)
    assert isinstance(info.value, ValueError)
    assert info.value.text == "#12345"
