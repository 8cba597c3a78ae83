"""
colorhub Conversions
====================

Plain-function layer under the color classes. Every transform comes as a
scalar function over channel values and an ``np_`` function over
``(..., 3)`` arrays.

Core ↔ hub:
    linear_rgb_to_xyz / xyz_to_linear_rgb
    xyz_to_oklab / oklab_to_xyz

Variant ↔ core:
    srgb_to_linear / linear_to_srgb        (per channel)
    oklab_to_oklch / oklch_to_oklab        (hue in degrees)
    srgb_to_hex_bytes / hex_bytes_to_srgb  (8-bit, lossy)

High-level API:
    np_convert(color, from_space, to_space, dtype=np.float32)
    convert_triple(color, from_space, to_space)

Both route variant → core → Xyz → core → variant.

>>> import numpy as np
>>> from colorhub.conversions import np_convert
>>> np_convert(np.array([[1.0, 0.0, 0.0]]), "srgb", "oklch")
array([[ 0.6279...,  0.2577..., 29.23...]], dtype=float32)
"""

from .transfer import (
    srgb_to_linear,
    linear_to_srgb,
    np_srgb_to_linear,
    np_linear_to_srgb,
)
from .rgb_xyz import (
    linear_rgb_to_xyz,
    xyz_to_linear_rgb,
    np_linear_rgb_to_xyz,
    np_xyz_to_linear_rgb,
)
from .oklab_xyz import (
    xyz_to_oklab,
    oklab_to_xyz,
    np_xyz_to_oklab,
    np_oklab_to_xyz,
)
from .polar import (
    oklab_to_oklch,
    oklch_to_oklab,
    np_oklab_to_oklch,
    np_oklch_to_oklab,
)
from .hex_codec import (
    srgb_to_hex_bytes,
    hex_bytes_to_srgb,
    parse_hex,
    format_hex,
)
from .wrapper import np_convert, convert_triple

__all__ = [
    # transfer curve
    'srgb_to_linear',
    'linear_to_srgb',
    'np_srgb_to_linear',
    'np_linear_to_srgb',

    # linear RGB ↔ XYZ
    'linear_rgb_to_xyz',
    'xyz_to_linear_rgb',
    'np_linear_rgb_to_xyz',
    'np_xyz_to_linear_rgb',

    # XYZ ↔ Oklab
    'xyz_to_oklab',
    'oklab_to_xyz',
    'np_xyz_to_oklab',
    'np_oklab_to_xyz',

    # Oklab ↔ Oklch
    'oklab_to_oklch',
    'oklch_to_oklab',
    'np_oklab_to_oklch',
    'np_oklch_to_oklab',

    # hex
    'srgb_to_hex_bytes',
    'hex_bytes_to_srgb',
    'parse_hex',
    'format_hex',

    # High-level API
    'np_convert',
    'convert_triple',
]
