"""
colorhub Color Classes
======================

Immutable value types for each supported color space.

Core spaces convert to and from the Xyz hub and to each other with
``convert``:

>>> from colorhub.colors import LinearRgb, Oklab, convert
>>> lab = convert(LinearRgb(0.4, 0.2, 0.6), Oklab)
>>> lab.l
0.66066...

Variants map one hop to their core space and back:

- ``Srgb``  <-> ``LinearRgb``  (gamma transfer curve)
- ``Oklch`` <-> ``Oklab``      (polar form)
- ``Hex``   <-> ``Srgb``       (8-bit quantization, lossy)

>>> from colorhub.colors import Hex
>>> Hex.parse("#3366CC").to_srgb().to_linear_rgb().convert("oklab")
Oklab(l=..., a=..., b=...)

Every type exposes ``BLACK``, ``WHITE`` and a tolerant ``in_bounds()``.
"""

from .color_base import ColorBase, CoreColorSpace
from .hue import Hue
from .xyz import Xyz
from .rgb import LinearRgb, Srgb
from .oklab import Oklab, Oklch
from .hex import Hex
from .color import convert, get_color_class, unified_registry

__all__ = [
    'ColorBase',
    'CoreColorSpace',
    'Hue',
    'Xyz',
    'LinearRgb',
    'Srgb',
    'Oklab',
    'Oklch',
    'Hex',
    'convert',
    'get_color_class',
    'unified_registry',
]
