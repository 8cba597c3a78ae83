"""Exceptions raised by colorhub.

Only construction and parsing can fail; every numeric transform is total.
"""


class ColorhubError(Exception):
    """Base class for all colorhub errors."""


class HueRangeError(ColorhubError, ValueError):
    """A hue was constructed from degrees outside ``[0, 360]``."""

    def __init__(self, degrees: float) -> None:
        self.degrees = degrees
        super().__init__(f"Hue expects degrees in [0, 360], got {degrees!r}")


class HexFormatError(ColorhubError, ValueError):
    """A string could not be parsed as a 6-digit hex color."""

    def __init__(self, text: object) -> None:
        self.text = text
        super().__init__(
            f"Hex expects exactly 6 hex digits with an optional leading '#', got {text!r}"
        )
