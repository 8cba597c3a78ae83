from typing import Any
from collections.abc import Sized

from .types.constants import BOUNDS_TOLERANCE


def get_dimension(element: Any) -> int:
    if element is None:
        return 0
    if isinstance(element, (str, bytes)):
        return 1
    if isinstance(element, Sized):
        return len(element)
    return 1


def approx_in_range(value: float, low: float, high: float, tol: float = BOUNDS_TOLERANCE) -> bool:
    """Check ``low - tol <= value <= high + tol``. NaN is never in range."""
    return low - tol <= value <= high + tol
