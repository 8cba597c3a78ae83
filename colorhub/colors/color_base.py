from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar, Iterator, Self, Tuple, Union, TYPE_CHECKING
from numbers import Real

import numpy as np
from numpy import ndarray

from ..types.color_types import ChannelBounds, ColorSpace
from ..types.constants import default_float_dtype
from ..utils import approx_in_range, get_dimension

if TYPE_CHECKING:
    from .xyz import Xyz


def channel(index: int, doc: str = "") -> property:
    """Read-only property exposing one channel of ``ColorBase.value``."""
    return property(lambda self: self._value[index], doc=doc)


class ColorBase:
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 3
    mode:         ClassVar[ColorSpace]
    channels:     ClassVar[Tuple[str, ...]]
    bounds:       ClassVar[Tuple[ChannelBounds, ...]]
    BLACK:        ClassVar[ColorBase]
    WHITE:        ClassVar[ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Tuple[Any, ...]) -> None:
        # safe assignment; __setattr__ still allows it during init
        self._value = tuple(self._coerce(i, v) for i, v in enumerate(value))

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _coerce(cls, index: int, v: Any) -> Any:
        if isinstance(v, bool) or not isinstance(v, Real):
            raise TypeError(f"{cls.mode} channel {cls.channels[index]!r} expects a real number, got {v!r}")
        return float(v)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[Any, ...]:
        return self._value

    def in_bounds(self) -> bool:
        """
        Check every bounded channel against its nominal range, allowing
        ``BOUNDS_TOLERANCE`` of slack on either side.
        """
        return all(
            approx_in_range(v, *bound)
            for v, bound in zip(self._value, self.bounds)
            if bound is not None
        )

    def replace(self, **changes: Any) -> Self:
        """Return a new color with the named channels replaced."""
        unknown = set(changes) - set(self.channels)
        if unknown:
            raise TypeError(f"{self.mode} has no channel(s) {sorted(unknown)}")
        values = tuple(changes.get(name, v) for name, v in zip(self.channels, self._value))
        return self.__class__(*values)

    # ------------------ ARRAY INTEROP ------------------
    def to_array(self, dtype=default_float_dtype) -> ndarray:
        return np.array(self._value, dtype=dtype)

    @classmethod
    def _array_values(cls, arr: Union[ndarray, Tuple[float, ...]]) -> Tuple[Any, ...]:
        values = tuple(v.item() if isinstance(v, np.generic) else v for v in arr)
        if get_dimension(values) != cls.num_channels:
            raise ValueError(f"{cls.mode} expects {cls.num_channels} channels, got {values!r}")
        return values

    @classmethod
    def from_array(cls, arr: Union[ndarray, Tuple[float, ...]]) -> Self:
        return cls(*cls._array_values(arr))

    # ------------------ VALUE SEMANTICS ------------------
    def __iter__(self) -> Iterator[Any]:
        return iter(self._value)

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value < other._value

    def __le__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value > other._value

    def __ge__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value >= other._value

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={v!r}" for name, v in zip(self.channels, self._value))
        return f"{self.__class__.__name__}({fields})"


class CoreColorSpace(ABC):
    """
    Mixin for the spaces that convert to and from the Xyz hub directly.

    Both directions must be total: any finite input maps to some output,
    even one that is not ``in_bounds()``.
    """
    __slots__ = ()

    # attached in colors/color.py
    convert: Callable[..., CoreColorSpace]

    @classmethod
    @abstractmethod
    def from_xyz(cls, xyz: Xyz) -> Self:
        ...

    @abstractmethod
    def to_xyz(self) -> Xyz:
        ...


def build_registry(*classes: type[ColorBase]) -> dict[str, type[ColorBase]]:
    return {cls.mode: cls for cls in classes}
