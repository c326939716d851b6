from __future__ import annotations
import warnings
from typing import Iterator
import numpy as np
from numpy import ndarray
from numpy.typing import ArrayLike
from ..colors.color import Color
from ..types.format_type import CHANNEL_SCALE, MAX_CHANNEL, pixel_dtype
from ..types.vector_types import Channels


def unit_to_channel(values: ArrayLike) -> ndarray:
    """
    Convert unit floats to 8-bit channel values.

    Each value is clamped to [0, 1], scaled by 255.999 and truncated.
    NaN counts as below range and becomes 0 (with a ``RuntimeWarning``);
    +inf becomes 255 and -inf becomes 0.

    Args:
        values: Scalar or array of floats, any shape.

    Returns:
        ``uint8`` array with the same shape as ``values``.
    """
    arr = np.asarray(values, dtype=np.float64)
    nan_mask = np.isnan(arr)
    if nan_mask.any():
        warnings.warn(
            f"{int(nan_mask.sum())} NaN channel value(s) converted to 0",
            RuntimeWarning,
            stacklevel=2,
        )
        arr = np.where(nan_mask, 0.0, arr)
    return (np.clip(arr, 0.0, 1.0) * CHANNEL_SCALE).astype(pixel_dtype)


def _check_channel(name: str, value: object) -> int:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"channel {name} must be an integer, got {type(value).__name__}")
    if not 0 <= value <= MAX_CHANNEL:
        raise ValueError(f"channel {name} must be in [0, {MAX_CHANNEL}], got {value}")
    return int(value)


class P3:
    """
    An immutable 8-bit RGB pixel. Defaults to black.

    Pixels read from a row are copies, so channels cannot be assigned; write a
    new ``P3`` into the row instead.
    """
    __slots__ = ('_r', '_g', '_b')

    def __init__(self, r: int = 0, g: int = 0, b: int = 0) -> None:
        super().__setattr__('_r', _check_channel('r', r))
        super().__setattr__('_g', _check_channel('g', g))
        super().__setattr__('_b', _check_channel('b', b))

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")

    @classmethod
    def from_color(cls, color: Color) -> P3:
        r, g, b = unit_to_channel(color.channels()).tolist()
        return cls(r, g, b)

    @property
    def r(self) -> int:
        return self._r

    @property
    def g(self) -> int:
        return self._g

    @property
    def b(self) -> int:
        return self._b

    def channels(self) -> Channels:
        return self._r, self._g, self._b

    def __iter__(self) -> Iterator[int]:
        return iter(self.channels())

    def output(self) -> str:
        return f"{self._r} {self._g} {self._b}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, P3):
            return NotImplemented
        return self.channels() == other.channels()

    def __hash__(self) -> int:
        return hash(self.channels())

    def __repr__(self) -> str:
        return f"P3({self._r}, {self._g}, {self._b})"
