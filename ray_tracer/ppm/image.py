"""
PPM image buffer
================

A fixed-size, row-major grid of ``P3`` pixels backed by a single contiguous
``(width * height, 3)`` uint8 array.

Rows are exposed as zero-copy views. ``rows()`` hands out read-only rows,
``rows_mut()`` hands out writable ones; a write through a writable row lands
in the buffer immediately. Keep at most one ``rows_mut()`` traversal alive at
a time.

>>> ppm = Ppm(2, 1)
>>> for row in ppm.rows_mut():
...     row.fill(P3(255, 0, 0))
>>> print(ppm.output(), end="")
P3
2 1
255
255 0 0
255 0 0
"""

from __future__ import annotations
from collections.abc import Sequence
from typing import Iterator, List
import numpy as np
from numpy import ndarray
from numpy.typing import ArrayLike
from ..types.format_type import MAGIC, MAX_CHANNEL, pixel_dtype
from ..utils import check_dimension, check_index
from .p3 import P3, unit_to_channel


class Row(Sequence):
    """A view of one image row. Reading yields ``P3`` copies."""
    __slots__ = ('_pixels',)

    def __init__(self, pixels: ndarray) -> None:
        self._pixels = pixels

    @property
    def writeable(self) -> bool:
        return bool(self._pixels.flags.writeable)

    def __len__(self) -> int:
        return self._pixels.shape[0]

    def __getitem__(self, index: int | slice) -> P3 | List[P3]:
        if isinstance(index, slice):
            return [P3(r, g, b) for r, g, b in self._pixels[index].tolist()]
        r, g, b = self._pixels[check_index(index, len(self))].tolist()
        return P3(r, g, b)

    def __setitem__(self, index: int, pixel: P3) -> None:
        if not self.writeable:
            raise TypeError("row is read-only; use rows_mut() to modify pixels")
        if not isinstance(pixel, P3):
            raise TypeError(f"expected P3, got {type(pixel).__name__}")
        self._pixels[check_index(index, len(self))] = pixel.channels()

    def __iter__(self) -> Iterator[P3]:
        for r, g, b in self._pixels.tolist():
            yield P3(r, g, b)

    def fill(self, pixel: P3) -> None:
        if not self.writeable:
            raise TypeError("row is read-only; use rows_mut() to modify pixels")
        if not isinstance(pixel, P3):
            raise TypeError(f"expected P3, got {type(pixel).__name__}")
        self._pixels[:] = pixel.channels()

    def __repr__(self) -> str:
        return f"Row({list(self)!r})"


class Rows(Sequence):
    """``height`` consecutive rows of ``width`` pixels, in storage order."""
    __slots__ = ('_grid',)

    def __init__(self, data: ndarray, width: int, height: int, writeable: bool) -> None:
        grid = data.reshape(height, width, 3)
        if not writeable:
            grid = grid.view()
            grid.flags.writeable = False
        self._grid = grid

    def __len__(self) -> int:
        return self._grid.shape[0]

    def __getitem__(self, index: int | slice) -> Row | List[Row]:
        if isinstance(index, slice):
            return [Row(pixels) for pixels in self._grid[index]]
        return Row(self._grid[check_index(index, len(self))])

    def __iter__(self) -> Iterator[Row]:
        for i in range(len(self)):
            yield Row(self._grid[i])


class Ppm:
    """
    Row-major pixel buffer serialized as a plain-text ``P3`` PPM document.

    The size is fixed at construction. Every pixel starts out black.
    """
    __slots__ = ('_data', '_width', '_height')

    def __init__(self, width: int, height: int) -> None:
        self._width = check_dimension("width", width)
        self._height = check_dimension("height", height)
        self._data = np.zeros((self._width * self._height, 3), dtype=pixel_dtype)

    @classmethod
    def from_unit_array(cls, colors: ArrayLike) -> Ppm:
        """
        Build a buffer from an ``(height, width, 3)`` array of unit floats.

        Channels are converted exactly as ``P3.from_color`` converts them.
        """
        arr = np.asarray(colors, dtype=np.float64)
        if arr.ndim != 3 or arr.shape[-1] != 3:
            raise ValueError(f"expected an array of shape (height, width, 3), got {arr.shape}")
        height, width, _ = arr.shape
        return cls(width, height).paint(arr)

    def paint(self, colors: ArrayLike) -> Ppm:
        """
        Overwrite every pixel from an ``(height, width, 3)`` array of unit floats.

        The whole buffer goes through a single conversion, so NaN channels
        produce one warning per call rather than one per pixel.
        """
        arr = np.asarray(colors, dtype=np.float64)
        expected = (self._height, self._width, 3)
        if arr.shape != expected:
            raise ValueError(f"expected an array of shape {expected}, got {arr.shape}")
        self._data[:] = unit_to_channel(arr).reshape(-1, 3)
        return self

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def __len__(self) -> int:
        return self._data.shape[0]

    def is_empty(self) -> bool:
        return len(self) == 0

    def rows(self) -> Rows:
        return Rows(self._data, self._width, self._height, writeable=False)

    def rows_mut(self) -> Rows:
        return Rows(self._data, self._width, self._height, writeable=True)

    def pixels(self) -> Iterator[P3]:
        for r, g, b in self._data.tolist():
            yield P3(r, g, b)

    def __array__(self, dtype=None, copy=None) -> ndarray:
        return np.array(self._data.reshape(self._height, self._width, 3), dtype=dtype)

    def output(self) -> str:
        header = f"{MAGIC}\n{self._width} {self._height}\n{MAX_CHANNEL}\n"
        body = "".join(f"{r} {g} {b}\n" for r, g, b in self._data.tolist())
        return header + body

    def __repr__(self) -> str:
        return f"Ppm(width={self._width}, height={self._height})"
