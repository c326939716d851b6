from __future__ import annotations
from typing import Any, Iterator, Optional
import numpy as np
from numpy import ndarray
from ..types.vector_types import Components, Scalar, is_scalar
from ..vectors.v3 import V3


class Color:
    """
    Red, green and blue intensities backed by a ``V3``.

    Values are not restricted to [0, 1]. Clamping happens only when a color
    is converted to a pixel, so sums and products of colors keep their full
    range until then.
    """
    __slots__ = ('_v',)

    __array_ufunc__ = None

    def __init__(self, r: Scalar = 0.0, g: Scalar = 0.0, b: Scalar = 0.0) -> None:
        self._v = V3(r, g, b)

    @classmethod
    def from_vector(cls, vector: V3) -> Color:
        new = cls.__new__(cls)
        new._v = vector.copy()
        return new

    @property
    def vector(self) -> V3:
        """A copy of the underlying vector."""
        return self._v.copy()

    # ------------------ CHANNELS ------------------
    @property
    def r(self) -> float:
        return self._v[0]

    @r.setter
    def r(self, value: Scalar) -> None:
        self._v[0] = value

    @property
    def g(self) -> float:
        return self._v[1]

    @g.setter
    def g(self, value: Scalar) -> None:
        self._v[1] = value

    @property
    def b(self) -> float:
        return self._v[2]

    @b.setter
    def b(self, value: Scalar) -> None:
        self._v[2] = value

    def __getitem__(self, index: int) -> float:
        return self._v[index]

    def __setitem__(self, index: int, value: Scalar) -> None:
        self._v[index] = value

    def __len__(self) -> int:
        return len(self._v)

    def __iter__(self) -> Iterator[float]:
        return iter(self._v)

    def __array__(self, dtype=None, copy=None) -> ndarray:
        return np.asarray(self._v, dtype=dtype)

    def channels(self) -> Components:
        return self._v.components()

    def copy(self) -> Color:
        return self.from_vector(self._v)

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._v == other._v

    __hash__ = None  # type: ignore[assignment]

    # ------------------ ARITHMETIC ------------------
    @staticmethod
    def _operand(other: Any) -> Optional[Any]:
        if isinstance(other, Color):
            return other._v
        if is_scalar(other):
            return other
        return None

    def __iadd__(self, other: Color | Scalar) -> Color:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        self._v += rhs
        return self

    def __isub__(self, other: Color | Scalar) -> Color:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        self._v -= rhs
        return self

    def __imul__(self, other: Color | Scalar) -> Color:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        self._v *= rhs
        return self

    def __itruediv__(self, other: Color | Scalar) -> Color:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        self._v /= rhs
        return self

    def __add__(self, other: Color | Scalar) -> Color:
        return self.copy().__iadd__(other)

    def __sub__(self, other: Color | Scalar) -> Color:
        return self.copy().__isub__(other)

    def __mul__(self, other: Color | Scalar) -> Color:
        return self.copy().__imul__(other)

    def __truediv__(self, other: Color | Scalar) -> Color:
        return self.copy().__itruediv__(other)

    def _reflected(self, other: Any, op) -> Color:
        if not is_scalar(other):
            return NotImplemented
        return self.from_vector(op(self._v, other))

    def __radd__(self, other: Scalar) -> Color:
        return self._reflected(other, V3.__radd__)

    def __rsub__(self, other: Scalar) -> Color:
        return self._reflected(other, V3.__rsub__)

    def __rmul__(self, other: Scalar) -> Color:
        return self._reflected(other, V3.__rmul__)

    def __rtruediv__(self, other: Scalar) -> Color:
        return self._reflected(other, V3.__rtruediv__)

    def __neg__(self) -> Color:
        return self.from_vector(-self._v)

    def __repr__(self) -> str:
        r, g, b = self.channels()
        return f"{self.__class__.__name__}({r!r}, {g!r}, {b!r})"
