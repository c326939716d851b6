from __future__ import annotations
import math
from typing import Any, ClassVar, Iterator, Optional
import numpy as np
from numpy import ndarray
from ..types.format_type import component_dtype
from ..types.vector_types import NUM_COMPONENTS, Components, Scalar, is_scalar
from ..utils import check_index


class V3:
    """
    Three component float64 vector.

    Arithmetic is component-wise. ``*`` and ``/`` are Hadamard products, not
    dot or cross products. The in-place operators are the only place the math
    lives; the binary operators copy ``self`` and apply the in-place form.

    Floating point edge cases follow IEEE-754: dividing by zero yields ``inf``
    or ``nan`` and nothing is raised or warned.
    """
    __slots__ = ('_v',)

    num_components: ClassVar[int] = NUM_COMPONENTS

    # numpy scalars defer to the reflected operators below
    __array_ufunc__ = None

    def __init__(self, x: Scalar = 0.0, y: Scalar = 0.0, z: Scalar = 0.0) -> None:
        self._v = np.array((x, y, z), dtype=component_dtype)

    @classmethod
    def _from_array(cls, values: ndarray) -> V3:
        new = cls.__new__(cls)
        new._v = np.array(values, dtype=component_dtype)
        return new

    # ------------------ COMPONENTS ------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @x.setter
    def x(self, value: Scalar) -> None:
        self._v[0] = value

    @property
    def y(self) -> float:
        return float(self._v[1])

    @y.setter
    def y(self, value: Scalar) -> None:
        self._v[1] = value

    @property
    def z(self) -> float:
        return float(self._v[2])

    @z.setter
    def z(self, value: Scalar) -> None:
        self._v[2] = value

    def __getitem__(self, index: int) -> float:
        return float(self._v[check_index(index, self.num_components)])

    def __setitem__(self, index: int, value: Scalar) -> None:
        self._v[check_index(index, self.num_components)] = value

    def __len__(self) -> int:
        return self.num_components

    def __iter__(self) -> Iterator[float]:
        return iter(self._v.tolist())

    def __array__(self, dtype=None, copy=None) -> ndarray:
        """Enable numpy array interface. Always returns a copy."""
        return np.array(self._v, dtype=dtype)

    def components(self) -> Components:
        x, y, z = self._v.tolist()
        return x, y, z

    def copy(self) -> V3:
        return self._from_array(self._v)

    __copy__ = copy

    # ------------------ MAGNITUDE ------------------
    def length_squared(self) -> float:
        x, y, z = self._v.tolist()
        return x * x + y * y + z * z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    # ------------------ COMPARISON ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, V3):
            return NotImplemented
        # exact, no tolerance
        return bool(np.array_equal(self._v, other._v))

    # mutable value type
    __hash__ = None  # type: ignore[assignment]

    # ------------------ ARITHMETIC ------------------
    @staticmethod
    def _operand(other: Any) -> Optional[Any]:
        """Return the array (or broadcast scalar) for ``other``, or None if unsupported."""
        if isinstance(other, V3):
            return other._v
        if is_scalar(other):
            return np.float64(other)
        return None

    def _apply(self, other: Any, op) -> V3:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        with np.errstate(all="ignore"):
            op(self._v, rhs, out=self._v)
        return self

    def __iadd__(self, other: V3 | Scalar) -> V3:
        return self._apply(other, np.add)

    def __isub__(self, other: V3 | Scalar) -> V3:
        return self._apply(other, np.subtract)

    def __imul__(self, other: V3 | Scalar) -> V3:
        return self._apply(other, np.multiply)

    def __itruediv__(self, other: V3 | Scalar) -> V3:
        return self._apply(other, np.divide)

    def __add__(self, other: V3 | Scalar) -> V3:
        return self.copy().__iadd__(other)

    def __sub__(self, other: V3 | Scalar) -> V3:
        return self.copy().__isub__(other)

    def __mul__(self, other: V3 | Scalar) -> V3:
        return self.copy().__imul__(other)

    def __truediv__(self, other: V3 | Scalar) -> V3:
        return self.copy().__itruediv__(other)

    def _broadcast(self, other: Any) -> Optional[V3]:
        if not is_scalar(other):
            return None
        return V3(other, other, other)

    def __radd__(self, other: Scalar) -> V3:
        lhs = self._broadcast(other)
        return NotImplemented if lhs is None else lhs.__iadd__(self)

    def __rsub__(self, other: Scalar) -> V3:
        lhs = self._broadcast(other)
        return NotImplemented if lhs is None else lhs.__isub__(self)

    def __rmul__(self, other: Scalar) -> V3:
        lhs = self._broadcast(other)
        return NotImplemented if lhs is None else lhs.__imul__(self)

    def __rtruediv__(self, other: Scalar) -> V3:
        lhs = self._broadcast(other)
        return NotImplemented if lhs is None else lhs.__itruediv__(self)

    def __neg__(self) -> V3:
        return self._from_array(-self._v)

    # ------------------ REPRESENTATION ------------------
    def __repr__(self) -> str:
        x, y, z = self._v.tolist()
        return f"{self.__class__.__name__}({x!r}, {y!r}, {z!r})"
