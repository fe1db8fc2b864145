"""3-component vector for directions and positions."""

from __future__ import annotations
from typing import Iterator, Optional, Sequence, Union
import math
import numpy as np

from .config import STORAGE_DTYPE


class Vector3:
    """
    Vector in 3D space backed by a 4-slot array ``[x, y, z, w]``.

    ``w`` is held at 0 so the vector behaves as a direction when multiplied
    by a 4x4 matrix. Up to 3 input values are read; missing values are 0 and
    anything past index 2 is ignored.

    Example:
        >>> a = Vector3([1, 0, 0])
        >>> a.cross_product(Vector3([0, 1, 0])).data()
        array([0., 0., 1., 0.])
    """

    __slots__ = ("_data",)

    def __init__(self, values: Optional[Sequence[float]] = None):
        self._data = np.zeros(4, dtype=STORAGE_DTYPE)

        if values is not None:
            for i, val in enumerate(values):
                if i >= 3:
                    break
                self._data[i] = val

    def cross_product(self, v: Vector3) -> Vector3:
        """Cross product of the first 3 components."""
        a = self._data
        b = v.data()
        return Vector3([
            a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0],
        ])

    def dot_product(self, v: Vector3) -> float:
        """Dot product of the first 3 components."""
        a = self._data
        b = v.data()
        return float(a[0] * b[0] + a[1] * b[1] + a[2] * b[2])

    def add(self, v: Union[Vector3, Sequence[float]]) -> Vector3:
        """
        Component-wise sum over the shorter of the two operands.

        ``v`` may be another vector or a raw array (such as the one
        returned by :meth:`scale`). Components past the shorter
        operand are left at 0.
        """
        other = _components(v)
        result = Vector3()
        count = min(len(self._data), len(other))
        result._data[:count] = self._data[:count] + other[:count]
        return result

    def subtract(self, v: Union[Vector3, Sequence[float]]) -> Vector3:
        """Component-wise difference over the shorter of the two operands."""
        other = _components(v)
        result = Vector3()
        count = min(len(self._data), len(other))
        result._data[:count] = self._data[:count] - other[:count]
        return result

    def normalize(self) -> Vector3:
        """
        Return a unit-length copy.

        A zero-length vector comes back unscaled instead of producing NaN.
        """
        v = self.copy()
        length = self.length()
        if length == 0:
            return v
        v._data[:3] /= length
        return v

    def length(self) -> float:
        """Euclidean norm of x, y and z."""
        x, y, z = self._data[0], self._data[1], self._data[2]
        return math.sqrt(x * x + y * y + z * z)

    def scale(self, s: float) -> np.ndarray:
        """
        Scale x, y and z in place.

        Note:
            Unlike the other operations this mutates the receiver and
            returns the raw backing array, not a new Vector3. Use
            :meth:`scaled` for a pure version.
        """
        v = self._data
        v[:3] *= s
        return v

    def scaled(self, s: float) -> Vector3:
        """Return a new vector with x, y and z multiplied by ``s``."""
        v = self.copy()
        v._data[:3] *= s
        return v

    def negate(self) -> Vector3:
        return self.scaled(-1.0)

    def copy(self) -> Vector3:
        v = Vector3()
        v._data[:] = self._data
        return v

    def get_x(self) -> float:
        return float(self._data[0])

    def get_y(self) -> float:
        return float(self._data[1])

    def get_z(self) -> float:
        return float(self._data[2])

    def data(self) -> np.ndarray:
        """Backing array ``[x, y, z, 0]`` (not a copy)."""
        return self._data

    def __iter__(self) -> Iterator[float]:
        yield self.get_x()
        yield self.get_y()
        yield self.get_z()

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Vector3({self.get_x():.4f}, {self.get_y():.4f}, {self.get_z():.4f})"


def _components(v) -> np.ndarray:
    if isinstance(v, Vector3):
        return v.data()
    return np.asarray(v, dtype=STORAGE_DTYPE).reshape(-1)
