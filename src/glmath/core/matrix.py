"""4x4 transformation matrix."""

from __future__ import annotations
from typing import Optional, Sequence, Union
import math
import numpy as np

from .config import (
    STORAGE_DTYPE,
    UPLOAD_DTYPE,
    IDENTITY_ROW_MAJOR,
    DEFAULT_HTML_PRECISION,
    DEFAULT_TOLERANCE,
)
from .vector import Vector3
from ..utils.debug import debug_print


class Matrix4:
    """
    4x4 matrix for affine and projective transforms.

    Storage is a flat array in COLUMN-MAJOR order: index ``r + 4 * c`` holds
    logical row ``r``, column ``c``. This is the layout a GL uniform upload
    expects.

    Input values are given in ROW-MAJOR order, the way a matrix is typed
    out by hand, and are transposed on construction:

        >>> m = Matrix4([1, 2, 3, 4,
        ...              5, 6, 7, 8,
        ...              9, 10, 11, 12,
        ...              13, 14, 15, 16])
        >>> m.data().tolist()
        [1.0, 5.0, 9.0, 13.0, 2.0, 6.0, 10.0, 14.0, 3.0, 7.0, 11.0, 15.0, 4.0, 8.0, 12.0, 16.0]

    With fewer than 16 values the remaining entries keep their identity
    values; values past the 16th are ignored.

    Transform operations (multiply, translate, rotate, scale) return new
    matrices and never modify the receiver or the argument. Matrices act on
    column vectors and every operation post-multiplies, so the operation
    applied last in a call chain is the first one applied to a vertex.
    """

    __slots__ = ("_m",)
    __hash__ = None

    def __init__(self, values: Optional[Sequence[float]] = None):
        self._m = np.array(IDENTITY_ROW_MAJOR, dtype=STORAGE_DTYPE)

        if values is not None:
            for i, val in enumerate(values):
                if i >= 16:
                    break
                self.set_value(i // 4, i % 4, val)

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def identity(cls) -> Matrix4:
        return cls()

    @classmethod
    def from_column_major(cls, values: Sequence[float]) -> Matrix4:
        """Wrap 16 values that are already in column-major order."""
        mat = cls()
        mat._m[:] = np.asarray(values, dtype=STORAGE_DTYPE).reshape(16)
        return mat

    @classmethod
    def from_array(cls, m) -> Matrix4:
        """
        Build a matrix from a nested 4x4 or flat 16-value row-major array.

        Args:
            m: 4x4 nested sequence / array, or 16 values (row-major)

        Returns:
            New Matrix4

        Raises:
            ValueError: If input cannot be reshaped to 4x4
        """
        arr = np.asarray(m, dtype=STORAGE_DTYPE)

        if arr.shape == (4, 4):
            arr = arr.reshape(16)

        if arr.shape != (16,):
            raise ValueError(
                f"Expected 4x4 matrix or flat length-16 array, got shape {arr.shape}"
            )

        return cls(arr)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def value(self, r: int, c: int) -> float:
        return float(self._m[r + c * 4])

    def set_value(self, r: int, c: int, value: float):
        self._m[r + c * 4] = value

    def data(self, dtype=UPLOAD_DTYPE) -> np.ndarray:
        """Copy of the 16 values in column-major order."""
        return self._m.astype(dtype)

    def rows(self) -> np.ndarray:
        """(4, 4) array in logical row-major layout."""
        return self._m.reshape(4, 4, order="F").copy()

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def multiply(self, other: Union[Matrix4, Vector3]) -> Union[Matrix4, Vector3]:
        """
        Post-multiply by ``other``.

        Args:
            other: Matrix4, or Vector3 (treated as a direction, w = 0)

        Returns:
            ``self * other`` as a new Matrix4, or a new Vector3 holding
            the first 3 components of ``self * [x, y, z, 0]``
        """
        a = self.rows()

        if isinstance(other, Vector3):
            return Vector3(_sum_products(a, other.data()[:, None])[:3, 0])

        product = _sum_products(a, other.rows())
        return Matrix4.from_column_major(product.reshape(16, order="F"))

    def translate(self, x: float, y: float, z: float) -> Matrix4:
        t = Matrix4()
        t._m[12] = x
        t._m[13] = y
        t._m[14] = z
        return self.multiply(t)

    def scale(
        self,
        sx: float,
        sy: float,
        sz: float,
        x: float = 0,
        y: float = 0,
        z: float = 0
    ) -> Matrix4:
        """Scale about the point (x, y, z), by default the origin."""
        s = Matrix4([
            sx, 0, 0, 0,
            0, sy, 0, 0,
            0, 0, sz, 0,
            0, 0, 0, 1,
        ])
        return self.translate(x, y, z).multiply(s).translate(-x, -y, -z)

    def rotate_x(self, theta: float, x: float = 0, y: float = 0, z: float = 0) -> Matrix4:
        return self.rotate(theta, 0, 0, x, y, z)

    def rotate_y(self, theta: float, x: float = 0, y: float = 0, z: float = 0) -> Matrix4:
        return self.rotate(0, theta, 0, x, y, z)

    def rotate_z(self, theta: float, x: float = 0, y: float = 0, z: float = 0) -> Matrix4:
        return self.rotate(0, 0, theta, x, y, z)

    def rotate(
        self,
        thetax: float,
        thetay: float,
        thetaz: float,
        x: float = 0,
        y: float = 0,
        z: float = 0
    ) -> Matrix4:
        """
        Rotate about the point (x, y, z) by angles given in DEGREES.

        The axis matrices are post-multiplied as Rx, Ry, Rz, so on a vertex
        the z rotation happens first, then y, then x.
        """
        cx, sx = _cos_sin(thetax)
        rx = Matrix4([
            1, 0, 0, 0,
            0, cx, -sx, 0,
            0, sx, cx, 0,
            0, 0, 0, 1,
        ])

        cy, sy = _cos_sin(thetay)
        ry = Matrix4([
            cy, 0, sy, 0,
            0, 1, 0, 0,
            -sy, 0, cy, 0,
            0, 0, 0, 1,
        ])

        cz, sz = _cos_sin(thetaz)
        rz = Matrix4([
            cz, -sz, 0, 0,
            sz, cz, 0, 0,
            0, 0, 1, 0,
            0, 0, 0, 1,
        ])

        return (
            self.translate(x, y, z)
            .multiply(rx)
            .multiply(ry)
            .multiply(rz)
            .translate(-x, -y, -z)
        )

    def transpose(self) -> Matrix4:
        return Matrix4.from_column_major(self._m.reshape(4, 4, order="F").T.reshape(16, order="F"))

    def inverse(self) -> Matrix4:
        """
        General 4x4 inverse.

        A singular matrix yields the all-zero matrix rather than an error.
        """
        try:
            inv = np.linalg.inv(self.rows())
        except np.linalg.LinAlgError:
            debug_print("[Matrix4] Error: non-invertible matrix")
            return Matrix4.from_column_major(np.zeros(16))

        return Matrix4.from_column_major(inv.reshape(16, order="F"))

    def transform_point(self, x: float, y: float, z: float) -> np.ndarray:
        """Homogeneous product ``self * [x, y, z, 1]``."""
        return self.rows() @ np.array([x, y, z, 1.0], dtype=STORAGE_DTYPE)

    # ------------------------------------------------------------------
    # Comparison / formatting
    # ------------------------------------------------------------------

    def allclose(self, other: Matrix4, tol: float = DEFAULT_TOLERANCE) -> bool:
        return bool(np.allclose(self._m, other._m, rtol=0.0, atol=tol))

    def as_html(self, precision: int = DEFAULT_HTML_PRECISION) -> str:
        """HTML table with one row per logical matrix row."""
        output = "<table>"
        for r in range(4):
            output += "<tr>"
            for c in range(4):
                output += f"<td>{self.value(r, c):.{precision}f}</td>"
            output += "</tr>"
        output += "</table>"
        return output

    def __matmul__(self, other):
        if isinstance(other, (Matrix4, Vector3)):
            return self.multiply(other)
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, Matrix4):
            return NotImplemented
        return bool(np.array_equal(self._m, other._m))

    def __repr__(self) -> str:
        rows = ",\n        ".join(
            "[" + ", ".join(f"{v:.4f}" for v in row) + "]" for row in self.rows()
        )
        return f"Matrix4([{rows}])"


def _sum_products(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    # Terms are added left to right, k = 0..3
    return (
        a[:, 0:1] * b[0:1, :]
        + a[:, 1:2] * b[1:2, :]
        + a[:, 2:3] * b[2:3, :]
        + a[:, 3:4] * b[3:4, :]
    )


def _cos_sin(degrees: float):
    rad = np.float64(degrees) / 180 * math.pi
    with np.errstate(invalid="ignore"):
        return float(np.cos(rad)), float(np.sin(rad))
