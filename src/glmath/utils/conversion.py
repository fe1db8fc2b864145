"""Type conversion utilities."""

from __future__ import annotations
from typing import Sequence, Union
import numpy as np


def to_numpy_array(
    x: Union[np.ndarray, "Matrix4", "Vector3", list],
    dtype: np.dtype = np.float32
) -> np.ndarray:
    """
    Convert input to NumPy array.

    Args:
        x: Input (numpy array, list, Matrix4 or Vector3)
        dtype: Target dtype

    Returns:
        NumPy array. Matrices come out as their 16 column-major values,
        vectors as [x, y, z, 0].
    """
    if hasattr(x, 'rows'):  # Matrix4
        return x.data(dtype)
    elif hasattr(x, 'get_x'):  # Vector3
        return np.asarray(x.data(), dtype=dtype)
    else:
        return np.asarray(x, dtype=dtype)


def to_vector3(x: Union["Vector3", Sequence[float]]) -> "Vector3":
    """
    Convert input to Vector3.

    Args:
        x: Vector3 (returned unchanged) or a sequence of up to 3 numbers

    Returns:
        Vector3
    """
    from ..core.vector import Vector3

    if isinstance(x, Vector3):
        return x
    return Vector3(list(x))
