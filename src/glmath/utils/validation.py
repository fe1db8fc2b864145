"""Input validation utilities."""

from __future__ import annotations
import numpy as np


def validate_points(xyz: np.ndarray):
    """
    Validate a point array.

    Args:
        xyz: Point positions

    Raises:
        ValueError: If xyz is not (N, 3)
    """
    if xyz.ndim != 2 or xyz.shape[1] != 3:
        raise ValueError(f"xyz must be (N, 3), got {xyz.shape}")


def validate_viewport(width: int, height: int):
    """
    Validate viewport dimensions.

    Raises:
        ValueError: If width or height is not positive
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Viewport must have positive size, got {width}x{height}")
