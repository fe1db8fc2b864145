"""2D projection utilities."""

from __future__ import annotations
from typing import Tuple
import numpy as np

from .validation import validate_points, validate_viewport


def project_points_to_screen(
    xyz: np.ndarray,
    mvp,
    width: int,
    height: int
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Project 3D points to 2D screen coordinates.

    Args:
        xyz: (N, 3) model-space positions
        mvp: Matrix4 combining projection, view and model
        width: Image width
        height: Image height

    Returns:
        means2D: (N, 2) screen coordinates (u, v)
        valid: (N,) boolean mask for valid projections

    Notes:
        - Points with w <= 0 (behind the camera) are invalid
        - Invalid points are set to NaN
        - Uses perspective division (clip space -> NDC -> screen)
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    validate_points(xyz)
    validate_viewport(width, height)

    N = xyz.shape[0]

    # Homogeneous coordinates
    xyz_homogeneous = np.concatenate([
        xyz,
        np.ones((N, 1), dtype=np.float64)
    ], axis=1)

    # Apply transform (rows act on column vectors)
    clip = xyz_homogeneous @ mvp.rows().T

    # Perspective division
    w = clip[:, 3]

    # Validate: finite and in front of camera
    valid = np.isfinite(clip).all(axis=1) & (w > 0)

    # NDC coordinates
    ndc = np.full((N, 2), np.nan, dtype=np.float64)
    ndc[valid, 0] = clip[valid, 0] / w[valid]
    ndc[valid, 1] = clip[valid, 1] / w[valid]

    # Screen coordinates
    u = (ndc[:, 0] * 0.5 + 0.5) * float(width)
    v = (-ndc[:, 1] * 0.5 + 0.5) * float(height)

    means2D = np.stack([u, v], axis=1).astype(np.float32)

    return means2D, valid
