"""Projection matrix construction."""

from __future__ import annotations
import numpy as np

from ..core.matrix import Matrix4


def build_ortho_matrix(
    left: float,
    right: float,
    bottom: float,
    top: float,
    near: float,
    far: float
) -> Matrix4:
    """
    Build OpenGL-style orthographic projection matrix.

    Maps the box [left, right] x [bottom, top] x [-near, -far] in view space
    to the NDC cube [-1, 1]^3.

    Args:
        left, right: Horizontal clipping planes
        bottom, top: Vertical clipping planes
        near, far: Depth clipping distances

    Returns:
        Matrix4 projection

    Notes:
        - Degenerate bounds (right == left, ...) divide by zero and
          produce inf/NaN entries; they are not rejected
    """
    l, r, b, t, n, f = _as_floats(left, right, bottom, top, near, far)

    with np.errstate(divide="ignore", invalid="ignore"):
        return Matrix4([
            2 / (r - l), 0, 0, -((l + r) / (r - l)),
            0, 2 / (t - b), 0, -((t + b) / (t - b)),
            0, 0, -2 / (f - n), -((f + n) / (f - n)),
            0, 0, 0, 1,
        ])


def build_frustum_matrix(
    left: float,
    right: float,
    bottom: float,
    top: float,
    near: float,
    far: float
) -> Matrix4:
    """
    Build perspective frustum matrix.

    The camera looks down -Z; clip.w = -z_view, so points in front of the
    camera end up with w > 0.

    Args:
        left, right: Horizontal extent of the near plane
        bottom, top: Vertical extent of the near plane
        near, far: Depth clipping distances (both positive)

    Returns:
        Matrix4 projection

    Notes:
        - The depth-scale entry is (n - f) / (f - n), which is always -1,
          not the textbook -(f + n) / (f - n)
    """
    l, r, b, t, n, f = _as_floats(left, right, bottom, top, near, far)

    with np.errstate(divide="ignore", invalid="ignore"):
        return Matrix4([
            2 * n / (r - l), 0, (r + l) / (r - l), 0,
            0, 2 * n / (t - b), (t + b) / (t - b), 0,
            0, 0, (-f + n) / (f - n), -2 * (f * n) / (f - n),
            0, 0, -1, 0,
        ])


def _as_floats(*values):
    # numpy scalars give inf/NaN on division by zero instead of raising
    return [np.float64(v) for v in values]
