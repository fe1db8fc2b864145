"""View matrix construction."""

from __future__ import annotations

from ..core.matrix import Matrix4
from ..core.vector import Vector3


def _basis_view(eye: Vector3, u: Vector3, v: Vector3, n: Vector3) -> Matrix4:
    # Rows are the camera axes; the translation moves eye to the origin
    rotation = Matrix4([
        u.get_x(), u.get_y(), u.get_z(), 0,
        v.get_x(), v.get_y(), v.get_z(), 0,
        n.get_x(), n.get_y(), n.get_z(), 0,
        0, 0, 0, 1,
    ])
    return rotation.translate(-eye.get_x(), -eye.get_y(), -eye.get_z())


def build_lookat_view(eye: Vector3, target: Vector3, up: Vector3) -> Matrix4:
    """
    Build world-to-view matrix from look-at parameters.

    Camera basis (right-handed, camera looks down -n):
        n = normalize(eye - target)
        u = normalize(up x n)      (right)
        v = normalize(n x u)       (up)

    Args:
        eye: Camera position in world coordinates
        target: Look-at point in world coordinates
        up: World 'up' hint

    Returns:
        Matrix4 view transform

    Notes:
        - No degenerate-case handling: eye == target or up parallel to
          (eye - target) give zero axes, which stay zero
    """
    n = eye.subtract(target).normalize()
    u = up.cross_product(n).normalize()
    v = n.cross_product(u).normalize()

    return _basis_view(eye, u, v, n)


def build_viewpoint_view(eye: Vector3, view_direction: Vector3, up: Vector3) -> Matrix4:
    """
    Build world-to-view matrix from a view-normal direction.

    Unlike :func:`build_lookat_view`, the camera axis is given directly.
    ``view_direction`` points from the scene toward the camera (the same
    sense as ``eye - target``). The up vector is made orthogonal to it by
    Gram-Schmidt:

        n = normalize(view_direction)
        v = normalize(up - (up . n) n)
        u = normalize(v x n)

    Args:
        eye: Camera position in world coordinates
        view_direction: View-normal vector
        up: World 'up' hint

    Returns:
        Matrix4 view transform
    """
    n = view_direction.normalize()
    alpha = up.dot_product(n)
    v = up.subtract(n.scaled(alpha)).normalize()
    u = v.cross_product(n).normalize()

    return _basis_view(eye, u, v, n)
