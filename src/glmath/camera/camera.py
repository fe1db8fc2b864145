"""Camera holding the current projection and view matrices."""

from __future__ import annotations

from ..core.matrix import Matrix4
from ..core.vector import Vector3
from ..utils.debug import debug_matrix_info
from .projection import build_ortho_matrix, build_frustum_matrix
from .lookat import build_lookat_view, build_viewpoint_view


class Camera:
    """
    Projection and view matrices for a scene.

    Both start as identity. ``ortho``/``frustum`` replace the projection and
    ``look_at``/``view_point`` replace the view; the last call of each kind
    wins. Every derivation also returns the matrix it stored.

    Example:
        >>> camera = Camera()
        >>> camera.frustum(-1, 1, -1, 1, 1, 100)
        >>> camera.look_at(Vector3([0, 0, 5]), Vector3(), Vector3([0, 1, 0]))
        >>> uniforms = camera.get_projection().data(), camera.get_view().data()
    """

    def __init__(self):
        self.projection = Matrix4()
        self.view = Matrix4()

    def get_projection(self) -> Matrix4:
        return self.projection

    def get_view(self) -> Matrix4:
        return self.view

    def view_projection(self) -> Matrix4:
        """Projection times view (world -> clip space)."""
        return self.projection.multiply(self.view)

    def ortho(
        self,
        left: float,
        right: float,
        bottom: float,
        top: float,
        near: float,
        far: float
    ) -> Matrix4:
        self.projection = build_ortho_matrix(left, right, bottom, top, near, far)
        debug_matrix_info("Camera.ortho", self.projection)
        return self.projection

    def frustum(
        self,
        left: float,
        right: float,
        bottom: float,
        top: float,
        near: float,
        far: float
    ) -> Matrix4:
        self.projection = build_frustum_matrix(left, right, bottom, top, near, far)
        debug_matrix_info("Camera.frustum", self.projection)
        return self.projection

    def look_at(self, eye: Vector3, target: Vector3, up: Vector3) -> Matrix4:
        self.view = build_lookat_view(eye, target, up)
        debug_matrix_info("Camera.look_at", self.view)
        return self.view

    def view_point(self, eye: Vector3, view_direction: Vector3, up: Vector3) -> Matrix4:
        self.view = build_viewpoint_view(eye, view_direction, up)
        debug_matrix_info("Camera.view_point", self.view)
        return self.view

    def set_view(self, view: Matrix4) -> Matrix4:
        """Replace the view with an explicit matrix."""
        self.view = view
        debug_matrix_info("Camera.set_view", self.view)
        return self.view
