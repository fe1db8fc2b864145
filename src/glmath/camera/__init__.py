"""Camera system: projection and view transforms."""

from .projection import build_ortho_matrix, build_frustum_matrix
from .lookat import build_lookat_view, build_viewpoint_view
from .camera import Camera
from .config import CameraConfig, make_camera_from_config

__all__ = [
    "build_ortho_matrix",
    "build_frustum_matrix",
    "build_lookat_view",
    "build_viewpoint_view",
    "Camera",
    "CameraConfig",
    "make_camera_from_config",
]
