"""
glmath - 3D transformation and camera math for WebGL-style rendering

Column-major 4x4 matrices, 3-vectors and a camera that derives projection
and view matrices, all exported as flat arrays ready for uniform upload.

Components:
    - Core: Matrix4, Vector3
    - Camera: Orthographic / frustum projections, look-at / view-point views
    - Model: Translate / rotate / scale composition
    - Utils: Conversion, validation, screen projection, debug output

Example:
    >>> from glmath import Camera, Matrix4, Vector3
    >>>
    >>> # Model: scale, then rotate, then move
    >>> model = Matrix4().translate(0, 0, -2).multiply(
    ...     Matrix4().rotate(0, 45, 0)).multiply(Matrix4().scale(2, 2, 2))
    >>>
    >>> # Camera
    >>> camera = Camera()
    >>> proj = camera.frustum(-1, 1, -1, 1, 1, 100)
    >>> view = camera.look_at(Vector3([0, 0, 5]), Vector3(), Vector3([0, 1, 0]))
    >>>
    >>> # Upload
    >>> uniforms = [m.data() for m in (proj, view, model)]
"""

__version__ = "1.0.0"

# Core
from .core import Matrix4, Vector3

# Camera
from .camera import (
    Camera,
    CameraConfig,
    make_camera_from_config,
    build_ortho_matrix,
    build_frustum_matrix,
    build_lookat_view,
    build_viewpoint_view,
)

# Model
from .model import ModelTransform

# Utils
from .utils import (
    to_numpy_array,
    to_vector3,
    project_points_to_screen,
    debug_print,
    is_debug_enabled,
)

__all__ = [
    "__version__",

    # Core
    "Matrix4",
    "Vector3",

    # Camera
    "Camera",
    "CameraConfig",
    "make_camera_from_config",
    "build_ortho_matrix",
    "build_frustum_matrix",
    "build_lookat_view",
    "build_viewpoint_view",

    # Model
    "ModelTransform",

    # Utils
    "to_numpy_array",
    "to_vector3",
    "project_points_to_screen",
    "debug_print",
    "is_debug_enabled",
]
