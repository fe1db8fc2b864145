"""Camera configuration parser."""

from __future__ import annotations
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field
from omegaconf import DictConfig, OmegaConf

from ..core.matrix import Matrix4
from ..core.vector import Vector3
from .camera import Camera


PROJECTION_TYPES = ("frustum", "ortho")
VIEW_TYPES = ("lookat", "viewpoint", "matrix")

DEFAULT_BOUNDS = {
    "left": -1.0,
    "right": 1.0,
    "bottom": -1.0,
    "top": 1.0,
    "near": 1.0,
    "far": 100.0,
}
DEFAULT_EYE = [0.0, 0.0, 5.0]
DEFAULT_TARGET = [0.0, 0.0, 0.0]
DEFAULT_DIRECTION = [0.0, 0.0, 1.0]
DEFAULT_UP = [0.0, 1.0, 0.0]


@dataclass
class CameraConfig:
    """
    Camera configuration.

    Attributes:
        projection_type: 'frustum' or 'ortho'
        left, right, bottom, top, near, far: Projection bounds
        view_type: 'lookat', 'viewpoint' or 'matrix'
        eye: Camera position (lookat / viewpoint)
        target: Look-at point (lookat)
        direction: View-normal vector, pointing toward the camera (viewpoint)
        up: World up hint (lookat / viewpoint)
        matrix: Explicit row-major view matrix (matrix)
    """
    projection_type: str = "frustum"
    left: float = DEFAULT_BOUNDS["left"]
    right: float = DEFAULT_BOUNDS["right"]
    bottom: float = DEFAULT_BOUNDS["bottom"]
    top: float = DEFAULT_BOUNDS["top"]
    near: float = DEFAULT_BOUNDS["near"]
    far: float = DEFAULT_BOUNDS["far"]
    view_type: str = "lookat"
    eye: List[float] = field(default_factory=lambda: list(DEFAULT_EYE))
    target: List[float] = field(default_factory=lambda: list(DEFAULT_TARGET))
    direction: List[float] = field(default_factory=lambda: list(DEFAULT_DIRECTION))
    up: List[float] = field(default_factory=lambda: list(DEFAULT_UP))
    matrix: Optional[List[Any]] = None

    def __post_init__(self):
        """Reject unknown projection / view kinds."""
        if self.projection_type not in PROJECTION_TYPES:
            raise ValueError(
                f"Unknown projection type '{self.projection_type}', "
                f"expected one of {PROJECTION_TYPES}"
            )
        if self.view_type not in VIEW_TYPES:
            raise ValueError(
                f"Unknown view type '{self.view_type}', expected one of {VIEW_TYPES}"
            )
        if self.view_type == "matrix" and self.matrix is None:
            raise ValueError("View type 'matrix' requires a 'matrix' entry")

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> 'CameraConfig':
        """
        Create CameraConfig from dictionary.

        Expected layout (every key optional):
            projection: {type, left, right, bottom, top, near, far}
            view: {type, eye, target, direction, up, matrix}
        """
        if isinstance(cfg, DictConfig):
            cfg = OmegaConf.to_container(cfg, resolve=True)

        proj = cfg.get("projection") or {}
        view = cfg.get("view") or {}

        return cls(
            projection_type=str(proj.get("type", "frustum")).lower(),
            left=float(proj.get("left", DEFAULT_BOUNDS["left"])),
            right=float(proj.get("right", DEFAULT_BOUNDS["right"])),
            bottom=float(proj.get("bottom", DEFAULT_BOUNDS["bottom"])),
            top=float(proj.get("top", DEFAULT_BOUNDS["top"])),
            near=float(proj.get("near", DEFAULT_BOUNDS["near"])),
            far=float(proj.get("far", DEFAULT_BOUNDS["far"])),
            view_type=str(view.get("type", "lookat")).lower(),
            eye=[float(v) for v in view.get("eye", DEFAULT_EYE)],
            target=[float(v) for v in view.get("target", DEFAULT_TARGET)],
            direction=[float(v) for v in view.get("direction", DEFAULT_DIRECTION)],
            up=[float(v) for v in view.get("up", DEFAULT_UP)],
            matrix=view.get("matrix"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary (same layout as accepted by from_dict)."""
        view = {
            "type": self.view_type,
            "eye": list(self.eye),
            "target": list(self.target),
            "direction": list(self.direction),
            "up": list(self.up),
        }
        if self.matrix is not None:
            view["matrix"] = self.matrix

        return {
            "projection": {
                "type": self.projection_type,
                "left": self.left,
                "right": self.right,
                "bottom": self.bottom,
                "top": self.top,
                "near": self.near,
                "far": self.far,
            },
            "view": view,
        }


def make_camera_from_config(camera_cfg: Dict[str, Any]) -> Camera:
    """
    Build a camera from configuration dictionary.

    This is the main entry point for creating rendering matrices from
    camera parameters, typically loaded from a YAML config file.

    Args:
        camera_cfg: Camera configuration (dict, DictConfig or CameraConfig)

    Returns:
        Camera with both projection and view set

    Example:
        >>> config = {
        ...     "projection": {"type": "frustum", "left": -1, "right": 1,
        ...                    "bottom": -1, "top": 1, "near": 1, "far": 50},
        ...     "view": {"type": "lookat", "eye": [0, 2, 5],
        ...              "target": [0, 0, 0], "up": [0, 1, 0]},
        ... }
        >>> camera = make_camera_from_config(config)
        >>> proj, view = camera.get_projection().data(), camera.get_view().data()
    """
    if isinstance(camera_cfg, CameraConfig):
        cfg = camera_cfg
    else:
        cfg = CameraConfig.from_dict(camera_cfg)

    camera = Camera()

    bounds = (cfg.left, cfg.right, cfg.bottom, cfg.top, cfg.near, cfg.far)
    if cfg.projection_type == "ortho":
        camera.ortho(*bounds)
    else:
        camera.frustum(*bounds)

    if cfg.view_type == "matrix":
        camera.set_view(Matrix4.from_array(cfg.matrix))
    elif cfg.view_type == "viewpoint":
        camera.view_point(Vector3(cfg.eye), Vector3(cfg.direction), Vector3(cfg.up))
    else:
        camera.look_at(Vector3(cfg.eye), Vector3(cfg.target), Vector3(cfg.up))

    return camera
