"""Model matrix composition for a renderable object."""

from __future__ import annotations
from typing import Any, Dict, List, Optional

from ..core.matrix import Matrix4


class ModelTransform:
    """
    Translate / rotate / scale state of one object.

    The model matrix is composed as

        translate * rotate * scale * world

    so a vertex gets the world matrix first, then the object's scale, then
    its rotation, then its translation. Reversing this order gives a
    different (wrong) placement.

    Each setter rebuilds its matrix from identity; location, size and
    orientation accumulate across calls for bookkeeping.

    Attributes:
        translate_matrix: Current translation
        rotate_matrix: Current rotation (degrees, Rx * Ry * Rz)
        scale_matrix: Current scale
        world: Base transform applied before everything else
        location: Accumulated translation [x, y, z]
        size: Accumulated scale factors [w, h, d]
        orientation: Accumulated rotation angles in degrees [x, y, z]
    """

    def __init__(self, world: Optional[Matrix4] = None):
        self.translate_matrix = Matrix4()
        self.rotate_matrix = Matrix4()
        self.scale_matrix = Matrix4()
        self.world = world if world is not None else Matrix4()

        self.location = [0.0, 0.0, 0.0]
        self.size = [1.0, 1.0, 1.0]
        self.orientation = [0.0, 0.0, 0.0]

    def move(self, x: float, y: float, z: float):
        self.translate_matrix = Matrix4().translate(x, y, z)
        self.location = [self.location[0] + x, self.location[1] + y, self.location[2] + z]

    def resize(self, w: float, h: float, d: float):
        self.scale_matrix = Matrix4().scale(w, h, d)
        self.size = [self.size[0] * w, self.size[1] * h, self.size[2] * d]

    def orient(self, tx: float, ty: float, tz: float):
        self.rotate_matrix = Matrix4().rotate(tx, ty, tz)
        self.orientation = [
            self.orientation[0] + tx,
            self.orientation[1] + ty,
            self.orientation[2] + tz,
        ]

    def get_location(self) -> List[float]:
        return self.location

    def get_size(self) -> List[float]:
        return self.size

    def get_orientation(self) -> List[float]:
        return self.orientation

    def model(self) -> Matrix4:
        return (
            self.translate_matrix
            .multiply(self.rotate_matrix)
            .multiply(self.scale_matrix)
            .multiply(self.world)
        )

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> 'ModelTransform':
        """
        Create from a dict with optional 'location', 'orientation', 'size'.

        Raises:
            ValueError: If an entry does not hold exactly 3 numbers
        """
        transform = cls()
        location = _triple(cfg, "location")
        if location is not None:
            transform.move(*location)
        orientation = _triple(cfg, "orientation")
        if orientation is not None:
            transform.orient(*orientation)
        size = _triple(cfg, "size")
        if size is not None:
            transform.resize(*size)
        return transform


def _triple(cfg: Dict[str, Any], key: str) -> Optional[List[float]]:
    values = cfg.get(key)
    if values is None:
        return None
    if isinstance(values, (str, bytes, int, float)):
        values = [values]
    values = list(values)
    if len(values) != 3:
        raise ValueError(f"model.{key} must have 3 values, got {len(values)}")
    return [float(v) for v in values]
