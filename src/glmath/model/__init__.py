"""Model transforms for renderable objects."""

from .transform import ModelTransform

__all__ = [
    "ModelTransform",
]
