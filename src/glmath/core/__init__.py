"""Core math types: 4x4 matrices and 3-vectors."""

from .vector import Vector3
from .matrix import Matrix4

__all__ = [
    "Vector3",
    "Matrix4",
]
