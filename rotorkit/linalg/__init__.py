"""
Linear algebra value types: 3D vectors and 4x4 matrices.
"""

from .vector import Vector3
from .matrix import Matrix4

__all__ = [
    "Vector3",
    "Matrix4",
]
