"""
Single-precision 4x4 matrices.

Values are stored row-major in a float32 tensor of shape (16,), so that
``values[r * 4 + c]`` is the element in row r and column c. Column-major
consumers get the transpose through get_column_major().
"""

from __future__ import annotations
from typing import Tuple
import torch

from ..core.constants import DTYPE, MATRIX4_SIZE, DEFAULT_ATOL
from ..core.types import ColumnMajor, ComponentData, as_components
from .vector import Vector3


class Matrix4:
    """
    A 4x4 matrix with float32 values in row-major order.

    Can be constructed from:
    - 16 values in row-major order
    - A 4x4 nested sequence (rows)
    - A tensor holding 16 elements

    Matrix multiplication is available as both ``a * b`` and ``a @ b``.
    """

    def __init__(self, values: ComponentData):
        """
        Initialize a matrix from its values.

        Args:
            values: 16 numbers in row-major order, in any shape

        Raises:
            ValueError: If values does not hold exactly 16 elements
        """
        self.values = as_components(values, MATRIX4_SIZE, name="matrix values")

    @classmethod
    def zero(cls) -> 'Matrix4':
        """Matrix with all values set to 0."""
        return cls(torch.zeros(MATRIX4_SIZE, dtype=DTYPE))

    @classmethod
    def identity(cls) -> 'Matrix4':
        return cls(torch.eye(4, dtype=DTYPE))

    def to_tensor(self) -> torch.Tensor:
        """Copy of the values as a (4, 4) tensor indexed [row, col]."""
        return self.values.reshape(4, 4).clone()

    def get_column_major(self) -> ColumnMajor:
        """
        Return the matrix as 4 columns of 4 floats.

        ``result[c][r]`` equals ``self[r, c]``.
        """
        return self.values.reshape(4, 4).T.tolist()

    def __getitem__(self, index: Tuple[int, int]) -> float:
        row, col = index
        return self.values[row * 4 + col].item()

    # === Products ===

    def __mul__(self, other: 'Matrix4') -> 'Matrix4':
        """Matrix product (row by column)."""
        if isinstance(other, Matrix4):
            return Matrix4(self.values.reshape(4, 4) @ other.values.reshape(4, 4))
        return NotImplemented

    def __matmul__(self, other: 'Matrix4') -> 'Matrix4':
        return self.__mul__(other)

    def transform_point(self, v: Vector3) -> Vector3:
        """
        Apply the matrix to the homogeneous point (x, y, z, 1).

        Returns the first three components of the product; no perspective
        division is done.
        """
        point_h = torch.cat([v.data, torch.ones(1, dtype=DTYPE)])
        result_h = self.values.reshape(4, 4) @ point_h
        return Vector3.from_tensor(result_h[:3])

    def allclose(self, other: 'Matrix4', atol: float = DEFAULT_ATOL) -> bool:
        """Elementwise comparison within an absolute tolerance."""
        return torch.allclose(self.values, other.values, rtol=0.0, atol=atol)

    def __repr__(self) -> str:
        rows = self.values.reshape(4, 4).tolist()
        return f"Matrix4({rows})"
