"""
Single-precision 3D vectors.

A Vector3 wraps a float32 tensor of shape (3,) holding [x, y, z]. It is a
mutable value: normalize() and Rotor3.rotate_vec() write into it in place,
every other operation returns a fresh vector.

Degenerate inputs are not errors. Normalizing the zero vector divides a
float32 tensor by zero and yields NaN components.
"""

from __future__ import annotations
from typing import Iterator, List, Union
import torch

from ..core.constants import DTYPE, VECTOR3_SIZE, DEFAULT_ATOL
from ..core.types import ComponentData, as_components
from ..core.contracts import require_nonzero


class Vector3:
    """
    A 3D vector with float32 components.

    Supports:
    - Componentwise +, - and scalar *, /
    - Dot and cross products
    - Magnitude and normalization
    - Construction of an orthogonal unit vector
    """

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.data = torch.tensor([x, y, z], dtype=DTYPE)

    @classmethod
    def from_tensor(cls, data: ComponentData) -> 'Vector3':
        """
        Create a vector from 3 components.

        Raises:
            ValueError: If data does not hold exactly 3 elements
        """
        v = cls.__new__(cls)
        v.data = as_components(data, VECTOR3_SIZE)
        return v

    @classmethod
    def zero(cls) -> 'Vector3':
        return cls(0.0, 0.0, 0.0)

    # === Components ===

    @property
    def x(self) -> float:
        return self.data[0].item()

    @x.setter
    def x(self, value: float) -> None:
        self.data[0] = value

    @property
    def y(self) -> float:
        return self.data[1].item()

    @y.setter
    def y(self, value: float) -> None:
        self.data[1] = value

    @property
    def z(self) -> float:
        return self.data[2].item()

    @z.setter
    def z(self, value: float) -> None:
        self.data[2] = value

    def to_tensor(self) -> torch.Tensor:
        """Copy of the components as a (3,) tensor."""
        return self.data.clone()

    def tolist(self) -> List[float]:
        return self.data.tolist()

    def clone(self) -> 'Vector3':
        """Create a copy."""
        return Vector3.from_tensor(self.data)

    def __iter__(self) -> Iterator[float]:
        return iter(self.tolist())

    # === Metric ===

    def magnitude(self) -> float:
        """Euclidean norm sqrt(x² + y² + z²)."""
        return torch.sqrt((self.data * self.data).sum()).item()

    def normalize(self) -> None:
        """Scale to unit length in place. The zero vector becomes NaN."""
        self.data = self.data / self.magnitude()

    def normalized(self) -> 'Vector3':
        """Return a unit-length copy. The zero vector gives NaN."""
        return Vector3.from_tensor(self.data / self.magnitude())

    def dot(self, other: 'Vector3') -> float:
        return torch.dot(self.data, other.data).item()

    def cross(self, other: 'Vector3') -> 'Vector3':
        x1, y1, z1 = self.data.unbind(dim=-1)
        x2, y2, z2 = other.data.unbind(dim=-1)
        return Vector3.from_tensor(torch.stack([
            y1 * z2 - z1 * y2,
            z1 * x2 - x1 * z2,
            x1 * y2 - y1 * x2,
        ]))

    def perpendicular(self) -> 'Vector3':
        """
        Return a unit vector orthogonal to self.

        Let m be the index of the first non-zero component (x, then y, then
        z) and n = (m + 1) mod 3. The result has result[n] = self[m] and
        result[m] = -self[n], zeros elsewhere, then gets normalized. Before
        normalization its dot product with self is exactly
        self[m]·self[n] - self[n]·self[m] = 0.

        Requires self to be non-zero; the zero vector gives NaN.
        """
        require_nonzero(self, what="perpendicular()")

        nonzero = (self.data != 0.0).nonzero()
        m = nonzero[0, 0].item() if nonzero.numel() > 0 else 2
        n = (m + 1) % 3

        result = torch.zeros(VECTOR3_SIZE, dtype=DTYPE)
        result[n] = self.data[m]
        result[m] = -self.data[n]

        perp = Vector3.from_tensor(result)
        perp.normalize()
        return perp

    # === Operators ===

    def __add__(self, other: 'Vector3') -> 'Vector3':
        if isinstance(other, Vector3):
            return Vector3.from_tensor(self.data + other.data)
        return NotImplemented

    def __sub__(self, other: 'Vector3') -> 'Vector3':
        if isinstance(other, Vector3):
            return Vector3.from_tensor(self.data - other.data)
        return NotImplemented

    def __neg__(self) -> 'Vector3':
        return Vector3.from_tensor(-self.data)

    def __mul__(self, other: Union[float, int]) -> 'Vector3':
        """Scale by a scalar."""
        if isinstance(other, (int, float)):
            return Vector3.from_tensor(self.data * other)
        return NotImplemented

    def __rmul__(self, other: Union[float, int]) -> 'Vector3':
        return self.__mul__(other)

    def __truediv__(self, other: Union[float, int]) -> 'Vector3':
        """Divide by a scalar. Division by zero gives Inf/NaN components."""
        if isinstance(other, (int, float)):
            return Vector3.from_tensor(self.data / other)
        return NotImplemented

    def allclose(self, other: 'Vector3', atol: float = DEFAULT_ATOL) -> bool:
        """Componentwise comparison within an absolute tolerance."""
        return torch.allclose(self.data, other.data, rtol=0.0, atol=atol)

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"
