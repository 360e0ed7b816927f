"""
Rotors for 3D rotations.

A rotor is an element of the even subalgebra of the 3D geometric algebra:

    R = s + xy*e₁₂ + yz*e₂₃ + zx*e₃₁

It plays the role of a unit quaternion, but is built directly from the
geometric product of two vectors. Rotors act on vectors through the sandwich
product:

    v' = R v R⁻¹

Component ordering:
[s, xy, yz, zx]
 0   1   2   3

All operations assume a unit rotor (s² + xy² + yz² + zx² = 1). Nothing
enforces it: long chains of append() drift away from unit length and must be
brought back with normalize(), otherwise rotated vectors pick up a scale.
"""

from __future__ import annotations
import logging
from typing import Iterator, List
import torch

from ..core.constants import DTYPE, ROTOR3_SIZE, DEFAULT_ATOL
from ..core.types import ComponentData, as_components
from ..core.contracts import require_unit
from ..linalg.vector import Vector3
from ..linalg.matrix import Matrix4
from ..utils.config import get_config

logger = logging.getLogger(__name__)


# Component indices
IDX_S = 0
IDX_XY = 1
IDX_YZ = 2
IDX_ZX = 3


class Rotor3:
    """
    A rotor representing a rotation in 3D.

    Can be constructed from:
    - Raw components (s, xy, yz, zx)
    - Two unit vectors, rotating by twice the angle between them
    - Two unit vectors, rotating by exactly the angle between them

    In-place operations (invert, append, normalize, rotate_vec) have value
    counterparts (inverted, appended, normalized, rotated_vec).
    """

    def __init__(self, s: float = 1.0, xy: float = 0.0, yz: float = 0.0, zx: float = 0.0):
        self.components = torch.tensor([s, xy, yz, zx], dtype=DTYPE)

    @classmethod
    def from_tensor(cls, data: ComponentData) -> 'Rotor3':
        """
        Create a rotor from components [s, xy, yz, zx].

        Raises:
            ValueError: If data does not hold exactly 4 elements
        """
        r = cls.__new__(cls)
        r.components = as_components(data, ROTOR3_SIZE)
        return r

    @classmethod
    def identity(cls) -> 'Rotor3':
        """Rotor that leaves every vector unchanged."""
        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_vectors(cls, a: Vector3, b: Vector3) -> 'Rotor3':
        """
        Rotor rotating by TWICE the angle from a to b, in the plane of a and b.

        This is the scalar + bivector part of the geometric product b a:

            s  = a·b
            xy = b.x*a.y - b.y*a.x
            yz = b.y*a.z - b.z*a.y
            zx = b.z*a.x - b.x*a.z

        Both vectors must be unit length; other inputs give a mis-scaled rotor.
        """
        require_unit(a, b, what="Rotor3.from_vectors()")

        ax, ay, az = a.data.unbind(dim=-1)
        bx, by, bz = b.data.unbind(dim=-1)

        return cls.from_tensor(torch.stack([
            bx * ax + by * ay + bz * az,
            bx * ay - by * ax,
            by * az - bz * ay,
            bz * ax - bx * az,
        ]))

    @classmethod
    def from_vectors_exact(cls, a: Vector3, b: Vector3) -> 'Rotor3':
        """
        Rotor rotating by exactly the angle from a to b.

        Builds the double-angle rotor from a to the unit bisector of a and b.
        When a and b are antiparallel the bisector (a + b)/|a + b| is
        undefined, and a.perpendicular() is used instead, which gives a
        180° rotation about an axis perpendicular to a.

        Both vectors must be unit length.
        """
        require_unit(a, b, what="Rotor3.from_vectors_exact()")

        tol = get_config().antiparallel_tolerance
        cos_angle = a.dot(b)
        if -1.0 - tol < cos_angle < -1.0 + tol:
            logger.debug(f"Antiparallel inputs (a·b = {cos_angle}), using perpendicular bisector")
            bisector = a.perpendicular()
        else:
            bisector = (a + b).normalized()

        return cls.from_vectors(a, bisector)

    # === Components ===

    @property
    def s(self) -> float:
        """Scalar part."""
        return self.components[IDX_S].item()

    @s.setter
    def s(self, value: float) -> None:
        self.components[IDX_S] = value

    @property
    def xy(self) -> float:
        """Bivector part in the xy plane (e₁₂)."""
        return self.components[IDX_XY].item()

    @xy.setter
    def xy(self, value: float) -> None:
        self.components[IDX_XY] = value

    @property
    def yz(self) -> float:
        """Bivector part in the yz plane (e₂₃)."""
        return self.components[IDX_YZ].item()

    @yz.setter
    def yz(self, value: float) -> None:
        self.components[IDX_YZ] = value

    @property
    def zx(self) -> float:
        """Bivector part in the zx plane (e₃₁)."""
        return self.components[IDX_ZX].item()

    @zx.setter
    def zx(self, value: float) -> None:
        self.components[IDX_ZX] = value

    def to_tensor(self) -> torch.Tensor:
        """Copy of the components [s, xy, yz, zx] as a (4,) tensor."""
        return self.components.clone()

    def tolist(self) -> List[float]:
        return self.components.tolist()

    def clone(self) -> 'Rotor3':
        """Create a copy."""
        return Rotor3.from_tensor(self.components)

    def __iter__(self) -> Iterator[float]:
        return iter(self.tolist())

    # === Unary operations ===

    def invert(self) -> None:
        """
        Reverse the rotor in place: negate the bivector part.

        For a unit rotor the reverse is the inverse rotation.
        """
        self.components[IDX_XY:] = -self.components[IDX_XY:]

    def inverted(self) -> 'Rotor3':
        """Return the reverse (inverse) rotation."""
        result = self.clone()
        result.invert()
        return result

    def magnitude(self) -> float:
        """sqrt(s² + xy² + yz² + zx²), 1 for a unit rotor."""
        return torch.sqrt((self.components * self.components).sum()).item()

    def normalize(self) -> None:
        """
        Rescale to a unit rotor in place.

        Call this periodically after chains of append(). The zero rotor
        becomes NaN.
        """
        self.components = self.components / self.magnitude()

    def normalized(self) -> 'Rotor3':
        """Return a unit-length copy."""
        result = self.clone()
        result.normalize()
        return result

    # === Action on vectors ===

    def rotate_vec(self, v: Vector3) -> None:
        """
        Rotate v in place by the sandwich product R v R⁻¹.

        Expanded as two products: t = R v (a vector part plus a trivector
        part txyz), then t R⁻¹, whose trivector part vanishes.
        """
        s, xy, yz, zx = self.components.unbind(dim=-1)
        vx, vy, vz = v.data.unbind(dim=-1)

        tx = s * vx + xy * vy - zx * vz
        ty = s * vy - xy * vx + yz * vz
        tz = s * vz - yz * vy + zx * vx
        txyz = xy * vz + yz * vx + zx * vy

        v.data = torch.stack([
            tx * s + ty * xy - tz * zx + txyz * yz,
            ty * s - tx * xy + tz * yz + txyz * zx,
            tz * s + tx * zx - ty * yz + txyz * xy,
        ])

    def rotated_vec(self, v: Vector3) -> Vector3:
        """Return v rotated by R v R⁻¹, leaving v untouched."""
        result = v.clone()
        self.rotate_vec(result)
        return result

    # === Composition ===

    def __mul__(self, other: 'Rotor3') -> 'Rotor3':
        """
        Geometric product self * other.

        Under the sandwich product, (self * other) applies other first,
        then self.
        """
        if not isinstance(other, Rotor3):
            return NotImplemented

        s, xy, yz, zx = self.components.unbind(dim=-1)
        rs, rxy, ryz, rzx = other.components.unbind(dim=-1)

        return Rotor3.from_tensor(torch.stack([
            s * rs - xy * rxy - yz * ryz - zx * rzx,
            s * rxy + xy * rs - yz * rzx + zx * ryz,
            s * ryz + yz * rs + xy * rzx - zx * rxy,
            s * rzx + zx * rs - xy * ryz + yz * rxy,
        ]))

    def append(self, other: 'Rotor3') -> None:
        """
        Compose in place: afterwards self rotates by the old self, then by other.

        The result is not renormalized.
        """
        self.components = (other * self).components

    def appended(self, other: 'Rotor3') -> 'Rotor3':
        """Return the rotation "self, then other"."""
        return other * self

    # === Conversions ===

    def rotation_mat(self) -> Matrix4:
        """
        Convert to a 4x4 homogeneous rotation matrix (row-major).

        Column c of the upper-left 3x3 block is the image of the c-th basis
        vector under rotate_vec(); the last row and column are (0, 0, 0, 1).
        The entries are the closed form of those three rotations in terms of
        the rotor components.
        """
        s, xy, yz, zx = self.components.unbind(dim=-1)

        ss, xyxy, yzyz, zxzx = s * s, xy * xy, yz * yz, zx * zx
        s_xy, s_yz, s_zx = s * xy, s * yz, s * zx
        xy_yz, yz_zx, zx_xy = xy * yz, yz * zx, zx * xy

        # Row 0
        m00 = ss - xyxy + yzyz - zxzx
        m01 = 2 * (s_xy + yz_zx)
        m02 = 2 * (xy_yz - s_zx)

        # Row 1
        m10 = 2 * (yz_zx - s_xy)
        m11 = ss - xyxy - yzyz + zxzx
        m12 = 2 * (s_yz + zx_xy)

        # Row 2
        m20 = 2 * (s_zx + xy_yz)
        m21 = 2 * (zx_xy - s_yz)
        m22 = ss + xyxy - yzyz - zxzx

        zero = torch.zeros((), dtype=DTYPE)
        one = torch.ones((), dtype=DTYPE)

        return Matrix4(torch.stack([
            m00, m01, m02, zero,
            m10, m11, m12, zero,
            m20, m21, m22, zero,
            zero, zero, zero, one,
        ]))

    # === Comparison ===

    def allclose(self, other: 'Rotor3', atol: float = DEFAULT_ATOL) -> bool:
        """Componentwise comparison within an absolute tolerance."""
        return torch.allclose(self.components, other.components, rtol=0.0, atol=atol)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rotor3):
            return NotImplemented
        return torch.equal(self.components, other.components)

    def __repr__(self) -> str:
        return f"Rotor3(s={self.s}, xy={self.xy}, yz={self.yz}, zx={self.zx})"
