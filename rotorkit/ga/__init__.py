"""
Geometric algebra module.

Implements rotors of the 3D even subalgebra (scalar + e₁₂, e₂₃, e₃₁) and
their action on vectors.
"""

from .rotor import (
    Rotor3,
    IDX_S,
    IDX_XY,
    IDX_YZ,
    IDX_ZX,
)

__all__ = [
    "Rotor3",
    "IDX_S",
    "IDX_XY",
    "IDX_YZ",
    "IDX_ZX",
]
