"""
rotorkit: single-precision 3D rotation toolkit.

Fixed-size vectors, 4x4 matrices and rotors (scalar + bivector elements of
the 3D geometric algebra) as a compact, gimbal-free representation of 3D
rotations. Components are stored in float32 PyTorch tensors.

Key Features:
- Rotor construction from two direction vectors (double or exact angle)
- Sandwich-product rotation of vectors
- Rotor composition, inversion and normalization
- Conversion to homogeneous 4x4 rotation matrices

Example:
    >>> from rotorkit import Vector3, Rotor3
    >>> r = Rotor3.from_vectors_exact(Vector3(1, 0, 0), Vector3(0, 1, 0))
    >>> r.rotated_vec(Vector3(1, 0, 0))  # ~ Vector3(0, 1, 0)
    >>> m = r.rotation_mat()
"""

__version__ = "0.1.0"
__author__ = "rotorkit Contributors"

from . import core
from . import utils
from . import linalg
from . import ga

from .linalg import Vector3, Matrix4
from .ga import Rotor3
from .utils import Config, get_config, set_config, config_override

__all__ = [
    "core",
    "utils",
    "linalg",
    "ga",
    "Vector3",
    "Matrix4",
    "Rotor3",
    "Config",
    "get_config",
    "set_config",
    "config_override",
]
