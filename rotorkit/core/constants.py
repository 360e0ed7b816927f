"""
Centralized constants for rotorkit.

This module defines the storage dtype and the numeric tolerances used
throughout the library. The tolerances here are the defaults of
:class:`rotorkit.utils.config.Config`; change them per process through the
config rather than by editing this module.

Usage:
    from rotorkit.core.constants import DTYPE, DEFAULT_UNIT_TOLERANCE
"""

import torch


# =============================================================================
# Storage
# =============================================================================

# All value types store their components as single-precision tensors
DTYPE: torch.dtype = torch.float32

# Component counts of the value types
VECTOR3_SIZE: int = 3
MATRIX4_SIZE: int = 16
ROTOR3_SIZE: int = 4


# =============================================================================
# Contract Tolerances
# =============================================================================

# Allowed |magnitude - 1| for vectors passed where unit length is required
DEFAULT_UNIT_TOLERANCE: float = 1e-4

# Half-width of the window around a.b == -1 treated as antiparallel
DEFAULT_ANTIPARALLEL_TOLERANCE: float = 1e-5


# =============================================================================
# Comparison Defaults
# =============================================================================

# Absolute tolerance used by the allclose() helpers
DEFAULT_ATOL: float = 1e-5
