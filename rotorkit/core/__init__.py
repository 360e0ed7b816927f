"""
Core module for rotorkit.

Contains:
- Constants: storage dtype and default tolerances
- Types: type aliases and component validation
- Contracts: debug-only precondition checks
"""

from .constants import (
    DTYPE,
    VECTOR3_SIZE,
    MATRIX4_SIZE,
    ROTOR3_SIZE,
    DEFAULT_UNIT_TOLERANCE,
    DEFAULT_ANTIPARALLEL_TOLERANCE,
    DEFAULT_ATOL,
)

from .types import (
    ComponentData,
    ColumnMajor,
    as_components,
)

from .contracts import (
    contracts_enabled,
    require_unit,
    require_nonzero,
)

__all__ = [
    # Constants
    "DTYPE",
    "VECTOR3_SIZE",
    "MATRIX4_SIZE",
    "ROTOR3_SIZE",
    "DEFAULT_UNIT_TOLERANCE",
    "DEFAULT_ANTIPARALLEL_TOLERANCE",
    "DEFAULT_ATOL",
    # Types
    "ComponentData",
    "ColumnMajor",
    "as_components",
    # Contracts
    "contracts_enabled",
    "require_unit",
    "require_nonzero",
]
