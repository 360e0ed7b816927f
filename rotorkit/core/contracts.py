"""
Debug-only precondition checks.

Operations such as rotor construction require unit-length inputs. These
requirements are contracts on the caller, not recoverable errors: the checks
are plain ``assert`` statements, so they disappear under ``python -O``, and
they can also be switched off at runtime with
``Config.check_contracts = False``.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from ..utils.config import get_config

if TYPE_CHECKING:
    from ..linalg.vector import Vector3


def contracts_enabled() -> bool:
    """Whether precondition checks run in this process."""
    return __debug__ and get_config().check_contracts


def require_unit(*vectors: "Vector3", what: str = "operation") -> None:
    """
    Assert that every vector has magnitude 1 within the configured tolerance.

    Raises:
        AssertionError: If a vector is not unit length and checks are enabled
    """
    if not contracts_enabled():
        return
    tol = get_config().unit_tolerance
    for v in vectors:
        mag = v.magnitude()
        assert 1.0 - tol < mag < 1.0 + tol, (
            f"{what} requires normalized vectors, got {v!r} with magnitude {mag}"
        )


def require_nonzero(v: "Vector3", what: str = "operation") -> None:
    """
    Assert that a vector is not the zero vector.

    Raises:
        AssertionError: If ``v`` is zero and checks are enabled
    """
    if not contracts_enabled():
        return
    assert v.magnitude() != 0.0, f"{what} requires a non-zero vector"
