"""
Type aliases and component validation for rotorkit.

Every value type wraps a flat float32 tensor:

    Vector3:  (3,)   [x, y, z]
    Matrix4:  (16,)  row-major, values[r * 4 + c]
    Rotor3:   (4,)   [s, xy, yz, zx]

Constructors accept anything ``torch.as_tensor`` understands; the helpers
below turn that into the canonical flat layout or raise ``ValueError``.
"""

from typing import List, Sequence, Union
import torch

from .constants import DTYPE


# =============================================================================
# Type Aliases
# =============================================================================

# Raw component data accepted by the from_tensor()/constructor paths
ComponentData = Union[torch.Tensor, Sequence[float], Sequence[Sequence[float]]]

# Transposed 4x4 matrix handed to column-major consumers
ColumnMajor = List[List[float]]


# =============================================================================
# Validation
# =============================================================================

def as_components(data: ComponentData, size: int, name: str = "components") -> torch.Tensor:
    """
    Convert raw data to a flat, contiguous float32 tensor of ``size`` elements.

    The input may have any shape as long as it holds exactly ``size``
    elements (so a 4x4 nested list is accepted where 16 values are expected).
    The result never aliases ``data``.

    Args:
        data: Tensor or (nested) sequence of numbers
        size: Required number of elements
        name: Name for error messages

    Returns:
        Tensor of shape (size,) and dtype float32

    Raises:
        ValueError: If data does not hold exactly ``size`` elements
    """
    tensor = torch.as_tensor(data, dtype=DTYPE)
    if tensor.numel() != size:
        raise ValueError(
            f"Expected {size} {name}, got {tensor.numel()} "
            f"(shape {tuple(tensor.shape)})"
        )
    return tensor.reshape(size).clone()
