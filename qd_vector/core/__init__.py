"""
Core infrastructure for qd_vector.

Shared abstractions used by the vector, matrix and affine modules.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    tolerances: Tolerance tiers and pivot threshold
"""

from qd_vector.core.exceptions import (
    QdVectorError,
    ValidationError,
    DimensionError,
    ShapeError,
    ShapeMismatchError,
    IncompatibleShapeError,
    RowMismatchError,
    NumericalError,
    SingularMatrixError,
    ZeroVectorError,
)
from qd_vector.core.tolerances import (
    ToleranceTier,
    ILL_CONDITIONED_THRESHOLD,
    TOLERATE_EPSILON,
    select_tolerance,
    pivot_tolerance,
)

__all__ = [
    # Exceptions
    "QdVectorError",
    "ValidationError",
    "DimensionError",
    "ShapeError",
    "ShapeMismatchError",
    "IncompatibleShapeError",
    "RowMismatchError",
    "NumericalError",
    "SingularMatrixError",
    "ZeroVectorError",
    # Tolerances
    "ToleranceTier",
    "ILL_CONDITIONED_THRESHOLD",
    "TOLERATE_EPSILON",
    "select_tolerance",
    "pivot_tolerance",
]
