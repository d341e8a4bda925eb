"""
qd_vector: quick-and-dirty dense vector and matrix primitives.

Vectors and matrices are float64 numpy arrays; every function accepts
plain nested lists as well and returns fresh arrays.

Submodules:
    vectors: Vector arithmetic, dot/cross products, norms
    matrix: Allocation, shape, products, reshapes, Gauss-Jordan reduction
    affine: Roll/pitch/yaw rotations and 4x4 affine transforms
    core: Exceptions, validation, tolerances
"""

from typing import Final

__version__ = "0.1.0"

name: Final[str] = "qd_vector"

from qd_vector.vectors import (
    v_zero,
    v_add,
    v_sub,
    v_scale,
    v_minimum,
    v_maximum,
    v_dot,
    v_cross,
    v_length,
    v_normalize,
)
from qd_vector.matrix import (
    SwapMode,
    M_zero,
    eye,
    M_shape,
    M_copy,
    M_tolerate,
    M_as_list,
    list_as_M,
    Mv_product,
    MM_product,
    M_transpose,
    M_row_major_order,
    M_column_major_order,
    swap_rows,
    shelf,
    M_slice,
    ReductionResult,
    reduce_with_info,
    M_reduce,
    M_inverse,
    M_determinant,
)
from qd_vector.affine import (
    M_roll,
    M_pitch,
    M_yaw,
    affine3d,
    apply_affine3d,
)
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

__all__ = [
    "__version__",
    "name",
    # Vectors
    "v_zero",
    "v_add",
    "v_sub",
    "v_scale",
    "v_minimum",
    "v_maximum",
    "v_dot",
    "v_cross",
    "v_length",
    "v_normalize",
    # Matrices
    "M_zero",
    "eye",
    "M_shape",
    "M_copy",
    "M_tolerate",
    "M_as_list",
    "list_as_M",
    "SwapMode",
    "Mv_product",
    "MM_product",
    "M_transpose",
    "M_row_major_order",
    "M_column_major_order",
    "swap_rows",
    "shelf",
    "M_slice",
    "ReductionResult",
    "reduce_with_info",
    "M_reduce",
    "M_inverse",
    "M_determinant",
    # Affine
    "M_roll",
    "M_pitch",
    "M_yaw",
    "affine3d",
    "apply_affine3d",
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
]
