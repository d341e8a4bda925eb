"""
Matrix module.

Dense 2D float64 matrices: allocation, shape queries, products, reshapes
and Gauss-Jordan row reduction.

Public API:
    M_zero, eye, M_shape, M_copy, M_tolerate   - allocation & shape
    M_as_list, list_as_M                       - flat-buffer conversion
    Mv_product, MM_product                     - products
    M_transpose, M_row_major_order,
    M_column_major_order                       - reshapes
    swap_rows, shelf, M_slice                  - row exchange, [A | B], sub-blocks
    M_reduce, M_inverse, M_determinant         - elimination engine
    reduce_with_info, ReductionResult          - elimination with pivot diagnostics
"""

from qd_vector.matrix._alloc import (
    M_zero,
    eye,
    M_shape,
    M_copy,
    M_tolerate,
    M_as_list,
    list_as_M,
)
from qd_vector.matrix.transforms import (
    SwapMode,
    Mv_product,
    MM_product,
    M_transpose,
    M_row_major_order,
    M_column_major_order,
    swap_rows,
    shelf,
    M_slice,
)
from qd_vector.matrix.reduce import (
    ReductionResult,
    reduce_with_info,
    M_reduce,
    M_inverse,
    M_determinant,
)

__all__ = [
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
]
