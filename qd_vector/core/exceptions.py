"""
Exception hierarchy for qd_vector.

All exceptions inherit from QdVectorError to allow catching any
library-specific error. Shape problems are ValidationErrors; problems that
only show up during elimination are NumericalErrors.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class QdVectorError(Exception):
    """Base exception for all qd_vector errors."""
    pass


class ValidationError(QdVectorError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Vector or matrix dimensions are incorrect or inconsistent.

    Raised when lengths don't match, when an array has the wrong number
    of dimensions, or when indices fall outside a matrix.
    """
    pass


class ShapeError(DimensionError):
    """
    Matrix rows have inconsistent lengths, or the matrix has no rows.

    Raised by the shape check in M_shape(M, check=True).
    """
    pass


class ShapeMismatchError(DimensionError):
    """
    Flat list length does not match the requested matrix shape.

    Attributes:
        length: Number of items in the flat list
        rows: Requested row count
        cols: Requested column count
    """

    def __init__(
        self,
        message: str,
        length: int | None = None,
        rows: int | None = None,
        cols: int | None = None
    ):
        super().__init__(message)
        self.length = length
        self.rows = rows
        self.cols = cols


class IncompatibleShapeError(DimensionError):
    """
    Two matrices cannot be combined.

    Raised by MM_product when the inner dimensions disagree.

    Attributes:
        left_shape: Shape of the left operand
        right_shape: Shape of the right operand
    """

    def __init__(
        self,
        message: str,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape


class RowMismatchError(IncompatibleShapeError):
    """
    Row counts differ in a horizontal concatenation.

    Raised by shelf([M1 | M2]) when M1 and M2 have different row counts.
    """
    pass


class NumericalError(QdVectorError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    Only raised by operations called with strict=True; the default is to
    let IEEE-754 inf/nan propagate.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when elimination meets a pivot at or below the pivot tolerance.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Column at which the degenerate pivot was found
        pivot_value: The degenerate pivot value
        rank: Number of usable pivots found before failing
        expected_rank: Expected rank (min(rows, cols))
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None,
        pivot_value: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index
        self.pivot_value = pivot_value
        self.rank = rank
        self.expected_rank = expected_rank


class ZeroVectorError(NumericalError):
    """
    Vector has zero length and cannot be normalized.

    Attributes:
        size: Number of components of the offending vector
    """

    def __init__(self, message: str, size: int | None = None):
        super().__init__(message)
        self.size = size
