"""
Tests for Gauss-Jordan row reduction, inverse and determinant.

Exact expectations are for small integer matrices whose eliminations
stay exact in binary floating point. Random matrices are checked against
scipy.linalg as an independent reference.
"""

import numpy as np
import pytest
from scipy import linalg

from qd_vector import (
    DimensionError,
    ReductionResult,
    ShapeError,
    SingularMatrixError,
    M_determinant,
    M_inverse,
    M_reduce,
    MM_product,
    eye,
    reduce_with_info,
)
from qd_vector.core.tolerances import (
    EXACT,
    FP64,
    FP64_ILL_CONDITIONED,
    ILL_CONDITIONED_THRESHOLD,
    select_tolerance,
)


AUGMENTED = [
    [1, 0, 1, 1, 0, 0],
    [0, 1, 0, 0, 1, 0],
    [1, 2, 2, 0, 0, 1],
]

REDUCED = [
    [1, 0, 0, 2, 2, -1],
    [0, 1, 0, 0, 1, 0],
    [0, 0, 1, -1, -2, 1],
]

M3 = [
    [1, 0, 1],
    [0, 1, 0],
    [1, 2, 2],
]

M3_INVERSE = [
    [2, 2, -1],
    [0, 1, 0],
    [-1, -2, 1],
]


def tolerance_for(A):
    """Tolerance tier chosen from the condition number of A."""
    return select_tolerance(
        is_ill_conditioned=np.linalg.cond(A) > ILL_CONDITIONED_THRESHOLD
    )


# ═══════════════════════════════════════════════════════════════════════
# M_reduce / reduce_with_info
# ═══════════════════════════════════════════════════════════════════════


class TestReduce:

    def test_augmented_example(self):
        np.testing.assert_allclose(
            M_reduce(AUGMENTED), REDUCED, rtol=EXACT.rtol, atol=EXACT.atol
        )

    def test_input_not_mutated(self):
        M = np.array(AUGMENTED, dtype=np.float64)
        before = M.copy()
        M_reduce(M)
        np.testing.assert_array_equal(M, before)

    def test_pivot_diagnostics(self):
        info = reduce_with_info(AUGMENTED)
        assert isinstance(info, ReductionResult)
        # Column 0 ties between rows 0 and 2: first found wins
        # Column 1 picks row 2 (|2| > |1|)
        assert info.pivot_rows == (0, 2, 2)
        assert info.pivots == (1.0, 2.0, -0.5)
        assert info.n_swaps == 1
        assert info.rank == 3

    def test_partial_pivoting_picks_largest(self):
        info = reduce_with_info([[1, 1], [-4, 2]])
        assert info.pivot_rows[0] == 1
        assert info.pivots[0] == -4.0
        np.testing.assert_allclose(info.matrix, np.eye(2), atol=1e-15)

    def test_identity_is_fixed_point(self):
        np.testing.assert_array_equal(M_reduce(eye(4)), eye(4))

    def test_zero_column_pivot_in_first_row_needs_swap(self):
        np.testing.assert_array_equal(M_reduce([[0, 1], [1, 0]]), [[1, 0], [0, 1]])

    def test_tall_matrix_leaves_extra_rows(self):
        M = [[2, 0], [0, 4], [7, 9]]
        result = M_reduce(M)
        np.testing.assert_array_equal(result[:2], [[1, 0], [0, 1]])
        np.testing.assert_array_equal(result[2], [7, 9])

    def test_wide_matrix_solves_system(self, rng, well_conditioned_matrix):
        A = well_conditioned_matrix
        b = rng.standard_normal(A.shape[0])
        tier = tolerance_for(A)
        reduced = M_reduce(np.column_stack([A, b]))
        np.testing.assert_allclose(reduced[:, :-1], np.eye(A.shape[0]), atol=1e-12)
        np.testing.assert_allclose(
            reduced[:, -1], linalg.solve(A, b),
            rtol=tier.rtol, atol=tier.atol, err_msg=tier.name,
        )

    def test_jagged_rejected(self):
        with pytest.raises(ShapeError):
            M_reduce([[1, 2], [3]])

    def test_singular_propagates_nonfinite(self):
        with pytest.warns(RuntimeWarning, match="degenerate pivot"):
            result = M_reduce([[1, 2], [2, 4]])
        assert not np.all(np.isfinite(result))

    def test_warning_points_at_caller(self):
        with pytest.warns(RuntimeWarning) as record:
            M_reduce([[1, 2], [2, 4]])
        assert record[0].filename == __file__

    def test_info_warning_points_at_caller(self, singular_matrix):
        with pytest.warns(RuntimeWarning) as record:
            reduce_with_info(singular_matrix)
        assert record[0].filename == __file__

    def test_singular_rank(self, singular_matrix):
        with pytest.warns(RuntimeWarning):
            info = reduce_with_info(singular_matrix)
        assert info.rank == 2

    def test_strict_raises(self):
        with pytest.raises(SingularMatrixError) as exc_info:
            M_reduce([[0, 0], [0, 1]], strict=True)
        err = exc_info.value
        assert err.matrix_name == 'M'
        assert err.pivot_index == 0
        assert err.pivot_value == 0.0
        assert err.rank == 0
        assert err.expected_rank == 2

    def test_strict_accepts_regular(self):
        np.testing.assert_allclose(
            M_reduce(AUGMENTED, strict=True), REDUCED, rtol=EXACT.rtol, atol=EXACT.atol
        )

    def test_strict_custom_name(self):
        with pytest.raises(SingularMatrixError, match="A is singular"):
            reduce_with_info([[0.0]], strict=True, matrix_name='A')


# ═══════════════════════════════════════════════════════════════════════
# M_inverse
# ═══════════════════════════════════════════════════════════════════════


class TestInverse:

    def test_example(self):
        inv = M_inverse(M3)
        np.testing.assert_allclose(inv, M3_INVERSE, rtol=EXACT.rtol, atol=EXACT.atol)

    def test_products_are_identity(self):
        inv = M_inverse(M3)
        np.testing.assert_allclose(MM_product(inv, M3), eye(3), atol=FP64.atol)
        np.testing.assert_allclose(MM_product(M3, inv), eye(3), atol=FP64.atol)

    def test_matches_scipy(self, well_conditioned_matrix):
        A = well_conditioned_matrix
        tier = tolerance_for(A)
        assert tier is FP64
        np.testing.assert_allclose(
            M_inverse(A), linalg.inv(A),
            rtol=tier.rtol, atol=tier.atol, err_msg=tier.name,
        )

    def test_ill_conditioned_hilbert(self, hilbert_matrix):
        H, H_inv = hilbert_matrix
        tier = tolerance_for(H)
        assert tier is FP64_ILL_CONDITIONED
        np.testing.assert_allclose(
            M_inverse(H, strict=True), H_inv,
            rtol=tier.rtol, atol=tier.atol, err_msg=tier.name,
        )

    def test_random_inverse_round_trip(self, well_conditioned_matrix):
        A = well_conditioned_matrix
        inv = M_inverse(A)
        np.testing.assert_allclose(MM_product(A, inv), np.eye(5), atol=1e-12)
        np.testing.assert_allclose(MM_product(inv, A), np.eye(5), atol=1e-12)

    def test_one_by_one(self):
        np.testing.assert_array_equal(M_inverse([[4.0]]), [[0.25]])

    def test_input_not_mutated(self):
        M = np.array(M3, dtype=np.float64)
        M_inverse(M)
        np.testing.assert_array_equal(M, M3)

    def test_non_square(self):
        with pytest.raises(DimensionError, match="square"):
            M_inverse([[1, 2, 3], [4, 5, 6]])

    def test_singular_propagates_nonfinite(self, singular_matrix):
        with pytest.warns(RuntimeWarning, match="singular"):
            inv = M_inverse(singular_matrix)
        assert inv.shape == (3, 3)
        assert not np.all(np.isfinite(inv))

    def test_singular_warning_points_at_caller(self, singular_matrix):
        with pytest.warns(RuntimeWarning) as record:
            M_inverse(singular_matrix)
        assert record[0].filename == __file__

    def test_singular_strict(self, singular_matrix):
        with pytest.raises(SingularMatrixError) as exc_info:
            M_inverse(singular_matrix, strict=True)
        assert exc_info.value.matrix_name == 'M'
        assert exc_info.value.pivot_index == 2
        assert exc_info.value.expected_rank == 3


# ═══════════════════════════════════════════════════════════════════════
# M_determinant
# ═══════════════════════════════════════════════════════════════════════


class TestDeterminant:

    def test_example(self):
        assert M_determinant(M3) == pytest.approx(1.0)

    def test_swap_flips_sign(self):
        assert M_determinant([[0, 1], [1, 0]]) == -1.0

    def test_matches_scipy(self, well_conditioned_matrix):
        A = well_conditioned_matrix
        assert M_determinant(A) == pytest.approx(linalg.det(A), rel=1e-10)

    def test_exact_zero_pivot(self):
        assert M_determinant([[0, 0], [0, 1]]) == 0.0

    def test_singular_is_near_zero(self, singular_matrix):
        assert M_determinant(singular_matrix) == pytest.approx(0.0, abs=1e-12)

    def test_non_square(self):
        with pytest.raises(DimensionError):
            M_determinant([[1, 2]])
