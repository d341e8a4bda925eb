"""
Tests for rotation constructors and 4x4 affine transforms.
"""

import math

import numpy as np
import pytest

from qd_vector import (
    DimensionError,
    M_determinant,
    M_inverse,
    M_pitch,
    M_roll,
    M_tolerate,
    M_transpose,
    M_yaw,
    affine3d,
    apply_affine3d,
    eye,
)


class TestRotations:

    def test_roll_90(self):
        np.testing.assert_array_equal(
            M_tolerate(M_roll(math.pi / 2.0)),
            [[0, -1, 0], [1, 0, 0], [0, 0, 1]],
        )

    def test_pitch_90(self):
        np.testing.assert_array_equal(
            M_tolerate(M_pitch(math.pi / 2.0)),
            [[0, 0, 1], [0, 1, 0], [-1, 0, 0]],
        )

    def test_yaw_90(self):
        np.testing.assert_array_equal(
            M_tolerate(M_yaw(math.pi / 2.0)),
            [[1, 0, 0], [0, 0, 1], [0, -1, 0]],
        )

    @pytest.mark.parametrize("ctor", [M_roll, M_pitch, M_yaw])
    def test_zero_angle_is_identity(self, ctor):
        np.testing.assert_array_equal(ctor(0.0), eye(3))

    @pytest.mark.parametrize("ctor", [M_roll, M_pitch, M_yaw])
    def test_orthonormal(self, ctor):
        R = ctor(0.7)
        np.testing.assert_allclose(R @ M_transpose(R), np.eye(3), atol=1e-15)
        assert M_determinant(R) == pytest.approx(1.0)

    @pytest.mark.parametrize("ctor", [M_roll, M_pitch, M_yaw])
    def test_inverse_is_negative_angle(self, ctor):
        np.testing.assert_allclose(M_inverse(ctor(0.3)), ctor(-0.3), atol=1e-14)


class TestAffine3d:

    def test_default_is_identity(self):
        np.testing.assert_array_equal(affine3d(), eye(4))

    def test_rotation_and_translation(self):
        R = [[0, -1, 0], [1, 0, 0], [0, 0, 1]]
        A = affine3d(R, [1, 2, 3])
        np.testing.assert_array_equal(A, [
            [0, -1, 0, 1],
            [1, 0, 0, 2],
            [0, 0, 1, 3],
            [0, 0, 0, 1],
        ])

    def test_translation_only(self):
        A = affine3d(translation=[5, 6, 7])
        np.testing.assert_array_equal(A[:3, :3], eye(3))
        np.testing.assert_array_equal(A[:3, 3], [5, 6, 7])

    def test_bad_rotation_shape(self):
        with pytest.raises(DimensionError, match="3x3"):
            affine3d([[1, 0], [0, 1]])

    def test_bad_translation_length(self):
        with pytest.raises(DimensionError):
            affine3d(translation=[1, 2])


class TestApplyAffine3d:

    def test_translate(self):
        A = affine3d(translation=[1, 2, 3])
        np.testing.assert_array_equal(apply_affine3d(A, [1, 1, 1]), [2, 3, 4])

    def test_rotate_then_translate(self):
        A = affine3d(M_roll(math.pi / 2.0), [10, 0, 0])
        np.testing.assert_allclose(apply_affine3d(A, [1, 0, 0]), [10, 1, 0], atol=1e-15)

    def test_inverse_undoes_transform(self, rng):
        A = affine3d(M_pitch(0.4), [1.5, -2.0, 0.25])
        v = rng.standard_normal(3)
        np.testing.assert_allclose(
            apply_affine3d(M_inverse(A), apply_affine3d(A, v)), v, atol=1e-12
        )

    def test_requires_3_vector(self):
        with pytest.raises(DimensionError):
            apply_affine3d(eye(4), [1, 2])
