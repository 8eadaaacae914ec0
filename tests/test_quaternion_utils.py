"""Tests for quaternion helpers and camera orientation."""

import numpy as np
import pytest

from src.orbitview.rendering.quaternion_utils import (
    look_at_quat,
    quat_dot,
    quat_from_unit_vectors,
    quat_identity,
    quat_inverse,
    quat_normalize,
    quat_rotate_vector,
    quat_to_rotation_matrix,
    rotation_matrix_to_quat,
)


QUARTER_TURN_Y = quat_from_unit_vectors([0.0, 0.0, 1.0], [1.0, 0.0, 0.0])
OBLIQUE = quat_from_unit_vectors([0.3, -0.5, 0.8], [1.0, 0.2, -0.4])


class TestQuaternionBasics:
    """Test inverse, dot and normalization."""

    def test_inverse_undoes_rotation(self):
        v = np.array([0.4, -1.2, 2.0])
        rotated = quat_rotate_vector(OBLIQUE, v)
        assert np.allclose(quat_rotate_vector(quat_inverse(OBLIQUE), rotated), v)

    def test_inverse_of_unnormalized_input(self):
        assert np.allclose(quat_inverse(2.0 * OBLIQUE), quat_inverse(OBLIQUE))

    def test_dot_of_sign_flip(self):
        """q and -q give a dot of -1; callers compare with abs()."""
        assert quat_dot(OBLIQUE, OBLIQUE) == pytest.approx(1.0)
        assert quat_dot(OBLIQUE, -OBLIQUE) == pytest.approx(-1.0)

    def test_normalize_degenerate_returns_identity(self):
        assert np.array_equal(quat_normalize(np.zeros(4)), quat_identity())

    def test_fresh_arrays(self):
        """Callers may mutate results without affecting later calls."""
        a = quat_identity()
        a[0] = 5.0
        assert quat_identity()[0] == 1.0


class TestRotation:
    """Test vector rotation and matrix conversion."""

    def test_quarter_turn_about_y(self):
        assert np.allclose(quat_rotate_vector(QUARTER_TURN_Y, [1.0, 0.0, 0.0]), [0.0, 0.0, -1.0])
        assert np.allclose(quat_rotate_vector(QUARTER_TURN_Y, [0.0, 1.0, 0.0]), [0.0, 1.0, 0.0])

    def test_matrix_conversion_recovers_rotation(self):
        recovered = rotation_matrix_to_quat(quat_to_rotation_matrix(OBLIQUE))
        assert abs(quat_dot(recovered, OBLIQUE)) == pytest.approx(1.0)

    def test_matrix_is_orthonormal(self):
        R = quat_to_rotation_matrix(OBLIQUE)
        assert np.allclose(R @ R.T, np.eye(3))
        assert np.linalg.det(R) == pytest.approx(1.0)


class TestFromUnitVectors:
    """Test shortest-arc construction."""

    def test_maps_source_onto_destination(self):
        q = quat_from_unit_vectors([0.0, 0.0, 1.0], [0.0, 1.0, 0.0])
        assert np.allclose(quat_rotate_vector(q, [0.0, 0.0, 1.0]), [0.0, 1.0, 0.0])

    def test_same_direction_is_identity(self):
        q = quat_from_unit_vectors([0.0, 1.0, 0.0], [0.0, 2.0, 0.0])
        assert np.allclose(q, quat_identity())

    def test_opposite_directions(self):
        q = quat_from_unit_vectors([0.0, 1.0, 0.0], [0.0, -1.0, 0.0])
        assert np.allclose(quat_rotate_vector(q, [0.0, 1.0, 0.0]), [0.0, -1.0, 0.0])
        assert np.linalg.norm(q) == pytest.approx(1.0)


class TestLookAt:
    """Test look_at_quat."""

    @staticmethod
    def _forward(q):
        return quat_rotate_vector(q, [0.0, 0.0, -1.0])

    def test_default_view_is_identity(self):
        q = look_at_quat([0.0, 0.0, 10.0], np.zeros(3), [0.0, 1.0, 0.0])
        assert np.allclose(q, quat_identity())

    def test_faces_target(self):
        q = look_at_quat([10.0, 0.0, 0.0], np.zeros(3), [0.0, 1.0, 0.0])
        assert np.allclose(self._forward(q), [-1.0, 0.0, 0.0])
        # local +Y stays in the plane of the up hint
        assert quat_rotate_vector(q, [0.0, 1.0, 0.0])[1] == pytest.approx(1.0)

    def test_view_parallel_to_up_is_finite(self):
        q = look_at_quat([0.0, 10.0, 0.0], np.zeros(3), [0.0, 1.0, 0.0])
        assert np.all(np.isfinite(q))
        assert np.allclose(self._forward(q), [0.0, -1.0, 0.0], atol=1e-3)
