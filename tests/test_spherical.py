"""Tests for Spherical coordinates."""

import math

import numpy as np
import pytest

from src.orbitview.rendering.spherical import POLE_EPS, Spherical


class TestSpherical:
    """Test Spherical conversions."""

    def test_from_vector_on_z_axis(self):
        s = Spherical.from_vector(np.array([0.0, 0.0, 10.0]))
        assert s.radius == pytest.approx(10.0)
        assert s.phi == pytest.approx(math.pi / 2)
        assert s.theta == pytest.approx(0.0)

    def test_theta_measured_from_z_toward_x(self):
        s = Spherical.from_vector(np.array([3.0, 0.0, 0.0]))
        assert s.theta == pytest.approx(math.pi / 2)

    def test_phi_measured_from_y(self):
        s = Spherical.from_vector(np.array([0.0, 2.0, 0.0]))
        assert s.phi == pytest.approx(0.0)
        s = Spherical.from_vector(np.array([0.0, -2.0, 0.0]))
        assert s.phi == pytest.approx(math.pi)

    def test_zero_vector(self):
        s = Spherical.from_vector(np.zeros(3))
        assert (s.radius, s.phi, s.theta) == (0.0, 0.0, 0.0)

    def test_to_vector_inverts_from_vector(self):
        v = np.array([1.5, -2.0, 0.5])
        assert np.allclose(Spherical.from_vector(v).to_vector(), v)

    def test_make_safe_keeps_phi_off_the_poles(self):
        assert Spherical(phi=0.0).make_safe().phi == POLE_EPS
        assert Spherical(phi=math.pi).make_safe().phi == pytest.approx(math.pi - POLE_EPS)
        assert Spherical(phi=1.0).make_safe().phi == 1.0

    def test_copy_is_independent(self):
        s = Spherical(radius=2.0, phi=1.0, theta=0.5)
        c = s.copy()
        c.radius = 7.0
        assert s.radius == 2.0
