"""Tests for programmatic camera motion: set_target, dolly and framing."""

import logging
import math

import numpy as np
import pytest

from src.orbitview.rendering.camera import Camera, PerspectiveCamera
from tests.helpers import count_changes, distance_to_target


class TestSetTarget:
    """Test set_target."""

    def test_camera_stays_and_turns(self, controls):
        controls.set_target(1.0, 0.0, 0.0)

        assert np.array_equal(controls.target, [1.0, 0.0, 0.0])
        assert np.allclose(controls.camera.position, [0.0, 0.0, 10.0])
        assert not np.allclose(controls.camera.quaternion, [1.0, 0.0, 0.0, 0.0])
        assert count_changes(controls) == 1

    def test_deferred_update(self, controls):
        controls.set_target(0.0, 2.0, 0.0, update=False)

        assert count_changes(controls) == 0
        assert controls.update() is True

    def test_target_mutated_in_place(self, controls):
        target = controls.target
        controls.set_target(3.0, 2.0, 1.0)
        assert target is controls.target


class TestDolly:
    """Test dolly by world distance."""

    def test_toward_target(self, controls):
        controls.dolly(4.0)
        assert distance_to_target(controls) == pytest.approx(6.0)

    def test_away_from_target(self, controls):
        controls.dolly(-5.0)
        assert distance_to_target(controls) == pytest.approx(15.0)

    def test_respects_max_distance(self, make_controls):
        controls = make_controls(max_distance=12.0)
        controls.dolly(-5.0)
        assert distance_to_target(controls) == pytest.approx(12.0)

    def test_overshoot_keeps_positive_radius(self, controls):
        controls.dolly(20.0)

        assert controls.get_distance() > 0.0
        assert np.all(np.isfinite(controls.camera.position))

    def test_orthographic_zooms(self, make_controls, orthographic_camera):
        controls = make_controls(camera=orthographic_camera)
        controls.dolly(5.0)

        assert orthographic_camera.zoom == pytest.approx(2.0)
        assert distance_to_target(controls) == pytest.approx(10.0)

    def test_dolly_in_out_are_inverse(self, controls):
        controls.dolly_in(0.8)
        controls.dolly_out(0.8)
        controls.update()
        assert distance_to_target(controls) == pytest.approx(10.0)


class TestFit:
    """Test fit_to_sphere / fit_to_bounds."""

    def test_fit_sphere_perspective(self, controls):
        controls.fit_to_sphere((1.0, 2.0, 3.0), 2.0)

        expected = 2.0 / math.sin(math.radians(25.0))
        assert np.allclose(controls.target, [1.0, 2.0, 3.0])
        assert distance_to_target(controls) == pytest.approx(expected)
        # viewing direction preserved
        assert np.allclose(controls.camera.position, [1.0, 2.0, 3.0 + expected])

    def test_fit_uses_narrower_axis(self, make_controls):
        camera = PerspectiveCamera(fov=50.0, aspect=0.5, position=(0.0, 0.0, 10.0))
        controls = make_controls(camera=camera)
        controls.fit_to_sphere((0.0, 0.0, 0.0), 1.0)

        half_h = math.atan(math.tan(math.radians(25.0)) * 0.5)
        assert distance_to_target(controls) == pytest.approx(1.0 / math.sin(half_h))

    def test_fit_sphere_orthographic(self, make_controls, orthographic_camera):
        controls = make_controls(camera=orthographic_camera)
        controls.fit_to_sphere((1.0, 0.0, 0.0), 2.0)

        assert orthographic_camera.zoom == pytest.approx(2.5)
        assert np.allclose(controls.target, [1.0, 0.0, 0.0])
        assert distance_to_target(controls) == pytest.approx(10.0)

    def test_fit_discards_pending_rotation(self, controls):
        controls.rotate_left(1.0)
        controls.fit_to_sphere((0.0, 0.0, 0.0), 1.0)
        assert controls.get_azimuthal_angle() == pytest.approx(0.0)

    def test_fit_bounds(self, controls):
        controls.fit_to_bounds((-1.0, -1.0, -1.0), (1.0, 1.0, 1.0))

        expected = math.sqrt(3.0) / math.sin(math.radians(25.0))
        assert np.allclose(controls.target, np.zeros(3))
        assert distance_to_target(controls) == pytest.approx(expected)

    def test_fit_respects_distance_limits(self, make_controls):
        controls = make_controls(max_distance=3.0)
        controls.fit_to_sphere((0.0, 0.0, 0.0), 2.0)
        assert distance_to_target(controls) == pytest.approx(3.0)

    def test_fit_unsupported_camera_moves_target(self, make_controls, caplog):
        controls = make_controls(camera=Camera(position=(0.0, 0.0, 10.0)))
        with caplog.at_level(logging.WARNING):
            controls.fit_to_sphere((2.0, 0.0, 0.0), 1.0)

        assert np.allclose(controls.target, [2.0, 0.0, 0.0])
        assert np.allclose(controls.camera.position, [2.0, 0.0, 10.0])
        assert "fit moves the target only" in caplog.text


class TestProgrammaticRotateAndPan:
    """Test rotate_left / rotate_up / pan called directly."""

    def test_rotate_left_then_update(self, controls):
        controls.rotate_left(0.25)
        controls.rotate_left(0.25)
        controls.update()
        assert controls.get_azimuthal_angle() == pytest.approx(-0.5)

    def test_rotate_up(self, controls):
        controls.rotate_up(0.4)
        controls.update()
        assert controls.get_polar_angle() == pytest.approx(math.pi / 2 - 0.4)

    def test_pan_moves_target_and_camera_together(self, controls):
        controls.pan(0.0, 60.0)
        controls.update()

        shift = 2 * 60 * 10 * math.tan(math.radians(25)) / 600
        assert np.allclose(controls.target, [0.0, shift, 0.0])
        assert np.allclose(controls.camera.position, [0.0, shift, 10.0])

    def test_pan_follows_surface_height(self, controls, surface):
        surface.resize(800, 300)
        controls.pan(60.0, 0.0)
        controls.update()

        shift = 2 * 60 * 10 * math.tan(math.radians(25)) / 300
        assert controls.target[0] == pytest.approx(-shift)
