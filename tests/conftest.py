"""Pytest configuration and shared fixtures."""

import pytest

from src.orbitview.config.settings import OrbitControlsConfig
from src.orbitview.controls.orbit_controls import OrbitControls
from src.orbitview.interaction.input_surface import InputSurface
from src.orbitview.rendering.camera import OrthographicCamera, PerspectiveCamera


@pytest.fixture
def surface():
    """800x600 input surface."""
    return InputSurface(client_width=800, client_height=600, name="test-surface")


@pytest.fixture
def perspective_camera():
    """Perspective camera 10 units in front of the origin along +Z."""
    return PerspectiveCamera(fov=50.0, aspect=1.0, position=(0.0, 0.0, 10.0))


@pytest.fixture
def orthographic_camera():
    """Orthographic camera with a 10x10 frustum, 10 units along +Z."""
    return OrthographicCamera(left=-5.0, right=5.0, top=5.0, bottom=-5.0, position=(0.0, 0.0, 10.0))


@pytest.fixture
def make_controls(surface, perspective_camera):
    """Factory: OrbitControls over the shared surface, config overrides as kwargs."""
    created = []

    def _make(camera=None, **config_kwargs):
        controls = OrbitControls(
            camera if camera is not None else perspective_camera,
            surface,
            config=OrbitControlsConfig(**config_kwargs),
        )
        controls.events.clear_history()
        created.append(controls)
        return controls

    yield _make

    for controls in created:
        controls.dispose()


@pytest.fixture
def controls(make_controls):
    """Default controller over the perspective camera."""
    return make_controls()
