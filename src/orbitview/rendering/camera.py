"""
Camera handles driven by the orbit controller.

DESIGN: Explicit Projection Variant
===================================

The controller never duck-types a camera. Every camera exposes a
``projection`` tag plus two accessors:

- ``as_perspective()``  -> the camera if it is a PerspectiveCamera, else None
- ``as_orthographic()`` -> the camera if it is an OrthographicCamera, else None

A bare ``Camera`` (or any subclass that overrides neither accessor) is an
unsupported projection. The controller branches on the accessors and, for an
unsupported camera, logs a warning and disables the capability in question
instead of raising.

Pose convention: the camera looks down its local -Z axis with local +Y up.
Orientation is a wxyz quaternion, matching quaternion_utils.
"""

from __future__ import annotations

import math
from enum import Enum

import numpy as np

from src.orbitview.rendering.quaternion_utils import (
    look_at_quat,
    quat_identity,
    quat_to_rotation_matrix,
)
from src.shared.exceptions import CameraError


class CameraProjection(Enum):
    """Projection type tag."""
    PERSPECTIVE = "perspective"
    ORTHOGRAPHIC = "orthographic"


def _as_vec3(value, name: str, camera_type: str) -> np.ndarray:
    arr = np.asarray(value, dtype=np.float64).reshape(-1)
    if arr.shape != (3,):
        raise CameraError(f"{name} must have 3 components, got {arr.shape}", camera_type)
    return arr.copy()


class Camera:
    """
    Base camera handle: pose, up vector and zoom.

    Attributes
    ----------
    position : np.ndarray
        (3,) world position
    quaternion : np.ndarray
        (4,) orientation (wxyz)
    up : np.ndarray
        (3,) unit up vector; the orbit axis
    zoom : float
        Zoom factor (meaningful for orthographic projection)
    projection_matrix : np.ndarray
        4x4 projection, refreshed by update_projection_matrix()
    """

    projection: CameraProjection | None = None

    def __init__(
        self,
        position=(0.0, 0.0, 1.0),
        up=(0.0, 1.0, 0.0),
        zoom: float = 1.0,
    ):
        camera_type = type(self).__name__
        self.position = _as_vec3(position, "position", camera_type)
        up_vec = _as_vec3(up, "up", camera_type)
        up_norm = float(np.linalg.norm(up_vec))
        if up_norm < 1e-12:
            raise CameraError("up vector must be non-zero", camera_type)
        self.up = up_vec / up_norm
        self.quaternion = quat_identity()
        self.zoom = float(zoom)
        self.projection_matrix = np.eye(4)
        self.projection_updates = 0

    # =========================================================================
    # Projection variant
    # =========================================================================

    def as_perspective(self) -> PerspectiveCamera | None:
        return None

    def as_orthographic(self) -> OrthographicCamera | None:
        return None

    def update_projection_matrix(self) -> None:
        """Recompute the projection matrix from the current parameters."""
        self.projection_matrix = self._compute_projection()
        self.projection_updates += 1

    def _compute_projection(self) -> np.ndarray:
        return np.eye(4)

    # =========================================================================
    # Pose
    # =========================================================================

    @property
    def rotation_matrix(self) -> np.ndarray:
        """3x3 rotation (columns are local X, Y, Z in world space)."""
        return quat_to_rotation_matrix(self.quaternion)

    @property
    def matrix(self) -> np.ndarray:
        """4x4 camera-to-world matrix."""
        m = np.eye(4)
        m[:3, :3] = self.rotation_matrix
        m[:3, 3] = self.position
        return m

    def look_at(self, target) -> None:
        """Orient the camera so that it faces ``target``."""
        self.quaternion = look_at_quat(self.position, np.asarray(target, dtype=np.float64), self.up)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(position={self.position.tolist()}, "
            f"zoom={self.zoom})"
        )


class PerspectiveCamera(Camera):
    """Perspective camera with a vertical field of view in degrees."""

    projection = CameraProjection.PERSPECTIVE

    def __init__(
        self,
        fov: float = 50.0,
        aspect: float = 1.0,
        near: float = 0.1,
        far: float = 2000.0,
        position=(0.0, 0.0, 1.0),
        up=(0.0, 1.0, 0.0),
        zoom: float = 1.0,
    ):
        if not 0.0 < fov < 180.0:
            raise CameraError(f"fov must be in (0, 180) degrees, got {fov}", "PerspectiveCamera")
        if aspect <= 0.0:
            raise CameraError(f"aspect must be positive, got {aspect}", "PerspectiveCamera")
        super().__init__(position=position, up=up, zoom=zoom)
        self.fov = float(fov)
        self.aspect = float(aspect)
        self.near = float(near)
        self.far = float(far)
        self.update_projection_matrix()

    def as_perspective(self) -> PerspectiveCamera:
        return self

    def _compute_projection(self) -> np.ndarray:
        # Zoom narrows the effective field of view
        half_fov = math.atan(math.tan(math.radians(self.fov) / 2.0) / self.zoom)
        f = 1.0 / math.tan(half_fov)
        projection = np.zeros((4, 4))
        projection[0, 0] = f / self.aspect
        projection[1, 1] = f
        projection[2, 2] = (self.far + self.near) / (self.near - self.far)
        projection[2, 3] = 2.0 * self.far * self.near / (self.near - self.far)
        projection[3, 2] = -1.0
        return projection


class OrthographicCamera(Camera):
    """Orthographic camera defined by frustum extents."""

    projection = CameraProjection.ORTHOGRAPHIC

    def __init__(
        self,
        left: float = -1.0,
        right: float = 1.0,
        top: float = 1.0,
        bottom: float = -1.0,
        near: float = 0.1,
        far: float = 2000.0,
        position=(0.0, 0.0, 1.0),
        up=(0.0, 1.0, 0.0),
        zoom: float = 1.0,
    ):
        if right == left or top == bottom:
            raise CameraError("frustum extents must be non-degenerate", "OrthographicCamera")
        super().__init__(position=position, up=up, zoom=zoom)
        self.left = float(left)
        self.right = float(right)
        self.top = float(top)
        self.bottom = float(bottom)
        self.near = float(near)
        self.far = float(far)
        self.update_projection_matrix()

    def as_orthographic(self) -> OrthographicCamera:
        return self

    def _compute_projection(self) -> np.ndarray:
        dx = (self.right - self.left) / (2.0 * self.zoom)
        dy = (self.top - self.bottom) / (2.0 * self.zoom)
        cx = (self.right + self.left) / 2.0
        cy = (self.top + self.bottom) / 2.0
        left, right = cx - dx, cx + dx
        top, bottom = cy + dy, cy - dy

        projection = np.eye(4)
        projection[0, 0] = 2.0 / (right - left)
        projection[1, 1] = 2.0 / (top - bottom)
        projection[2, 2] = -2.0 / (self.far - self.near)
        projection[0, 3] = -(right + left) / (right - left)
        projection[1, 3] = -(top + bottom) / (top - bottom)
        projection[2, 3] = -(self.far + self.near) / (self.far - self.near)
        return projection


__all__ = [
    "Camera",
    "CameraProjection",
    "OrthographicCamera",
    "PerspectiveCamera",
]
