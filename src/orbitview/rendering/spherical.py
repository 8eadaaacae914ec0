"""
Spherical coordinates for the orbit camera.

Industry standard for orbit cameras (three.js OrbitControls, camera-controls):
the camera offset from the target is stored as (radius, phi, theta) in a
"Y-is-up" frame.

- radius: distance from target
- phi: polar angle measured from +Y (0 = looking straight down from above)
- theta: azimuth around +Y, measured from +Z toward +X

phi is kept strictly inside (0, pi) via make_safe() to avoid the pole
singularity where theta becomes undefined.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

# Pole margin for make_safe()
POLE_EPS = 1e-6


@dataclass
class Spherical:
    """
    Mutable spherical triple.

    Attributes
    ----------
    radius : float
        Distance from the origin of the frame
    phi : float
        Polar angle in radians, from +Y
    theta : float
        Azimuth angle in radians, around +Y from +Z
    """

    radius: float = 1.0
    phi: float = 0.0
    theta: float = 0.0

    @classmethod
    def from_vector(cls, v: np.ndarray) -> "Spherical":
        """Build from a Cartesian (3,) offset in the Y-up frame."""
        x, y, z = (float(c) for c in np.asarray(v, dtype=np.float64).reshape(3))
        radius = math.sqrt(x * x + y * y + z * z)
        if radius == 0.0:
            return cls(radius=0.0, phi=0.0, theta=0.0)
        return cls(
            radius=radius,
            phi=math.acos(max(-1.0, min(1.0, y / radius))),
            theta=math.atan2(x, z),
        )

    def to_vector(self) -> np.ndarray:
        """Cartesian (3,) offset in the Y-up frame."""
        sin_phi_radius = math.sin(self.phi) * self.radius
        return np.array(
            [
                sin_phi_radius * math.sin(self.theta),
                math.cos(self.phi) * self.radius,
                sin_phi_radius * math.cos(self.theta),
            ]
        )

    def make_safe(self) -> "Spherical":
        """Restrict phi to [POLE_EPS, pi - POLE_EPS]."""
        self.phi = max(POLE_EPS, min(math.pi - POLE_EPS, self.phi))
        return self

    def copy(self) -> "Spherical":
        return Spherical(radius=self.radius, phi=self.phi, theta=self.theta)
