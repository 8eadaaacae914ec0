"""Camera controllers."""

from src.orbitview.controls.orbit_controls import OrbitControls


__all__ = ["OrbitControls"]
