"""Configuration module for orbitview."""

from src.orbitview.config.settings import (
    KeyBindings,
    MouseButtons,
    OrbitControlsConfig,
    TouchBindings,
)


__all__ = [
    "KeyBindings",
    "MouseButtons",
    "OrbitControlsConfig",
    "TouchBindings",
]
