"""
Configuration dataclasses for the orbit controller.

All fields are plain mutable attributes; the host may assign them at any time
(e.g. ``controls.config.enable_pan = False``). Construction-time validation
rejects values that would break the numeric invariants of update(); angle
windows are never rejected, the clamp resolves them deterministically.
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass, field, fields
from typing import Any

from src.orbitview.interaction.gestures import MouseAction, TouchAction
from src.shared.exceptions import ConfigError


logger = logging.getLogger(__name__)


__all__ = ["KeyBindings", "MouseButtons", "OrbitControlsConfig", "TouchBindings"]


@dataclass
class MouseButtons:
    """Button -> action remapping table."""

    left: MouseAction | None = MouseAction.ROTATE
    middle: MouseAction | None = MouseAction.PAN
    right: MouseAction | None = MouseAction.PAN

    def action_for(self, button: int) -> MouseAction | None:
        """Action for a DOM-style button index (0 left, 1 middle, 2 right)."""
        return {0: self.left, 1: self.middle, 2: self.right}.get(button)


@dataclass
class TouchBindings:
    """Finger count -> action remapping table."""

    one: TouchAction = TouchAction.ROTATE
    two: TouchAction = TouchAction.DOLLY_PAN


@dataclass
class KeyBindings:
    """Key codes for the four pan directions (arrow keys by default)."""

    left: int = 37
    up: int = 38
    right: int = 39
    bottom: int = 40


@dataclass
class OrbitControlsConfig:
    """Limits, toggles and sensitivities for OrbitControls.

    Attributes
    ----------
    enabled : bool
        Master switch for all input handling
    min_distance, max_distance : float
        Radius clamp (perspective dolly)
    min_zoom, max_zoom : float
        Zoom clamp (orthographic dolly)
    min_polar_angle, max_polar_angle : float
        Polar clamp in radians, measured from the up axis
    min_azimuth_angle, max_azimuth_angle : float
        Azimuth clamp in radians; the window may wrap through +-pi
    damping_factor : float
        Fraction of a pending delta applied per update() when damping is on
    auto_rotate_speed : float
        Revolutions per minute at 60 update() calls per second
    """

    enabled: bool = True

    # Capabilities
    enable_rotate: bool = True
    enable_pan: bool = True
    enable_zoom: bool = True
    enable_keys: bool = True

    # Limits
    min_distance: float = 0.0
    max_distance: float = math.inf
    min_zoom: float = 0.0
    max_zoom: float = math.inf
    min_polar_angle: float = 0.0
    max_polar_angle: float = math.pi
    min_azimuth_angle: float = -math.inf
    max_azimuth_angle: float = math.inf

    # Inertia
    enable_damping: bool = False
    damping_factor: float = 0.05

    # Sensitivity
    rotate_speed: float = 1.0
    pan_speed: float = 1.0
    zoom_speed: float = 1.0
    key_pan_speed: float = 7.0  # pixels per key press

    screen_space_panning: bool = True

    auto_rotate: bool = False
    auto_rotate_speed: float = 2.0

    # Remapping tables
    mouse_buttons: MouseButtons = field(default_factory=MouseButtons)
    touches: TouchBindings = field(default_factory=TouchBindings)
    keys: KeyBindings = field(default_factory=KeyBindings)

    def __post_init__(self):
        """Validate settings after initialization."""
        if not 0.0 < self.damping_factor <= 1.0:
            raise ConfigError(
                f"damping_factor must be in (0, 1], got {self.damping_factor}",
                field_name="damping_factor",
            )
        for name in ("min_distance", "min_zoom"):
            if getattr(self, name) < 0.0:
                raise ConfigError(f"{name} must be non-negative, got {getattr(self, name)}", field_name=name)
        for name in ("rotate_speed", "pan_speed", "zoom_speed", "key_pan_speed"):
            if getattr(self, name) < 0.0:
                raise ConfigError(f"{name} must be non-negative, got {getattr(self, name)}", field_name=name)

    def to_dict(self) -> dict[str, object]:
        """Convert to plain types (enums by value, infinities as strings)."""
        data = asdict(self)
        for key, value in data.items():
            if isinstance(value, float) and math.isinf(value):
                data[key] = "inf" if value > 0 else "-inf"
        data["mouse_buttons"] = {
            k: (v.value if v is not None else None) for k, v in asdict(self.mouse_buttons).items()
        }
        data["touches"] = {k: v.value for k, v in asdict(self.touches).items()}
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any], config_path: str | None = None) -> "OrbitControlsConfig":
        """
        Build a config from plain types.

        Unknown keys are logged and ignored.

        Parameters
        ----------
        data : dict[str, Any]
            Mapping as produced by to_dict()
        config_path : str | None
            Source file, for error messages

        Returns
        -------
        OrbitControlsConfig
            New configuration

        Raises
        ------
        ConfigError
            If a value cannot be converted or fails validation
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            if key not in known:
                logger.warning(f"Ignoring unknown controls config key: {key}")
                continue
            try:
                if key == "mouse_buttons":
                    kwargs[key] = MouseButtons(
                        **{k: (MouseAction(v) if v is not None else None) for k, v in dict(value).items()}
                    )
                elif key == "touches":
                    kwargs[key] = TouchBindings(**{k: TouchAction(v) for k, v in dict(value).items()})
                elif key == "keys":
                    kwargs[key] = KeyBindings(**{k: int(v) for k, v in dict(value).items()})
                elif isinstance(value, bool):
                    kwargs[key] = value
                elif isinstance(cls.__dataclass_fields__[key].default, bool):
                    raise TypeError(f"expected a boolean, got {value!r}")
                else:
                    kwargs[key] = float(value)
            except (TypeError, ValueError) as e:
                raise ConfigError(f"Invalid value: {e}", config_path=config_path, field_name=key) from e

        try:
            return cls(**kwargs)
        except ConfigError as e:
            if config_path is not None and e.config_path is None:
                raise ConfigError(e.message, config_path=config_path, field_name=e.field_name) from e
            raise
