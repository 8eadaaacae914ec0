"""
Gesture classification tables for the orbit controller.

The gesture state machine is expressed as data:

- MOUSE_TRANSITIONS maps (mouse action, modifier held) to a gesture state.
  Holding ctrl/meta/shift swaps ROTATE and PAN.
- ONE_TOUCH_TRANSITIONS / TWO_TOUCH_TRANSITIONS map the configured touch
  action to a touch gesture state.
- STATE_CAPABILITIES lists the capability flags a state depends on. A state
  is reachable when at least one of them is enabled (two-finger gestures
  combine two capabilities; each sub-gesture is then gated separately).

Every state returns to NONE when its gesture ends; there is no terminal state.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.orbitview.config.settings import OrbitControlsConfig


class MouseAction(Enum):
    """Action a mouse button performs."""
    ROTATE = "rotate"
    DOLLY = "dolly"
    PAN = "pan"


class TouchAction(Enum):
    """Action a one- or two-finger touch performs."""
    ROTATE = "rotate"
    PAN = "pan"
    DOLLY_PAN = "dolly_pan"
    DOLLY_ROTATE = "dolly_rotate"


class GestureState(Enum):
    """Active gesture. Exactly one at a time."""
    NONE = "none"
    ROTATE = "rotate"
    DOLLY = "dolly"
    PAN = "pan"
    TOUCH_ROTATE = "touch_rotate"
    TOUCH_PAN = "touch_pan"
    TOUCH_DOLLY_PAN = "touch_dolly_pan"
    TOUCH_DOLLY_ROTATE = "touch_dolly_rotate"


class Capability(Enum):
    """Capability flags on OrbitControlsConfig, by attribute name."""
    ROTATE = "enable_rotate"
    PAN = "enable_pan"
    ZOOM = "enable_zoom"

    def enabled(self, config: OrbitControlsConfig) -> bool:
        return bool(getattr(config, self.value))


MOUSE_TRANSITIONS: dict[tuple[MouseAction, bool], GestureState] = {
    (MouseAction.ROTATE, False): GestureState.ROTATE,
    (MouseAction.ROTATE, True): GestureState.PAN,
    (MouseAction.PAN, False): GestureState.PAN,
    (MouseAction.PAN, True): GestureState.ROTATE,
    (MouseAction.DOLLY, False): GestureState.DOLLY,
    (MouseAction.DOLLY, True): GestureState.DOLLY,
}

ONE_TOUCH_TRANSITIONS: dict[TouchAction, GestureState] = {
    TouchAction.ROTATE: GestureState.TOUCH_ROTATE,
    TouchAction.PAN: GestureState.TOUCH_PAN,
}

TWO_TOUCH_TRANSITIONS: dict[TouchAction, GestureState] = {
    TouchAction.DOLLY_PAN: GestureState.TOUCH_DOLLY_PAN,
    TouchAction.DOLLY_ROTATE: GestureState.TOUCH_DOLLY_ROTATE,
}

STATE_CAPABILITIES: dict[GestureState, tuple[Capability, ...]] = {
    GestureState.NONE: (),
    GestureState.ROTATE: (Capability.ROTATE,),
    GestureState.DOLLY: (Capability.ZOOM,),
    GestureState.PAN: (Capability.PAN,),
    GestureState.TOUCH_ROTATE: (Capability.ROTATE,),
    GestureState.TOUCH_PAN: (Capability.PAN,),
    GestureState.TOUCH_DOLLY_PAN: (Capability.ZOOM, Capability.PAN),
    GestureState.TOUCH_DOLLY_ROTATE: (Capability.ZOOM, Capability.ROTATE),
}

# Wheel zoom may combine with an active rotate drag but not with pan/dolly drags
WHEEL_COMPATIBLE_STATES = frozenset({GestureState.NONE, GestureState.ROTATE})


def is_state_enabled(state: GestureState, config: OrbitControlsConfig) -> bool:
    """True if ``state`` is NONE or at least one of its capabilities is on."""
    capabilities = STATE_CAPABILITIES[state]
    if not capabilities:
        return True
    return any(cap.enabled(config) for cap in capabilities)


def _guard(state: GestureState, config: OrbitControlsConfig) -> GestureState:
    return state if is_state_enabled(state, config) else GestureState.NONE


def resolve_mouse_state(
    action: MouseAction | None,
    has_modifier: bool,
    config: OrbitControlsConfig,
) -> GestureState:
    """
    Gesture state for a pointer-down.

    Parameters
    ----------
    action : MouseAction | None
        Action mapped to the pressed button (None for unmapped buttons)
    has_modifier : bool
        Whether ctrl, meta or shift is held
    config : OrbitControlsConfig
        Capability flags

    Returns
    -------
    GestureState
        Resolved state, or NONE if unmapped or disabled
    """
    if action is None:
        return GestureState.NONE
    return _guard(MOUSE_TRANSITIONS[(action, bool(has_modifier))], config)


def resolve_touch_state(touch_count: int, config: OrbitControlsConfig) -> GestureState:
    """Gesture state for a touch-start with ``touch_count`` fingers down."""
    if touch_count == 1:
        state = ONE_TOUCH_TRANSITIONS.get(config.touches.one, GestureState.NONE)
    elif touch_count == 2:
        state = TWO_TOUCH_TRANSITIONS.get(config.touches.two, GestureState.NONE)
    else:
        state = GestureState.NONE
    return _guard(state, config)


__all__ = [
    "Capability",
    "GestureState",
    "MOUSE_TRANSITIONS",
    "MouseAction",
    "ONE_TOUCH_TRANSITIONS",
    "STATE_CAPABILITIES",
    "TWO_TOUCH_TRANSITIONS",
    "TouchAction",
    "WHEEL_COMPATIBLE_STATES",
    "is_state_enabled",
    "resolve_mouse_state",
    "resolve_touch_state",
]
