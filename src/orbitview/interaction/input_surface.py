"""
Input surface abstraction for the orbit controller.

An InputSurface is whatever delivers pointer, wheel, touch and key events to
the controller: a canvas widget adapter, a test harness, a replay script.
It keeps a listener registry keyed by event name and dispatches events to the
registered handlers in registration order.

Listeners are matched by identity on removal, so the controller must remove
the exact bound-method objects it added.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)

# Event names understood by the orbit controller
CONTEXT_MENU = "contextmenu"
POINTER_DOWN = "pointerdown"
POINTER_MOVE = "pointermove"
POINTER_UP = "pointerup"
WHEEL = "wheel"
TOUCH_START = "touchstart"
TOUCH_MOVE = "touchmove"
TOUCH_END = "touchend"
KEY_DOWN = "keydown"


@dataclass
class InputEvent:
    """Base input event with default-action and propagation flags."""

    default_prevented: bool = field(default=False, init=False)
    propagation_stopped: bool = field(default=False, init=False)

    def prevent_default(self) -> None:
        self.default_prevented = True

    def stop_propagation(self) -> None:
        self.propagation_stopped = True


@dataclass
class ContextMenuEvent(InputEvent):
    pass


@dataclass
class PointerEvent(InputEvent):
    """Mouse / pointer event in client (pixel) coordinates.

    button: 0 = left, 1 = middle, 2 = right.
    """

    client_x: float = 0.0
    client_y: float = 0.0
    button: int = 0
    ctrl_key: bool = False
    meta_key: bool = False
    shift_key: bool = False

    @property
    def has_modifier(self) -> bool:
        return self.ctrl_key or self.meta_key or self.shift_key


@dataclass
class WheelEvent(InputEvent):
    """Wheel event; negative delta_y scrolls up (zoom in)."""

    delta_y: float = 0.0


@dataclass
class TouchPoint:
    page_x: float
    page_y: float


@dataclass
class TouchEvent(InputEvent):
    """Touch event carrying every touch currently on the surface."""

    touches: list[TouchPoint] = field(default_factory=list)


@dataclass
class KeyEvent(InputEvent):
    key_code: int = 0


class InputSurface:
    """
    Listener registry and event dispatcher.

    Parameters
    ----------
    client_width : float
        Surface width in pixels
    client_height : float
        Surface height in pixels
    name : str
        Label used in log messages
    """

    def __init__(self, client_width: float = 800.0, client_height: float = 600.0, name: str = "surface"):
        self.client_width = float(client_width)
        self.client_height = float(client_height)
        self.name = name
        self.has_focus = False
        self._listeners: dict[str, list[Callable[[Any], None]]] = {}

    def add_event_listener(self, event_name: str, handler: Callable[[Any], None]) -> None:
        """Register ``handler`` for ``event_name`` (duplicates are ignored)."""
        handlers = self._listeners.setdefault(event_name, [])
        if any(h is handler or h == handler for h in handlers):
            return
        handlers.append(handler)
        logger.debug(f"[{self.name}] + {event_name} listener")

    def remove_event_listener(self, event_name: str, handler: Callable[[Any], None]) -> bool:
        """
        Remove a previously registered handler.

        Returns
        -------
        bool
            True if the handler was registered and has been removed
        """
        handlers = self._listeners.get(event_name)
        if not handlers:
            return False
        for i, h in enumerate(handlers):
            if h is handler or h == handler:
                del handlers[i]
                logger.debug(f"[{self.name}] - {event_name} listener")
                return True
        return False

    def dispatch(self, event_name: str, event: InputEvent) -> InputEvent:
        """Deliver ``event`` to every handler registered for ``event_name``."""
        for handler in list(self._listeners.get(event_name, ())):
            handler(event)
        return event

    def listener_count(self, event_name: str | None = None) -> int:
        if event_name is not None:
            return len(self._listeners.get(event_name, ()))
        return sum(len(h) for h in self._listeners.values())

    def focus(self) -> None:
        self.has_focus = True

    def resize(self, client_width: float, client_height: float) -> None:
        self.client_width = float(client_width)
        self.client_height = float(client_height)


__all__ = [
    "CONTEXT_MENU",
    "KEY_DOWN",
    "POINTER_DOWN",
    "POINTER_MOVE",
    "POINTER_UP",
    "TOUCH_END",
    "TOUCH_MOVE",
    "TOUCH_START",
    "WHEEL",
    "ContextMenuEvent",
    "InputEvent",
    "InputSurface",
    "KeyEvent",
    "PointerEvent",
    "TouchEvent",
    "TouchPoint",
    "WheelEvent",
]
