"""Event builders and assertions shared by the test modules."""

import numpy as np

from src.orbitview.interaction.events import EventType
from src.orbitview.interaction.input_surface import PointerEvent, TouchEvent, TouchPoint


def event_types(controls, event_type=None):
    """Types of the notifications emitted since the last clear_history()."""
    return [e.type for e in controls.events.get_history(event_type)]


def count_changes(controls):
    return len(controls.events.get_history(EventType.CHANGE))


def pointer(x, y, button=0, **modifiers):
    return PointerEvent(client_x=x, client_y=y, button=button, **modifiers)


def touches(*points):
    return TouchEvent(touches=[TouchPoint(page_x=x, page_y=y) for x, y in points])


def distance_to_target(controls):
    return float(np.linalg.norm(controls.camera.position - controls.target))
