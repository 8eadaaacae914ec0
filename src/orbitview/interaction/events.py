"""
Change-notification channel for the orbit controller.

Observers (typically the render loop) subscribe to START / END / CHANGE to
learn when a gesture begins or ends and when update() moved the camera.
Notifications carry no payload beyond their type.
"""
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Notifications emitted by the orbit controller."""

    START = "start"    # A gesture began (pointer down, touch start, wheel)
    END = "end"        # A gesture ended
    CHANGE = "change"  # update() moved the camera, or reset() restored it


@dataclass
class Event:
    """Event data container."""
    type: EventType | str
    data: dict[str, Any] = field(default_factory=dict)
    source: str | None = None


class EventBus:
    """
    Simple event bus for pub/sub pattern.

    Callbacks run synchronously in priority order on the emitting thread.
    A failing callback is logged and does not stop the remaining ones.
    """

    def __init__(self, name: str = "default", max_history: int = 100):
        """
        Initialize event bus.

        Parameters
        ----------
        name : str
            Name of this event bus instance
        max_history : int
            Number of emitted events kept for inspection
        """
        self.name = name
        self._subscribers: dict[EventType | str, list[tuple[int, Callable]]] = {}
        self._event_history: list[Event] = []
        self._max_history = max_history
        logger.debug(f"Created EventBus: {name}")

    def subscribe(
        self,
        event_type: EventType | str,
        callback: Callable[[Event], None],
        priority: int = 0
    ) -> None:
        """
        Subscribe to an event type.

        Parameters
        ----------
        event_type : EventType | str
            Event type to subscribe to
        callback : Callable[[Event], None]
            Function to call when event is emitted
        priority : int
            Priority for callback execution (higher = earlier)
        """
        callbacks = self._subscribers.setdefault(event_type, [])

        for i, (existing_priority, _) in enumerate(callbacks):
            if priority > existing_priority:
                callbacks.insert(i, (priority, callback))
                break
        else:
            callbacks.append((priority, callback))

        logger.debug(
            f"[{self.name}] Subscribed to {event_type}: "
            f"{getattr(callback, '__name__', repr(callback))} (priority={priority})"
        )

    def unsubscribe(
        self,
        event_type: EventType | str,
        callback: Callable[[Event], None]
    ) -> bool:
        """
        Unsubscribe from an event type.

        Returns
        -------
        bool
            True if callback was found and removed
        """
        callbacks = self._subscribers.get(event_type)
        if not callbacks:
            return False

        for i, (_, cb) in enumerate(callbacks):
            if cb == callback:
                del callbacks[i]
                logger.debug(f"[{self.name}] Unsubscribed from {event_type}")
                return True

        return False

    def emit(
        self,
        event_type: EventType | str,
        source: str | None = None,
        **data
    ) -> None:
        """
        Emit an event.

        Parameters
        ----------
        event_type : EventType | str
            Type of event to emit
        source : str | None
            Component emitting the event
        **data
            Event data as keyword arguments
        """
        event = Event(type=event_type, data=data, source=source)

        self._event_history.append(event)
        if len(self._event_history) > self._max_history:
            self._event_history.pop(0)

        # Snapshot so callbacks may (un)subscribe while being notified
        subscribers = list(self._subscribers.get(event_type, ()))
        if not subscribers:
            return

        for _, callback in subscribers:
            try:
                callback(event)
            except Exception as e:
                logger.error(
                    f"[{self.name}] Error in event handler "
                    f"{getattr(callback, '__name__', repr(callback))} for {event_type}: {e}",
                    exc_info=True
                )

    def clear_subscribers(self, event_type: (EventType | str) | None = None) -> None:
        """
        Clear subscribers.

        Parameters
        ----------
        event_type : (EventType | str) | None
            If provided, clear only for this event type.
            If None, clear all subscribers.
        """
        if event_type is None:
            self._subscribers.clear()
            logger.debug(f"[{self.name}] Cleared all subscribers")
        elif event_type in self._subscribers:
            del self._subscribers[event_type]
            logger.debug(f"[{self.name}] Cleared subscribers for {event_type}")

    def get_history(
        self,
        event_type: (EventType | str) | None = None,
        limit: int | None = None
    ) -> list[Event]:
        """Get event history, optionally filtered by type (most recent last)."""
        history = self._event_history

        if event_type is not None:
            history = [e for e in history if e.type == event_type]

        if limit is not None:
            history = history[-limit:]

        return list(history)

    def clear_history(self) -> None:
        self._event_history.clear()

    def has_subscribers(self, event_type: EventType | str) -> bool:
        """Check if an event type has any subscribers."""
        return bool(self._subscribers.get(event_type))


__all__ = [
    "EventBus",
    "Event",
    "EventType",
]
