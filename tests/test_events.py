"""Tests for the controller's notification bus."""

import logging

from src.orbitview.interaction.events import Event, EventBus, EventType


class TestEventBus:
    """Test EventBus functionality."""

    def test_emit_reaches_subscribers(self):
        bus = EventBus(name="test")
        received = []
        bus.subscribe(EventType.CHANGE, received.append)

        bus.emit(EventType.CHANGE, source="unit")

        assert len(received) == 1
        assert isinstance(received[0], Event)
        assert received[0].type is EventType.CHANGE
        assert received[0].source == "unit"
        assert received[0].data == {}

    def test_only_matching_type_is_notified(self):
        bus = EventBus()
        received = []
        bus.subscribe(EventType.START, received.append)

        bus.emit(EventType.END)

        assert received == []

    def test_priority_order(self):
        bus = EventBus()
        order = []
        bus.subscribe(EventType.CHANGE, lambda e: order.append("low"), priority=0)
        bus.subscribe(EventType.CHANGE, lambda e: order.append("high"), priority=10)
        bus.subscribe(EventType.CHANGE, lambda e: order.append("mid"), priority=5)

        bus.emit(EventType.CHANGE)

        assert order == ["high", "mid", "low"]

    def test_unsubscribe(self):
        bus = EventBus()
        received = []
        bus.subscribe(EventType.CHANGE, received.append)

        assert bus.unsubscribe(EventType.CHANGE, received.append) is True
        assert bus.unsubscribe(EventType.CHANGE, received.append) is False
        bus.emit(EventType.CHANGE)

        assert received == []
        assert not bus.has_subscribers(EventType.CHANGE)

    def test_failing_callback_does_not_block_others(self, caplog):
        bus = EventBus(name="faulty")
        received = []

        def broken(event):
            raise RuntimeError("boom")

        bus.subscribe(EventType.CHANGE, broken, priority=1)
        bus.subscribe(EventType.CHANGE, received.append)

        with caplog.at_level(logging.ERROR):
            bus.emit(EventType.CHANGE)

        assert len(received) == 1
        assert "boom" in caplog.text

    def test_unsubscribe_during_emit(self):
        bus = EventBus()
        calls = []

        def once(event):
            calls.append(event)
            bus.unsubscribe(EventType.CHANGE, once)

        bus.subscribe(EventType.CHANGE, once)
        bus.emit(EventType.CHANGE)
        bus.emit(EventType.CHANGE)

        assert len(calls) == 1

    def test_history_is_bounded_and_filterable(self):
        bus = EventBus(max_history=3)
        for event_type in (EventType.START, EventType.CHANGE, EventType.CHANGE, EventType.END):
            bus.emit(event_type)

        assert [e.type for e in bus.get_history()] == [EventType.CHANGE, EventType.CHANGE, EventType.END]
        assert len(bus.get_history(EventType.CHANGE)) == 2
        assert [e.type for e in bus.get_history(limit=1)] == [EventType.END]

        bus.clear_history()
        assert bus.get_history() == []

    def test_clear_subscribers(self):
        bus = EventBus()
        bus.subscribe(EventType.START, lambda e: None)
        bus.subscribe(EventType.END, lambda e: None)

        bus.clear_subscribers(EventType.START)
        assert not bus.has_subscribers(EventType.START)
        assert bus.has_subscribers(EventType.END)

        bus.clear_subscribers()
        assert not bus.has_subscribers(EventType.END)
