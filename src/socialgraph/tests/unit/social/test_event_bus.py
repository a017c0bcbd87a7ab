"""Unit tests for the in-process event bus."""

from unittest.mock import MagicMock, create_autospec

from social.domain.events import DomainEvent, EventType
from social.infrastructure.event_bus import EventBus, LoggingEventListener
from social.infrastructure.observability import EventBusProbe
from social.ports.event_sink import EventSink


class RecordingListener:
    def __init__(self, name, calls):
        self.name = name
        self.calls = calls

    def handle(self, event):
        self.calls.append((self.name, event.type))


class FailingListener:
    def handle(self, event):
        raise RuntimeError("listener failed")


class TestEventBus:
    """Tests for listener registration and delivery."""

    def test_is_an_event_sink(self):
        assert isinstance(EventBus(), EventSink)

    def test_specific_listeners_run_before_all_listeners(self):
        calls = []
        bus = EventBus()
        bus.add_listener(EventType.ALL, RecordingListener("all", calls))
        bus.add_listener(EventType.PROFILE_CREATED, RecordingListener("profile", calls))

        bus.fire(DomainEvent(type=EventType.PROFILE_CREATED, payload=None))

        assert calls == [
            ("profile", EventType.PROFILE_CREATED),
            ("all", EventType.PROFILE_CREATED),
        ]

    def test_unrelated_listener_is_not_called(self):
        calls = []
        bus = EventBus()
        bus.add_listener(EventType.MESSAGE_SENT, RecordingListener("message", calls))

        bus.fire(DomainEvent(type=EventType.PROFILE_CREATED, payload=None))

        assert calls == []

    def test_failing_listener_does_not_stop_others(self):
        calls = []
        probe = create_autospec(EventBusProbe, instance=True)
        bus = EventBus(probe=probe)
        bus.add_listeners(
            EventType.SKILL_ADDED,
            [FailingListener(), RecordingListener("second", calls)],
        )

        bus.fire(DomainEvent(type=EventType.SKILL_ADDED, payload=None))

        assert calls == [("second", EventType.SKILL_ADDED)]
        probe.listener_failed.assert_called_once()
        assert probe.listener_failed.call_args.kwargs["listener"] == "FailingListener"

    def test_remove_listener_from_every_type(self):
        calls = []
        listener = RecordingListener("x", calls)
        bus = EventBus()
        bus.add_listener(EventType.ALL, listener)
        bus.add_listener(EventType.PROFILE_UPDATED, listener)

        bus.remove_listener(listener)

        assert bus.listeners(EventType.ALL) == []
        assert bus.listeners(EventType.PROFILE_UPDATED) == []

    def test_remove_listener_from_one_type(self):
        listener = RecordingListener("x", [])
        bus = EventBus()
        bus.add_listener(EventType.ALL, listener)
        bus.add_listener(EventType.PROFILE_UPDATED, listener)

        bus.remove_listener(listener, EventType.ALL)

        assert bus.listeners(EventType.PROFILE_UPDATED) == [listener]

    def test_clear_listeners(self):
        bus = EventBus()
        bus.add_listener(EventType.ALL, RecordingListener("x", []))
        bus.add_listener(EventType.SKILL_ADDED, RecordingListener("y", []))

        bus.clear_listeners(EventType.ALL)
        assert bus.listeners(EventType.ALL) == []
        assert len(bus.listeners(EventType.SKILL_ADDED)) == 1

        bus.clear_listeners()
        assert bus.listeners(EventType.SKILL_ADDED) == []


class TestLoggingEventListener:
    def test_logs_event(self, context):
        logger = MagicMock()
        listener = LoggingEventListener(logger=logger)

        listener.handle(
            DomainEvent(
                type=EventType.PROFILE_CREATED,
                payload="p",
                context=context,
                properties={"userId": "horst"},
            )
        )

        logger.info.assert_called_once()
        kwargs = logger.info.call_args.kwargs
        assert kwargs["event_type"] == "profile_created"
        assert kwargs["viewer_id"] == "horst"
        assert kwargs["properties"] == {"userId": "horst"}

    def test_disabled_listener_is_silent(self):
        logger = MagicMock()

        LoggingEventListener(enabled=False, logger=logger).handle(
            DomainEvent(type=EventType.PROFILE_CREATED, payload=None)
        )

        logger.info.assert_not_called()
