"""Unit tests for EventNotifier."""

from unittest.mock import create_autospec

from social.application.notifier import EventNotifier
from social.application.observability import EventNotifierProbe
from social.domain.events import EventType
from social.domain.views import Person
from social.ports.event_sink import EventSink


class TestEventNotifier:
    """Tests for best-effort notification."""

    def test_fires_event_with_context(self, notifier, mock_sink, context):
        person = Person(id="horst")

        notifier.notify(EventType.PROFILE_UPDATED, person, context)

        event = mock_sink.fire.call_args.args[0]
        assert event.type == EventType.PROFILE_UPDATED
        assert event.payload is person
        assert event.context == context

    def test_none_properties_are_dropped(self, notifier, mock_sink, context):
        notifier.notify(
            EventType.MESSAGE_CREATED,
            None,
            context,
            {"userId": "horst", "appId": None},
        )

        event = mock_sink.fire.call_args.args[0]
        assert event.properties == {"userId": "horst"}
        assert event.property("appId") is None

    def test_disabled_notifier_does_nothing(self, mock_sink, context):
        notifier = EventNotifier(mock_sink, enabled=False)

        notifier.notify(EventType.PROFILE_CREATED, Person(), context)

        mock_sink.fire.assert_not_called()

    def test_no_sink_means_disabled(self):
        assert EventNotifier(None, enabled=True).enabled is False

    def test_sink_failure_is_swallowed_and_recorded(self, context):
        sink = create_autospec(EventSink, instance=True)
        sink.fire.side_effect = RuntimeError("listener exploded")
        probe = create_autospec(EventNotifierProbe, instance=True)
        notifier = EventNotifier(sink, enabled=True, probe=probe)

        notifier.notify(EventType.PROFILE_DELETED, Person(), context)

        probe.event_failed.assert_called_once()
        assert probe.event_failed.call_args.kwargs["event_type"] == "profile_deleted"
        probe.event_fired.assert_not_called()

    def test_success_is_recorded(self, mock_sink, context):
        probe = create_autospec(EventNotifierProbe, instance=True)
        notifier = EventNotifier(mock_sink, enabled=True, probe=probe)

        notifier.notify(EventType.SKILL_ADDED, ("horst", "python"), context)

        probe.event_fired.assert_called_once_with(event_type="skill_added")
