"""Unit tests for the Social composition root."""

from unittest.mock import AsyncMock, create_autospec

import pytest

from gateway.domain.value_objects import SingleResult
from infrastructure.settings import GatewaySettings
from social.dependencies import build_event_bus, build_services
from social.domain.events import EventType
from social.domain.views import Person
from social.infrastructure.event_bus import LoggingEventListener
from social.ports.event_sink import EventSink


@pytest.fixture
def settings():
    return GatewaySettings(
        _env_file=None,
        profile_url_template="https://x/${ID}",
        events_enabled=True,
        events_logging=True,
    )


class TestBuildEventBus:
    def test_logging_listener_registered_for_all(self, settings):
        bus = build_event_bus(settings)

        listeners = bus.listeners(EventType.ALL)
        assert len(listeners) == 1
        assert isinstance(listeners[0], LoggingEventListener)

    def test_no_listener_without_logging(self):
        bus = build_event_bus(GatewaySettings(_env_file=None, events_logging=False))
        assert bus.listeners(EventType.ALL) == []


class TestBuildServices:
    """Tests for wiring the facades together."""

    @pytest.mark.asyncio
    async def test_services_share_channel_and_settings(self, settings, context):
        channel = AsyncMock()
        channel.send.return_value = SingleResult({"id": "horst"})

        services = build_services(channel, settings=settings)
        person = await services.people.get_person("@me", None, context)

        assert person.profile_url == "https://x/horst"
        channel.send.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_given_sink_receives_events(self, settings, context):
        channel = AsyncMock()
        channel.send.return_value = SingleResult({"id": "horst"})
        sink = create_autospec(EventSink, instance=True)

        services = build_services(channel, settings=settings, sink=sink)
        person = Person(id="horst", display_name="Horst")
        await services.people.update_person("@me", person, context)

        sink.fire.assert_called_once()
        assert sink.fire.call_args.args[0].type == EventType.PROFILE_UPDATED
