"""Composition root for the Social bounded context.

Builds every facade around one QueryChannel, configured from
GatewaySettings. Wiring into a web framework or DI container is left to
the embedding application.
"""

from __future__ import annotations

from dataclasses import dataclass

from gateway.application.gateway import QueryGateway
from gateway.ports.channel import QueryChannel
from infrastructure.settings import GatewaySettings, get_settings
from social.application.enricher import PersonEnricher
from social.application.notifier import EventNotifier
from social.application.services import (
    ActivityStreamService,
    AlbumService,
    AppDataService,
    FriendService,
    GraphService,
    GroupService,
    MediaItemService,
    MessageService,
    OrganizationService,
    PersonService,
    ProcessMiningService,
    SkillService,
)
from social.domain.events import EventType
from social.infrastructure.event_bus import EventBus, LoggingEventListener
from social.ports.event_sink import EventSink


@dataclass(frozen=True)
class SocialServices:
    """All facades sharing one gateway, enricher and notifier."""

    people: PersonService
    friends: FriendService
    groups: GroupService
    messages: MessageService
    activities: ActivityStreamService
    albums: AlbumService
    media_items: MediaItemService
    app_data: AppDataService
    graph: GraphService
    organization: OrganizationService
    skills: SkillService
    process_mining: ProcessMiningService


def build_event_bus(settings: GatewaySettings) -> EventBus:
    """Create an event bus, with the logging listener if configured."""
    bus = EventBus()
    if settings.events_logging:
        bus.add_listener(EventType.ALL, LoggingEventListener())
    return bus


def build_services(
    channel: QueryChannel,
    settings: GatewaySettings | None = None,
    sink: EventSink | None = None,
) -> SocialServices:
    """Wire every facade to the given channel.

    Args:
        channel: Transport to the remote graph engine
        settings: Gateway settings; loaded from the environment if None
        sink: Receiver of domain events; an EventBus is created if None

    Returns:
        The assembled facades
    """
    settings = settings or get_settings()
    if sink is None:
        sink = build_event_bus(settings)

    gateway = QueryGateway(channel)
    enricher = PersonEnricher(
        profile_url_template=settings.profile_url_template,
        info_url_template=settings.info_url_template,
    )
    notifier = EventNotifier(sink, enabled=settings.events_enabled)

    return SocialServices(
        people=PersonService(gateway, enricher, notifier=notifier),
        friends=FriendService(gateway, enricher, notifier=notifier),
        groups=GroupService(gateway, notifier=notifier),
        messages=MessageService(gateway, notifier=notifier),
        activities=ActivityStreamService(gateway, notifier=notifier),
        albums=AlbumService(gateway, notifier=notifier),
        media_items=MediaItemService(gateway, notifier=notifier),
        app_data=AppDataService(gateway, notifier=notifier),
        graph=GraphService(gateway, enricher, notifier=notifier),
        organization=OrganizationService(gateway, enricher, notifier=notifier),
        skills=SkillService(gateway, enricher, notifier=notifier),
        process_mining=ProcessMiningService(gateway, notifier=notifier),
    )
