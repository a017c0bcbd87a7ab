"""Best-effort domain event notification."""

from __future__ import annotations

from typing import Any, Mapping

from gateway.domain.value_objects import SecurityContext
from social.application.observability import (
    DefaultEventNotifierProbe,
    EventNotifierProbe,
)
from social.domain.events import DomainEvent, EventType
from social.ports.event_sink import EventSink


class EventNotifier:
    """Hands domain events to a sink without ever failing the caller.

    When disabled, ``notify`` does nothing. Otherwise every exception
    raised while building or delivering the event is logged at warning
    level and discarded.
    """

    def __init__(
        self,
        sink: EventSink | None,
        enabled: bool = False,
        probe: EventNotifierProbe | None = None,
    ):
        self._sink = sink
        self._enabled = enabled and sink is not None
        self._probe = probe or DefaultEventNotifierProbe()

    @property
    def enabled(self) -> bool:
        return self._enabled

    def notify(
        self,
        event_type: EventType,
        payload: Any,
        context: SecurityContext | None,
        properties: Mapping[str, str | None] | None = None,
    ) -> None:
        if not self._enabled:
            return

        try:
            event = DomainEvent(
                type=event_type,
                payload=payload,
                context=context,
                properties={
                    key: value
                    for key, value in (properties or {}).items()
                    if value is not None
                },
            )
            self._sink.fire(event)
        except Exception as e:
            self._probe.event_failed(event_type=event_type.value, error=e)
            return

        self._probe.event_fired(event_type=event_type.value)
