"""Synchronous in-process event bus.

Listeners are registered per event type, or for every type via
``EventType.ALL``. Delivery happens on the caller's stack.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable

import structlog

from social.domain.events import DomainEvent, EventType
from social.infrastructure.observability import DefaultEventBusProbe, EventBusProbe
from social.ports.event_sink import EventListener


class EventBus:
    """EventSink that fans events out to registered listeners.

    Type-specific listeners run before ``ALL`` listeners, each group in
    registration order. A failing listener is logged and does not keep
    the remaining listeners from running.
    """

    def __init__(self, probe: EventBusProbe | None = None):
        self._listeners: dict[EventType, list[EventListener]] = defaultdict(list)
        self._probe = probe or DefaultEventBusProbe()

    def fire(self, event: DomainEvent) -> None:
        listeners = list(self._listeners.get(event.type, ()))
        if event.type != EventType.ALL:
            listeners.extend(self._listeners.get(EventType.ALL, ()))

        for listener in listeners:
            try:
                listener.handle(event)
            except Exception as e:
                self._probe.listener_failed(
                    event_type=event.type.value,
                    listener=type(listener).__name__,
                    error=e,
                )

    def add_listener(self, event_type: EventType, listener: EventListener) -> None:
        self._listeners[event_type].append(listener)

    def add_listeners(
        self, event_type: EventType, listeners: Iterable[EventListener]
    ) -> None:
        self._listeners[event_type].extend(listeners)

    def remove_listener(
        self, listener: EventListener, event_type: EventType | None = None
    ) -> None:
        """Unregister a listener from one event type, or from all if None."""
        if event_type is not None:
            targets = [self._listeners.get(event_type, [])]
        else:
            targets = list(self._listeners.values())

        for registered in targets:
            while listener in registered:
                registered.remove(listener)

    def clear_listeners(self, event_type: EventType | None = None) -> None:
        if event_type is None:
            self._listeners.clear()
        else:
            self._listeners.pop(event_type, None)

    def listeners(self, event_type: EventType) -> list[EventListener]:
        return list(self._listeners.get(event_type, ()))


class LoggingEventListener:
    """Writes every event it receives to the structured log."""

    def __init__(
        self,
        enabled: bool = True,
        logger: structlog.stdlib.BoundLogger | None = None,
    ):
        self._enabled = enabled
        self._logger = logger or structlog.get_logger()

    def handle(self, event: DomainEvent) -> None:
        if not self._enabled:
            return
        context = event.context
        self._logger.info(
            "social_event",
            event_type=event.type.value,
            payload=repr(event.payload),
            viewer_id=context.viewer_id if context is not None else None,
            owner_id=context.owner_id if context is not None else None,
            occurred_at=event.occurred_at.isoformat(),
            properties=dict(event.properties),
        )
