"""Event sink ports for the Social bounded context."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from social.domain.events import DomainEvent


@runtime_checkable
class EventSink(Protocol):
    """Receives domain events raised by the facades.

    Implementations deliver synchronously and must not assume the caller
    handles their errors in any particular way; the notifier logs and
    discards every failure.
    """

    def fire(self, event: DomainEvent) -> None:
        """Deliver an event."""
        ...


@runtime_checkable
class EventListener(Protocol):
    """Reacts to events delivered by an event bus."""

    def handle(self, event: DomainEvent) -> None:
        """Handle a single event."""
        ...
