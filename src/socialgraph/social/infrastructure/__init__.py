"""Infrastructure adapters for the Social bounded context."""

from social.infrastructure.event_bus import EventBus, LoggingEventListener

__all__ = ["EventBus", "LoggingEventListener"]
