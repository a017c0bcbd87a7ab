"""Social ports (interfaces) module."""

from social.ports.event_sink import EventListener, EventSink

__all__ = ["EventListener", "EventSink"]
