"""Social domain module.

Contains the property-bag views and the domain events for the Social
bounded context.
"""

from social.domain.events import DomainEvent, EventType

__all__ = ["DomainEvent", "EventType"]
