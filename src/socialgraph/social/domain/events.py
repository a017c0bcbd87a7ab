"""Domain events for the Social context.

Events are raised by the facades after a mutation completed on the remote
engine. They carry the affected view (or, for deletions, the snapshot
taken before the delete) together with the caller's security context.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any, Mapping

from gateway.domain.value_objects import SecurityContext


class EventType(str, Enum):
    """Kinds of domain event.

    ``ALL`` is only used to register a listener for every event type; no
    event is ever raised with it.
    """

    ALL = "all"

    PROFILE_CREATED = "profile_created"
    PROFILE_UPDATED = "profile_updated"
    PROFILE_DELETED = "profile_deleted"

    ACTIVITY_CREATED = "activity_created"
    ACTIVITY_UPDATED = "activity_updated"
    ACTIVITY_DELETED = "activity_deleted"

    MESSAGE_SENT = "message_sent"
    MESSAGE_CREATED = "message_created"
    MESSAGE_UPDATED = "message_updated"
    MESSAGE_DELETED = "message_deleted"

    SKILL_ADDED = "skill_added"
    SKILL_REMOVED = "skill_removed"


@dataclass(frozen=True)
class DomainEvent:
    """Event raised after a successful create, update or delete.

    Attributes:
        type: What happened
        payload: The affected view, a list of views or a small tuple
        context: Security context of the caller, if known
        properties: Additional string metadata such as user or app id
        occurred_at: When the event occurred (UTC)
    """

    type: EventType
    payload: Any
    context: SecurityContext | None = None
    properties: Mapping[str, str] = field(default_factory=dict)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def property(self, key: str) -> str | None:
        return self.properties.get(key)
