"""Application layer for the Social bounded context."""

from social.application.enricher import PersonEnricher
from social.application.notifier import EventNotifier
from social.application.observability import (
    DefaultEventNotifierProbe,
    DefaultSocialServiceProbe,
    EventNotifierProbe,
    SocialServiceProbe,
)

__all__ = [
    "DefaultEventNotifierProbe",
    "DefaultSocialServiceProbe",
    "EventNotifier",
    "EventNotifierProbe",
    "PersonEnricher",
    "SocialServiceProbe",
]
