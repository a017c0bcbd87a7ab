"""Property-bag views exchanged with the remote engine."""

from social.domain.views.activity import ActivityEntry, ActivityObject, MediaLink
from social.domain.views.app_data import AppDataCollection
from social.domain.views.base import View, strip_none
from social.domain.views.group import Group
from social.domain.views.media import Album, MediaItem
from social.domain.views.message import INBOX, OUTBOX, Message, MessageCollection
from social.domain.views.person import Account, Address, Name, Organization, Person
from social.domain.views.process_cycle import ProcessCycle
from social.domain.views.relationship import MANAGED_BY, MANAGER_OF, Relationship
from social.domain.views.skill import SkillSet

__all__ = [
    "Account",
    "ActivityEntry",
    "ActivityObject",
    "Address",
    "Album",
    "AppDataCollection",
    "Group",
    "INBOX",
    "MANAGED_BY",
    "MANAGER_OF",
    "MediaItem",
    "MediaLink",
    "Message",
    "MessageCollection",
    "Name",
    "OUTBOX",
    "Organization",
    "Person",
    "ProcessCycle",
    "Relationship",
    "SkillSet",
    "View",
    "strip_none",
]
