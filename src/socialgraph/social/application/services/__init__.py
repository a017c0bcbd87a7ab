"""Domain facades for the Social bounded context."""

from social.application.services.activity_stream_service import ActivityStreamService
from social.application.services.album_service import AlbumService
from social.application.services.app_data_service import AppDataService
from social.application.services.friend_service import FriendService
from social.application.services.graph_service import GraphService
from social.application.services.group_service import GroupService
from social.application.services.media_item_service import MediaItemService
from social.application.services.message_service import MessageService
from social.application.services.organization_service import OrganizationService
from social.application.services.person_service import PersonService
from social.application.services.process_mining_service import ProcessMiningService
from social.application.services.skill_service import SkillService

__all__ = [
    "ActivityStreamService",
    "AlbumService",
    "AppDataService",
    "FriendService",
    "GraphService",
    "GroupService",
    "MediaItemService",
    "MessageService",
    "OrganizationService",
    "PersonService",
    "ProcessMiningService",
    "SkillService",
]
