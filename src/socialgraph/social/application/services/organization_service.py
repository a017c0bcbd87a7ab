"""Organization hierarchy facade for the Social bounded context."""

from __future__ import annotations

from typing import Any, Collection, Mapping, Union

from gateway.application.gateway import QueryGateway
from gateway.application.query_builder import QueryBuilder
from gateway.domain.procedures import Param, Procedure
from gateway.domain.value_objects import PaginatedCollection, SecurityContext, UserId
from social.application.enricher import PersonEnricher
from social.application.notifier import EventNotifier
from social.application.observability import SocialServiceProbe
from social.application.services.base import SocialService
from social.domain.views.person import Person
from social.domain.views.relationship import MANAGED_BY, MANAGER_OF, Relationship

PathItem = Union[Person, Relationship]


class OrganizationService(SocialService):
    """Paths through the management hierarchy."""

    def __init__(
        self,
        gateway: QueryGateway,
        enricher: PersonEnricher,
        notifier: EventNotifier | None = None,
        probe: SocialServiceProbe | None = None,
    ):
        super().__init__(gateway, notifier=notifier, probe=probe)
        self._enricher = enricher

    async def get_hierarchy_path(
        self,
        user_id: UserId | str,
        target_id: str,
        fields: Collection[str] | None,
        context: SecurityContext | None,
    ) -> PaginatedCollection[PathItem]:
        """Get the management chain connecting two people.

        The path alternates between people and relationship markers telling
        whether the next person is managed by, or the manager of, the
        previous one.
        """
        query = (
            QueryBuilder(Procedure.GET_HIERARCHY_PATH)
            .user(user_id, context)
            .param(Param.TARGET_USER_ID, target_id, required=True)
            .fields(fields)
            .build()
        )

        def convert(item: Mapping[str, Any]) -> PathItem:
            item_id = str(item["id"])
            if item_id in (MANAGED_BY, MANAGER_OF):
                return Relationship(item_id)
            return self._enricher.enrich(Person.from_wire(item), context, fields)

        return await self._gateway.fetch_list(
            query, convert, "could not retrieve hierarchy path"
        )
