"""Group facade for the Social bounded context."""

from __future__ import annotations

from typing import Collection

from gateway.application.query_builder import QueryBuilder
from gateway.domain.procedures import Procedure
from gateway.domain.value_objects import (
    CollectionOptions,
    PaginatedCollection,
    SecurityContext,
    UserId,
)
from social.application.services.base import SocialService
from social.domain.views.group import Group

TITLE_SORT = "title"


class GroupService(SocialService):
    """Lists the groups a user belongs to."""

    async def get_groups(
        self,
        user_id: UserId | str,
        options: CollectionOptions | None,
        fields: Collection[str] | None,
        context: SecurityContext | None,
    ) -> PaginatedCollection[Group]:
        query = (
            QueryBuilder(Procedure.GET_GROUPS)
            .user(user_id, context)
            .options(options, TITLE_SORT)
            .fields(fields)
            .build()
        )
        return await self._gateway.fetch_list(
            query, Group.from_wire, "could not retrieve groups"
        )
