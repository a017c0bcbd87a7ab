"""Graph-algorithm facade for the Social bounded context.

The algorithms themselves run on the remote engine; this facade only
names them and converts their answers.
"""

from __future__ import annotations

from typing import Collection, Iterable

from gateway.application.gateway import QueryGateway
from gateway.application.query_builder import QueryBuilder
from gateway.domain.procedures import Param, Procedure
from gateway.domain.value_objects import (
    CollectionOptions,
    PaginatedCollection,
    SecurityContext,
    UserId,
)
from social.application.enricher import PersonEnricher
from social.application.notifier import EventNotifier
from social.application.observability import SocialServiceProbe
from social.application.services.base import FORMATTED_SORT, SocialService, person_sort
from social.domain.views.group import Group
from social.domain.views.person import Person


class GraphService(SocialService):
    """Friends of friends, shortest paths and recommendations."""

    def __init__(
        self,
        gateway: QueryGateway,
        enricher: PersonEnricher,
        notifier: EventNotifier | None = None,
        probe: SocialServiceProbe | None = None,
    ):
        super().__init__(gateway, notifier=notifier, probe=probe)
        self._enricher = enricher

    async def get_friends_of_friends(
        self,
        user_ids: Iterable[UserId | str],
        depth: int,
        unknown: bool,
        options: CollectionOptions | None,
        fields: Collection[str] | None,
        context: SecurityContext | None,
    ) -> PaginatedCollection[Person]:
        """Get people up to ``depth`` friendship hops away.

        Args:
            user_ids: Users to start from
            depth: Maximum number of hops
            unknown: Only return people not yet befriended
            options: Sorting, filtering and paging
            fields: Person fields to return, None for all
            context: Security context of the caller
        """
        query = (
            QueryBuilder(Procedure.GET_FRIENDS_OF_FRIENDS)
            .users(user_ids, context)
            .param(Param.FOF_DEPTH, depth, required=True)
            .param(Param.FOF_UNKNOWN, unknown, required=True)
            .options(person_sort(options), FORMATTED_SORT)
            .fields(fields)
            .build()
        )
        return await self._fetch_people(query, fields, context)

    async def get_shortest_path(
        self,
        user_id: UserId | str,
        target_id: UserId | str,
        options: CollectionOptions | None,
        fields: Collection[str] | None,
        context: SecurityContext | None,
    ) -> PaginatedCollection[Person]:
        """Get the people on the shortest friendship path between two users."""
        query = (
            QueryBuilder(Procedure.GET_SHORTEST_PATH)
            .user(user_id, context)
            .user(target_id, context, key=Param.TARGET_USER_ID)
            .options(options)
            .fields(fields)
            .build()
        )
        return await self._fetch_people(query, fields, context)

    async def get_group_recommendation(
        self,
        user_id: UserId | str,
        number: int,
        options: CollectionOptions | None,
        fields: Collection[str] | None,
        context: SecurityContext | None,
    ) -> PaginatedCollection[Group]:
        """Recommend groups in which at least ``number`` friends are members."""
        query = (
            QueryBuilder(Procedure.RECOMMEND_GROUP)
            .user(user_id, context)
            .param(Param.MIN_FRIENDS_IN_GROUP, number, required=True)
            .options(options)
            .fields(fields)
            .build()
        )
        return await self._gateway.fetch_list(
            query, Group.from_wire, "could not retrieve group recommendations"
        )

    async def get_friend_recommendation(
        self,
        user_id: UserId | str,
        number: int,
        options: CollectionOptions | None,
        fields: Collection[str] | None,
        context: SecurityContext | None,
    ) -> PaginatedCollection[Person]:
        """Recommend people sharing at least ``number`` friends with the user."""
        query = (
            QueryBuilder(Procedure.RECOMMEND_FRIEND)
            .user(user_id, context)
            .param(Param.MIN_COMMON_FRIENDS, number, required=True)
            .options(options)
            .fields(fields)
            .build()
        )
        return await self._fetch_people(query, fields, context)

    async def _fetch_people(self, query, fields, context) -> PaginatedCollection[Person]:
        people = await self._gateway.fetch_list(
            query, Person.from_wire, "could not retrieve people"
        )
        self._enricher.enrich_all(people, context, fields)
        return people
