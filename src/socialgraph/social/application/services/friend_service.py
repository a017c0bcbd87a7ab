"""Friendship facade for the Social bounded context."""

from __future__ import annotations

from typing import Collection

from gateway.application.gateway import QueryGateway
from gateway.application.query_builder import QueryBuilder
from gateway.domain.procedures import Param, Procedure
from gateway.domain.value_objects import (
    CollectionOptions,
    PaginatedCollection,
    Query,
    SecurityContext,
    UserId,
)
from social.application.enricher import PersonEnricher
from social.application.notifier import EventNotifier
from social.application.observability import SocialServiceProbe
from social.application.services.base import FORMATTED_SORT, SocialService, person_sort
from social.domain.views.person import Person


class FriendService(SocialService):
    """Friendship requests between people."""

    def __init__(
        self,
        gateway: QueryGateway,
        enricher: PersonEnricher,
        notifier: EventNotifier | None = None,
        probe: SocialServiceProbe | None = None,
    ):
        super().__init__(gateway, notifier=notifier, probe=probe)
        self._enricher = enricher

    async def get_requests(
        self,
        user_id: UserId | str,
        options: CollectionOptions | None,
        fields: Collection[str] | None,
        context: SecurityContext | None,
    ) -> PaginatedCollection[Person]:
        """Get the people who asked the user for friendship."""
        query = (
            QueryBuilder(Procedure.GET_FRIEND_REQUESTS)
            .user(user_id, context)
            .options(person_sort(options), FORMATTED_SORT)
            .fields(fields)
            .build()
        )
        people = await self._gateway.fetch_list(
            query, Person.from_wire, "could not retrieve friend requests"
        )
        self._enricher.enrich_all(people, context, fields)
        return people

    async def request_friendship(
        self,
        user_id: UserId | str,
        target: Person,
        context: SecurityContext | None,
    ) -> None:
        """Ask ``target`` for friendship, or confirm their pending request."""
        await self._gateway.execute(
            self._friendship_query(Procedure.REQUEST_FRIENDSHIP, user_id, target, context),
            "could not request friendship",
        )

    async def deny_friendship(
        self,
        user_id: UserId | str,
        target: Person,
        context: SecurityContext | None,
    ) -> None:
        """Deny a pending request or end an existing friendship."""
        await self._gateway.execute(
            self._friendship_query(Procedure.DENY_FRIENDSHIP, user_id, target, context),
            "could not deny friendship",
        )

    @staticmethod
    def _friendship_query(
        procedure: Procedure,
        user_id: UserId | str,
        target: Person,
        context: SecurityContext | None,
    ) -> Query:
        return (
            QueryBuilder(procedure)
            .user(user_id, context)
            .param(Param.TARGET_USER_ID, target.id, required=True)
            .build()
        )
