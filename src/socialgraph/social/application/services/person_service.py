"""Person facade for the Social bounded context."""

from __future__ import annotations

from typing import Collection, Iterable

from gateway.application.gateway import QueryGateway
from gateway.application.query_builder import QueryBuilder
from gateway.domain.procedures import Param, Procedure
from gateway.domain.value_objects import (
    CollectionOptions,
    GroupId,
    PaginatedCollection,
    SecurityContext,
    UserId,
)
from social.application.enricher import PersonEnricher
from social.application.notifier import EventNotifier
from social.application.observability import SocialServiceProbe
from social.application.services.base import (
    FORMATTED_SORT,
    SocialService,
    person_sort,
    require_found,
    utc_now,
)
from social.domain.events import EventType
from social.domain.views.person import ANONYMOUS_ID, Person

SKILLS_FILTER = "@skills"


class PersonService(SocialService):
    """Reads and maintains people in the directory.

    Every person returned passes through the PersonEnricher, so viewer and
    owner flags and the synthesized profile or info URL are always
    relative to the caller.
    """

    def __init__(
        self,
        gateway: QueryGateway,
        enricher: PersonEnricher,
        notifier: EventNotifier | None = None,
        probe: SocialServiceProbe | None = None,
    ):
        super().__init__(gateway, notifier=notifier, probe=probe)
        self._enricher = enricher

    async def get_people(
        self,
        user_ids: Iterable[UserId | str],
        group_id: GroupId | None,
        options: CollectionOptions | None,
        fields: Collection[str] | None,
        context: SecurityContext | None,
    ) -> PaginatedCollection[Person]:
        """Get the people related to a set of users through a group."""
        query = (
            QueryBuilder(Procedure.GET_PEOPLE)
            .users(user_ids, context)
            .group(group_id)
            .options(person_sort(options), FORMATTED_SORT)
            .fields(fields)
            .build()
        )
        people = await self._gateway.fetch_list(
            query, Person.from_wire, "could not retrieve people"
        )
        self._enricher.enrich_all(people, context, fields)
        return people

    async def get_person(
        self,
        user_id: UserId | str,
        fields: Collection[str] | None,
        context: SecurityContext | None,
    ) -> Person:
        """Get a single person.

        The anonymous user is answered locally without a remote call.

        Raises:
            GatewayError: NOT_FOUND if the engine knows no such person.
        """
        if UserId.of(user_id).value == ANONYMOUS_ID:
            return Person.anonymous()

        query = (
            QueryBuilder(Procedure.GET_PERSON)
            .user(user_id, context)
            .fields(fields)
            .build()
        )
        person = await self._gateway.fetch_single(
            query, Person.from_wire, "could not retrieve person"
        )
        person = require_found(person, f"person '{UserId.of(user_id).value}'")
        return self._enricher.enrich(person, context, fields)

    async def get_all_people(
        self,
        options: CollectionOptions | None,
        fields: Collection[str] | None,
        context: SecurityContext | None,
    ) -> PaginatedCollection[Person]:
        """Get everyone in the directory.

        A filter of ``@skills`` asks for the people holding the skill given
        as filter value instead.
        """
        options = person_sort(options)
        if options.filter == SKILLS_FILTER:
            builder = QueryBuilder(Procedure.GET_PEOPLE_BY_SKILL).param(
                Param.SKILL, options.filter_value
            )
        else:
            builder = QueryBuilder(Procedure.GET_ALL_PEOPLE)

        query = builder.options(options, FORMATTED_SORT).fields(fields).build()
        people = await self._gateway.fetch_list(
            query, Person.from_wire, "could not retrieve people"
        )
        self._enricher.enrich_all(people, context, fields)
        return people

    async def create_person(
        self,
        person: Person,
        context: SecurityContext | None,
    ) -> Person:
        person = Person(person.properties)
        person.updated = utc_now()
        query = (
            QueryBuilder(Procedure.CREATE_PERSON)
            .payload(Param.PERSON_OBJECT, person.to_wire())
            .build()
        )
        created = await self._gateway.fetch_single(
            query, Person.from_wire, "could not create person"
        )
        created = require_found(created, "created person")
        self._enricher.enrich(created, context)

        self._notifier.notify(EventType.PROFILE_CREATED, created, context)
        return created

    async def update_person(
        self,
        user_id: UserId | str,
        person: Person,
        context: SecurityContext | None,
    ) -> Person:
        person = Person(person.properties)
        person.updated = utc_now()
        query = (
            QueryBuilder(Procedure.UPDATE_PERSON)
            .user(user_id, context)
            .payload(Param.PERSON_OBJECT, person.to_wire())
            .build()
        )
        updated = await self._gateway.fetch_single(
            query, Person.from_wire, "could not update person"
        )
        updated = require_found(updated, f"person '{UserId.of(user_id).value}'")
        self._enricher.enrich(updated, context)

        self._notifier.notify(EventType.PROFILE_UPDATED, updated, context)
        return updated

    async def delete_person(
        self,
        user_id: UserId | str,
        context: SecurityContext | None,
    ) -> None:
        """Delete a person.

        With events enabled, the person is read first so the deletion
        event can carry the removed profile.
        """
        query = (
            QueryBuilder(Procedure.DELETE_PERSON).user(user_id, context).build()
        )
        snapshot = await self._snapshot(
            "delete_person",
            UserId.of(user_id).value,
            lambda: self.get_person(user_id, None, context),
        )

        await self._gateway.execute(query, "could not delete person")

        if snapshot is not None:
            self._notifier.notify(EventType.PROFILE_DELETED, snapshot, context)
