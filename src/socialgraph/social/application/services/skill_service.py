"""Skill facade for the Social bounded context."""

from __future__ import annotations

from gateway.application.gateway import QueryGateway
from gateway.application.query_builder import QueryBuilder
from gateway.domain.procedures import Param, Procedure
from gateway.domain.value_objects import (
    CollectionOptions,
    PaginatedCollection,
    SecurityContext,
    UserId,
)
from gateway.ports.exceptions import GatewayError
from social.application.enricher import PersonEnricher
from social.application.notifier import EventNotifier
from social.application.observability import SocialServiceProbe
from social.application.services.base import SocialService
from social.domain.events import EventType
from social.domain.views.skill import SkillSet

NAME_SORT = "name"


class SkillService(SocialService):
    """Skills that people link to each other.

    Linking and unlinking are attributed to the viewer, so both require a
    viewer id in the security context.
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

    async def get_skill_autocomplete(
        self,
        fragment: str,
        options: CollectionOptions | None,
        context: SecurityContext | None,
    ) -> PaginatedCollection[str]:
        """Get known skill names starting with ``fragment``."""
        query = (
            QueryBuilder(Procedure.GET_SKILL_AUTOCOMPLETION)
            .param(Param.AUTOCOMPLETE_FRAGMENT, fragment, required=True)
            .options(options)
            .build()
        )
        return await self._gateway.fetch_list(
            query, str, "could not retrieve skill suggestions"
        )

    async def get_skills(
        self,
        user_id: UserId | str,
        options: CollectionOptions | None,
        context: SecurityContext | None,
    ) -> PaginatedCollection[SkillSet]:
        """Get a user's skills with the people who linked each of them."""
        query = (
            QueryBuilder(Procedure.GET_SKILLS)
            .user(user_id, context)
            .options(options, NAME_SORT)
            .build()
        )
        skills = await self._gateway.fetch_list(
            query, SkillSet.from_wire, "could not retrieve skills"
        )
        for skill_set in skills:
            self._enricher.enrich_all(skill_set.people or (), context)
        return skills

    async def add_skill(
        self,
        user_id: UserId | str,
        skill: str,
        context: SecurityContext | None,
    ) -> None:
        """Link a skill to a user on behalf of the viewer.

        Raises:
            GatewayError: BAD_REQUEST if the context carries no viewer id.
        """
        await self._link(Procedure.ADD_SKILL, EventType.SKILL_ADDED, user_id, skill, context)

    async def remove_skill(
        self,
        user_id: UserId | str,
        skill: str,
        context: SecurityContext | None,
    ) -> None:
        """Remove the viewer's link between a user and a skill.

        Raises:
            GatewayError: BAD_REQUEST if the context carries no viewer id.
        """
        await self._link(
            Procedure.REMOVE_SKILL, EventType.SKILL_REMOVED, user_id, skill, context
        )

    async def _link(
        self,
        procedure: Procedure,
        event_type: EventType,
        user_id: UserId | str,
        skill: str,
        context: SecurityContext | None,
    ) -> None:
        if context is None or not context.viewer_id:
            raise GatewayError.bad_request("viewer id from security context is required")

        query = (
            QueryBuilder(procedure)
            .user(user_id, context)
            .param(Param.SKILL_LINKER, context.viewer_id)
            .param(Param.SKILL, skill, required=True)
            .build()
        )
        await self._gateway.execute(query, "could not update skill link")

        resolved = query.param(Param.USER_ID)
        self._notifier.notify(event_type, (resolved, skill), context)
