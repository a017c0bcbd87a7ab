"""Application-data facade for the Social bounded context."""

from __future__ import annotations

from typing import Any, Collection, Iterable, Mapping

from gateway.application.query_builder import QueryBuilder, strip_nulls
from gateway.domain.procedures import Param, Procedure
from gateway.domain.value_objects import GroupId, SecurityContext, UserId
from social.application.services.base import SocialService
from social.domain.views.app_data import AppDataCollection


class AppDataService(SocialService):
    """Per-user key/value data stored on behalf of an application."""

    async def get_person_data(
        self,
        user_ids: Iterable[UserId | str],
        group_id: GroupId | None,
        app_id: str | None,
        fields: Collection[str] | None,
        context: SecurityContext | None,
    ) -> AppDataCollection:
        query = (
            QueryBuilder(Procedure.GET_APP_DATA)
            .users(user_ids, context)
            .group(group_id)
            .param(Param.APP_ID, app_id)
            .fields(fields)
            .build()
        )
        data = await self._gateway.fetch_single(
            query, AppDataCollection.from_wire, "could not retrieve app data"
        )
        return data if data is not None else AppDataCollection()

    async def update_person_data(
        self,
        user_id: UserId | str,
        group_id: GroupId | None,
        app_id: str | None,
        values: Mapping[str, Any],
        context: SecurityContext | None,
    ) -> None:
        query = (
            QueryBuilder(Procedure.UPDATE_APP_DATA)
            .user(user_id, context)
            .group(group_id)
            .param(Param.APP_ID, app_id)
            .param(Param.APP_DATA, values and strip_nulls(values), required=True)
            .build()
        )
        await self._gateway.execute(query, "could not update app data")

    async def delete_person_data(
        self,
        user_id: UserId | str,
        group_id: GroupId | None,
        app_id: str | None,
        fields: Collection[str] | None,
        context: SecurityContext | None,
    ) -> None:
        """Delete the given keys, or all of the app's data if ``fields`` is None."""
        query = (
            QueryBuilder(Procedure.DELETE_APP_DATA)
            .user(user_id, context)
            .group(group_id)
            .param(Param.APP_ID, app_id)
            .fields(fields)
            .build()
        )
        await self._gateway.execute(query, "could not delete app data")
