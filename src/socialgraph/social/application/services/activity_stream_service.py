"""Activity-stream facade for the Social bounded context."""

from __future__ import annotations

from typing import Collection, Iterable

from gateway.application.query_builder import QueryBuilder
from gateway.domain.procedures import Param, Procedure
from gateway.domain.value_objects import (
    CollectionOptions,
    GroupId,
    PaginatedCollection,
    SecurityContext,
    UserId,
)
from social.application.services.base import SocialService, require_found, utc_now
from social.domain.events import EventType
from social.domain.views.activity import ActivityEntry

PUBLISHED_SORT = "published"


def _event_properties(
    user_id: str | None, group_id: GroupId | None, app_id: str | None
) -> dict[str, str | None]:
    return {
        "userId": user_id,
        "groupId": group_id.object_id if group_id is not None else None,
        "appId": app_id,
    }


class ActivityStreamService(SocialService):
    """Activity entries published by people and applications."""

    async def get_activity_entries(
        self,
        user_ids: Iterable[UserId | str],
        group_id: GroupId | None,
        app_id: str | None,
        fields: Collection[str] | None,
        options: CollectionOptions | None,
        context: SecurityContext | None,
    ) -> PaginatedCollection[ActivityEntry]:
        query = (
            QueryBuilder(Procedure.GET_ACTIVITY_ENTRIES)
            .users(user_ids, context)
            .group(group_id)
            .param(Param.APP_ID, app_id)
            .options(options, PUBLISHED_SORT)
            .fields(fields)
            .build()
        )
        return await self._gateway.fetch_list(
            query, ActivityEntry.from_wire, "could not retrieve activity entries"
        )

    async def get_activity_entries_by_id(
        self,
        user_id: UserId | str,
        group_id: GroupId | None,
        app_id: str | None,
        fields: Collection[str] | None,
        options: CollectionOptions | None,
        activity_ids: Iterable[str] | None,
        context: SecurityContext | None,
    ) -> PaginatedCollection[ActivityEntry]:
        query = (
            QueryBuilder(Procedure.GET_ACTIVITY_ENTRIES_BY_ID)
            .user(user_id, context)
            .group(group_id)
            .param(Param.APP_ID, app_id)
            .ids(Param.ACTIVITY_ID_LIST, activity_ids)
            .options(options, PUBLISHED_SORT)
            .fields(fields)
            .build()
        )
        return await self._gateway.fetch_list(
            query, ActivityEntry.from_wire, "could not retrieve activity entries"
        )

    async def get_activity_entry(
        self,
        user_id: UserId | str,
        group_id: GroupId | None,
        app_id: str | None,
        fields: Collection[str] | None,
        activity_id: str,
        context: SecurityContext | None,
    ) -> ActivityEntry:
        """Get one activity entry.

        Raises:
            GatewayError: NOT_FOUND if the engine knows no such entry.
        """
        query = (
            QueryBuilder(Procedure.GET_ACTIVITY_ENTRY)
            .user(user_id, context)
            .group(group_id)
            .param(Param.APP_ID, app_id)
            .param(Param.ACTIVITY_ID, activity_id, required=True)
            .fields(fields)
            .build()
        )
        entry = await self._gateway.fetch_single(
            query, ActivityEntry.from_wire, "could not retrieve activity entry"
        )
        return require_found(entry, f"activity entry '{activity_id}'")

    async def create_activity_entry(
        self,
        user_id: UserId | str,
        group_id: GroupId | None,
        app_id: str | None,
        fields: Collection[str] | None,
        activity: ActivityEntry,
        context: SecurityContext | None,
    ) -> ActivityEntry:
        """Create an activity entry, stamping its publication time if unset."""
        activity = ActivityEntry(activity.properties)
        if activity.published is None:
            activity.published = utc_now()

        query = (
            QueryBuilder(Procedure.CREATE_ACTIVITY_ENTRY)
            .user(user_id, context)
            .group(group_id)
            .param(Param.APP_ID, app_id)
            .payload(Param.ACTIVITY_ENTRY_OBJECT, activity.to_wire())
            .fields(fields)
            .build()
        )
        created = await self._gateway.fetch_single(
            query, ActivityEntry.from_wire, "could not create activity entry"
        )
        created = require_found(created, "created activity entry")

        self._notifier.notify(
            EventType.ACTIVITY_CREATED,
            created,
            context,
            _event_properties(query.param(Param.USER_ID), group_id, app_id),
        )
        return created

    async def update_activity_entry(
        self,
        user_id: UserId | str,
        group_id: GroupId | None,
        app_id: str | None,
        fields: Collection[str] | None,
        activity_id: str,
        activity: ActivityEntry,
        context: SecurityContext | None,
    ) -> ActivityEntry:
        activity = ActivityEntry(activity.properties)
        activity.updated = utc_now()

        query = (
            QueryBuilder(Procedure.UPDATE_ACTIVITY_ENTRY)
            .user(user_id, context)
            .group(group_id)
            .param(Param.APP_ID, app_id)
            .param(Param.ACTIVITY_ID, activity_id, required=True)
            .payload(Param.ACTIVITY_ENTRY_OBJECT, activity.to_wire())
            .fields(fields)
            .build()
        )
        updated = await self._gateway.fetch_single(
            query, ActivityEntry.from_wire, "could not update activity entry"
        )
        updated = require_found(updated, f"activity entry '{activity_id}'")

        self._notifier.notify(
            EventType.ACTIVITY_UPDATED,
            updated,
            context,
            _event_properties(query.param(Param.USER_ID), group_id, app_id),
        )
        return updated

    async def delete_activity_entries(
        self,
        user_id: UserId | str,
        group_id: GroupId | None,
        app_id: str | None,
        activity_ids: Iterable[str],
        context: SecurityContext | None,
    ) -> None:
        """Delete activity entries, raising one deletion event per entry."""
        activity_ids = list(activity_ids)
        query = (
            QueryBuilder(Procedure.DELETE_ACTIVITY_ENTRIES)
            .user(user_id, context)
            .group(group_id)
            .param(Param.APP_ID, app_id)
            .ids(Param.ACTIVITY_ID_LIST, activity_ids)
            .build()
        )
        snapshot = await self._snapshot(
            "delete_activity_entries",
            ",".join(activity_ids),
            lambda: self.get_activity_entries_by_id(
                user_id, group_id, app_id, None, None, activity_ids, context
            ),
        )

        await self._gateway.execute(query, "could not delete activity entries")

        if snapshot is None:
            return
        properties = _event_properties(query.param(Param.USER_ID), group_id, app_id)
        for entry in snapshot:
            self._notifier.notify(EventType.ACTIVITY_DELETED, entry, context, properties)
