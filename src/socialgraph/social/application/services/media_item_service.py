"""Media-item facade for the Social bounded context."""

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
from social.application.services.base import SocialService, require_found
from social.domain.views.media import MediaItem


class MediaItemService(SocialService):
    """Media items stored in albums."""

    async def get_media_item(
        self,
        user_id: UserId | str,
        app_id: str | None,
        album_id: str,
        media_item_id: str,
        fields: Collection[str] | None,
        context: SecurityContext | None,
    ) -> MediaItem:
        """Get one media item.

        Raises:
            GatewayError: NOT_FOUND if the engine knows no such item.
        """
        query = (
            QueryBuilder(Procedure.GET_MEDIA_ITEM)
            .user(user_id, context)
            .param(Param.APP_ID, app_id)
            .param(Param.ALBUM_ID, album_id, required=True)
            .param(Param.MEDIA_ITEM_ID, media_item_id, required=True)
            .fields(fields)
            .build()
        )
        item = await self._gateway.fetch_single(
            query, MediaItem.from_wire, "could not retrieve media item"
        )
        return require_found(item, f"media item '{media_item_id}'")

    async def get_media_items(
        self,
        user_id: UserId | str,
        app_id: str | None,
        album_id: str,
        media_item_ids: Iterable[str] | None,
        fields: Collection[str] | None,
        options: CollectionOptions | None,
        context: SecurityContext | None,
    ) -> PaginatedCollection[MediaItem]:
        """Get the given items of an album, or the whole album if no ids are given."""
        if media_item_ids is None:
            builder = QueryBuilder(Procedure.GET_MEDIA_ITEMS)
        else:
            builder = QueryBuilder(Procedure.GET_MEDIA_ITEMS_BY_ID).ids(
                Param.MEDIA_ITEM_ID_LIST, media_item_ids
            )

        query = (
            builder.user(user_id, context)
            .param(Param.APP_ID, app_id)
            .param(Param.ALBUM_ID, album_id, required=True)
            .options(options)
            .fields(fields)
            .build()
        )
        return await self._gateway.fetch_list(
            query, MediaItem.from_wire, "could not retrieve media items"
        )

    async def get_group_media_items(
        self,
        user_ids: Iterable[UserId | str],
        group_id: GroupId | None,
        app_id: str | None,
        fields: Collection[str] | None,
        options: CollectionOptions | None,
        context: SecurityContext | None,
    ) -> PaginatedCollection[MediaItem]:
        query = (
            QueryBuilder(Procedure.GET_GROUP_MEDIA_ITEMS)
            .users(user_ids, context)
            .group(group_id)
            .param(Param.APP_ID, app_id)
            .options(options)
            .fields(fields)
            .build()
        )
        return await self._gateway.fetch_list(
            query, MediaItem.from_wire, "could not retrieve media items"
        )

    async def create_media_item(
        self,
        user_id: UserId | str,
        app_id: str | None,
        album_id: str,
        media_item: MediaItem,
        context: SecurityContext | None,
    ) -> None:
        query = (
            QueryBuilder(Procedure.CREATE_MEDIA_ITEM)
            .user(user_id, context)
            .param(Param.APP_ID, app_id)
            .param(Param.ALBUM_ID, album_id, required=True)
            .payload(Param.MEDIA_ITEM_OBJECT, media_item.to_wire())
            .build()
        )
        await self._gateway.execute(query, "could not create media item")

    async def update_media_item(
        self,
        user_id: UserId | str,
        app_id: str | None,
        album_id: str,
        media_item_id: str,
        media_item: MediaItem,
        context: SecurityContext | None,
    ) -> None:
        query = (
            QueryBuilder(Procedure.UPDATE_MEDIA_ITEM)
            .user(user_id, context)
            .param(Param.APP_ID, app_id)
            .param(Param.ALBUM_ID, album_id, required=True)
            .param(Param.MEDIA_ITEM_ID, media_item_id, required=True)
            .payload(Param.MEDIA_ITEM_OBJECT, media_item.to_wire())
            .build()
        )
        await self._gateway.execute(query, "could not update media item")

    async def delete_media_item(
        self,
        user_id: UserId | str,
        app_id: str | None,
        album_id: str,
        media_item_id: str,
        context: SecurityContext | None,
    ) -> None:
        query = (
            QueryBuilder(Procedure.DELETE_MEDIA_ITEM)
            .user(user_id, context)
            .param(Param.APP_ID, app_id)
            .param(Param.ALBUM_ID, album_id, required=True)
            .param(Param.MEDIA_ITEM_ID, media_item_id, required=True)
            .build()
        )
        await self._gateway.execute(query, "could not delete media item")
