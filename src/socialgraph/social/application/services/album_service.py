"""Album facade for the Social bounded context."""

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
from social.domain.views.media import Album


class AlbumService(SocialService):
    """Photo and media albums."""

    async def get_album(
        self,
        user_id: UserId | str,
        app_id: str | None,
        fields: Collection[str] | None,
        album_id: str,
        context: SecurityContext | None,
    ) -> Album:
        """Get one album.

        Raises:
            GatewayError: NOT_FOUND if the engine knows no such album.
        """
        query = (
            QueryBuilder(Procedure.GET_ALBUM)
            .user(user_id, context)
            .param(Param.APP_ID, app_id)
            .param(Param.ALBUM_ID, album_id, required=True)
            .fields(fields)
            .build()
        )
        album = await self._gateway.fetch_single(
            query, Album.from_wire, "could not retrieve album"
        )
        return require_found(album, f"album '{album_id}'")

    async def get_albums(
        self,
        user_id: UserId | str,
        app_id: str | None,
        fields: Collection[str] | None,
        options: CollectionOptions | None,
        album_ids: Iterable[str] | None,
        context: SecurityContext | None,
    ) -> PaginatedCollection[Album]:
        """Get a user's albums, optionally only the given ids."""
        query = (
            QueryBuilder(Procedure.GET_ALBUMS)
            .user(user_id, context)
            .param(Param.APP_ID, app_id)
            .ids(Param.ALBUM_ID_LIST, album_ids)
            .options(options)
            .fields(fields)
            .build()
        )
        return await self._gateway.fetch_list(
            query, Album.from_wire, "could not retrieve albums"
        )

    async def get_group_albums(
        self,
        user_ids: Iterable[UserId | str],
        group_id: GroupId | None,
        app_id: str | None,
        fields: Collection[str] | None,
        options: CollectionOptions | None,
        context: SecurityContext | None,
    ) -> PaginatedCollection[Album]:
        query = (
            QueryBuilder(Procedure.GET_GROUP_ALBUMS)
            .users(user_ids, context)
            .group(group_id)
            .param(Param.APP_ID, app_id)
            .options(options)
            .fields(fields)
            .build()
        )
        return await self._gateway.fetch_list(
            query, Album.from_wire, "could not retrieve albums"
        )

    async def create_album(
        self,
        user_id: UserId | str,
        app_id: str | None,
        album: Album,
        context: SecurityContext | None,
    ) -> None:
        query = (
            QueryBuilder(Procedure.CREATE_ALBUM)
            .user(user_id, context)
            .param(Param.APP_ID, app_id)
            .payload(Param.ALBUM_OBJECT, album.to_wire())
            .build()
        )
        await self._gateway.execute(query, "could not create album")

    async def update_album(
        self,
        user_id: UserId | str,
        app_id: str | None,
        album: Album,
        album_id: str,
        context: SecurityContext | None,
    ) -> None:
        query = (
            QueryBuilder(Procedure.UPDATE_ALBUM)
            .user(user_id, context)
            .param(Param.APP_ID, app_id)
            .payload(Param.ALBUM_OBJECT, album.to_wire())
            .param(Param.ALBUM_ID, album_id, required=True)
            .build()
        )
        await self._gateway.execute(query, "could not update album")

    async def delete_album(
        self,
        user_id: UserId | str,
        app_id: str | None,
        album_id: str,
        context: SecurityContext | None,
    ) -> None:
        query = (
            QueryBuilder(Procedure.DELETE_ALBUM)
            .user(user_id, context)
            .param(Param.APP_ID, app_id)
            .param(Param.ALBUM_ID, album_id, required=True)
            .build()
        )
        await self._gateway.execute(query, "could not delete album")
