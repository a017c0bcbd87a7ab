"""Message facade for the Social bounded context."""

from __future__ import annotations

from typing import Collection, Iterable

from gateway.application.query_builder import QueryBuilder
from gateway.domain.procedures import Param, Procedure
from gateway.domain.value_objects import (
    CollectionOptions,
    PaginatedCollection,
    SecurityContext,
    UserId,
)
from social.application.services.base import SocialService, require_found, utc_now
from social.domain.events import EventType
from social.domain.views.message import OUTBOX, Message, MessageCollection

TITLE_SORT = "title"
ID_SORT = "id"


class MessageService(SocialService):
    """Message collections and the messages in them.

    Protected collections such as the inbox and outbox get no special
    treatment here; whether they may be deleted is up to the engine.
    """

    async def get_message_collections(
        self,
        user_id: UserId | str,
        options: CollectionOptions | None,
        fields: Collection[str] | None,
        context: SecurityContext | None,
    ) -> PaginatedCollection[MessageCollection]:
        query = (
            QueryBuilder(Procedure.GET_MESSAGE_COLLECTIONS)
            .user(user_id, context)
            .options(options, TITLE_SORT)
            .fields(fields)
            .build()
        )
        return await self._gateway.fetch_list(
            query, MessageCollection.from_wire, "could not retrieve message collections"
        )

    async def create_message_collection(
        self,
        user_id: UserId | str,
        collection: MessageCollection,
        context: SecurityContext | None,
    ) -> MessageCollection:
        collection = MessageCollection(collection.properties)
        collection.updated = utc_now()
        query = (
            QueryBuilder(Procedure.CREATE_MESSAGE_COLLECTION)
            .user(user_id, context)
            .payload(Param.MESSAGE_COLLECTION_OBJECT, collection.to_wire())
            .build()
        )
        created = await self._gateway.fetch_single(
            query, MessageCollection.from_wire, "could not create message collection"
        )
        return require_found(created, "created message collection")

    async def modify_message_collection(
        self,
        user_id: UserId | str,
        collection: MessageCollection,
        context: SecurityContext | None,
    ) -> None:
        collection = MessageCollection(collection.properties)
        collection.updated = utc_now()
        query = (
            QueryBuilder(Procedure.MODIFY_MESSAGE_COLLECTION)
            .user(user_id, context)
            .payload(Param.MESSAGE_COLLECTION_OBJECT, collection.to_wire())
            .build()
        )
        await self._gateway.execute(query, "could not modify message collection")

    async def delete_message_collection(
        self,
        user_id: UserId | str,
        collection_id: str,
        context: SecurityContext | None,
    ) -> None:
        query = (
            QueryBuilder(Procedure.DELETE_MESSAGE_COLLECTION)
            .user(user_id, context)
            .param(Param.MESSAGE_COLLECTION_ID, collection_id, required=True)
            .build()
        )
        await self._gateway.execute(query, "could not delete message collection")

    async def get_messages(
        self,
        user_id: UserId | str,
        collection_id: str,
        fields: Collection[str] | None,
        message_ids: Iterable[str] | None,
        options: CollectionOptions | None,
        context: SecurityContext | None,
    ) -> PaginatedCollection[Message]:
        """Get the messages of a collection, optionally only the given ids."""
        query = (
            QueryBuilder(Procedure.GET_MESSAGES)
            .user(user_id, context)
            .param(Param.MESSAGE_COLLECTION_ID, collection_id, required=True)
            .ids(Param.MESSAGE_ID_LIST, message_ids)
            .options(options, ID_SORT)
            .fields(fields)
            .build()
        )
        return await self._gateway.fetch_list(
            query, Message.from_wire, "could not retrieve messages"
        )

    async def create_message(
        self,
        user_id: UserId | str,
        app_id: str | None,
        collection_id: str | None,
        message: Message,
        context: SecurityContext | None,
    ) -> Message | None:
        """Create a message; without a collection id it goes to the outbox.

        Returns:
            The message as stored by the engine, or None if it returned none.
        """
        if not collection_id:
            collection_id = OUTBOX

        query = (
            QueryBuilder(Procedure.CREATE_MESSAGE)
            .user(user_id, context)
            .param(Param.APP_ID, app_id)
            .param(Param.MESSAGE_COLLECTION_ID, collection_id)
            .payload(Param.MESSAGE_OBJECT, message.to_wire())
            .build()
        )
        created = await self._gateway.fetch_single(
            query, Message.from_wire, "could not create message"
        )

        self._notifier.notify(
            EventType.MESSAGE_CREATED,
            created,
            context,
            {
                "userId": query.param(Param.USER_ID),
                "messageCollectionId": collection_id,
                "appId": app_id,
            },
        )
        return created

    async def modify_message(
        self,
        user_id: UserId | str,
        collection_id: str,
        message_id: str,
        message: Message,
        context: SecurityContext | None,
    ) -> None:
        """Modify a message.

        With events enabled, the message is read back after the change so
        the update event carries its new state.
        """
        message = Message(message.properties)
        message.updated = utc_now()
        query = (
            QueryBuilder(Procedure.MODIFY_MESSAGE)
            .user(user_id, context)
            .param(Param.MESSAGE_COLLECTION_ID, collection_id, required=True)
            .param(Param.MESSAGE_ID, message_id, required=True)
            .payload(Param.MESSAGE_OBJECT, message.to_wire())
            .build()
        )
        await self._gateway.execute(query, "could not modify message")

        modified = await self._snapshot(
            "modify_message",
            message_id,
            lambda: self.get_messages(
                user_id, collection_id, None, [message_id], None, context
            ),
        )
        if modified:
            self._notifier.notify(
                EventType.MESSAGE_UPDATED,
                modified.items[0],
                context,
                {
                    "userId": query.param(Param.USER_ID),
                    "messageCollectionId": collection_id,
                },
            )

    async def delete_messages(
        self,
        user_id: UserId | str,
        collection_id: str,
        message_ids: Iterable[str],
        context: SecurityContext | None,
    ) -> None:
        """Delete messages, raising one deletion event per removed message."""
        message_ids = list(message_ids)
        query = (
            QueryBuilder(Procedure.DELETE_MESSAGES)
            .user(user_id, context)
            .param(Param.MESSAGE_COLLECTION_ID, collection_id, required=True)
            .ids(Param.MESSAGE_ID_LIST, message_ids)
            .build()
        )
        snapshot = await self._snapshot(
            "delete_messages",
            collection_id,
            lambda: self.get_messages(
                user_id, collection_id, None, message_ids, None, context
            ),
        )

        await self._gateway.execute(query, "could not delete messages")

        if snapshot is None:
            return
        properties = {
            "userId": query.param(Param.USER_ID),
            "messageCollectionId": collection_id,
        }
        for deleted in snapshot:
            self._notifier.notify(EventType.MESSAGE_DELETED, deleted, context, properties)
