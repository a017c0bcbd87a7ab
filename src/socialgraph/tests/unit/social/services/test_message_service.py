"""Unit tests for MessageService."""

import pytest

from gateway.domain.procedures import Param, Procedure
from gateway.domain.value_objects import ListResult, SingleResult
from social.application.services.message_service import MessageService
from social.domain.events import EventType
from social.domain.views import Message, MessageCollection


@pytest.fixture
def service(gateway, notifier):
    return MessageService(gateway, notifier=notifier)


class TestCollections:
    @pytest.mark.asyncio
    async def test_collections_sorted_by_title(self, service, mock_channel, context):
        mock_channel.send.return_value = ListResult(items=[{"id": "@inbox"}], total=1)

        collections = await service.get_message_collections("@me", None, None, context)

        assert mock_channel.send.call_args.args[0].param(Param.SORT_FIELD) == "title"
        assert collections.items[0].id == "@inbox"

    @pytest.mark.asyncio
    async def test_create_collection_stamps_updated(self, service, mock_channel, context):
        mock_channel.send.return_value = SingleResult({"id": "c1", "title": "Work"})
        collection = MessageCollection(title="Work")

        created = await service.create_message_collection("@me", collection, context)

        payload = mock_channel.send.call_args.args[0].param(Param.MESSAGE_COLLECTION_OBJECT)
        assert payload["title"] == "Work"
        assert isinstance(payload["updated"], int)
        assert collection.updated is None
        assert created.id == "c1"

    @pytest.mark.asyncio
    async def test_delete_collection(self, service, mock_channel, context):
        mock_channel.send.return_value = SingleResult()

        await service.delete_message_collection("horst", "c1", context)

        query = mock_channel.send.call_args.args[0]
        assert query.procedure == Procedure.DELETE_MESSAGE_COLLECTION
        assert query.param(Param.MESSAGE_COLLECTION_ID) == "c1"


class TestMessages:
    """Tests for messages within a collection."""

    @pytest.mark.asyncio
    async def test_create_defaults_to_outbox(self, service, mock_channel, mock_sink, context):
        mock_channel.send.return_value = SingleResult({"id": "m1"})

        created = await service.create_message(
            "@me", "app", None, Message(title="hi"), context
        )

        query = mock_channel.send.call_args.args[0]
        assert query.param(Param.MESSAGE_COLLECTION_ID) == "@outbox"
        assert query.param(Param.MESSAGE_OBJECT) == {"title": "hi"}
        event = mock_sink.fire.call_args.args[0]
        assert event.type == EventType.MESSAGE_CREATED
        assert event.payload is created
        assert event.properties == {
            "userId": "horst",
            "messageCollectionId": "@outbox",
            "appId": "app",
        }

    @pytest.mark.asyncio
    async def test_create_may_return_nothing(self, service, mock_channel, context):
        mock_channel.send.return_value = SingleResult(None)

        created = await service.create_message("horst", None, "c1", Message(), context)

        assert created is None

    @pytest.mark.asyncio
    async def test_get_messages_by_id(self, service, mock_channel, context):
        mock_channel.send.return_value = ListResult()

        await service.get_messages("horst", "c1", None, ["m1", "m2"], None, context)

        query = mock_channel.send.call_args.args[0]
        assert query.param(Param.MESSAGE_ID_LIST) == ["m1", "m2"]
        assert query.param(Param.SORT_FIELD) == "id"

    @pytest.mark.asyncio
    async def test_modify_fires_event_with_new_state(
        self, service, mock_channel, mock_sink, context
    ):
        mock_channel.send.side_effect = [
            SingleResult(),
            ListResult(items=[{"id": "m1", "title": "edited"}], total=1),
        ]

        await service.modify_message("horst", "c1", "m1", Message(title="edited"), context)

        modify = mock_channel.send.call_args_list[0].args[0]
        assert modify.procedure == Procedure.MODIFY_MESSAGE
        assert "updated" in modify.param(Param.MESSAGE_OBJECT)
        event = mock_sink.fire.call_args.args[0]
        assert event.type == EventType.MESSAGE_UPDATED
        assert event.payload.title == "edited"

    @pytest.mark.asyncio
    async def test_delete_fires_one_event_per_message(
        self, service, mock_channel, mock_sink, context
    ):
        mock_channel.send.side_effect = [
            ListResult(items=[{"id": "m1"}, {"id": "m2"}], total=2),
            SingleResult(),
        ]

        await service.delete_messages("horst", "c1", ["m1", "m2"], context)

        delete = mock_channel.send.call_args_list[1].args[0]
        assert delete.procedure == Procedure.DELETE_MESSAGES
        events = [call.args[0] for call in mock_sink.fire.call_args_list]
        assert [e.type for e in events] == [EventType.MESSAGE_DELETED] * 2
        assert [e.payload.id for e in events] == ["m1", "m2"]
