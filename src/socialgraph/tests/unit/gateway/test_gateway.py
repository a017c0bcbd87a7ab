"""Unit tests for QueryGateway and the in-process channel."""

import pytest

from gateway.application.gateway import QueryGateway
from gateway.domain.procedures import Param, Procedure
from gateway.domain.value_objects import ListResult, Query, SingleResult
from gateway.infrastructure.channels import InProcessQueryChannel
from gateway.ports.channel import QueryChannel
from gateway.ports.exceptions import ErrorClassification, GatewayError


def person_handler(query):
    if query.procedure == Procedure.GET_PERSON:
        return SingleResult({"id": query.param(Param.USER_ID)})
    return ListResult(items=[{"id": "a"}, {"id": "b"}], first=0, max=2, total=7)


class TestInProcessQueryChannel:
    """Tests for the in-process channel adapter."""

    def test_satisfies_protocol(self):
        assert isinstance(InProcessQueryChannel(person_handler), QueryChannel)

    @pytest.mark.asyncio
    async def test_sync_handler(self):
        channel = InProcessQueryChannel(person_handler)
        query = Query(Procedure.GET_PERSON, {Param.USER_ID: "horst"})

        assert await channel.send(query) == SingleResult({"id": "horst"})

    @pytest.mark.asyncio
    async def test_async_handler(self):
        async def handler(query):
            return SingleResult({"id": "async"})

        channel = InProcessQueryChannel(handler)

        result = await channel.send(Query(Procedure.GET_PERSON))

        assert result.payload == {"id": "async"}

    @pytest.mark.asyncio
    async def test_handler_error_surfaces_on_await(self):
        def handler(query):
            raise TimeoutError("engine timed out")

        awaitable = InProcessQueryChannel(handler).send(Query(Procedure.GET_PERSON))

        with pytest.raises(TimeoutError):
            await awaitable


class TestQueryGateway:
    """Tests for the combined dispatch and conversion entry point."""

    @pytest.mark.asyncio
    async def test_fetch_single(self, mock_gateway_probe):
        gateway = QueryGateway(InProcessQueryChannel(person_handler), mock_gateway_probe)
        query = Query(Procedure.GET_PERSON, {Param.USER_ID: "horst"})

        result = await gateway.fetch_single(query, dict)

        assert result == {"id": "horst"}

    @pytest.mark.asyncio
    async def test_fetch_list(self, mock_gateway_probe):
        gateway = QueryGateway(InProcessQueryChannel(person_handler), mock_gateway_probe)

        page = await gateway.fetch_list(Query(Procedure.GET_PEOPLE), dict)

        assert len(page) == 2
        assert page.total == 7

    @pytest.mark.asyncio
    async def test_handler_failure_is_internal(self, mock_gateway_probe):
        def handler(query):
            raise RuntimeError("boom")

        gateway = QueryGateway(InProcessQueryChannel(handler), mock_gateway_probe)

        with pytest.raises(GatewayError) as exc_info:
            await gateway.execute(Query(Procedure.DELETE_PERSON), "could not delete")

        assert exc_info.value.classification == ErrorClassification.INTERNAL
        assert exc_info.value.message == "could not delete: boom"
