"""Query gateway: dispatch plus conversion in one collaborator."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from gateway.application.converter import ResultConverter
from gateway.application.dispatcher import ChannelDispatcher
from gateway.application.observability import DefaultGatewayProbe, GatewayProbe
from gateway.domain.value_objects import (
    PaginatedCollection,
    PropertyMap,
    Query,
    QueryResult,
)
from gateway.ports.channel import QueryChannel

T = TypeVar("T")


class QueryGateway:
    """Entry point the domain facades use to talk to the remote engine.

    Holds only the channel reference and its probe; safe to share
    between concurrent callers.
    """

    def __init__(
        self,
        channel: QueryChannel,
        probe: GatewayProbe | None = None,
    ):
        self._probe = probe or DefaultGatewayProbe()
        self._dispatcher = ChannelDispatcher(channel, probe=self._probe)
        self._converter = ResultConverter(probe=self._probe)

    async def execute(
        self,
        query: Query,
        failure_message: str = "remote query failed",
    ) -> QueryResult:
        """Dispatch a query and return the raw result."""
        return await self._dispatcher.dispatch(query, failure_message)

    async def fetch_single(
        self,
        query: Query,
        factory: Callable[[PropertyMap], T],
        failure_message: str = "remote query failed",
    ) -> T | None:
        """Dispatch a query and convert its single payload, if any."""
        result = await self.execute(query, failure_message)
        return self._converter.single(result, factory)

    async def fetch_list(
        self,
        query: Query,
        factory: Callable[[Any], T],
        failure_message: str = "remote query failed",
    ) -> PaginatedCollection[T]:
        """Dispatch a query and convert every returned item."""
        result = await self.execute(query, failure_message)
        return self._converter.collection(result, factory)
