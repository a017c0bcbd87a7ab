"""Channel protocol for the Gateway bounded context.

The channel is the only thing the gateway knows about the transport.
Connection handling, framing, authentication, reconnection, retries and
timeouts all live behind it.
"""

from __future__ import annotations

from typing import Awaitable, Protocol, runtime_checkable

from gateway.domain.value_objects import Query, QueryResult


@runtime_checkable
class QueryChannel(Protocol):
    """Sends queries to the remote graph engine."""

    def send(self, query: Query) -> Awaitable[QueryResult]:
        """Dispatch a query.

        Args:
            query: The named, parameterized call to send.

        Returns:
            An awaitable resolving to the engine's result. Transport,
            timeout and remote failures surface as exceptions when awaited.
        """
        ...
