"""Dispatch of built queries over the injected channel."""

from __future__ import annotations

from gateway.application.observability import DefaultGatewayProbe, GatewayProbe
from gateway.domain.value_objects import Query, QueryResult
from gateway.ports.channel import QueryChannel
from gateway.ports.exceptions import GatewayError


class ChannelDispatcher:
    """Sends queries to the remote engine and classifies channel failures.

    No retries and no timeouts are applied here; the channel owns both.
    """

    def __init__(
        self,
        channel: QueryChannel,
        probe: GatewayProbe | None = None,
    ):
        self._channel = channel
        self._probe = probe or DefaultGatewayProbe()

    async def dispatch(
        self,
        query: Query,
        failure_message: str = "remote query failed",
    ) -> QueryResult:
        """Await the channel's answer for one query.

        Raises:
            GatewayError: INTERNAL if the channel raised, chained to the
                original cause. A GatewayError raised by the channel itself
                is passed through unchanged.
        """
        self._probe.query_dispatched(
            procedure=query.procedure.value,
            param_count=len(query.params),
        )
        try:
            return await self._channel.send(query)
        except GatewayError as e:
            self._probe.query_failed(procedure=query.procedure.value, error=e)
            raise
        except Exception as e:
            self._probe.query_failed(procedure=query.procedure.value, error=e)
            raise GatewayError.internal(f"{failure_message}: {e}") from e
