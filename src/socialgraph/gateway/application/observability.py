"""Domain probes for the Gateway application layer.

These probes capture gateway-level events (calls dispatched, channel
failures, contract breaks with the remote engine) without exposing
logging details to the dispatch and conversion code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class GatewayProbe(Protocol):
    """Domain probe for query dispatch and result conversion."""

    def query_dispatched(self, procedure: str, param_count: int) -> None:
        """Record that a query was handed to the channel."""
        ...

    def query_failed(self, procedure: str, error: Exception) -> None:
        """Record that the channel reported a failure for a query."""
        ...

    def malformed_response(self, expected: str, received: str) -> None:
        """Record that the engine answered with an unexpected result shape."""
        ...

    def conversion_failed(self, view: str, error: Exception) -> None:
        """Record that a returned property map could not be converted."""
        ...

    def with_context(self, context: ObservationContext) -> GatewayProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultGatewayProbe:
    """Default implementation of GatewayProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultGatewayProbe:
        return DefaultGatewayProbe(logger=self._logger, context=context)

    def query_dispatched(self, procedure: str, param_count: int) -> None:
        self._logger.debug(
            "gateway_query_dispatched",
            procedure=procedure,
            param_count=param_count,
            **self._get_context_kwargs(),
        )

    def query_failed(self, procedure: str, error: Exception) -> None:
        self._logger.error(
            "gateway_query_failed",
            procedure=procedure,
            error=str(error),
            error_type=type(error).__name__,
            exc_info=error,
            **self._get_context_kwargs(),
        )

    def malformed_response(self, expected: str, received: str) -> None:
        self._logger.error(
            "gateway_malformed_response",
            expected=expected,
            received=received,
            **self._get_context_kwargs(),
        )

    def conversion_failed(self, view: str, error: Exception) -> None:
        self._logger.error(
            "gateway_conversion_failed",
            view=view,
            error=str(error),
            **self._get_context_kwargs(),
        )
