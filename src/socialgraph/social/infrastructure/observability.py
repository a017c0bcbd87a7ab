"""Domain probes for the Social infrastructure layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class EventBusProbe(Protocol):
    """Domain probe for event delivery on the event bus."""

    def listener_failed(
        self, event_type: str, listener: str, error: Exception
    ) -> None:
        """Record that a listener raised while handling an event."""
        ...

    def with_context(self, context: ObservationContext) -> EventBusProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultEventBusProbe:
    """Default implementation of EventBusProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultEventBusProbe:
        return DefaultEventBusProbe(logger=self._logger, context=context)

    def listener_failed(
        self, event_type: str, listener: str, error: Exception
    ) -> None:
        self._logger.error(
            "event_listener_failed",
            event_type=event_type,
            listener=listener,
            error=str(error),
            exc_info=error,
            **self._get_context_kwargs(),
        )
