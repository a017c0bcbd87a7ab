"""Domain probes for the Social application layer.

Probes for event notification and for the facades themselves. They
follow the Domain Oriented Observability pattern: services report what
happened in domain terms and the probe decides how it is logged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class EventNotifierProbe(Protocol):
    """Domain probe for best-effort event notification."""

    def event_fired(self, event_type: str) -> None:
        """Record that an event was handed to the sink."""
        ...

    def event_failed(self, event_type: str, error: Exception) -> None:
        """Record that handing an event to the sink failed."""
        ...

    def with_context(self, context: ObservationContext) -> EventNotifierProbe:
        """Create a new probe with observation context bound."""
        ...


class SocialServiceProbe(Protocol):
    """Domain probe for facade operations."""

    def snapshot_fetch_failed(
        self, operation: str, subject_id: str, error: Exception
    ) -> None:
        """Record that the pre-delete snapshot could not be read."""
        ...

    def with_context(self, context: ObservationContext) -> SocialServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultEventNotifierProbe:
    """Default implementation of EventNotifierProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultEventNotifierProbe:
        return DefaultEventNotifierProbe(logger=self._logger, context=context)

    def event_fired(self, event_type: str) -> None:
        self._logger.debug(
            "social_event_fired",
            event_type=event_type,
            **self._get_context_kwargs(),
        )

    def event_failed(self, event_type: str, error: Exception) -> None:
        self._logger.warning(
            "social_event_failed",
            event_type=event_type,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )


class DefaultSocialServiceProbe:
    """Default implementation of SocialServiceProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultSocialServiceProbe:
        return DefaultSocialServiceProbe(logger=self._logger, context=context)

    def snapshot_fetch_failed(
        self, operation: str, subject_id: str, error: Exception
    ) -> None:
        self._logger.warning(
            "social_snapshot_fetch_failed",
            operation=operation,
            subject_id=subject_id,
            error=str(error),
            **self._get_context_kwargs(),
        )
