"""Observation context for domain-oriented observability.

Observation contexts carry request-scoped metadata that every probe adds
to the events it records.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any


@dataclass(frozen=True)
class ObservationContext:
    """Immutable metadata attached to instrumentation events.

    Attributes:
        request_id: Identifier of the current request, if any.
        viewer_id: The calling user.
        owner_id: The user owning the accessed resources.
        procedure: Remote procedure being executed.
        extra: Additional contextual metadata.

    Example:
        context = ObservationContext(request_id="req-123", viewer_id="horst")
        probe = DefaultGatewayProbe().with_context(context)
    """

    request_id: str | None = None
    viewer_id: str | None = None
    owner_id: str | None = None
    procedure: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        """Convert context to a dictionary for logging.

        Only includes non-None values.
        """
        result: dict[str, Any] = {}
        if self.request_id is not None:
            result["request_id"] = self.request_id
        if self.viewer_id is not None:
            result["viewer_id"] = self.viewer_id
        if self.owner_id is not None:
            result["owner_id"] = self.owner_id
        if self.procedure is not None:
            result["procedure"] = self.procedure
        result.update(self.extra)
        return result

    def with_procedure(self, procedure: str) -> ObservationContext:
        return replace(self, procedure=procedure)

    def with_extra(self, **kwargs: Any) -> ObservationContext:
        """Create a new context with additional metadata."""
        return replace(self, extra={**self.extra, **kwargs})
