"""Conversion of untyped engine results into typed views."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from gateway.application.observability import DefaultGatewayProbe, GatewayProbe
from gateway.domain.value_objects import (
    ListResult,
    PaginatedCollection,
    PropertyMap,
    QueryResult,
    SingleResult,
)
from gateway.ports.exceptions import GatewayError

T = TypeVar("T")


class ResultConverter:
    """Maps SingleResult and ListResult payloads through a view factory."""

    def __init__(self, probe: GatewayProbe | None = None):
        self._probe = probe or DefaultGatewayProbe()

    def single(
        self,
        result: QueryResult,
        factory: Callable[[PropertyMap], T],
    ) -> T | None:
        """Convert a single-item result.

        Returns:
            The converted view, or None if the engine found nothing.

        Raises:
            GatewayError: INTERNAL if the result is not a SingleResult or
                the payload cannot be converted.
        """
        if not isinstance(result, SingleResult):
            self._probe.malformed_response(
                expected=SingleResult.__name__,
                received=type(result).__name__,
            )
            raise GatewayError.internal("engine returned no single result")

        if result.payload is None:
            return None
        return self._convert(result.payload, factory)

    def collection(
        self,
        result: QueryResult,
        factory: Callable[[Any], T],
    ) -> PaginatedCollection[T]:
        """Convert a list result, copying the paging data verbatim."""
        if not isinstance(result, ListResult):
            self._probe.malformed_response(
                expected=ListResult.__name__,
                received=type(result).__name__,
            )
            raise GatewayError.internal("engine returned no list result")

        items = [self._convert(item, factory) for item in result.items]
        return PaginatedCollection(
            items=items,
            start_index=result.first,
            items_per_page=result.max,
            total=result.total,
        )

    def _convert(self, payload: Any, factory: Callable[[Any], T]) -> T:
        try:
            return factory(payload)
        except Exception as e:
            self._probe.conversion_failed(view=_factory_name(factory), error=e)
            raise GatewayError.internal(f"could not convert result: {e}") from e


def _factory_name(factory: Callable[..., Any]) -> str:
    owner = getattr(factory, "__self__", None)
    if isinstance(owner, type):
        return owner.__name__
    return getattr(factory, "__qualname__", type(factory).__name__)
