"""In-process QueryChannel adapter.

Wraps a plain handler callable so an engine running in the same process
(or a test double) can serve gateway queries without a transport.
"""

from __future__ import annotations

import inspect
from typing import Awaitable, Callable, Union

from gateway.domain.value_objects import Query, QueryResult

QueryHandler = Callable[[Query], Union[QueryResult, Awaitable[QueryResult]]]


class InProcessQueryChannel:
    """QueryChannel that calls a handler directly.

    The handler may be synchronous or a coroutine function. Exceptions it
    raises surface when the returned awaitable is awaited, exactly as a
    remote channel failure would.
    """

    def __init__(self, handler: QueryHandler):
        self._handler = handler

    def send(self, query: Query) -> Awaitable[QueryResult]:
        return self._invoke(query)

    async def _invoke(self, query: Query) -> QueryResult:
        result = self._handler(query)
        if inspect.isawaitable(result):
            result = await result
        return result
