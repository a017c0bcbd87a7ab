"""Gateway domain module.

Contains the call/result value objects and the procedure catalog for the
Gateway bounded context.
"""

from gateway.domain.procedures import Param, Procedure
from gateway.domain.value_objects import (
    CollectionOptions,
    GroupId,
    GroupType,
    ListResult,
    PaginatedCollection,
    Query,
    QueryResult,
    SecurityContext,
    SingleResult,
    UserId,
)

__all__ = [
    "CollectionOptions",
    "GroupId",
    "GroupType",
    "ListResult",
    "PaginatedCollection",
    "Param",
    "Procedure",
    "Query",
    "QueryResult",
    "SecurityContext",
    "SingleResult",
    "UserId",
]
