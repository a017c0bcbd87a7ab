"""Domain value objects for the Gateway bounded context.

These are immutable data structures describing a remote procedure call
and its result, together with the caller-supplied identity and paging
information that is turned into call parameters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Generic, Mapping, Sequence, TypeAlias, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field

from gateway.domain.procedures import Procedure

# Untyped property map as exchanged with the remote engine.
PropertyMap: TypeAlias = dict[str, Any]

T = TypeVar("T")


class SortOrder(str, Enum):
    """Sort direction requested for a collection."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


class FilterOperation(str, Enum):
    """Filter comparison requested for a collection."""

    CONTAINS = "contains"
    EQUALS = "equals"
    PRESENT = "present"
    STARTS_WITH = "startsWith"


class CollectionOptions(BaseModel):
    """How a collection should be sorted, filtered and paged.

    Frozen: translators derive copies instead of mutating the caller's
    instance.
    """

    model_config = ConfigDict(frozen=True)

    sort_by: str | None = None
    sort_order: SortOrder | None = None
    filter: str | None = None
    filter_operation: FilterOperation | None = None
    filter_value: str | None = None
    first: int = 0
    max: int = 0


class SecurityContext(BaseModel):
    """Identity of the caller (viewer) and of the resource owner."""

    model_config = ConfigDict(frozen=True)

    viewer_id: str | None = None
    owner_id: str | None = None


class UserId(BaseModel):
    """A user reference that may need resolving against the caller.

    Literal ids are used as-is; ``@me``, ``@viewer`` and ``@owner`` are
    resolved from the security context.
    """

    model_config = ConfigDict(frozen=True)

    ME: ClassVar[str] = "@me"
    VIEWER: ClassVar[str] = "@viewer"
    OWNER: ClassVar[str] = "@owner"

    value: str = Field(min_length=1)

    def is_reference(self) -> bool:
        return self.value in (UserId.ME, UserId.VIEWER, UserId.OWNER)

    def resolve(self, context: SecurityContext | None) -> str | None:
        """Resolve to a concrete user id.

        Returns:
            The literal id, or the matching id from the context. None if a
            reference cannot be resolved because the context lacks it.
        """
        if self.value in (UserId.ME, UserId.VIEWER):
            return context.viewer_id if context is not None else None
        if self.value == UserId.OWNER:
            return context.owner_id if context is not None else None
        return self.value

    @classmethod
    def of(cls, value: "str | UserId") -> UserId:
        if isinstance(value, UserId):
            return value
        return cls(value=value)


class GroupType(str, Enum):
    """Kinds of group a request can target."""

    ALL = "all"
    FRIENDS = "friends"
    SELF = "self"
    DELETED = "deleted"
    OBJECT_ID = "objectId"
    CUSTOM = "custom"


class GroupId(BaseModel):
    """A group selector: either a group type or an explicit group id."""

    model_config = ConfigDict(frozen=True)

    type: GroupType
    object_id: str | None = None

    @classmethod
    def of_type(cls, group_type: GroupType) -> GroupId:
        return cls(type=group_type)

    @classmethod
    def of_object(cls, object_id: str) -> GroupId:
        return cls(type=GroupType.OBJECT_ID, object_id=object_id)

    def normalized(self) -> str:
        """Wire form of this group.

        An explicit group is sent as its id; any other type is sent as
        ``"@" + type``.
        """
        if self.type == GroupType.OBJECT_ID:
            if self.object_id is None:
                raise ValueError("object-id group requires an object_id")
            return self.object_id
        return f"@{self.type.value}"


@dataclass(frozen=True)
class Query:
    """A named, parameterized call to the remote graph engine."""

    procedure: Procedure
    params: Mapping[str, Any] = field(default_factory=dict)

    def param(self, key: str) -> Any:
        return self.params.get(key)


@dataclass(frozen=True)
class SingleResult:
    """Result of a call returning at most one item.

    A None payload denotes "not found", not an error.
    """

    payload: PropertyMap | None = None


@dataclass(frozen=True)
class ListResult:
    """Result of a call returning a page of items."""

    items: Sequence[Any] = ()
    first: int = 0
    max: int = 0
    total: int = 0


QueryResult: TypeAlias = Union[SingleResult, ListResult]


@dataclass(frozen=True)
class PaginatedCollection(Generic[T]):
    """A converted page of items with paging data copied from the engine."""

    items: list[T]
    start_index: int
    items_per_page: int
    total: int

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)
