"""Property-bag views.

A view is a typed facade over a string-keyed property map, which is also
the wire format exchanged with the remote engine. Fields are declared as
descriptors naming their wire key; reading a missing key yields None and
assigning None removes the key.
"""

from __future__ import annotations

import copy
from datetime import datetime, timezone
from typing import Any, Generic, Iterable, Mapping, TypeVar

V = TypeVar("V", bound="View")


def strip_none(value: Any) -> Any:
    """Return a copy of ``value`` with None entries removed at every level."""
    if isinstance(value, Mapping):
        return {
            key: strip_none(item) for key, item in value.items() if item is not None
        }
    if isinstance(value, (list, tuple)):
        return [strip_none(item) for item in value if item is not None]
    return value


class WireField:
    """A view attribute stored under a wire key of the property map."""

    def __init__(self, key: str | None = None):
        self.key = key

    def __set_name__(self, owner: type, name: str) -> None:
        if self.key is None:
            self.key = name

    def __get__(self, instance: View | None, owner: type) -> Any:
        if instance is None:
            return self
        value = instance.properties.get(self.key)
        if value is None:
            return None
        return self.decode(value)

    def __set__(self, instance: View, value: Any) -> None:
        if value is None:
            instance.properties.pop(self.key, None)
        else:
            instance.properties[self.key] = self.encode(value)

    def decode(self, value: Any) -> Any:
        return value

    def encode(self, value: Any) -> Any:
        return value


class ListField(WireField):
    """A list of primitives; tuples and sets are stored as lists."""

    def decode(self, value: Any) -> Any:
        return list(value)

    def encode(self, value: Iterable[Any]) -> Any:
        return list(value)


class EpochMillisField(WireField):
    """A timestamp stored as milliseconds since the Unix epoch."""

    def decode(self, value: Any) -> datetime:
        if isinstance(value, datetime):
            return value
        return datetime.fromtimestamp(int(value) / 1000, tz=timezone.utc)

    def encode(self, value: datetime | int) -> int:
        if isinstance(value, datetime):
            return int(value.timestamp() * 1000)
        return int(value)


class IsoTimestampField(WireField):
    """A timestamp stored as an ISO-8601 string."""

    def decode(self, value: Any) -> datetime:
        if isinstance(value, datetime):
            return value
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))

    def encode(self, value: datetime | str) -> str:
        if isinstance(value, datetime):
            return value.isoformat()
        return str(value)


class ViewField(WireField, Generic[V]):
    """A nested view stored as a nested property map."""

    def __init__(self, view_type: type[V], key: str | None = None):
        super().__init__(key)
        self.view_type = view_type

    def decode(self, value: Any) -> V:
        return self.view_type(value)

    def encode(self, value: V | Mapping[str, Any]) -> dict[str, Any]:
        return _to_map(value)


class ViewListField(WireField, Generic[V]):
    """A list of nested views stored as a list of property maps."""

    def __init__(self, view_type: type[V], key: str | None = None):
        super().__init__(key)
        self.view_type = view_type

    def decode(self, value: Any) -> list[V]:
        return [self.view_type(item) for item in value]

    def encode(self, value: Iterable[V | Mapping[str, Any]]) -> list[dict[str, Any]]:
        return [_to_map(item) for item in value]


class View:
    """Base class for every property-bag view.

    The constructor copies the given map, so a view never aliases the
    payload it was built from. Keyword arguments set declared fields.

    Example:
        group = Group(id="g1", title="Developers")
        group.to_wire()  # {"id": "g1", "title": "Developers"}
    """

    def __init__(self, properties: Mapping[str, Any] | None = None, **fields: Any):
        if properties is not None and not isinstance(properties, Mapping):
            raise TypeError(
                f"{type(self).__name__} requires a property map, "
                f"got {type(properties).__name__}"
            )
        self.properties: dict[str, Any] = copy.deepcopy(dict(properties or {}))
        for name, value in fields.items():
            if not isinstance(getattr(type(self), name, None), WireField):
                raise AttributeError(f"{type(self).__name__} has no field '{name}'")
            setattr(self, name, value)

    @classmethod
    def from_wire(cls: type[V], payload: Mapping[str, Any]) -> V:
        return cls(payload)

    def to_wire(self) -> dict[str, Any]:
        """Return a fresh map with None values stripped at every level."""
        return strip_none(copy.deepcopy(self.properties))

    def get(self, key: str) -> Any:
        return self.properties.get(key)

    def set(self, key: str, value: Any) -> None:
        if value is None:
            self.properties.pop(key, None)
        else:
            self.properties[key] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, View):
            return NotImplemented
        return type(self) is type(other) and self.properties == other.properties

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.properties!r})"


def _to_map(value: View | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(value, View):
        return value.to_wire()
    return strip_none(dict(value))
