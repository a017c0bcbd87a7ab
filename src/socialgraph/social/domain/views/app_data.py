from __future__ import annotations

from typing import Any, Mapping

from social.domain.views.base import strip_none


class AppDataCollection:
    """Application data keyed by user id, then by data key."""

    def __init__(self, data: Mapping[str, Mapping[str, Any]] | None = None):
        self.data: dict[str, dict[str, Any]] = {
            user_id: dict(values) for user_id, values in (data or {}).items()
        }

    @classmethod
    def from_wire(cls, payload: Mapping[str, Any]) -> AppDataCollection:
        return cls(payload)

    def for_user(self, user_id: str) -> dict[str, Any]:
        return self.data.get(user_id, {})

    def to_wire(self) -> dict[str, Any]:
        return strip_none(self.data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AppDataCollection):
            return NotImplemented
        return self.data == other.data

    def __repr__(self) -> str:
        return f"AppDataCollection({self.data!r})"
