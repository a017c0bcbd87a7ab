from __future__ import annotations

from dataclasses import dataclass
from typing import Any

MANAGER_OF = "@manager_of"
MANAGED_BY = "@managed_by"


@dataclass(frozen=True)
class Relationship:
    """A typed, undirected link between two people in a hierarchy path.

    Serializes alongside the people of the path, marked by ``relationship``.
    """

    type: str

    def to_wire(self) -> dict[str, Any]:
        return {"type": self.type, "relationship": True}
