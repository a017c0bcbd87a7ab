from __future__ import annotations

from typing import Any, Iterable, Mapping

from social.domain.views.base import View, ViewListField, WireField
from social.domain.views.person import Person


class SkillSet(View):
    """A named skill together with the people who linked it.

    ``people`` is converted once and the same Person instances are handed
    out on every read, so per-request flags set on them are kept.
    """

    name = WireField("name")
    confirmed = WireField("confirmed")
    _people_field = ViewListField(Person, "people")

    def __init__(self, properties: Mapping[str, Any] | None = None, **fields: Any):
        people = fields.pop("people", None)
        super().__init__(properties, **fields)
        self._people: list[Person] | None = None
        if people is not None:
            self.people = people

    @property
    def people(self) -> list[Person] | None:
        if self._people is None:
            self._people = SkillSet._people_field.__get__(self, SkillSet)
        return self._people

    @people.setter
    def people(self, people: Iterable[Person] | None) -> None:
        people = list(people) if people is not None else None
        SkillSet._people_field.__set__(self, people)
        self._people = people

    def to_wire(self) -> dict[str, Any]:
        wire = super().to_wire()
        if self._people is not None:
            wire["people"] = [person.to_wire() for person in self._people]
        return wire
