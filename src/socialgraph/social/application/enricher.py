"""Per-request enrichment of person views."""

from __future__ import annotations

from typing import Collection, Iterable

from gateway.domain.value_objects import SecurityContext
from social.domain.views.person import Person

ID_PLACEHOLDER = "${ID}"


class PersonEnricher:
    """Derives the fields of a person that depend on who is asking.

    Viewer and owner flags are compared against the security context.
    At most one URL is synthesized per person, chosen by the requested
    fields: the profile URL when all fields or ``profileUrl`` were
    requested, otherwise the info URL when ``infoUrl`` was requested.
    """

    def __init__(
        self,
        profile_url_template: str | None = None,
        info_url_template: str | None = None,
    ):
        self._profile_url_template = profile_url_template
        self._info_url_template = info_url_template

    def enrich(
        self,
        person: Person,
        context: SecurityContext | None,
        fields: Collection[str] | None = None,
    ) -> Person:
        person_id = person.id
        if person_id is not None:
            person_id = str(person_id)

        if context is not None and person_id is not None:
            person.is_viewer = person_id == context.viewer_id
            person.is_owner = person_id == context.owner_id
        else:
            person.is_viewer = False
            person.is_owner = False

        if person_id is None:
            return person

        if not fields or Person.PROFILE_URL in fields:
            if self._profile_url_template:
                person.profile_url = self._profile_url_template.replace(
                    ID_PLACEHOLDER, person_id
                )
        elif Person.INFO_URL in fields and self._info_url_template:
            person.info_url = self._info_url_template.replace(
                ID_PLACEHOLDER, person_id
            )

        return person

    def enrich_all(
        self,
        people: Iterable[Person],
        context: SecurityContext | None,
        fields: Collection[str] | None = None,
    ) -> list[Person]:
        return [self.enrich(person, context, fields) for person in people]
