"""Person view and its nested parts."""

from __future__ import annotations

from typing import Any, Mapping

from social.domain.views.base import (
    EpochMillisField,
    ListField,
    View,
    ViewField,
    ViewListField,
    WireField,
)

ANONYMOUS_ID = "-1"
ANONYMOUS_DISPLAY_NAME = "Anonym"


class Name(View):
    """Name parts; stored flattened into the person's own property map."""

    additional_name = WireField("additionalName")
    family_name = WireField("familyName")
    formatted = WireField("formatted")
    given_name = WireField("givenName")
    honorific_prefix = WireField("honorificPrefix")
    honorific_suffix = WireField("honorificSuffix")

    KEYS = (
        "additionalName",
        "familyName",
        "formatted",
        "givenName",
        "honorificPrefix",
        "honorificSuffix",
    )


class Address(View):
    country = WireField("country")
    formatted = WireField("formatted")
    latitude = WireField("latitude")
    longitude = WireField("longitude")
    locality = WireField("locality")
    postal_code = WireField("postalCode")
    region = WireField("region")
    street_address = WireField("streetAddress")
    type = WireField("type")
    primary = WireField("primary")


class Account(View):
    domain = WireField("domain")
    user_id = WireField("userId")
    username = WireField("username")


class Organization(View):
    """Organization membership, including the hierarchy extensions."""

    name = WireField("name")
    title = WireField("title")
    description = WireField("description")
    field = WireField("field")
    sub_field = WireField("subField")
    type = WireField("type")
    webpage = WireField("webpage")
    salary = WireField("salary")
    primary = WireField("primary")
    start_date = EpochMillisField("startDate")
    end_date = EpochMillisField("endDate")
    address = ViewField(Address, "address")

    manager_id = WireField("managerId")
    secretary_id = WireField("secretaryId")
    department = WireField("department")
    department_head = WireField("departmentHead")
    org_unit = WireField("orgUnit")
    location = WireField("location")


class Person(View):
    """A person in the directory.

    ``is_viewer`` and ``is_owner`` are derived per request by the context
    enricher. They are plain attributes and never part of the property map.
    """

    PROFILE_URL = "profileUrl"
    INFO_URL = "infoUrl"

    id = WireField("id")
    display_name = WireField("displayName")
    nickname = WireField("nickname")
    preferred_username = WireField("preferredUsername")
    about_me = WireField("aboutMe")
    age = WireField("age")
    gender = WireField("gender")
    birthday = EpochMillisField("birthday")
    status = WireField("status")
    relationship_status = WireField("relationshipStatus")
    utc_offset = WireField("utcOffset")
    profile_url = WireField(PROFILE_URL)
    info_url = WireField(INFO_URL)
    thumbnail_url = WireField("thumbnailUrl")
    updated = EpochMillisField("updated")

    current_location = ViewField(Address, "currentLocation")
    addresses = ViewListField(Address, "addresses")
    accounts = ViewListField(Account, "accounts")
    organizations = ViewListField(Organization, "organizations")

    emails = ListField("emails")
    phone_numbers = ListField("phoneNumbers")
    activities = ListField("activities")
    books = ListField("books")
    interests = ListField("interests")
    job_interests = WireField("jobInterests")
    languages_spoken = ListField("languagesSpoken")
    quotes = ListField("quotes")
    tags = ListField("tags")
    urls = ListField("urls")

    def __init__(self, properties: Mapping[str, Any] | None = None, **fields: Any):
        name = fields.pop("name", None)
        super().__init__(properties, **fields)
        self.is_viewer = False
        self.is_owner = False
        if name is not None:
            self.name = name

    @property
    def name(self) -> Name | None:
        """Name parts, or None if the map carries none of them."""
        parts = {
            key: self.properties[key]
            for key in Name.KEYS
            if self.properties.get(key) is not None
        }
        if not parts:
            return None
        return Name(parts)

    @name.setter
    def name(self, name: Name | None) -> None:
        for key in Name.KEYS:
            self.properties.pop(key, None)
        if name is not None:
            self.properties.update(name.to_wire())

    @classmethod
    def anonymous(cls) -> Person:
        """The placeholder person answered for unauthenticated viewers."""
        return cls(
            id=ANONYMOUS_ID,
            display_name=ANONYMOUS_DISPLAY_NAME,
            nickname=ANONYMOUS_DISPLAY_NAME,
            name=Name(formatted=ANONYMOUS_DISPLAY_NAME),
        )
