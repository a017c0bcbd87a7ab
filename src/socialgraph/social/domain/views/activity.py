"""Activity-stream views.

Activity timestamps travel as ISO-8601 strings rather than epoch
milliseconds.
"""

from __future__ import annotations

from social.domain.views.base import (
    IsoTimestampField,
    ListField,
    View,
    ViewField,
    ViewListField,
    WireField,
)


class MediaLink(View):
    url = WireField("url")
    width = WireField("width")
    height = WireField("height")
    duration = WireField("duration")


class ActivityObject(View):
    id = WireField("id")
    object_type = WireField("objectType")
    display_name = WireField("displayName")
    content = WireField("content")
    summary = WireField("summary")
    url = WireField("url")
    image = ViewField(MediaLink, "image")
    published = IsoTimestampField("published")
    updated = IsoTimestampField("updated")
    downstream_duplicates = ListField("downstreamDuplicates")
    upstream_duplicates = ListField("upstreamDuplicates")


# Nested objects refer back to their own type.
ActivityObject.author = ViewField(ActivityObject, "author")
ActivityObject.attachments = ViewListField(ActivityObject, "attachments")


class ActivityEntry(View):
    id = WireField("id")
    title = WireField("title")
    content = WireField("content")
    verb = WireField("verb")
    url = WireField("url")
    icon = ViewField(MediaLink, "icon")
    actor = ViewField(ActivityObject, "actor")
    object = ViewField(ActivityObject, "object")
    target = ViewField(ActivityObject, "target")
    generator = ViewField(ActivityObject, "generator")
    provider = ViewField(ActivityObject, "provider")
    published = IsoTimestampField("published")
    updated = IsoTimestampField("updated")
