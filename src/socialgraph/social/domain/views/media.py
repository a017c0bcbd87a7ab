"""Album and media-item views."""

from __future__ import annotations

from social.domain.views.base import EpochMillisField, ListField, View, ViewField, WireField
from social.domain.views.person import Address


class Album(View):
    id = WireField("id")
    owner_id = WireField("ownerId")
    title = WireField("title")
    description = WireField("description")
    location = ViewField(Address, "location")
    media_item_count = WireField("mediaItemCount")
    media_mime_type = ListField("mediaMimeType")
    media_type = ListField("mediaType")
    thumbnail_url = WireField("thumbnailUrl")


class MediaItem(View):
    id = WireField("id")
    album_id = WireField("albumId")
    title = WireField("title")
    description = WireField("description")
    type = WireField("type")
    mime_type = WireField("mimeType")
    url = WireField("url")
    thumbnail_url = WireField("thumbnailUrl")
    language = WireField("language")
    location = ViewField(Address, "location")
    file_size = WireField("fileSize")
    duration = WireField("duration")
    start_time = WireField("startTime")
    num_comments = WireField("numComments")
    num_views = WireField("numViews")
    num_votes = WireField("numVotes")
    rating = WireField("rating")
    tagged_people = ListField("taggedPeople")
    tags = ListField("tags")
    created = EpochMillisField("created")
    last_updated = EpochMillisField("lastUpdated")
