"""Message and message-collection views."""

from __future__ import annotations

from social.domain.views.base import EpochMillisField, ListField, View, WireField

INBOX = "@inbox"
OUTBOX = "@outbox"


class MessageCollection(View):
    id = WireField("id")
    title = WireField("title")
    total = WireField("total")
    unread = WireField("unread")
    updated = EpochMillisField("updated")
    urls = ListField("urls")


class Message(View):
    id = WireField("id")
    title = WireField("title")
    title_id = WireField("titleId")
    body = WireField("body")
    body_id = WireField("bodyId")
    sender_id = WireField("senderId")
    recipients = ListField("recipients")
    in_reply_to = WireField("inReplyTo")
    replies = ListField("replies")
    collection_ids = ListField("collectionIds")
    app_url = WireField("appUrl")
    type = WireField("type")
    status = WireField("status")
    urls = ListField("urls")
    time_sent = EpochMillisField("timeSent")
    updated = EpochMillisField("updated")
