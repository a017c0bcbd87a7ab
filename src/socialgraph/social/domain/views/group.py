from __future__ import annotations

from social.domain.views.base import View, WireField


class Group(View):
    id = WireField("id")
    title = WireField("title")
    description = WireField("description")
