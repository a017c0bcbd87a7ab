from __future__ import annotations

from social.domain.views.base import EpochMillisField, ListField, View, WireField


class ProcessCycle(View):
    """A document's lifecycle from start to end date.

    ``user_list`` holds the ids of the users involved, always as a list of
    strings.
    """

    type = WireField("type")
    doc_id = WireField("docId")
    start_date = EpochMillisField("startDate")
    end_date = EpochMillisField("endDate")
    user_list = ListField("userList")

    @property
    def user_ids(self) -> list[str]:
        return [str(user_id) for user_id in self.user_list or []]
