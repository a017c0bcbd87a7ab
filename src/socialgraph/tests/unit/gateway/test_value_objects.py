"""Unit tests for Gateway domain value objects."""

import pytest
from pydantic import ValidationError

from gateway.domain.value_objects import (
    CollectionOptions,
    GroupId,
    GroupType,
    ListResult,
    PaginatedCollection,
    SecurityContext,
    UserId,
)


class TestUserId:
    """Tests for UserId resolution."""

    def test_literal_resolves_to_itself(self):
        assert UserId.of("horst").resolve(None) == "horst"

    def test_viewer_and_me_resolve_to_viewer(self):
        context = SecurityContext(viewer_id="v", owner_id="o")

        assert UserId.of("@viewer").resolve(context) == "v"
        assert UserId.of("@me").resolve(context) == "v"

    def test_owner_resolves_to_owner(self):
        context = SecurityContext(viewer_id="v", owner_id="o")
        assert UserId.of("@owner").resolve(context) == "o"

    def test_reference_without_context_is_unresolved(self):
        assert UserId.of("@me").resolve(None) is None

    def test_is_reference(self):
        assert UserId.of("@owner").is_reference()
        assert not UserId.of("horst").is_reference()

    def test_of_returns_existing_instance(self):
        user_id = UserId.of("horst")
        assert UserId.of(user_id) is user_id

    def test_empty_id_is_rejected(self):
        with pytest.raises(ValidationError):
            UserId(value="")


class TestGroupId:
    """Tests for group normalization."""

    @pytest.mark.parametrize(
        "group_type,expected",
        [
            (GroupType.ALL, "@all"),
            (GroupType.FRIENDS, "@friends"),
            (GroupType.SELF, "@self"),
            (GroupType.DELETED, "@deleted"),
            (GroupType.CUSTOM, "@custom"),
        ],
    )
    def test_types_are_prefixed(self, group_type, expected):
        assert GroupId.of_type(group_type).normalized() == expected

    def test_object_id_is_sent_as_is(self):
        assert GroupId.of_object("42").normalized() == "42"

    def test_object_type_without_id_is_rejected(self):
        with pytest.raises(ValueError):
            GroupId.of_type(GroupType.OBJECT_ID).normalized()


class TestCollectionOptions:
    def test_is_frozen(self):
        options = CollectionOptions()
        with pytest.raises(ValidationError):
            options.sort_by = "name"


class TestPaginatedCollection:
    def test_len_and_iter(self):
        page = PaginatedCollection(items=["a", "b"], start_index=0, items_per_page=2, total=9)

        assert len(page) == 2
        assert list(page) == ["a", "b"]

    def test_list_result_defaults(self):
        result = ListResult()
        assert (list(result.items), result.first, result.max, result.total) == ([], 0, 0, 0)
