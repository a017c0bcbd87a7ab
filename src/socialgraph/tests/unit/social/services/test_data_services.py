"""Unit tests for GroupService, AppDataService and ProcessMiningService."""

import pytest

from gateway.domain.procedures import Param, Procedure
from gateway.domain.value_objects import CollectionOptions, ListResult, SingleResult
from social.application.services.app_data_service import AppDataService
from social.application.services.group_service import GroupService
from social.application.services.process_mining_service import ProcessMiningService
from social.domain.views import AppDataCollection, ProcessCycle


class TestGroupService:
    @pytest.mark.asyncio
    async def test_groups_sorted_by_title(self, gateway, mock_channel, context):
        mock_channel.send.return_value = ListResult(items=[{"id": "g1"}], total=4)

        groups = await GroupService(gateway).get_groups("@me", None, None, context)

        query = mock_channel.send.call_args.args[0]
        assert query.params == {Param.USER_ID: "horst", Param.SORT_FIELD: "title"}
        assert groups.total == 4


class TestAppDataService:
    """Tests for per-application user data."""

    @pytest.mark.asyncio
    async def test_get_person_data(self, gateway, mock_channel, context):
        mock_channel.send.return_value = SingleResult({"horst": {"theme": "dark"}})

        data = await AppDataService(gateway).get_person_data(
            ["@me"], None, "app", ["theme"], context
        )

        assert data.for_user("horst") == {"theme": "dark"}

    @pytest.mark.asyncio
    async def test_no_data_is_empty_collection(self, gateway, mock_channel, context):
        mock_channel.send.return_value = SingleResult(None)

        data = await AppDataService(gateway).get_person_data(
            ["horst"], None, "app", None, context
        )

        assert data == AppDataCollection()

    @pytest.mark.asyncio
    async def test_update_strips_nulls(self, gateway, mock_channel, context):
        mock_channel.send.return_value = SingleResult()

        await AppDataService(gateway).update_person_data(
            "horst", None, "app", {"theme": "dark", "font": None}, context
        )

        query = mock_channel.send.call_args.args[0]
        assert query.procedure == Procedure.UPDATE_APP_DATA
        assert query.param(Param.APP_DATA) == {"theme": "dark"}

    @pytest.mark.asyncio
    async def test_update_requires_values(self, gateway, mock_channel, context):
        with pytest.raises(ValueError):
            await AppDataService(gateway).update_person_data(
                "horst", None, "app", None, context
            )

    @pytest.mark.asyncio
    async def test_delete_all_keys(self, gateway, mock_channel, context):
        mock_channel.send.return_value = SingleResult()

        await AppDataService(gateway).delete_person_data("horst", None, "app", None, context)

        query = mock_channel.send.call_args.args[0]
        assert Param.FIELD_LIST not in query.params


class TestProcessMiningService:
    @pytest.mark.asyncio
    async def test_add_cycle(self, gateway, mock_channel, context):
        mock_channel.send.return_value = SingleResult({"docId": "d1", "userList": ["a"]})
        cycle = ProcessCycle(doc_id="d1", user_list=["a"])

        stored = await ProcessMiningService(gateway).add_process_cycle("invoice", cycle, context)

        query = mock_channel.send.call_args.args[0]
        assert query.param(Param.PROCESS_CYCLE_DOC_TYPE) == "invoice"
        assert query.param(Param.PROCESS_CYCLE_OBJECT) == {"docId": "d1", "userList": ["a"]}
        assert stored.user_ids == ["a"]

    @pytest.mark.asyncio
    async def test_cycles_without_type_sorted_by_end_date(self, gateway, mock_channel, context):
        mock_channel.send.return_value = ListResult()

        await ProcessMiningService(gateway).get_process_cycles(
            None, CollectionOptions(max=10), context
        )

        query = mock_channel.send.call_args.args[0]
        assert query.params == {Param.SORT_FIELD: "endDate", Param.SUBSET_SIZE: 10}

    @pytest.mark.asyncio
    async def test_delete_cycles(self, gateway, mock_channel, context):
        mock_channel.send.return_value = SingleResult()

        await ProcessMiningService(gateway).delete_process_cycles("invoice", context)

        assert mock_channel.send.call_args.args[0].procedure == Procedure.DELETE_PROCESS_CYCLES
