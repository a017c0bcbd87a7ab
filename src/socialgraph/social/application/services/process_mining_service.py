"""Process-mining facade for the Social bounded context."""

from __future__ import annotations

from gateway.application.query_builder import QueryBuilder
from gateway.domain.procedures import Param, Procedure
from gateway.domain.value_objects import (
    CollectionOptions,
    PaginatedCollection,
    SecurityContext,
)
from social.application.services.base import SocialService, require_found
from social.domain.views.process_cycle import ProcessCycle

END_DATE_SORT = "endDate"


class ProcessMiningService(SocialService):
    """Records and queries document process cycles."""

    async def add_process_cycle(
        self,
        doc_type: str,
        cycle: ProcessCycle,
        context: SecurityContext | None,
    ) -> ProcessCycle:
        query = (
            QueryBuilder(Procedure.ADD_PROCESS_CYCLE)
            .param(Param.PROCESS_CYCLE_DOC_TYPE, doc_type, required=True)
            .payload(Param.PROCESS_CYCLE_OBJECT, cycle.to_wire())
            .build()
        )
        stored = await self._gateway.fetch_single(
            query, ProcessCycle.from_wire, "could not add process cycle"
        )
        return require_found(stored, "stored process cycle")

    async def get_process_cycles(
        self,
        doc_type: str | None,
        options: CollectionOptions | None,
        context: SecurityContext | None,
    ) -> PaginatedCollection[ProcessCycle]:
        """Get process cycles, optionally only those of one document type."""
        query = (
            QueryBuilder(Procedure.GET_PROCESS_CYCLES)
            .param(Param.PROCESS_CYCLE_DOC_TYPE, doc_type)
            .options(options, END_DATE_SORT)
            .build()
        )
        return await self._gateway.fetch_list(
            query, ProcessCycle.from_wire, "could not retrieve process cycles"
        )

    async def delete_process_cycles(
        self,
        doc_type: str,
        context: SecurityContext | None,
    ) -> None:
        """Delete every process cycle of a document type."""
        query = (
            QueryBuilder(Procedure.DELETE_PROCESS_CYCLES)
            .param(Param.PROCESS_CYCLE_DOC_TYPE, doc_type, required=True)
            .build()
        )
        await self._gateway.execute(query, "could not delete process cycles")
