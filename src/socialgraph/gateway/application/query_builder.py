"""Construction of remote procedure calls."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from gateway.application.options import translate_options
from gateway.domain.procedures import Param, Procedure
from gateway.domain.value_objects import (
    CollectionOptions,
    GroupId,
    Query,
    SecurityContext,
    UserId,
)
from gateway.ports.exceptions import GatewayError


def strip_nulls(properties: Mapping[str, Any]) -> dict[str, Any]:
    """Copy a property map, dropping keys whose value is None."""
    return {key: value for key, value in properties.items() if value is not None}


class QueryBuilder:
    """Builds a Query for one procedure.

    Identity parameters that an operation requires must not be None; a
    missing one is a programming error and raises ValueError before
    anything is dispatched.

    Example:
        query = (
            QueryBuilder(Procedure.GET_PERSON)
            .user(UserId.of("horst"), context)
            .fields(["id", "displayName"])
            .build()
        )
    """

    def __init__(self, procedure: Procedure):
        self._procedure = procedure
        self._params: dict[str, Any] = {}

    def param(self, key: str, value: Any, required: bool = False) -> QueryBuilder:
        """Set a parameter; None values are skipped unless required."""
        if value is None:
            if required:
                raise ValueError(
                    f"parameter '{key}' is required for {self._procedure.value}"
                )
            return self
        self._params[key] = value
        return self

    def user(
        self,
        user_id: UserId | str,
        context: SecurityContext | None,
        key: str = Param.USER_ID,
    ) -> QueryBuilder:
        """Set a single resolved user id."""
        return self.param(key, _resolve_user(user_id, context), required=True)

    def users(
        self,
        user_ids: Iterable[UserId | str],
        context: SecurityContext | None,
    ) -> QueryBuilder:
        """Set the list of resolved user ids."""
        if user_ids is None:
            raise ValueError(
                f"parameter '{Param.USER_ID_LIST}' is required for "
                f"{self._procedure.value}"
            )
        resolved = [_resolve_user(user_id, context) for user_id in user_ids]
        return self.param(Param.USER_ID_LIST, resolved, required=True)

    def group(self, group_id: GroupId | None) -> QueryBuilder:
        """Set the normalized group id, if any."""
        if group_id is None:
            return self
        return self.param(Param.GROUP_ID, group_id.normalized())

    def ids(self, key: str, ids: Iterable[str] | None) -> QueryBuilder:
        """Set a list of object ids, if any."""
        if ids is None:
            return self
        return self.param(key, list(ids))

    def fields(self, fields: Iterable[str] | None) -> QueryBuilder:
        """Set the field-selection list; None selects all fields."""
        if fields is None:
            return self
        return self.param(Param.FIELD_LIST, list(fields))

    def options(
        self,
        options: CollectionOptions | None,
        default_sort: str | None = None,
    ) -> QueryBuilder:
        """Merge translated collection options."""
        self._params.update(translate_options(options, default_sort))
        return self

    def payload(self, key: str, properties: Mapping[str, Any]) -> QueryBuilder:
        """Set an object payload with null-valued fields stripped."""
        if properties is None:
            raise ValueError(
                f"payload '{key}' is required for {self._procedure.value}"
            )
        return self.param(key, strip_nulls(properties))

    def build(self) -> Query:
        return Query(procedure=self._procedure, params=dict(self._params))


def _resolve_user(user_id: UserId | str, context: SecurityContext | None) -> str:
    if user_id is None:
        raise ValueError("user id is required")

    user_id = UserId.of(user_id)
    resolved = user_id.resolve(context)
    if resolved is None:
        raise GatewayError.bad_request(
            f"cannot resolve user '{user_id.value}' without a security context"
        )
    return resolved
