"""Translation of collection options into call parameters."""

from __future__ import annotations

from typing import Any

from gateway.domain.procedures import Param
from gateway.domain.value_objects import CollectionOptions, FilterOperation

# Wire codes for filter operations as understood by the engine.
_FILTER_OPERATION_CODES: dict[FilterOperation, str] = {
    FilterOperation.CONTAINS: "contains",
    FilterOperation.EQUALS: "equals",
    FilterOperation.PRESENT: "hasProperty",
    FilterOperation.STARTS_WITH: "startsWith",
}


def with_default_sort(
    options: CollectionOptions | None,
    default_sort: str | None,
) -> CollectionOptions:
    """Return options whose sort field falls back to ``default_sort``.

    The given instance is never modified; a copy is returned when the
    default applies.
    """
    if options is None:
        options = CollectionOptions()
    if not options.sort_by and default_sort:
        return options.model_copy(update={"sort_by": default_sort})
    return options


def translate_options(
    options: CollectionOptions | None,
    default_sort: str | None = None,
) -> dict[str, Any]:
    """Convert collection options into remote-call parameters.

    Args:
        options: Requested sorting, filtering and paging. None means
            "no options", which still receives the default sort.
        default_sort: Sort field used when none was requested.

    Returns:
        Parameters to merge into the outgoing query. Paging values are
        only sent when positive; range checks are left to the engine.
    """
    options = with_default_sort(options, default_sort)
    params: dict[str, Any] = {}

    if options.filter is not None:
        params[Param.FILTER_FIELD] = options.filter
    if options.filter_value is not None:
        params[Param.FILTER_VALUE] = options.filter_value
    if options.filter_operation is not None:
        params[Param.FILTER_OPERATION] = _FILTER_OPERATION_CODES[
            options.filter_operation
        ]

    if options.sort_by:
        params[Param.SORT_FIELD] = options.sort_by
    if options.sort_order is not None:
        params[Param.SORT_ORDER] = options.sort_order.value

    if options.first > 0:
        params[Param.SUBSET_START] = options.first
    if options.max > 0:
        params[Param.SUBSET_SIZE] = options.max

    return params
