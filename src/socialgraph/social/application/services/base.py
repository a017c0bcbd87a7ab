"""Shared plumbing for the Social facades."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Awaitable, Callable, TypeVar

from gateway.application.gateway import QueryGateway
from gateway.domain.value_objects import CollectionOptions
from gateway.ports.exceptions import GatewayError
from social.application.notifier import EventNotifier
from social.application.observability import (
    DefaultSocialServiceProbe,
    SocialServiceProbe,
)

T = TypeVar("T")

NAME_SORT = "name"
FORMATTED_SORT = "formatted"


def person_sort(options: CollectionOptions | None) -> CollectionOptions:
    """Map a requested ``name`` sort onto the formatted-name field."""
    options = options or CollectionOptions()
    if options.sort_by == NAME_SORT:
        return options.model_copy(update={"sort_by": FORMATTED_SORT})
    return options


def require_found(view: T | None, description: str) -> T:
    """Turn an absent single result into a not-found error."""
    if view is None:
        raise GatewayError.not_found(f"{description} not found")
    return view


def utc_now() -> datetime:
    return datetime.now(UTC)


class SocialService:
    """Base class holding the collaborators every facade needs."""

    def __init__(
        self,
        gateway: QueryGateway,
        notifier: EventNotifier | None = None,
        probe: SocialServiceProbe | None = None,
    ):
        self._gateway = gateway
        self._notifier = notifier or EventNotifier(sink=None)
        self._probe = probe or DefaultSocialServiceProbe()

    async def _snapshot(
        self,
        operation: str,
        subject_id: str,
        fetch: Callable[[], Awaitable[T]],
    ) -> T | None:
        """Read the state about to be deleted, for the deletion event.

        Skipped when events are disabled. A failing read is logged and
        yields None so the deletion itself can still go ahead.
        """
        if not self._notifier.enabled:
            return None
        try:
            return await fetch()
        except Exception as e:
            self._probe.snapshot_fetch_failed(
                operation=operation, subject_id=subject_id, error=e
            )
            return None
