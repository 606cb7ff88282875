"""Drag-and-drop reordering with optimistic updates.

The controller keeps the admin's local card list. A drop rearranges the
list immediately, persists the new order and reloads the saved list.
If saving fails the list snapshotted at drag start is restored.

States::

    VIEWING --begin_drag--> DRAGGING --drop--> OPTIMISTIC --ok--> VIEWING
                               |                   |
                               +--cancel/no-op--> VIEWING <--failed (restored)
"""

from collections.abc import Awaitable, Callable, Sequence
from enum import StrEnum
from typing import Any, TypeVar

import structlog

from compass_admin.client import CompassAPIError


logger = structlog.get_logger()

T = TypeVar("T")

ReorderFn = Callable[[list[int]], Awaitable[None]]
RefetchFn = Callable[[], Awaitable[Sequence[dict[str, Any]]]]


class OrderingState(StrEnum):
    """Where the controller is in a drag interaction."""

    VIEWING = "viewing"
    DRAGGING = "dragging"
    OPTIMISTIC = "optimistic"


class OrderingError(Exception):
    """Raised for an operation that is invalid in the current state."""


def move_item(items: Sequence[T], source: int, destination: int) -> list[T]:
    """Return a copy of ``items`` with one element moved.

    The element at ``source`` is removed and reinserted at
    ``destination``; every other element keeps its relative order.

    Raises:
        IndexError: If either index is out of range
    """
    size = len(items)
    if not 0 <= source < size:
        raise IndexError(f"source index {source} out of range for {size} items")
    if not 0 <= destination < size:
        raise IndexError(f"destination index {destination} out of range for {size} items")

    result = list(items)
    moved = result.pop(source)
    result.insert(destination, moved)
    return result


class OrderingController:
    """Holds one tenant's card list during admin reordering.

    Args:
        tenant_id: Tenant the cards belong to
        reorder: Coroutine persisting a full id list, e.g.
            ``CompassClient.reorder_cards``
        refetch: Optional coroutine returning the saved list, e.g.
            ``CompassClient.list_cards``; called after a successful save
    """

    def __init__(
        self,
        tenant_id: str,
        reorder: ReorderFn,
        refetch: RefetchFn | None = None,
    ) -> None:
        self.tenant_id = tenant_id
        self._reorder = reorder
        self._refetch = refetch
        self.items: list[dict[str, Any]] = []
        self.state = OrderingState.VIEWING
        self.last_error: CompassAPIError | None = None
        self._snapshot: list[dict[str, Any]] | None = None
        self._source: int | None = None

    @property
    def card_ids(self) -> list[int]:
        return [item["id"] for item in self.items]

    def load(self, items: Sequence[dict[str, Any]]) -> None:
        """Replace the local list, e.g. after fetching from the API."""
        if self.state != OrderingState.VIEWING:
            raise OrderingError(f"cannot load while {self.state}")
        self.items = list(items)

    def begin_drag(self, source_index: int) -> None:
        """Start dragging the item at ``source_index``."""
        if self.state != OrderingState.VIEWING:
            raise OrderingError(f"cannot start a drag while {self.state}")
        if not 0 <= source_index < len(self.items):
            raise IndexError(
                f"source index {source_index} out of range for {len(self.items)} items"
            )

        self._snapshot = list(self.items)
        self._source = source_index
        self.state = OrderingState.DRAGGING

    def cancel_drag(self) -> None:
        """Abandon the drag without changes."""
        if self.state != OrderingState.DRAGGING:
            raise OrderingError(f"cannot cancel a drag while {self.state}")
        self._finish()

    async def drop(self, destination_index: int | None) -> bool:
        """Drop the dragged item.

        Dropping outside the list (``None``) or on the source position
        changes nothing and makes no call. Otherwise the local list is
        updated first and the full id list is sent to the server. After a
        successful save the list is replaced by the refetched one, so
        ids the server skipped do not linger in the local order.

        Returns:
            True if a new order was persisted, False if nothing changed
            or persisting failed (see ``last_error``)

        Raises:
            IndexError: If ``destination_index`` is out of range; the drag
                is abandoned
            CompassAPIError: If the refetch after a successful save fails
        """
        if self.state != OrderingState.DRAGGING or self._source is None:
            raise OrderingError(f"cannot drop while {self.state}")

        source = self._source
        if destination_index is None or destination_index == source:
            self._finish()
            return False

        if not 0 <= destination_index < len(self.items):
            self._finish()
            raise IndexError(
                f"destination index {destination_index} out of range for {len(self.items)} items"
            )

        self.items = move_item(self.items, source, destination_index)
        self.state = OrderingState.OPTIMISTIC
        card_ids = self.card_ids

        try:
            await self._reorder(card_ids)
        except CompassAPIError as e:
            logger.warning(
                "reorder_rolled_back",
                tenant_id=self.tenant_id,
                error=e.message,
                code=e.code,
            )
            self.items = self._snapshot or []
            self.last_error = e
            self._finish()
            return False

        logger.info("reorder_committed", tenant_id=self.tenant_id, card_ids=card_ids)
        self.last_error = None
        self._finish()
        if self._refetch is not None:
            self.load(await self._refetch())
        return True

    def _finish(self) -> None:
        self._snapshot = None
        self._source = None
        self.state = OrderingState.VIEWING
