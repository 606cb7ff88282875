"""Card repository for database operations."""

from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Annotated, Any

from fastapi import Depends
from sqlalchemy import case, func, select, update

from compass.api.dependencies import DBSession
from compass.core.constants import EMPTY_MAX_ORDER
from compass.modules.cards.models import Card


class CardRepository:
    """Repository for Card database operations.

    Every method takes the tenant id explicitly and filters on it, so a
    caller can never read or change another tenant's card. Missing rows
    are reported as ``None``/``False``; turning that into an error is the
    service's job.
    """

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def list_by_tenant(self, tenant_id: str) -> list[Card]:
        """List a tenant's cards in display order.

        Ties on ``order`` fall back to id, i.e. insertion order.

        Args:
            tenant_id: The tenant's id

        Returns:
            Cards sorted ascending by order (empty for unknown tenants)
        """
        stmt = (
            select(Card)
            .where(Card.tenant_id == tenant_id)
            .order_by(Card.order.asc(), Card.id.asc())
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_id(self, card_id: int, tenant_id: str) -> Card | None:
        """Get a card by id within a tenant.

        Args:
            card_id: The card's id
            tenant_id: The tenant's id

        Returns:
            Card if it exists under this tenant, None otherwise
        """
        stmt = (
            select(Card)
            .where(Card.id == card_id, Card.tenant_id == tenant_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def max_order(self, tenant_id: str) -> int:
        """Get the highest order value among a tenant's cards.

        Returns:
            The maximum order, or -1 when the tenant has no cards
        """
        stmt = select(func.max(Card.order)).where(Card.tenant_id == tenant_id)
        result = await self.session.execute(stmt)
        max_order = result.scalar_one_or_none()
        return EMPTY_MAX_ORDER if max_order is None else max_order

    async def create(self, card: Card) -> Card:
        """Create a card at the end of its tenant's list.

        Any ``order`` already set on the instance is replaced by one past
        the tenant's current maximum.

        Args:
            card: Card instance to create (``tenant_id`` must be set)

        Returns:
            The created card with id, order and timestamps populated
        """
        card.order = await self.max_order(card.tenant_id) + 1
        self.session.add(card)
        await self.session.flush()
        await self.session.refresh(card)
        return card

    async def update(
        self,
        card_id: int,
        tenant_id: str,
        changes: dict[str, Any],
    ) -> Card | None:
        """Apply a partial update to a card.

        Args:
            card_id: The card's id
            tenant_id: The tenant's id
            changes: Field values to set; absent fields are untouched

        Returns:
            The updated card, or None if no card matches id and tenant
        """
        card = await self.get_by_id(card_id, tenant_id)
        if card is None:
            return None

        for field, value in changes.items():
            setattr(card, field, value)
        card.updated_at = datetime.now(UTC)

        await self.session.flush()
        await self.session.refresh(card)
        return card

    async def delete(self, card_id: int, tenant_id: str) -> bool:
        """Hard-delete a card. Remaining orders are not compacted.

        Returns:
            True if a card was removed, False if none matched
        """
        card = await self.get_by_id(card_id, tenant_id)
        if card is None:
            return False

        await self.session.delete(card)
        await self.session.flush()
        return True

    async def reorder(self, tenant_id: str, card_ids: Sequence[int]) -> int:
        """Set each listed card's order to its position in ``card_ids``.

        All positions are written by one UPDATE statement, so the reorder
        either applies completely or not at all. Ids that do not belong
        to the tenant match no row and are ignored. When an id is listed
        twice its last position wins.

        Args:
            tenant_id: The tenant's id
            card_ids: Card ids in the desired display order

        Returns:
            Number of cards whose order was rewritten
        """
        if not card_ids:
            return 0

        positions = {card_id: index for index, card_id in enumerate(card_ids)}
        stmt = (
            update(Card)
            .where(Card.tenant_id == tenant_id, Card.id.in_(list(positions)))
            .values(order=case(positions, value=Card.id), updated_at=func.now())
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount


# Type alias for dependency injection
CardRepo = Annotated[CardRepository, Depends(CardRepository)]
