"""Card service for business logic."""

from typing import Annotated

import structlog
from fastapi import Depends

from compass.core.errors import NotFoundError
from compass.modules.cards.models import Card
from compass.modules.cards.presentation import CardPresentation, present_card
from compass.modules.cards.repos import CardRepo
from compass.modules.cards.schemas import CardCreate, CardUpdate


logger = structlog.get_logger()


class CardService:
    """Service for onboarding card management.

    Wraps the tenant-scoped repository, turning missing rows into
    ``NotFoundError`` and logging every change.
    """

    def __init__(self, repo: CardRepo) -> None:
        self.repo = repo

    async def list_cards(self, tenant_id: str) -> list[Card]:
        """List a tenant's cards in display order."""
        return await self.repo.list_by_tenant(tenant_id)

    async def get_card(self, card_id: int, tenant_id: str) -> Card:
        """Get a card by id.

        Raises:
            NotFoundError: If the card does not exist under this tenant
        """
        card = await self.repo.get_by_id(card_id, tenant_id)
        if card is None:
            raise NotFoundError(
                "Card not found",
                resource="card",
                resource_id=str(card_id),
            )
        return card

    async def create_card(
        self,
        data: CardCreate,
        tenant_id: str,
        created_by: str | None = None,
    ) -> Card:
        """Create a card at the end of the tenant's list.

        Args:
            data: Card content
            tenant_id: The owning tenant
            created_by: Platform user id of the admin creating it

        Returns:
            The created card
        """
        card = Card(
            tenant_id=tenant_id,
            type=data.type.value,
            title=data.title,
            content=data.content,
            media_url=data.media_url,
            media_mime_type=data.media_mime_type,
            created_by=created_by,
        )
        card = await self.repo.create(card)
        logger.info(
            "card_created",
            card_id=card.id,
            tenant_id=tenant_id,
            card_type=card.type,
            order=card.order,
        )
        return card

    async def update_card(
        self,
        card_id: int,
        data: CardUpdate,
        tenant_id: str,
    ) -> Card:
        """Apply the fields present in ``data`` to a card.

        Raises:
            NotFoundError: If the card does not exist under this tenant
        """
        changes = data.changes()
        card = await self.repo.update(card_id, tenant_id, changes)
        if card is None:
            raise NotFoundError(
                "Card not found",
                resource="card",
                resource_id=str(card_id),
            )
        logger.info(
            "card_updated",
            card_id=card_id,
            tenant_id=tenant_id,
            fields=sorted(changes),
        )
        return card

    async def delete_card(self, card_id: int, tenant_id: str) -> None:
        """Delete a card.

        Raises:
            NotFoundError: If the card does not exist under this tenant
        """
        if not await self.repo.delete(card_id, tenant_id):
            raise NotFoundError(
                "Card not found",
                resource="card",
                resource_id=str(card_id),
            )
        logger.info("card_deleted", card_id=card_id, tenant_id=tenant_id)

    async def reorder_cards(self, card_ids: list[int], tenant_id: str) -> int:
        """Rewrite card orders to follow ``card_ids``.

        Ids from other tenants or unknown ids are skipped silently.

        Returns:
            Number of cards reordered
        """
        updated = await self.repo.reorder(tenant_id, card_ids)
        if updated != len(set(card_ids)):
            logger.warning(
                "cards_reorder_partial",
                tenant_id=tenant_id,
                requested=len(card_ids),
                updated=updated,
            )
        logger.info("cards_reordered", tenant_id=tenant_id, updated=updated)
        return updated

    async def present_cards(self, tenant_id: str) -> list[CardPresentation]:
        """Build the member-facing carousel slides for a tenant."""
        cards = await self.repo.list_by_tenant(tenant_id)
        return [present_card(card) for card in cards]


# Type alias for dependency injection
CardSvc = Annotated[CardService, Depends(CardService)]
