"""Card API routes.

Reads are open to members of the tenant's community: the tenant comes
from the ``tenant_id`` query parameter or the caller's token. Writes
require a tenant admin and always act on the admin's own tenant.
"""

from fastapi import status

from compass.core.auth import AdminIdentity, TargetTenantId
from compass.core.schemas import SuccessResponse
from compass.modules.cards import router
from compass.modules.cards.presentation import PresentationResponse
from compass.modules.cards.schemas import (
    CardCreate,
    CardEnvelope,
    CardListResponse,
    CardReorderRequest,
    CardResponse,
    CardUpdate,
)
from compass.modules.cards.services import CardSvc


# ============================================================
# Read Routes
# ============================================================


@router.get(
    "",
    response_model=CardListResponse,
    summary="List cards",
    description="List a tenant's onboarding cards in display order.",
)
async def list_cards(
    service: CardSvc,
    tenant_id: TargetTenantId,
) -> CardListResponse:
    """List cards for a tenant."""
    cards = await service.list_cards(tenant_id)
    return CardListResponse(cards=[CardResponse.model_validate(c) for c in cards])


@router.get(
    "/presentation",
    response_model=PresentationResponse,
    summary="Get carousel slides",
    description="Resolve a tenant's cards into carousel slides with banners.",
)
async def get_presentation(
    service: CardSvc,
    tenant_id: TargetTenantId,
) -> PresentationResponse:
    """Get the member-facing carousel."""
    slides = await service.present_cards(tenant_id)
    return PresentationResponse(slides=slides)


# ============================================================
# Admin Routes
# ============================================================


@router.post(
    "",
    response_model=CardEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create card",
    description="Append a card to the end of the admin's tenant list.",
)
async def create_card(
    data: CardCreate,
    service: CardSvc,
    identity: AdminIdentity,
) -> CardEnvelope:
    """Create a card."""
    card = await service.create_card(
        data,
        tenant_id=identity.tenant_id,
        created_by=identity.user_id,
    )
    return CardEnvelope(card=CardResponse.model_validate(card))


@router.post(
    "/reorder",
    response_model=SuccessResponse,
    summary="Reorder cards",
    description="Set card orders to follow the given id list. Unknown ids are ignored.",
)
async def reorder_cards(
    data: CardReorderRequest,
    service: CardSvc,
    identity: AdminIdentity,
) -> SuccessResponse:
    """Reorder cards."""
    await service.reorder_cards(data.card_ids, identity.tenant_id)
    return SuccessResponse()


@router.get(
    "/{card_id}",
    response_model=CardEnvelope,
    summary="Get card",
    description="Get a single card by id.",
)
async def get_card(
    card_id: int,
    service: CardSvc,
    tenant_id: TargetTenantId,
) -> CardEnvelope:
    """Get a card by id."""
    card = await service.get_card(card_id, tenant_id)
    return CardEnvelope(card=CardResponse.model_validate(card))


@router.patch(
    "/{card_id}",
    response_model=CardEnvelope,
    summary="Update card",
    description="Update only the fields present in the request body.",
)
async def update_card(
    card_id: int,
    data: CardUpdate,
    service: CardSvc,
    identity: AdminIdentity,
) -> CardEnvelope:
    """Partially update a card."""
    card = await service.update_card(card_id, data, identity.tenant_id)
    return CardEnvelope(card=CardResponse.model_validate(card))


@router.delete(
    "/{card_id}",
    response_model=SuccessResponse,
    summary="Delete card",
    description="Delete a card. Remaining cards keep their order values.",
)
async def delete_card(
    card_id: int,
    service: CardSvc,
    identity: AdminIdentity,
) -> SuccessResponse:
    """Delete a card."""
    await service.delete_card(card_id, identity.tenant_id)
    return SuccessResponse()
