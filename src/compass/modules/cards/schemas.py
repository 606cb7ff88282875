"""Pydantic schemas for card operations."""

from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import Field, StrictInt, field_validator, model_validator

from compass.core.schemas import CamelModel


class CardType(StrEnum):
    """Kinds of onboarding card."""

    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"


OPTIONAL_TEXT_FIELDS = ("title", "content", "media_url", "media_mime_type")


class CardCreate(CamelModel):
    """Schema for creating a card.

    The id, order and timestamps are assigned by the server.
    """

    type: CardType
    title: str | None = None
    content: str | None = None
    media_url: str | None = None
    media_mime_type: str | None = None

    @field_validator(*OPTIONAL_TEXT_FIELDS, mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        """Store empty strings from the editor form as missing values."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class CardUpdate(CamelModel):
    """Schema for partially updating a card.

    Only fields present in the request body are applied. An explicit
    ``null`` clears an optional field; an omitted field is left alone.
    """

    type: CardType | None = None
    title: str | None = None
    content: str | None = None
    media_url: str | None = None
    media_mime_type: str | None = None

    @model_validator(mode="after")
    def type_not_null(self) -> "CardUpdate":
        """A card always has a type, so ``type`` may be changed but not cleared."""
        if "type" in self.model_fields_set and self.type is None:
            raise ValueError("type cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        """Return only the fields the caller actually sent."""
        return self.model_dump(mode="json", exclude_unset=True, by_alias=False)


class CardReorderRequest(CamelModel):
    """Schema for reordering cards.

    ``card_ids`` lists card ids in the desired display order. Booleans,
    floats and numeric strings are rejected.
    """

    card_ids: list[StrictInt] = Field(..., min_length=1)


class CardResponse(CamelModel):
    """Schema for card response data."""

    id: int
    tenant_id: str
    order: int
    type: CardType
    title: str | None = None
    content: str | None = None
    media_url: str | None = None
    media_mime_type: str | None = None
    created_by: str | None = None
    created_at: datetime
    updated_at: datetime


class CardEnvelope(CamelModel):
    """Single card wrapper: ``{"card": {...}}``."""

    card: CardResponse


class CardListResponse(CamelModel):
    """Card list wrapper: ``{"cards": [...]}``."""

    cards: list[CardResponse]
