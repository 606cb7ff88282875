"""Onboarding card database models."""

from sqlalchemy import Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from compass.core.constants import MAX_MIME_TYPE_LENGTH, MAX_USER_ID_LENGTH
from compass.core.database.base import Base, TenantMixin, TimestampMixin


class Card(Base, TimestampMixin, TenantMixin):
    """One ordered unit of onboarding content.

    Cards are shown to a tenant's members in ascending ``order``. Order
    values need not be contiguous or unique and ``(tenant_id, order)``
    carries no unique constraint.

    Attributes:
        id: Database-assigned integer id
        order: Display position among the tenant's cards
        type: ``text``, ``image`` or ``video``
        title: Optional heading
        content: Body text, or a raw video URL for video cards without media
        media_url: Uploaded or pasted image/video URL
        media_mime_type: Informational MIME type of the media
        created_by: Platform user id of the creator (advisory only)
    """

    __tablename__ = "onboarding_cards"
    __table_args__ = (Index("ix_onboarding_cards_tenant_order", "tenant_id", "order"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    type: Mapped[str] = mapped_column(String(16), nullable=False)
    title: Mapped[str | None] = mapped_column(Text, nullable=True)
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    media_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    media_mime_type: Mapped[str | None] = mapped_column(
        String(MAX_MIME_TYPE_LENGTH),
        nullable=True,
    )
    created_by: Mapped[str | None] = mapped_column(
        String(MAX_USER_ID_LENGTH),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Card(id={self.id}, tenant_id={self.tenant_id}, order={self.order}, type={self.type})>"
