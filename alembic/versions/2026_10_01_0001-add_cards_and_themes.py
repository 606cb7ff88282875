"""add_cards_and_themes

Revision ID: c0a1d2e3f4a5
Revises:
Create Date: 2026-10-01 00:01:00.000000

This migration adds:
- onboarding_cards table with (tenant_id, order) index
- company_themes table with one row per tenant
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "c0a1d2e3f4a5"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade database schema."""
    op.create_table(
        "onboarding_cards",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("tenant_id", sa.String(length=255), nullable=False),
        sa.Column("order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("type", sa.String(length=16), nullable=False),
        sa.Column("title", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("media_url", sa.Text(), nullable=True),
        sa.Column("media_mime_type", sa.String(length=255), nullable=True),
        sa.Column("created_by", sa.String(length=255), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_onboarding_cards_tenant_id"),
        "onboarding_cards",
        ["tenant_id"],
        unique=False,
    )
    # Not unique: reorders may briefly produce duplicate order values
    op.create_index(
        "ix_onboarding_cards_tenant_order",
        "onboarding_cards",
        ["tenant_id", "order"],
        unique=False,
    )

    op.create_table(
        "company_themes",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("tenant_id", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column("colors", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("typography", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("border_radius", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("spacing", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("mode", sa.String(length=8), nullable=False, server_default="dark"),
        sa.Column("custom_css", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("tenant_id", name="uq_company_themes_tenant_id"),
    )
    op.create_index(
        op.f("ix_company_themes_tenant_id"),
        "company_themes",
        ["tenant_id"],
        unique=False,
    )


def downgrade() -> None:
    """Downgrade database schema."""
    op.drop_index(op.f("ix_company_themes_tenant_id"), table_name="company_themes")
    op.drop_table("company_themes")
    op.drop_index("ix_onboarding_cards_tenant_order", table_name="onboarding_cards")
    op.drop_index(op.f("ix_onboarding_cards_tenant_id"), table_name="onboarding_cards")
    op.drop_table("onboarding_cards")
