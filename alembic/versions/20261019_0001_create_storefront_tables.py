"""create products, leads, click_tracking and conversions tables

Revision ID: 20261019_0001
Revises:
Create Date: 2026-10-19 09:00:00
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = "20261019_0001"
down_revision = None
branch_labels = None
depends_on = None


def _uuid_pk() -> sa.Column:
    return sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False)


def _created_at() -> sa.Column:
    return sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False)


def _updated_at() -> sa.Column:
    return sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False)


def _utm_columns() -> list[sa.Column]:
    return [
        sa.Column("utm_source", sa.String(length=255), nullable=True),
        sa.Column("utm_medium", sa.String(length=255), nullable=True),
        sa.Column("utm_campaign", sa.String(length=255), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        "products",
        _uuid_pk(),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("slug", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("rich_description", sa.Text(), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("tool_url", sa.Text(), nullable=True),
        sa.Column("affiliate_link", sa.Text(), nullable=True),
        sa.Column("payment_link", sa.Text(), nullable=True),
        sa.Column("original_price", sa.Numeric(precision=12, scale=2), nullable=True),
        sa.Column("discounted_price", sa.Numeric(precision=12, scale=2), nullable=True),
        sa.Column("currency", sa.String(length=8), nullable=True),
        sa.Column("product_type", sa.String(length=50), nullable=True),
        sa.Column("revenue_type", sa.String(length=32), nullable=True, comment="free, affiliate, payment"),
        sa.Column("product_tags", postgresql.ARRAY(sa.Text()), nullable=True),
        sa.Column("keywords", postgresql.ARRAY(sa.Text()), nullable=True),
        sa.Column("meta_title", sa.String(length=255), nullable=True),
        sa.Column("meta_description", sa.Text(), nullable=True),
        sa.Column("faq_data", postgresql.JSONB(astext_type=sa.Text()), nullable=True),
        sa.Column("howto_data", postgresql.JSONB(astext_type=sa.Text()), nullable=True),
        sa.Column("is_deleted", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        _created_at(),
        _updated_at(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug", name="uq_products_slug"),
    )
    op.create_index(
        "ix_products_is_deleted_deleted_at",
        "products",
        ["is_deleted", "deleted_at"],
        unique=False,
    )

    op.create_table(
        "leads",
        _uuid_pk(),
        sa.Column("product_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("phone", sa.String(length=50), nullable=True),
        *_utm_columns(),
        sa.Column("referrer", sa.Text(), nullable=True),
        sa.Column("ip_address", sa.String(length=64), nullable=True),
        sa.Column("user_agent", sa.Text(), nullable=True),
        _created_at(),
        _updated_at(),
        sa.ForeignKeyConstraint(["product_id"], ["products.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_leads_created_at", "leads", ["created_at"], unique=False)
    op.create_index("ix_leads_product_id", "leads", ["product_id"], unique=False)

    op.create_table(
        "click_tracking",
        _uuid_pk(),
        sa.Column("product_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("click_type", sa.String(length=32), nullable=False, comment="affiliate, payment"),
        *_utm_columns(),
        sa.Column("referrer", sa.Text(), nullable=True),
        sa.Column("ip_address", sa.String(length=64), nullable=True),
        sa.Column("user_agent", sa.Text(), nullable=True),
        _created_at(),
        sa.ForeignKeyConstraint(["product_id"], ["products.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_click_tracking_created_at", "click_tracking", ["created_at"], unique=False)
    op.create_index("ix_click_tracking_product_id", "click_tracking", ["product_id"], unique=False)

    op.create_table(
        "conversions",
        _uuid_pk(),
        sa.Column("lead_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("click_tracking_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("product_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("conversion_type", sa.String(length=50), nullable=False),
        sa.Column("revenue_amount", sa.Numeric(precision=12, scale=2), nullable=True),
        sa.Column("currency", sa.String(length=8), nullable=True),
        *_utm_columns(),
        _created_at(),
        sa.ForeignKeyConstraint(["lead_id"], ["leads.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["click_tracking_id"], ["click_tracking.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["product_id"], ["products.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_conversions_created_at", "conversions", ["created_at"], unique=False)
    op.create_index("ix_conversions_lead_id", "conversions", ["lead_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_conversions_lead_id", table_name="conversions")
    op.drop_index("ix_conversions_created_at", table_name="conversions")
    op.drop_table("conversions")

    op.drop_index("ix_click_tracking_product_id", table_name="click_tracking")
    op.drop_index("ix_click_tracking_created_at", table_name="click_tracking")
    op.drop_table("click_tracking")

    op.drop_index("ix_leads_product_id", table_name="leads")
    op.drop_index("ix_leads_created_at", table_name="leads")
    op.drop_table("leads")

    op.drop_index("ix_products_is_deleted_deleted_at", table_name="products")
    op.drop_table("products")
