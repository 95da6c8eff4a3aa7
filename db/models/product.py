"""
db/models/product.py

Catalog product ("tool") listed on the storefront.
"""

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Any

from sqlalchemy import Boolean, DateTime, Index, Numeric, String, Text
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column

from db.base import Base, TimestampMixin


class RevenueType:
    FREE = "free"
    AFFILIATE = "affiliate"
    PAYMENT = "payment"


class Product(Base, TimestampMixin):
    """
    One catalog entry.

    Products are soft-deleted into the trash (``is_deleted`` + ``deleted_at``)
    and purged permanently once the retention window has passed.
    """

    __tablename__ = "products"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    rich_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    tool_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    affiliate_link: Mapped[str | None] = mapped_column(Text, nullable=True)
    payment_link: Mapped[str | None] = mapped_column(Text, nullable=True)
    original_price: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    discounted_price: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    currency: Mapped[str | None] = mapped_column(String(8), nullable=True)
    product_type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    revenue_type: Mapped[str | None] = mapped_column(
        String(32),
        nullable=True,
        comment="free, affiliate, payment",
    )
    product_tags: Mapped[list[str] | None] = mapped_column(ARRAY(Text), nullable=True)
    keywords: Mapped[list[str] | None] = mapped_column(ARRAY(Text), nullable=True)
    meta_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    meta_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    faq_data: Mapped[list[dict[str, Any]] | None] = mapped_column(JSONB, nullable=True)
    howto_data: Mapped[list[dict[str, Any]] | None] = mapped_column(JSONB, nullable=True)
    is_deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        Index("ix_products_is_deleted_deleted_at", "is_deleted", "deleted_at"),
    )

    def __repr__(self) -> str:
        return f"<Product id={self.id} slug={self.slug!r}>"
