"""
db/models/click_event.py

Outbound affiliate/payment click recorded on a product page.
"""

import uuid

from sqlalchemy import ForeignKey, Index, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from db.base import Base, CreatedAtMixin
from db.models.product import Product


class ClickEvent(Base, CreatedAtMixin):
    __tablename__ = "click_tracking"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    product_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("products.id", ondelete="SET NULL"),
        nullable=True,
    )
    click_type: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        comment="affiliate, payment",
    )
    utm_source: Mapped[str | None] = mapped_column(String(255), nullable=True)
    utm_medium: Mapped[str | None] = mapped_column(String(255), nullable=True)
    utm_campaign: Mapped[str | None] = mapped_column(String(255), nullable=True)
    referrer: Mapped[str | None] = mapped_column(Text, nullable=True)
    ip_address: Mapped[str | None] = mapped_column(String(64), nullable=True)
    user_agent: Mapped[str | None] = mapped_column(Text, nullable=True)

    product: Mapped[Product | None] = relationship(lazy="joined")

    __table_args__ = (
        Index("ix_click_tracking_created_at", "created_at"),
        Index("ix_click_tracking_product_id", "product_id"),
    )
