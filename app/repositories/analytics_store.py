"""
app/repositories/analytics_store.py

Read access to leads, conversions and click events, plus trash purging.

The analytics layer only ever sees the frozen row types from
``attribution.records`` and ``app.domain.trash``; ORM objects stay here.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from datetime import datetime
from decimal import Decimal
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.trash import TrashedProduct
from attribution.records import AttributionRecord, ClickRecord, ConversionRecord
from db.models import ClickEvent, Conversion, Lead, Product, RevenueType


class AnalyticsDataStore(ABC):
    """
    Storage abstraction consumed by the analytics and retention services.
    """

    @abstractmethod
    def list_leads(self) -> list[AttributionRecord]:
        """
        Return every lead with its purchase flag and summed revenue.
        """

    @abstractmethod
    def list_conversions(self, *, start: datetime, end: datetime) -> list[ConversionRecord]:
        """
        Return conversions created within ``[start, end]``.
        """

    @abstractmethod
    def list_click_events(self, *, start: datetime, end: datetime) -> list[ClickRecord]:
        """
        Return click events created within ``[start, end]``.
        """

    @abstractmethod
    def list_expired_trash(self, *, cutoff: datetime) -> list[TrashedProduct]:
        """
        Return soft-deleted products whose ``deleted_at`` is before ``cutoff``.
        """

    @abstractmethod
    def delete_products(self, product_ids: Sequence[str]) -> int:
        """
        Permanently delete products and return the deleted row count.
        """


def _to_float(value: Decimal | float | None) -> float | None:
    if value is None:
        return None
    return float(value)


def _to_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


class SQLAlchemyAnalyticsStore(AnalyticsDataStore):
    """
    Analytics store backed by the storefront PostgreSQL schema.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_leads(self) -> list[AttributionRecord]:
        leads = self._session.scalars(select(Lead).order_by(Lead.created_at.desc())).unique().all()
        records: list[AttributionRecord] = []
        for lead in leads:
            amounts = [
                float(conversion.revenue_amount)
                for conversion in lead.conversions
                if conversion.revenue_amount is not None
            ]
            records.append(
                AttributionRecord(
                    utm_source=lead.utm_source,
                    utm_medium=lead.utm_medium,
                    utm_campaign=lead.utm_campaign,
                    referrer=lead.referrer,
                    purchased=bool(lead.conversions),
                    revenue=sum(amounts) if amounts else None,
                    product_id=_to_str(lead.product_id),
                    product_name=lead.product.name if lead.product is not None else None,
                    created_at=lead.created_at,
                    record_id=_to_str(lead.id),
                )
            )
        return records

    def list_conversions(self, *, start: datetime, end: datetime) -> list[ConversionRecord]:
        statement = (
            select(Conversion)
            .where(Conversion.created_at >= start, Conversion.created_at <= end)
            .order_by(Conversion.created_at.desc())
        )
        return [
            ConversionRecord(
                created_at=row.created_at,
                revenue_amount=_to_float(row.revenue_amount),
                utm_source=row.utm_source,
                product_id=_to_str(row.product_id),
                lead_id=_to_str(row.lead_id),
                conversion_type=row.conversion_type,
                record_id=_to_str(row.id),
            )
            for row in self._session.scalars(statement).all()
        ]

    def list_click_events(self, *, start: datetime, end: datetime) -> list[ClickRecord]:
        statement = (
            select(ClickEvent)
            .where(ClickEvent.created_at >= start, ClickEvent.created_at <= end)
            .order_by(ClickEvent.created_at.desc())
        )
        records: list[ClickRecord] = []
        for row in self._session.scalars(statement).unique().all():
            product = row.product
            records.append(
                ClickRecord(
                    click_type=row.click_type,
                    created_at=row.created_at,
                    utm_source=row.utm_source,
                    product_id=_to_str(row.product_id),
                    product_name=product.name if product is not None else None,
                    revenue_type=(product.revenue_type if product is not None else None) or RevenueType.FREE,
                    record_id=_to_str(row.id),
                )
            )
        return records

    def list_expired_trash(self, *, cutoff: datetime) -> list[TrashedProduct]:
        statement = (
            select(Product.id, Product.name, Product.deleted_at)
            .where(
                Product.is_deleted.is_(True),
                Product.deleted_at.is_not(None),
                Product.deleted_at < cutoff,
            )
            .order_by(Product.deleted_at.asc())
        )
        return [
            TrashedProduct(product_id=str(row.id), name=row.name, deleted_at=row.deleted_at)
            for row in self._session.execute(statement).all()
        ]

    def delete_products(self, product_ids: Sequence[str]) -> int:
        if not product_ids:
            return 0

        try:
            result = self._session.execute(
                delete(Product).where(Product.id.in_(list(product_ids)))
            )
            self._session.commit()
        except SQLAlchemyError:
            self._session.rollback()
            raise
        return int(result.rowcount or 0)
