"""
attribution/click_analytics.py

Click and conversion analytics over a reporting window.

Formulas
--------
Total Revenue    = sum(conversion.revenue_amount), ``None`` counted as 0
Conversion Rate  = conversions / clicks * 100   (0 when there are no clicks,
                   capped at 100)

Per-source and per-product rows are keyed by the clicks. Conversions and
revenue are attached only to keys that received at least one click in the
window; conversions for other keys still count in the totals.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone

from attribution.records import ClickRecord, ConversionRecord
from attribution.sources import DIRECT_SOURCE
from attribution.summary import conversion_rate

AFFILIATE_CLICK = "affiliate"
PAYMENT_CLICK = "payment"
UNKNOWN_PRODUCT_NAME = "Unknown"
DEFAULT_REVENUE_TYPE = "free"


@dataclass
class SourceClickSummary:
    source: str
    clicks: int = 0
    conversions: int = 0
    revenue: float = 0.0


@dataclass
class ProductClickSummary:
    product_id: str | None
    product_name: str
    revenue_type: str
    clicks: int = 0
    affiliate_clicks: int = 0
    payment_clicks: int = 0
    conversions: int = 0
    revenue: float = 0.0


@dataclass
class DailyActivity:
    day: date
    clicks: int = 0
    conversions: int = 0
    revenue: float = 0.0


@dataclass(frozen=True)
class RecentClick:
    record_id: str | None
    click_type: str
    product_name: str
    utm_source: str
    created_at: datetime


@dataclass(frozen=True)
class ClickAnalytics:
    """
    Aggregated click/conversion view for one window.
    """

    total_clicks: int
    total_conversions: int
    total_revenue: float
    conversion_rate: float
    affiliate_clicks: int
    payment_clicks: int
    by_source: list[SourceClickSummary] = field(default_factory=list)
    by_product: list[ProductClickSummary] = field(default_factory=list)
    daily: list[DailyActivity] = field(default_factory=list)
    recent_activity: list[RecentClick] = field(default_factory=list)


def compute_click_analytics(
    clicks: Iterable[ClickRecord],
    conversions: Iterable[ConversionRecord],
    *,
    start: datetime,
    end: datetime,
    recent_limit: int = 20,
) -> ClickAnalytics:
    """
    Build totals, per-source/per-product breakdowns, a per-day series for
    every UTC day in ``[start, end]`` and the latest clicks.
    """

    click_list = list(clicks)
    conversion_list = list(conversions)

    daily = {day: DailyActivity(day=day) for day in _days_between(start, end)}
    by_source: dict[str, SourceClickSummary] = {}
    by_product: dict[str | None, ProductClickSummary] = {}
    affiliate_clicks = 0
    payment_clicks = 0

    for click in click_list:
        source = _source_of(click.utm_source)
        by_source.setdefault(source, SourceClickSummary(source=source)).clicks += 1

        product = by_product.get(click.product_id)
        if product is None:
            product = ProductClickSummary(
                product_id=click.product_id,
                product_name=click.product_name or UNKNOWN_PRODUCT_NAME,
                revenue_type=click.revenue_type or DEFAULT_REVENUE_TYPE,
            )
            by_product[click.product_id] = product
        product.clicks += 1

        if click.click_type == AFFILIATE_CLICK:
            affiliate_clicks += 1
            product.affiliate_clicks += 1
        elif click.click_type == PAYMENT_CLICK:
            payment_clicks += 1
            product.payment_clicks += 1

        bucket = daily.get(_utc_day(click.created_at))
        if bucket is not None:
            bucket.clicks += 1

    total_revenue = 0.0
    for conversion in conversion_list:
        revenue = conversion.revenue_amount or 0.0
        total_revenue += revenue

        source_row = by_source.get(_source_of(conversion.utm_source))
        if source_row is not None:
            source_row.conversions += 1
            source_row.revenue += revenue

        product_row = by_product.get(conversion.product_id)
        if product_row is not None:
            product_row.conversions += 1
            product_row.revenue += revenue

        bucket = daily.get(_utc_day(conversion.created_at))
        if bucket is not None:
            bucket.conversions += 1
            bucket.revenue += revenue

    recent = sorted(click_list, key=lambda item: _as_utc(item.created_at), reverse=True)
    recent_activity = [
        RecentClick(
            record_id=click.record_id,
            click_type=click.click_type,
            product_name=click.product_name or UNKNOWN_PRODUCT_NAME,
            utm_source=_source_of(click.utm_source),
            created_at=click.created_at,
        )
        for click in recent[: max(0, recent_limit)]
    ]

    return ClickAnalytics(
        total_clicks=len(click_list),
        total_conversions=len(conversion_list),
        total_revenue=total_revenue,
        conversion_rate=conversion_rate(len(conversion_list), len(click_list)),
        affiliate_clicks=affiliate_clicks,
        payment_clicks=payment_clicks,
        by_source=sorted(by_source.values(), key=lambda row: -row.clicks),
        by_product=sorted(by_product.values(), key=lambda row: -row.clicks),
        daily=[daily[day] for day in sorted(daily)],
        recent_activity=recent_activity,
    )


def _source_of(utm_source: str | None) -> str:
    if utm_source and utm_source.strip():
        return utm_source.strip().lower()
    return DIRECT_SOURCE


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _utc_day(value: datetime) -> date:
    return _as_utc(value).date()


def _days_between(start: datetime, end: datetime) -> list[date]:
    first = _utc_day(start)
    last = _utc_day(end)
    days: list[date] = []
    current = first
    while current <= last:
        days.append(current)
        current += timedelta(days=1)
    return days
