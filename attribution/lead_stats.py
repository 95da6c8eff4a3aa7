"""
attribution/lead_stats.py

Headline lead statistics for the admin dashboard.

Expected inputs
---------------
leads : iterable of AttributionRecord
    One record per lead; ``purchased`` is true when the lead has at least
    one conversion and ``created_at`` is the capture time.
now : datetime
    Reference time. "Today" and "this month" start at midnight and on the
    first of the month in ``now``'s timezone.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from attribution.records import AttributionRecord, coerce_records
from attribution.summary import conversion_rate

UNKNOWN_PRODUCT = "Unknown Product"


@dataclass(frozen=True)
class ProductLeadCount:
    product_name: str
    lead_count: int


@dataclass(frozen=True)
class LeadStats:
    total_leads: int
    leads_this_month: int
    leads_today: int
    conversion_rate: float
    top_products: list[ProductLeadCount] = field(default_factory=list)


def compute_lead_stats(
    leads: Iterable[AttributionRecord | Mapping[str, Any]],
    *,
    now: datetime | None = None,
    top_products_limit: int = 5,
) -> LeadStats:
    """
    Count leads overall, this month and today, rank products by lead count
    and compute the share of leads that purchased.
    """

    reference = now or datetime.now(tz=timezone.utc)
    if reference.tzinfo is None:
        reference = reference.replace(tzinfo=timezone.utc)
    start_of_today = reference.replace(hour=0, minute=0, second=0, microsecond=0)
    start_of_month = start_of_today.replace(day=1)

    total = 0
    this_month = 0
    today = 0
    purchased = 0
    product_counts: Counter[str] = Counter()

    for lead in coerce_records(leads):
        total += 1
        if lead.purchased:
            purchased += 1
        product_counts[lead.product_name or UNKNOWN_PRODUCT] += 1

        if lead.created_at is None:
            continue
        created_at = lead.created_at
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        created_at = created_at.astimezone(reference.tzinfo)
        if created_at >= start_of_month:
            this_month += 1
        if created_at >= start_of_today:
            today += 1

    # Counter.most_common keeps first-seen order for equal counts.
    top_products = [
        ProductLeadCount(product_name=name, lead_count=count)
        for name, count in product_counts.most_common(max(0, top_products_limit))
    ]

    return LeadStats(
        total_leads=total,
        leads_this_month=this_month,
        leads_today=today,
        conversion_rate=conversion_rate(purchased, total),
        top_products=top_products,
    )
