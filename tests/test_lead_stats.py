"""
tests/test_lead_stats.py

Lead counters, top products and lead conversion rate.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from attribution.lead_stats import UNKNOWN_PRODUCT, compute_lead_stats
from attribution.records import AttributionRecord

NOW = datetime(2026, 10, 19, 15, 0, tzinfo=timezone.utc)


def _lead(created_at: datetime | None, product: str | None = None, purchased: bool = False) -> AttributionRecord:
    return AttributionRecord(created_at=created_at, product_name=product, purchased=purchased)


class TestComputeLeadStats:
    def test_counts_today_and_this_month(self) -> None:
        leads = [
            _lead(datetime(2026, 10, 19, 1, 0, tzinfo=timezone.utc)),
            _lead(datetime(2026, 10, 2, 9, 0, tzinfo=timezone.utc)),
            _lead(datetime(2026, 9, 30, 23, 59, tzinfo=timezone.utc)),
            _lead(None),
        ]

        stats = compute_lead_stats(leads, now=NOW)

        assert stats.total_leads == 4
        assert stats.leads_this_month == 2
        assert stats.leads_today == 1

    def test_naive_timestamps_are_utc(self) -> None:
        stats = compute_lead_stats([_lead(datetime(2026, 10, 19, 0, 30))], now=NOW)

        assert stats.leads_today == 1

    def test_top_products_limited_and_ranked(self) -> None:
        leads = (
            [_lead(NOW, "Alpha")] * 3
            + [_lead(NOW, "Beta")] * 5
            + [_lead(NOW, None)] * 2
            + [_lead(NOW, name) for name in ("C", "D", "E", "F")]
        )

        stats = compute_lead_stats(leads, now=NOW, top_products_limit=3)

        assert [(row.product_name, row.lead_count) for row in stats.top_products] == [
            ("Beta", 5),
            ("Alpha", 3),
            (UNKNOWN_PRODUCT, 2),
        ]

    def test_conversion_rate_is_share_of_purchased_leads(self) -> None:
        leads = [_lead(NOW, purchased=True), _lead(NOW), _lead(NOW), _lead(NOW)]

        assert compute_lead_stats(leads, now=NOW).conversion_rate == pytest.approx(25.0)

    def test_empty(self) -> None:
        stats = compute_lead_stats([], now=NOW)

        assert stats.total_leads == 0
        assert stats.conversion_rate == 0.0
        assert stats.top_products == []

    def test_accepts_plain_mappings(self) -> None:
        stats = compute_lead_stats(
            [{"created_at": "2026-10-19T10:00:00Z", "product_name": "Alpha", "has_purchased": True}],
            now=NOW,
        )

        assert stats.leads_today == 1
        assert stats.conversion_rate == 100.0
