"""
tests/test_lead_analytics_service.py

Window handling of LeadAnalyticsService on top of an in-memory store.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from app.config import AnalyticsSettings
from app.services.lead_analytics_service import LeadAnalyticsService
from attribution.records import AttributionRecord, ClickRecord
from tests.fakes import FakeAnalyticsStore


class TestLeadAnalyticsService:
    def test_default_window_is_trailing_days(self) -> None:
        store = FakeAnalyticsStore()
        service = LeadAnalyticsService(store, settings=AnalyticsSettings(default_window_days=7))

        service.click_analytics()

        start, end = store.windows[0]
        assert end - start == timedelta(days=7)
        assert end.tzinfo is not None

    def test_explicit_naive_bounds_are_utc(self) -> None:
        store = FakeAnalyticsStore(
            clicks=[ClickRecord("affiliate", datetime(2026, 10, 2, tzinfo=timezone.utc))]
        )
        service = LeadAnalyticsService(store, settings=AnalyticsSettings())

        analytics = service.click_analytics(start=datetime(2026, 10, 1), end=datetime(2026, 10, 3))

        assert analytics.total_clicks == 1
        assert len(analytics.daily) == 3
        assert store.windows[0][0].tzinfo == timezone.utc

    def test_inverted_window_is_rejected(self) -> None:
        service = LeadAnalyticsService(FakeAnalyticsStore(), settings=AnalyticsSettings())

        with pytest.raises(ValueError):
            service.click_analytics(
                start=datetime(2026, 10, 5, tzinfo=timezone.utc),
                end=datetime(2026, 10, 1, tzinfo=timezone.utc),
            )

    def test_top_products_limit_comes_from_settings(self) -> None:
        store = FakeAnalyticsStore(
            leads=[AttributionRecord(product_name=name) for name in ("a", "b", "c")]
        )
        service = LeadAnalyticsService(store, settings=AnalyticsSettings(top_products_limit=2))

        assert len(service.lead_stats().top_products) == 2

    def test_lead_sources_use_display_labels(self) -> None:
        store = FakeAnalyticsStore(
            leads=[
                AttributionRecord(utm_source="google", utm_medium="cpc", utm_campaign="spring", record_id="1"),
                AttributionRecord(record_id="2"),
            ]
        )
        service = LeadAnalyticsService(store, settings=AnalyticsSettings())

        views = service.lead_sources()

        assert [(view.record_id, view.source) for view in views] == [
            ("1", "Google (cpc) - spring"),
            ("2", "Direct"),
        ]
