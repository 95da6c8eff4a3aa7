"""
app/services/lead_analytics_service.py

Read-side analytics over leads, conversions and click events.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from app.config import AnalyticsSettings, get_analytics_settings
from app.repositories.analytics_store import AnalyticsDataStore
from attribution.click_analytics import ClickAnalytics, compute_click_analytics
from attribution.lead_stats import LeadStats, compute_lead_stats
from attribution.records import AttributionRecord
from attribution.sources import describe_source
from attribution.summary import AttributionSummary, summarize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LeadSourceView:
    """
    One lead as shown in the admin lead table.
    """

    record_id: str | None
    product_name: str | None
    source: str
    purchased: bool
    revenue: float | None
    created_at: datetime | None


class LeadAnalyticsService:
    """
    Compose store reads with the pure aggregation functions.
    """

    def __init__(
        self,
        store: AnalyticsDataStore,
        settings: AnalyticsSettings | None = None,
    ) -> None:
        self._store = store
        self._settings = settings or get_analytics_settings()

    def source_summary(self) -> AttributionSummary:
        leads = self._store.list_leads()
        summary = summarize(leads)
        logger.info(
            "Attribution summary computed: leads=%d sources=%d",
            summary.overall.count,
            len(summary.by_source),
        )
        return summary

    def lead_stats(self, *, now: datetime | None = None) -> LeadStats:
        return compute_lead_stats(
            self._store.list_leads(),
            now=now,
            top_products_limit=self._settings.top_products_limit,
        )

    def lead_sources(self) -> list[LeadSourceView]:
        return [_to_view(lead) for lead in self._store.list_leads()]

    def click_analytics(
        self,
        *,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> ClickAnalytics:
        """
        Click analytics for ``[start, end]``.

        Missing bounds default to the trailing ``default_window_days`` ending now.
        """

        window_end = _as_utc(end) if end is not None else datetime.now(tz=timezone.utc)
        window_start = (
            _as_utc(start)
            if start is not None
            else window_end - timedelta(days=self._settings.default_window_days)
        )
        if window_start > window_end:
            raise ValueError("start must not be after end")

        clicks = self._store.list_click_events(start=window_start, end=window_end)
        conversions = self._store.list_conversions(start=window_start, end=window_end)
        logger.info(
            "Click analytics window %s..%s: clicks=%d conversions=%d",
            window_start.isoformat(),
            window_end.isoformat(),
            len(clicks),
            len(conversions),
        )
        return compute_click_analytics(
            clicks,
            conversions,
            start=window_start,
            end=window_end,
            recent_limit=self._settings.recent_activity_limit,
        )


def _to_view(lead: AttributionRecord) -> LeadSourceView:
    return LeadSourceView(
        record_id=lead.record_id,
        product_name=lead.product_name,
        source=describe_source(lead),
        purchased=lead.purchased,
        revenue=lead.revenue,
        created_at=lead.created_at,
    )


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
