"""
tests/test_attribution_summary.py

Pytest unit tests for lead/revenue attribution.

All tests are pure Python: no database, no I/O. Every assertion is
deterministic for the same input.
"""

from __future__ import annotations

import pytest

from attribution.records import AttributionRecord
from attribution.sources import (
    DIRECT_SOURCE,
    WEBSITE_REFERRAL_LABEL,
    classify_referrer,
    describe_source,
    source_key,
    source_label,
)
from attribution.summary import conversion_rate, summarize


# ---------------------------------------------------------------------------
# Source classification
# ---------------------------------------------------------------------------


class TestSourceKey:
    def test_utm_source_wins_over_referrer(self) -> None:
        record = AttributionRecord(utm_source="Newsletter", referrer="https://youtube.com/x")

        assert source_key(record) == "newsletter"

    def test_utm_source_is_normalized(self) -> None:
        assert source_key(AttributionRecord(utm_source="  Google ")) == "google"

    @pytest.mark.parametrize(
        ("referrer", "expected"),
        [
            ("https://www.youtube.com/watch?v=1", "YouTube (referral)"),
            ("https://m.facebook.com/", "Facebook (referral)"),
            ("https://l.instagram.com/", "Instagram (referral)"),
            ("https://www.linkedin.com/feed", "LinkedIn (referral)"),
            ("https://www.google.com/search?q=x", "Google (search)"),
            ("https://twitter.com/acme", "Twitter (referral)"),
            ("https://blog.example.org/post", WEBSITE_REFERRAL_LABEL),
        ],
    )
    def test_referrer_domains(self, referrer, expected) -> None:
        assert source_key(AttributionRecord(referrer=referrer)) == expected

    def test_no_attribution_is_direct(self) -> None:
        assert source_key(AttributionRecord()) == DIRECT_SOURCE
        assert source_key(AttributionRecord(utm_source="  ", referrer="")) == DIRECT_SOURCE

    def test_classify_referrer_without_referrer(self) -> None:
        assert classify_referrer(None) is None
        assert classify_referrer("   ") is None


class TestLabels:
    def test_source_label(self) -> None:
        assert source_label("google") == "Google"
        assert source_label(DIRECT_SOURCE) == "Direct"
        assert source_label("YouTube (referral)") == "YouTube (referral)"

    def test_describe_source_with_medium_and_campaign(self) -> None:
        record = AttributionRecord(utm_source="google", utm_medium="cpc", utm_campaign="spring")

        assert describe_source(record) == "Google (cpc) - spring"

    def test_describe_source_omits_none_medium(self) -> None:
        record = AttributionRecord(utm_source="newsletter", utm_medium="none")

        assert describe_source(record) == "Newsletter"

    def test_describe_source_falls_back_to_referrer_then_direct(self) -> None:
        assert describe_source(AttributionRecord(referrer="https://youtube.com/v")) == "YouTube (referral)"
        assert describe_source(AttributionRecord()) == "Direct"


# ---------------------------------------------------------------------------
# Conversion rate
# ---------------------------------------------------------------------------


class TestConversionRate:
    def test_zero_total(self) -> None:
        assert conversion_rate(0, 0) == 0.0

    def test_normal(self) -> None:
        assert conversion_rate(1, 4) == pytest.approx(25.0)

    def test_is_clamped(self) -> None:
        assert conversion_rate(5, 2) == 100.0


# ---------------------------------------------------------------------------
# summarize
# ---------------------------------------------------------------------------


class TestSummarize:
    def test_groups_by_source_with_rates_and_revenue(self) -> None:
        records = [
            {"utm_source": "google", "has_purchased": True, "total_revenue": 50},
            {"utm_source": "google", "has_purchased": False},
            {"referrer": "https://youtube.com/watch?v=1"},
        ]

        summary = summarize(records)

        google, youtube = summary.by_source
        assert (google.source, google.label) == ("google", "Google")
        assert google.count == 2
        assert google.purchased == 1
        assert google.revenue == pytest.approx(50.0)
        assert google.conversion_rate == pytest.approx(50.0)
        assert youtube.source == "YouTube (referral)"
        assert youtube.count == 1
        assert youtube.conversion_rate == 0.0

        assert summary.overall.count == 3
        assert summary.overall.purchased == 1
        assert summary.overall.revenue == pytest.approx(50.0)
        assert summary.overall.conversion_rate == pytest.approx(100.0 / 3)

    def test_empty_input(self) -> None:
        summary = summarize([])

        assert summary.by_source == []
        assert summary.overall.count == 0
        assert summary.overall.conversion_rate == 0.0

    def test_missing_or_garbage_revenue_counts_as_zero(self) -> None:
        summary = summarize(
            [
                AttributionRecord(utm_source="ads", purchased=True, revenue=None),
                {"utm_source": "ads", "revenue": "not a number", "purchased": True},
                {"utm_source": "ads", "revenue": "12.5"},
            ]
        )

        assert summary.by_source[0].revenue == pytest.approx(12.5)
        assert summary.by_source[0].purchased == 2

    def test_ordered_by_count_then_key(self) -> None:
        summary = summarize(
            [
                {"utm_source": "b"},
                {"utm_source": "a"},
                {"utm_source": "c"},
                {"utm_source": "c"},
            ]
        )

        assert [row.source for row in summary.by_source] == ["c", "a", "b"]

    def test_counts_add_up_to_overall(self) -> None:
        records = [
            {"utm_source": "x", "purchased": True},
            {"referrer": "https://linkedin.com"},
            {},
            {"utm_source": "X"},
        ]

        summary = summarize(records)

        assert sum(row.count for row in summary.by_source) == summary.overall.count
        assert sum(row.purchased for row in summary.by_source) == summary.overall.purchased
        assert {row.source for row in summary.by_source} == {"x", "LinkedIn (referral)", "direct"}

    def test_is_pure(self) -> None:
        records = [AttributionRecord(utm_source="google", purchased=True, revenue=10.0)]

        assert summarize(records) == summarize(records)
        assert records[0].revenue == 10.0
