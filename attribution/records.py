"""
attribution/records.py

Read-only input records for attribution and click analytics.

Records are snapshots fetched per request by the caller (usually
:class:`app.repositories.analytics_store.AnalyticsDataStore`). They are
never mutated by the analytics functions.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


@dataclass(frozen=True)
class AttributionRecord:
    """
    One lead (or click) with its attribution tags and purchase outcome.

    ``revenue`` of ``None`` is treated as zero by every aggregation.
    """

    utm_source: str | None = None
    utm_medium: str | None = None
    utm_campaign: str | None = None
    referrer: str | None = None
    purchased: bool = False
    revenue: float | None = None
    product_id: str | None = None
    product_name: str | None = None
    created_at: datetime | None = None
    record_id: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "AttributionRecord":
        """
        Build a record from a loosely shaped dictionary.

        ``source`` is accepted for ``utm_source``, ``has_purchased`` for
        ``purchased`` and ``total_revenue`` / ``revenue_amount`` for
        ``revenue``.
        """

        utm_source = data.get("utm_source")
        if utm_source is None:
            utm_source = data.get("source")

        purchased = data.get("purchased")
        if purchased is None:
            purchased = data.get("has_purchased")

        revenue = _first_present(data, "revenue", "total_revenue", "revenue_amount")
        record_id = data.get("record_id", data.get("id"))
        product_id = data.get("product_id")

        return cls(
            utm_source=clean_text(utm_source),
            utm_medium=clean_text(data.get("utm_medium")),
            utm_campaign=clean_text(data.get("utm_campaign")),
            referrer=clean_text(data.get("referrer")),
            purchased=bool(purchased),
            revenue=to_amount(revenue),
            product_id=str(product_id) if product_id is not None else None,
            product_name=clean_text(data.get("product_name")),
            created_at=to_datetime(data.get("created_at")),
            record_id=str(record_id) if record_id is not None else None,
        )


@dataclass(frozen=True)
class ClickRecord:
    """
    One tracked outbound click on a product page.
    """

    click_type: str
    created_at: datetime
    utm_source: str | None = None
    product_id: str | None = None
    product_name: str | None = None
    revenue_type: str | None = None
    record_id: str | None = None


@dataclass(frozen=True)
class ConversionRecord:
    """
    One conversion (purchase or sign-up) with its attributed revenue.
    """

    created_at: datetime
    revenue_amount: float | None = None
    utm_source: str | None = None
    product_id: str | None = None
    lead_id: str | None = None
    conversion_type: str | None = None
    record_id: str | None = None


def coerce_records(
    records: Iterable[AttributionRecord | Mapping[str, Any]],
) -> list[AttributionRecord]:
    """
    Normalize a mixed iterable of records and plain mappings.
    """

    coerced: list[AttributionRecord] = []
    for record in records:
        if isinstance(record, AttributionRecord):
            coerced.append(record)
        else:
            coerced.append(AttributionRecord.from_mapping(record))
    return coerced


def clean_text(value: Any) -> str | None:
    """Return a stripped string, or ``None`` for missing/blank values."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def to_amount(value: Any) -> float | None:
    """Convert a revenue-like value to float; unparseable values become ``None``."""
    if value is None or isinstance(value, bool):
        return None
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(amount):
        return None
    return amount


def to_datetime(value: Any) -> datetime | None:
    """Parse ISO-8601 strings (``Z`` suffix allowed) into aware datetimes."""
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        raw = str(value).strip()
        if not raw:
            return None
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError:
            return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed


def _first_present(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return None
