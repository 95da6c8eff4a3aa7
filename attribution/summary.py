"""
attribution/summary.py

Lead/revenue attribution by source.

Formulas
--------
count            = number of records credited to the source
purchased        = records flagged as purchased
revenue          = sum(record.revenue), ``None`` counted as 0
Conversion Rate  = purchased / count * 100   (0 when count is 0)

The overall totals use the same formulas over the full input.
The per-source counts always add up to the number of input records.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from attribution.records import AttributionRecord, coerce_records
from attribution.sources import source_key, source_label


@dataclass(frozen=True)
class SourceSummary:
    """
    Performance of one attribution source.
    """

    source: str
    label: str
    count: int
    purchased: int
    revenue: float
    conversion_rate: float


@dataclass(frozen=True)
class AttributionTotals:
    count: int
    purchased: int
    revenue: float
    conversion_rate: float


@dataclass(frozen=True)
class AttributionSummary:
    """
    ``by_source`` is sorted by descending ``count``; ties are ordered by key.
    """

    overall: AttributionTotals
    by_source: list[SourceSummary] = field(default_factory=list)


@dataclass
class _Bucket:
    count: int = 0
    purchased: int = 0
    revenue: float = 0.0


def conversion_rate(converted: int, total: int) -> float:
    """
    Percentage of ``total`` that converted; 0.0 when ``total`` is zero.
    """

    if total <= 0:
        return 0.0
    rate = converted / total * 100.0
    return min(100.0, max(0.0, rate))


def summarize(
    records: Iterable[AttributionRecord | Mapping[str, Any]],
) -> AttributionSummary:
    """
    Group records by attribution source and compute per-source and overall totals.

    Pure function of its input. Plain mappings are accepted and coerced with
    :meth:`AttributionRecord.from_mapping`.
    """

    buckets: dict[str, _Bucket] = {}
    overall = _Bucket()

    for record in coerce_records(records):
        key = source_key(record)
        bucket = buckets.setdefault(key, _Bucket())
        revenue = record.revenue or 0.0

        bucket.count += 1
        overall.count += 1
        bucket.revenue += revenue
        overall.revenue += revenue
        if record.purchased:
            bucket.purchased += 1
            overall.purchased += 1

    by_source = [
        SourceSummary(
            source=key,
            label=source_label(key),
            count=bucket.count,
            purchased=bucket.purchased,
            revenue=bucket.revenue,
            conversion_rate=conversion_rate(bucket.purchased, bucket.count),
        )
        for key, bucket in buckets.items()
    ]
    by_source.sort(key=lambda item: (-item.count, item.source))

    return AttributionSummary(
        overall=AttributionTotals(
            count=overall.count,
            purchased=overall.purchased,
            revenue=overall.revenue,
            conversion_rate=conversion_rate(overall.purchased, overall.count),
        ),
        by_source=by_source,
    )
