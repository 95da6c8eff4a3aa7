"""
attribution/sources.py

Attribution source classification.

Rules
-----
1. An explicit UTM source wins. Its grouping key is the lower-cased,
   stripped value (``"Google "`` and ``"google"`` land in one bucket).
2. Otherwise the referrer URL is matched by domain substring against
   :data:`REFERRER_LABELS`, first match wins.
3. A referrer that matches nothing is a generic website referral.
4. No UTM source and no referrer means direct traffic.
"""

from __future__ import annotations

from typing import Final

from attribution.records import AttributionRecord

DIRECT_SOURCE: Final[str] = "direct"
DIRECT_LABEL: Final[str] = "Direct"
WEBSITE_REFERRAL_LABEL: Final[str] = "Website (referral)"

REFERRER_LABELS: Final[tuple[tuple[str, str], ...]] = (
    ("youtube.com", "YouTube (referral)"),
    ("facebook.com", "Facebook (referral)"),
    ("instagram.com", "Instagram (referral)"),
    ("linkedin.com", "LinkedIn (referral)"),
    ("google.com", "Google (search)"),
    ("twitter.com", "Twitter (referral)"),
)

_REFERRER_SOURCE_KEYS: Final[frozenset[str]] = frozenset(
    {label for _, label in REFERRER_LABELS} | {WEBSITE_REFERRAL_LABEL}
)


def classify_referrer(referrer: str | None) -> str | None:
    """
    Map a referrer URL to a friendly label, or ``None`` when there is no referrer.
    """

    if referrer is None or not referrer.strip():
        return None
    lowered = referrer.strip().lower()
    for domain, label in REFERRER_LABELS:
        if domain in lowered:
            return label
    return WEBSITE_REFERRAL_LABEL


def source_key(record: AttributionRecord) -> str:
    """
    Grouping key for one record.
    """

    if record.utm_source and record.utm_source.strip():
        return record.utm_source.strip().lower()
    referral = classify_referrer(record.referrer)
    if referral is not None:
        return referral
    return DIRECT_SOURCE


def source_label(key: str) -> str:
    """
    Human-readable label for a grouping key produced by :func:`source_key`.
    """

    if key == DIRECT_SOURCE:
        return DIRECT_LABEL
    if key in _REFERRER_SOURCE_KEYS:
        return key
    return _capitalize(key)


def describe_source(record: AttributionRecord) -> str:
    """
    Per-lead display label including UTM medium and campaign.

    ``utm_source="google", utm_medium="cpc", utm_campaign="spring"`` renders
    as ``"Google (cpc) - spring"``. A medium of ``"none"`` is omitted.
    """

    utm_source = (record.utm_source or "").strip()
    if utm_source:
        label = _capitalize(utm_source)
        medium = (record.utm_medium or "").strip()
        if medium and medium.lower() != "none":
            label += f" ({medium})"
        campaign = (record.utm_campaign or "").strip()
        if campaign:
            label += f" - {campaign}"
        return label

    referral = classify_referrer(record.referrer)
    if referral is not None:
        return referral
    return DIRECT_LABEL


def _capitalize(value: str) -> str:
    return value[:1].upper() + value[1:]
