"""Structured product draft returned by the completion service."""

import re
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

_NUMBER_PATTERN = re.compile(r"-?\d+(?:\.\d+)?")

# Fields whose absence or emptiness is reported back to the reviewer.
EXPECTED_FIELDS = (
    "name",
    "description",
    "rich_description",
    "image_url",
    "original_price",
    "faq_data",
    "howto_data",
    "features",
    "benefits",
)


def _flatten_item(item: Any) -> str:
    """Render a structured list entry as one readable line."""
    if not isinstance(item, dict):
        return str(item)
    head = item.get("title") or item.get("name")
    body = item.get("description")
    if head and body:
        return f"{head}: {body}"
    values = [str(v).strip() for v in item.values() if isinstance(v, (str, int, float)) and str(v).strip()]
    return " - ".join(values)


class FAQItem(BaseModel):
    model_config = ConfigDict(extra="allow", str_strip_whitespace=True)

    question: str
    answer: Optional[str] = None


class HowToStep(BaseModel):
    model_config = ConfigDict(extra="allow", str_strip_whitespace=True)

    step: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None


class ExtractedProduct(BaseModel):
    """Human-reviewable product draft.

    Every field is optional. Keys the model emits beyond this schema are
    kept as-is so reviewers see everything that came back.
    ``confidence_scores`` and ``stats_data`` are opaque pass-through data.
    """

    model_config = ConfigDict(extra="allow", str_strip_whitespace=True)

    name: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    rich_description: Optional[str] = None
    image_url: Optional[str] = None
    original_price: Optional[float] = None
    discounted_price: Optional[float] = None
    currency: Optional[str] = None
    affiliate_link: Optional[str] = None
    cta_button_text: Optional[str] = None
    product_type: Optional[str] = None
    product_tags: List[str] = Field(default_factory=list)
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    keywords: List[str] = Field(default_factory=list)
    focus_keyword: Optional[str] = None
    faq_data: List[FAQItem] = Field(default_factory=list)
    howto_data: List[HowToStep] = Field(default_factory=list)
    features: List[str] = Field(default_factory=list)
    benefits: List[str] = Field(default_factory=list)
    use_cases: List[str] = Field(default_factory=list)
    pros: List[str] = Field(default_factory=list)
    cons: List[str] = Field(default_factory=list)
    pricing_tiers: List[Dict[str, Any]] = Field(default_factory=list)
    stats_data: Optional[Dict[str, Any]] = None
    suggested_category: Optional[str] = None
    confidence_scores: Optional[Dict[str, Any]] = None
    tool_url: Optional[str] = None
    source_url: Optional[str] = None

    @field_validator("original_price", "discounted_price", mode="before")
    @classmethod
    def _parse_price(cls, value: Any) -> Any:
        """Accept numbers and price strings such as ``"$1,299.00"``."""
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            return value
        if isinstance(value, str):
            match = _NUMBER_PATTERN.search(value.replace(",", ""))
            return float(match.group(0)) if match else None
        return None

    @field_validator(
        "product_tags",
        "keywords",
        "features",
        "benefits",
        "use_cases",
        "pros",
        "cons",
        mode="before",
    )
    @classmethod
    def _string_list(cls, value: Any) -> Any:
        """``null`` becomes an empty list and a bare string a one-item list."""
        if value is None:
            return []
        if isinstance(value, str):
            return [value] if value.strip() else []
        if isinstance(value, list):
            items = (_flatten_item(item) for item in value if item is not None)
            return [item for item in items if item.strip()]
        return value

    @field_validator("pricing_tiers", mode="before")
    @classmethod
    def _tier_list(cls, value: Any) -> Any:
        """A bare tier name becomes ``{"name": ...}``; other scalars are dropped."""
        if value is None:
            return []
        if isinstance(value, list):
            tiers = []
            for item in value:
                if isinstance(item, dict):
                    tiers.append(item)
                elif isinstance(item, str) and item.strip():
                    tiers.append({"name": item.strip()})
            return tiers
        return value

    @field_validator("faq_data", "howto_data", mode="before")
    @classmethod
    def _object_list(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            return [item for item in value if item is not None]
        return value


def compute_missing_fields(data: Dict[str, Any]) -> List[str]:
    """Return the expected fields that are absent or empty in ``data``.

    ``None``, blank strings, empty lists and empty objects count as missing.
    Zero is a real value (free products) and is not reported.
    """
    missing = []
    for key in EXPECTED_FIELDS:
        value = data.get(key)
        if value is None:
            missing.append(key)
        elif isinstance(value, str) and not value.strip():
            missing.append(key)
        elif isinstance(value, (list, tuple, dict)) and len(value) == 0:
            missing.append(key)
    return missing
