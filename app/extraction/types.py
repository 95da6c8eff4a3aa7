"""
Runtime data models for product page extraction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from llm_extraction.schema import ExtractedProduct


@dataclass(frozen=True)
class FetchedPage:
    """
    Raw HTML of one fetched product page.
    """

    url: str
    final_url: str
    status_code: int
    html: str


@dataclass(frozen=True)
class PageMetadata:
    """
    Metadata scraped from the page head. Every field is optional.
    """

    title: str | None = None
    description: str | None = None
    og_title: str | None = None
    og_description: str | None = None
    og_image: str | None = None

    @property
    def effective_title(self) -> str | None:
        return self.title or self.og_title

    @property
    def effective_description(self) -> str | None:
        return self.description or self.og_description


@dataclass(frozen=True)
class ProductExtractionResult:
    """
    Successful extraction: the draft, what it lacks, and when it was made.
    """

    data: ExtractedProduct
    extraction_date: datetime
    missing_fields: list[str] = field(default_factory=list)
    metadata: PageMetadata = field(default_factory=PageMetadata)
