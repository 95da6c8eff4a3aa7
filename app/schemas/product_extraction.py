"""
app/schemas/product_extraction.py

Request and response envelopes for product metadata extraction.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field


class ProductExtractionRequest(BaseModel):
    """
    ``url`` is optional here so a missing value answers 400, not 422.
    """

    url: str | None = None


class ExtractionSuccessResponse(BaseModel):
    success: Literal[True] = True
    data: dict[str, Any]
    missing_fields: list[str] = Field(default_factory=list)
    extraction_date: datetime


class ExtractionErrorResponse(BaseModel):
    success: Literal[False] = False
    error: str
