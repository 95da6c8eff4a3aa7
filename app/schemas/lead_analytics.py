"""
app/schemas/lead_analytics.py

Response schemas for lead attribution, lead stats, click analytics and
trash maintenance.
"""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class _FromDomain(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class SourceSummaryResponse(_FromDomain):
    source: str
    label: str
    count: int = Field(..., ge=0)
    purchased: int = Field(..., ge=0)
    revenue: float
    conversion_rate: float = Field(..., ge=0, le=100)


class AttributionTotalsResponse(_FromDomain):
    count: int = Field(..., ge=0)
    purchased: int = Field(..., ge=0)
    revenue: float
    conversion_rate: float = Field(..., ge=0, le=100)


class AttributionSummaryResponse(_FromDomain):
    """
    API response model for lead attribution grouped by source.
    """

    overall: AttributionTotalsResponse
    by_source: list[SourceSummaryResponse] = Field(default_factory=list)


class LeadSourceResponse(_FromDomain):
    record_id: str | None = None
    product_name: str | None = None
    source: str
    purchased: bool
    revenue: float | None = None
    created_at: datetime | None = None


class ProductLeadCountResponse(_FromDomain):
    product_name: str
    lead_count: int = Field(..., ge=0)


class LeadStatsResponse(_FromDomain):
    total_leads: int = Field(..., ge=0)
    leads_this_month: int = Field(..., ge=0)
    leads_today: int = Field(..., ge=0)
    conversion_rate: float = Field(..., ge=0, le=100)
    top_products: list[ProductLeadCountResponse] = Field(default_factory=list)


class SourceClickSummaryResponse(_FromDomain):
    source: str
    clicks: int
    conversions: int
    revenue: float


class ProductClickSummaryResponse(_FromDomain):
    product_id: str | None = None
    product_name: str
    revenue_type: str
    clicks: int
    affiliate_clicks: int
    payment_clicks: int
    conversions: int
    revenue: float


class DailyActivityResponse(_FromDomain):
    day: date
    clicks: int
    conversions: int
    revenue: float


class RecentClickResponse(_FromDomain):
    record_id: str | None = None
    click_type: str
    product_name: str
    utm_source: str
    created_at: datetime


class ClickAnalyticsResponse(_FromDomain):
    """
    API response model for click analytics over a date window.
    """

    total_clicks: int = Field(..., ge=0)
    total_conversions: int = Field(..., ge=0)
    total_revenue: float
    conversion_rate: float = Field(..., ge=0, le=100)
    affiliate_clicks: int = Field(..., ge=0)
    payment_clicks: int = Field(..., ge=0)
    by_source: list[SourceClickSummaryResponse] = Field(default_factory=list)
    by_product: list[ProductClickSummaryResponse] = Field(default_factory=list)
    daily: list[DailyActivityResponse] = Field(default_factory=list)
    recent_activity: list[RecentClickResponse] = Field(default_factory=list)


class DeletedProductResponse(_FromDomain):
    product_id: str
    name: str
    days_in_trash: int = Field(..., ge=0)


class TrashCleanupResponse(_FromDomain):
    """
    API response model for one trash purge run.
    """

    cutoff: datetime
    deleted_count: int = Field(..., ge=0)
    deleted_products: list[DeletedProductResponse] = Field(default_factory=list)
