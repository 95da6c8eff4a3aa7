"""
app/api/routers/lead_analytics.py

Lead attribution, lead statistics and click analytics endpoints.
"""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.api.dependencies import get_lead_analytics_service
from app.schemas.lead_analytics import (
    AttributionSummaryResponse,
    ClickAnalyticsResponse,
    LeadSourceResponse,
    LeadStatsResponse,
)
from app.services.lead_analytics_service import LeadAnalyticsService

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("/sources", response_model=AttributionSummaryResponse)
def get_source_summary(
    analytics_service: LeadAnalyticsService = Depends(get_lead_analytics_service),
) -> AttributionSummaryResponse:
    """
    Leads grouped by attribution source with conversion rate and revenue.
    """

    return AttributionSummaryResponse.model_validate(analytics_service.source_summary())


@router.get("/leads", response_model=list[LeadSourceResponse])
def list_lead_sources(
    analytics_service: LeadAnalyticsService = Depends(get_lead_analytics_service),
) -> list[LeadSourceResponse]:
    return [LeadSourceResponse.model_validate(view) for view in analytics_service.lead_sources()]


@router.get("/leads/stats", response_model=LeadStatsResponse)
def get_lead_stats(
    analytics_service: LeadAnalyticsService = Depends(get_lead_analytics_service),
) -> LeadStatsResponse:
    return LeadStatsResponse.model_validate(analytics_service.lead_stats())


@router.get("/clicks", response_model=ClickAnalyticsResponse)
def get_click_analytics(
    start: datetime | None = Query(default=None, description="Window start (ISO-8601)"),
    end: datetime | None = Query(default=None, description="Window end (ISO-8601)"),
    analytics_service: LeadAnalyticsService = Depends(get_lead_analytics_service),
) -> ClickAnalyticsResponse:
    """
    Click analytics for a date window, trailing 30 days when omitted.
    """

    try:
        analytics = analytics_service.click_analytics(start=start, end=end)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc

    return ClickAnalyticsResponse.model_validate(analytics)
