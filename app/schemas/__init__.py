"""
app/schemas package marker.
"""

from app.schemas.lead_analytics import (
    AttributionSummaryResponse,
    ClickAnalyticsResponse,
    LeadSourceResponse,
    LeadStatsResponse,
    TrashCleanupResponse,
)
from app.schemas.product_extraction import (
    ExtractionErrorResponse,
    ExtractionSuccessResponse,
    ProductExtractionRequest,
)

__all__ = [
    "AttributionSummaryResponse",
    "ClickAnalyticsResponse",
    "ExtractionErrorResponse",
    "ExtractionSuccessResponse",
    "LeadSourceResponse",
    "LeadStatsResponse",
    "ProductExtractionRequest",
    "TrashCleanupResponse",
]
