"""
app/services package marker.
"""

from app.services.lead_analytics_service import LeadAnalyticsService
from app.services.product_extraction_service import (
    ProductExtractionService,
    get_product_extraction_service,
)
from app.services.trash_cleanup_service import TrashCleanupService

__all__ = [
    "LeadAnalyticsService",
    "ProductExtractionService",
    "get_product_extraction_service",
    "TrashCleanupService",
]
