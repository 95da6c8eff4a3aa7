"""
app/api/routers package marker.
"""

from app.api.routers.lead_analytics import router as lead_analytics_router
from app.api.routers.maintenance import router as maintenance_router
from app.api.routers.product_extraction import router as product_extraction_router

__all__ = [
    "lead_analytics_router",
    "maintenance_router",
    "product_extraction_router",
]
