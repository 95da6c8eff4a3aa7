"""
app/repositories package marker.
"""

from app.repositories.analytics_store import AnalyticsDataStore, SQLAlchemyAnalyticsStore

__all__ = [
    "AnalyticsDataStore",
    "SQLAlchemyAnalyticsStore",
]
