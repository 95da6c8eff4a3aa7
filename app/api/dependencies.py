"""
app/api/dependencies.py

Shared FastAPI dependencies wiring services to the request session.
"""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.orm import Session

from app.repositories.analytics_store import AnalyticsDataStore, SQLAlchemyAnalyticsStore
from app.services.lead_analytics_service import LeadAnalyticsService
from app.services.trash_cleanup_service import TrashCleanupService
from db.session import get_db


def get_analytics_store(db: Session = Depends(get_db)) -> AnalyticsDataStore:
    return SQLAlchemyAnalyticsStore(db)


def get_lead_analytics_service(
    store: AnalyticsDataStore = Depends(get_analytics_store),
) -> LeadAnalyticsService:
    return LeadAnalyticsService(store)


def get_trash_cleanup_service(
    store: AnalyticsDataStore = Depends(get_analytics_store),
) -> TrashCleanupService:
    return TrashCleanupService(store)
