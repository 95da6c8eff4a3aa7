"""
app/api/routers/maintenance.py

Operator endpoints for storefront housekeeping.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from app.api.dependencies import get_trash_cleanup_service
from app.schemas.lead_analytics import TrashCleanupResponse
from app.services.trash_cleanup_service import TrashCleanupService

router = APIRouter(prefix="/maintenance", tags=["maintenance"])


@router.post("/purge-trash", response_model=TrashCleanupResponse)
def purge_trash(
    cleanup_service: TrashCleanupService = Depends(get_trash_cleanup_service),
) -> TrashCleanupResponse:
    """
    Permanently delete products that have been in the trash past retention.
    """

    try:
        summary = cleanup_service.run()
    except SQLAlchemyError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete trashed products.",
        ) from exc

    return TrashCleanupResponse.model_validate(summary)
