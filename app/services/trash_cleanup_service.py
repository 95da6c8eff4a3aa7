"""
app/services/trash_cleanup_service.py

Permanent deletion of products that stayed in the trash past retention.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from app.config import TrashCleanupSettings, get_trash_cleanup_settings
from app.domain.trash import DeletedProduct, TrashCleanupSummary
from app.repositories.analytics_store import AnalyticsDataStore

logger = logging.getLogger(__name__)


class TrashCleanupService:
    """
    Delete products soft-deleted more than ``retention_days`` ago.
    """

    def __init__(
        self,
        store: AnalyticsDataStore,
        settings: TrashCleanupSettings | None = None,
    ) -> None:
        self._store = store
        self._settings = settings or get_trash_cleanup_settings()

    def run(self, now: datetime | None = None) -> TrashCleanupSummary:
        reference = now or datetime.now(tz=timezone.utc)
        if reference.tzinfo is None:
            reference = reference.replace(tzinfo=timezone.utc)
        cutoff = reference - timedelta(days=self._settings.retention_days)

        expired = self._store.list_expired_trash(cutoff=cutoff)
        if not expired:
            logger.info("Trash cleanup: no products older than %s", cutoff.isoformat())
            return TrashCleanupSummary(cutoff=cutoff, deleted_count=0)

        deleted_count = self._store.delete_products([item.product_id for item in expired])
        deleted = [
            DeletedProduct(
                product_id=item.product_id,
                name=item.name,
                days_in_trash=item.days_in_trash(reference),
            )
            for item in expired
        ]
        logger.info(
            "Trash cleanup: permanently deleted %d product(s): %s",
            deleted_count,
            ", ".join(item.name for item in deleted),
        )
        return TrashCleanupSummary(
            cutoff=cutoff,
            deleted_count=deleted_count,
            deleted_products=deleted,
        )
