"""
tests/test_trash_cleanup_service.py

Retention-based purge of soft-deleted products.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from app.config import TrashCleanupSettings
from app.domain.trash import TrashedProduct
from app.services.trash_cleanup_service import TrashCleanupService
from tests.fakes import FakeAnalyticsStore

NOW = datetime(2026, 10, 19, 4, 0, tzinfo=timezone.utc)


def _trashed(product_id: str, days_ago: int) -> TrashedProduct:
    return TrashedProduct(product_id=product_id, name=f"Tool {product_id}", deleted_at=NOW - timedelta(days=days_ago))


class TestTrashCleanupService:
    def test_deletes_only_products_past_retention(self) -> None:
        store = FakeAnalyticsStore(trash=[_trashed("a", 91), _trashed("b", 89), _trashed("c", 400)])
        service = TrashCleanupService(store, settings=TrashCleanupSettings(retention_days=90))

        summary = service.run(NOW)

        assert summary.cutoff == NOW - timedelta(days=90)
        assert summary.deleted_count == 2
        assert store.deleted_ids == ["a", "c"]
        assert [(item.product_id, item.days_in_trash) for item in summary.deleted_products] == [
            ("a", 91),
            ("c", 400),
        ]

    def test_nothing_to_delete(self) -> None:
        store = FakeAnalyticsStore(trash=[_trashed("b", 10)])

        summary = TrashCleanupService(store, settings=TrashCleanupSettings()).run(NOW)

        assert summary.deleted_count == 0
        assert summary.deleted_products == []
        assert store.deleted_ids == []

    def test_custom_retention(self) -> None:
        store = FakeAnalyticsStore(trash=[_trashed("a", 8)])

        summary = TrashCleanupService(store, settings=TrashCleanupSettings(retention_days=7)).run(NOW)

        assert summary.deleted_count == 1

    def test_naive_now_is_treated_as_utc(self) -> None:
        store = FakeAnalyticsStore(trash=[_trashed("a", 100)])

        summary = TrashCleanupService(store, settings=TrashCleanupSettings()).run(NOW.replace(tzinfo=None))

        assert summary.cutoff.tzinfo is not None
        assert summary.deleted_count == 1
