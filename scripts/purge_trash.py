"""
Permanently delete expired trashed products from the CLI.
"""

from __future__ import annotations

import argparse
import json

from app.config import TrashCleanupSettings, get_trash_cleanup_settings
from app.repositories.analytics_store import SQLAlchemyAnalyticsStore
from app.services.trash_cleanup_service import TrashCleanupService
from db.session import session_scope


def main() -> int:
    parser = argparse.ArgumentParser(description="Purge products trashed past retention.")
    parser.add_argument(
        "--retention-days",
        dest="retention_days",
        type=int,
        default=None,
        help="Override TRASH_RETENTION_DAYS for this run.",
    )
    args = parser.parse_args()

    settings = get_trash_cleanup_settings()
    if args.retention_days is not None:
        settings = TrashCleanupSettings(
            enabled=settings.enabled,
            retention_days=max(1, args.retention_days),
            hour_utc=settings.hour_utc,
        )

    with session_scope() as db:
        summary = TrashCleanupService(SQLAlchemyAnalyticsStore(db), settings=settings).run()

    payload = {
        "cutoff": summary.cutoff.isoformat(),
        "deleted_count": summary.deleted_count,
        "deleted_products": [
            {
                "product_id": item.product_id,
                "name": item.name,
                "days_in_trash": item.days_in_trash,
            }
            for item in summary.deleted_products
        ],
    }
    print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
