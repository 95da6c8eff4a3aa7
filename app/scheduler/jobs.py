"""
app/scheduler/jobs.py

APScheduler-based scheduler for storefront housekeeping.

Schedule (all times UTC)
--------------------------
  daily_trash_cleanup: TRASH_CLEANUP_HOUR_UTC:00 every day (default 04:00)

The job is registered only when ``TRASH_CLEANUP_ENABLED`` is true.

Lifecycle
----------
Call ``build_scheduler()`` once to get a configured ``BackgroundScheduler``.
Start it on app boot; shut it down gracefully on app shutdown.
The scheduler is wired into FastAPI via the ``lifespan`` context in main.py.
"""

from __future__ import annotations

import logging

from apscheduler.schedulers.background import BackgroundScheduler

from app.config import get_trash_cleanup_settings
from app.repositories.analytics_store import SQLAlchemyAnalyticsStore
from app.services.trash_cleanup_service import TrashCleanupService
from db.session import session_scope

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Job: Daily trash cleanup
# ---------------------------------------------------------------------------


def run_daily_trash_cleanup() -> None:
    """
    Permanently delete products that have sat in the trash past retention.
    """
    logger.info("Scheduler: daily_trash_cleanup starting")
    try:
        with session_scope() as session:
            summary = TrashCleanupService(SQLAlchemyAnalyticsStore(session)).run()
    except Exception:
        logger.exception("Scheduler: daily_trash_cleanup failed")
        return

    logger.info(
        "Scheduler: daily_trash_cleanup complete; deleted=%d cutoff=%s",
        summary.deleted_count,
        summary.cutoff.isoformat(),
    )


# ---------------------------------------------------------------------------
# Scheduler factory
# ---------------------------------------------------------------------------


def build_scheduler() -> BackgroundScheduler:
    """
    Build and register all periodic jobs.

    Returns a configured but *not yet started* ``BackgroundScheduler``.
    The caller must call ``.start()`` and ``.shutdown(wait=True)`` at the
    appropriate lifecycle points.
    """
    scheduler = BackgroundScheduler(timezone="UTC")
    settings = get_trash_cleanup_settings()

    if not settings.enabled:
        logger.info("Scheduler: trash cleanup disabled via TRASH_CLEANUP_ENABLED")
        return scheduler

    scheduler.add_job(
        run_daily_trash_cleanup,
        trigger="cron",
        hour=settings.hour_utc,
        minute=0,
        id="daily_trash_cleanup",
        name="Daily trash cleanup",
        replace_existing=True,
        misfire_grace_time=3600,
    )

    return scheduler
