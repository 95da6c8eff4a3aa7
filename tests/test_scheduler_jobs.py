"""
tests/test_scheduler_jobs.py

Job registration for the housekeeping scheduler. The scheduler is built
but never started.
"""

from __future__ import annotations

from app.config import TrashCleanupSettings
from app.scheduler import jobs


class TestBuildScheduler:
    def test_registers_daily_trash_cleanup(self, monkeypatch) -> None:
        monkeypatch.setattr(jobs, "get_trash_cleanup_settings", lambda: TrashCleanupSettings(hour_utc=4))

        scheduler = jobs.build_scheduler()

        job_ids = [job.id for job in scheduler.get_jobs()]
        assert job_ids == ["daily_trash_cleanup"]

    def test_disabled_cleanup_registers_nothing(self, monkeypatch) -> None:
        monkeypatch.setattr(jobs, "get_trash_cleanup_settings", lambda: TrashCleanupSettings(enabled=False))

        assert jobs.build_scheduler().get_jobs() == []
