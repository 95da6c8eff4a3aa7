"""
app/domain/trash.py

Domain models for soft-deleted product retention.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class TrashedProduct:
    """
    A product that sits in the trash (``is_deleted`` with a ``deleted_at``).
    """

    product_id: str
    name: str
    deleted_at: datetime

    def days_in_trash(self, now: datetime) -> int:
        return max(0, (now - self.deleted_at).days)


@dataclass(frozen=True)
class DeletedProduct:
    product_id: str
    name: str
    days_in_trash: int


@dataclass(frozen=True)
class TrashCleanupSummary:
    """
    Outcome of one permanent-deletion pass.
    """

    cutoff: datetime
    deleted_count: int
    deleted_products: list[DeletedProduct] = field(default_factory=list)
