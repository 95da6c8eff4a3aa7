"""
app/domain package marker.
"""

from app.domain.trash import DeletedProduct, TrashCleanupSummary, TrashedProduct

__all__ = [
    "DeletedProduct",
    "TrashCleanupSummary",
    "TrashedProduct",
]
