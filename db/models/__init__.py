"""
Model package exports.

Import all SQLAlchemy models here so metadata registration and Alembic
autogeneration work without extra imports.
"""

from db.models.click_event import ClickEvent
from db.models.conversion import Conversion
from db.models.lead import Lead
from db.models.product import Product, RevenueType

__all__ = [
    "ClickEvent",
    "Conversion",
    "Lead",
    "Product",
    "RevenueType",
]
