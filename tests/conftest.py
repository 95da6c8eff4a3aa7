"""
tests/conftest.py

Shared fixtures.
"""

from __future__ import annotations

import pytest

from app.config import ProductExtractionSettings


@pytest.fixture()
def extraction_settings() -> ProductExtractionSettings:
    return ProductExtractionSettings(
        user_agent="TestAgent/1.0",
        fetch_timeout_seconds=5.0,
        max_content_chars=15000,
    )
