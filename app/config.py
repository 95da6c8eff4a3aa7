"""
app/config.py

Application-level configuration helpers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from db.config import load_env_files

DEFAULT_BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
)

_ALLOWED_LLM_ADAPTERS = {"openai", "mock"}


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    """
    Ensure project `.env` files are loaded once before reading app settings.
    """

    load_env_files()


def _get_bool_env(name: str, default: bool) -> bool:
    """
    Read a boolean from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    return raw_value.strip().lower() in {"1", "true", "yes", "on"}


def _get_int_env(name: str, default: int) -> int:
    """
    Read an integer from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError:
        return default


def _get_float_env(name: str, default: float) -> float:
    """
    Read a float from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return float(raw_value)
    except ValueError:
        return default


def _get_str_env(name: str, default: str) -> str:
    """
    Read a string from environment variables with fallback.
    """

    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return default
    stripped = value.strip()
    return stripped if stripped else default


def _get_optional_str_env(name: str) -> str | None:
    """
    Read an optional string value from environment variables.
    """

    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return None
    stripped = value.strip()
    return stripped if stripped else None


@dataclass(frozen=True)
class ProductExtractionSettings:
    """
    Runtime settings for product page fetching and text preparation.
    """

    user_agent: str = DEFAULT_BROWSER_USER_AGENT
    fetch_timeout_seconds: float = 30.0
    max_content_chars: int = 15000


@dataclass(frozen=True)
class LLMSettings:
    """
    Completion service settings.
    """

    adapter: str = "openai"
    api_key: str | None = None
    base_url: str | None = None
    model: str = "gpt-4o"
    temperature: float = 0.3
    max_tokens: int = 4096
    timeout_seconds: float = 30.0


@dataclass(frozen=True)
class AnalyticsSettings:
    """
    Defaults for lead and click analytics windows.
    """

    default_window_days: int = 30
    top_products_limit: int = 5
    recent_activity_limit: int = 20


@dataclass(frozen=True)
class TrashCleanupSettings:
    """
    Retention policy for soft-deleted products.
    """

    enabled: bool = True
    retention_days: int = 90
    hour_utc: int = 4


@lru_cache(maxsize=1)
def get_product_extraction_settings() -> ProductExtractionSettings:
    """
    Return cached product extraction settings from environment variables.
    """

    return ProductExtractionSettings(
        user_agent=_get_str_env("EXTRACTION_USER_AGENT", DEFAULT_BROWSER_USER_AGENT),
        fetch_timeout_seconds=max(1.0, _get_float_env("EXTRACTION_FETCH_TIMEOUT_SECONDS", 30.0)),
        max_content_chars=max(1, _get_int_env("EXTRACTION_MAX_CONTENT_CHARS", 15000)),
    )


@lru_cache(maxsize=1)
def get_llm_settings() -> LLMSettings:
    """
    Return cached completion service settings.

    ``LLM_API_KEY`` wins over ``OPENAI_API_KEY``. An unknown adapter name
    falls back to ``openai``.
    """

    adapter = _get_str_env("LLM_ADAPTER", "openai").lower()
    if adapter not in _ALLOWED_LLM_ADAPTERS:
        adapter = "openai"

    return LLMSettings(
        adapter=adapter,
        api_key=_get_optional_str_env("LLM_API_KEY") or _get_optional_str_env("OPENAI_API_KEY"),
        base_url=_get_optional_str_env("LLM_BASE_URL"),
        model=_get_str_env("LLM_MODEL", "gpt-4o"),
        temperature=min(2.0, max(0.0, _get_float_env("LLM_TEMPERATURE", 0.3))),
        max_tokens=max(1, _get_int_env("LLM_MAX_TOKENS", 4096)),
        timeout_seconds=max(1.0, _get_float_env("LLM_TIMEOUT_SECONDS", 30.0)),
    )


@lru_cache(maxsize=1)
def get_analytics_settings() -> AnalyticsSettings:
    """
    Return cached analytics settings from environment variables.
    """

    return AnalyticsSettings(
        default_window_days=max(1, _get_int_env("ANALYTICS_DEFAULT_WINDOW_DAYS", 30)),
        top_products_limit=max(1, _get_int_env("ANALYTICS_TOP_PRODUCTS_LIMIT", 5)),
        recent_activity_limit=max(1, _get_int_env("ANALYTICS_RECENT_ACTIVITY_LIMIT", 20)),
    )


@lru_cache(maxsize=1)
def get_trash_cleanup_settings() -> TrashCleanupSettings:
    """
    Return cached trash retention settings from environment variables.
    """

    return TrashCleanupSettings(
        enabled=_get_bool_env("TRASH_CLEANUP_ENABLED", True),
        retention_days=max(1, _get_int_env("TRASH_RETENTION_DAYS", 90)),
        hour_utc=min(23, max(0, _get_int_env("TRASH_CLEANUP_HOUR_UTC", 4))),
    )


@lru_cache(maxsize=1)
def get_cors_allow_origins() -> tuple[str, ...]:
    """
    Return allowed browser origins from comma-separated ``CORS_ALLOW_ORIGINS``.
    """

    raw_value = _get_str_env("CORS_ALLOW_ORIGINS", "*")
    origins = tuple(item.strip() for item in raw_value.split(",") if item.strip())
    return origins or ("*",)
