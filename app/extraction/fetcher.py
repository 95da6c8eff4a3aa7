"""
Product page fetcher.
"""

from __future__ import annotations

import logging

import requests

from app.config import ProductExtractionSettings
from app.extraction.errors import FetchError
from app.extraction.logging_utils import log_event
from app.extraction.types import FetchedPage

logger = logging.getLogger(__name__)


class PageFetcher:
    """
    Fetches one product page with a desktop browser User-Agent.

    One GET per call, no retries. Any transport failure or non-2xx status
    becomes a :class:`FetchError`.
    """

    def __init__(
        self,
        *,
        settings: ProductExtractionSettings,
        session: requests.Session | None = None,
    ) -> None:
        self._settings = settings
        self._session = session or requests.Session()
        self.request_headers = {
            "User-Agent": settings.user_agent,
            "Accept": "text/html,application/xhtml+xml;q=0.9,*/*;q=0.8",
        }

    def fetch(self, url: str) -> FetchedPage:
        try:
            response = self._session.get(
                url,
                headers=self.request_headers,
                timeout=self._settings.fetch_timeout_seconds,
                allow_redirects=True,
            )
        except requests.Timeout as exc:
            log_event(logger, logging.WARNING, "page_fetch_timeout", url=url, error=str(exc))
            raise FetchError(
                f"Failed to fetch webpage: timed out after {self._settings.fetch_timeout_seconds:g}s",
                url=url,
            ) from exc
        except requests.RequestException as exc:
            log_event(logger, logging.WARNING, "page_fetch_failed", url=url, error=str(exc))
            raise FetchError(f"Failed to fetch webpage: {exc}", url=url) from exc

        if not 200 <= response.status_code < 300:
            reason = response.reason or "HTTP error"
            log_event(
                logger,
                logging.WARNING,
                "page_fetch_bad_status",
                url=url,
                status_code=response.status_code,
            )
            raise FetchError(
                f"Failed to fetch webpage: {response.status_code} {reason}",
                url=url,
                upstream_status=response.status_code,
            )

        html = response.text
        log_event(
            logger,
            logging.INFO,
            "page_fetched",
            url=url,
            final_url=response.url,
            status_code=response.status_code,
            length=len(html),
        )
        return FetchedPage(
            url=url,
            final_url=response.url or url,
            status_code=response.status_code,
            html=html,
        )
