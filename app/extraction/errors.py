"""
Error taxonomy for product metadata extraction.

Every error carries the HTTP status the API answers with. Nothing is
retried automatically; the caller decides whether to try the URL again.
"""

from __future__ import annotations


class ProductExtractionError(Exception):
    """
    Base class for extraction failures surfaced to the caller.
    """

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidInputError(ProductExtractionError):
    """Missing, empty or non-http(s) URL."""

    status_code = 400


class FetchError(ProductExtractionError):
    """The product page was unreachable or answered with a non-success status."""

    status_code = 500

    def __init__(self, message: str, *, url: str, upstream_status: int | None = None) -> None:
        self.url = url
        self.upstream_status = upstream_status
        super().__init__(message)


class UpstreamRateLimitedError(ProductExtractionError):
    status_code = 429


class UpstreamQuotaExceededError(ProductExtractionError):
    status_code = 402


class UpstreamError(ProductExtractionError):
    """Any other completion service failure (status, timeout, connection)."""

    status_code = 500


class MalformedResponseError(ProductExtractionError):
    """The completion reply held no parseable product JSON."""

    status_code = 500

    def __init__(self, message: str, *, raw_response: str) -> None:
        self.raw_response = raw_response
        super().__init__(message)
