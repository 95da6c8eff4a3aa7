"""
app/services/product_extraction_service.py

Turns a product URL into a human-reviewable product draft.

Flow
----
1. Validate the URL (http/https, non-empty).
2. Fetch the page (one GET, desktop User-Agent, explicit timeout).
3. Scrape title/description/Open Graph metadata and a plain-text rendering.
4. Prompt the completion service once.
5. Parse the first JSON object of the reply into an ExtractedProduct.
6. Inject the source URL and compute the missing expected fields.

A fetch failure stops the flow before the completion service is called.
Nothing is persisted and nothing is retried.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from functools import lru_cache
from urllib.parse import urlparse

import requests

from app.config import (
    LLMSettings,
    ProductExtractionSettings,
    get_llm_settings,
    get_product_extraction_settings,
)
from app.extraction.errors import (
    InvalidInputError,
    MalformedResponseError,
    ProductExtractionError,
    UpstreamError,
    UpstreamQuotaExceededError,
    UpstreamRateLimitedError,
)
from app.extraction.fetcher import PageFetcher
from app.extraction.html_parsers import HTMLParsingLayer
from app.extraction.logging_utils import log_event
from app.extraction.types import ProductExtractionResult
from app.schemas.product_extraction import ExtractionErrorResponse, ExtractionSuccessResponse
from llm_extraction import errors as completion_errors
from llm_extraction.adapter import BaseLLMAdapter, MockLLMAdapter, OpenAILLMAdapter
from llm_extraction.prompt_builder import SYSTEM_PROMPT, ProductPromptBuilder
from llm_extraction.schema import compute_missing_fields
from llm_extraction.validator import ReplyParseError, parse_extracted_product, product_to_payload

logger = logging.getLogger(__name__)

_ALLOWED_SCHEMES = {"http", "https"}


def build_llm_adapter(settings: LLMSettings) -> BaseLLMAdapter:
    """
    Instantiate the configured completion service adapter.
    """

    if settings.adapter == "mock":
        return MockLLMAdapter()
    return OpenAILLMAdapter(
        model=settings.model,
        temperature=settings.temperature,
        max_tokens=settings.max_tokens,
        timeout_seconds=settings.timeout_seconds,
        api_key=settings.api_key,
        base_url=settings.base_url,
    )


class ProductExtractionService:
    """
    Orchestrates page fetch, metadata scraping and the completion call.
    """

    def __init__(
        self,
        *,
        adapter: BaseLLMAdapter,
        settings: ProductExtractionSettings | None = None,
        fetcher: PageFetcher | None = None,
        prompt_builder: ProductPromptBuilder | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._settings = settings or get_product_extraction_settings()
        self._adapter = adapter
        self._fetcher = fetcher or PageFetcher(settings=self._settings, session=session)
        self._prompt_builder = prompt_builder or ProductPromptBuilder()

    def extract(self, url: str | None) -> ProductExtractionResult:
        """
        Run the full extraction for one URL.

        Raises
        ------
        ProductExtractionError
            One of the typed subclasses in :mod:`app.extraction.errors`.
        """

        target = self._validate_url(url)
        log_event(logger, logging.INFO, "product_extraction_started", url=target)

        page = self._fetcher.fetch(target)
        metadata = HTMLParsingLayer.extract_metadata(page.html)
        content = HTMLParsingLayer.extract_text(
            page.html,
            max_chars=self._settings.max_content_chars,
        )
        prompt = self._prompt_builder.build_prompt(
            url=target,
            content=content,
            title=metadata.effective_title,
            description=metadata.effective_description,
            image_url=metadata.og_image,
        )

        raw_reply = self._complete(prompt, url=target)

        try:
            product = parse_extracted_product(raw_reply)
        except ReplyParseError as exc:
            log_event(
                logger,
                logging.ERROR,
                "completion_reply_malformed",
                url=target,
                stage=exc.stage,
                errors=exc.errors,
                raw_response=exc.raw_response,
            )
            raise MalformedResponseError(
                "Failed to parse AI response as JSON",
                raw_response=exc.raw_response,
            ) from exc

        product = product.model_copy(update={"tool_url": target, "source_url": target})
        missing_fields = compute_missing_fields(product_to_payload(product))
        log_event(
            logger,
            logging.INFO,
            "product_extraction_completed",
            url=target,
            missing_fields=missing_fields,
        )
        return ProductExtractionResult(
            data=product,
            extraction_date=datetime.now(timezone.utc),
            missing_fields=missing_fields,
            metadata=metadata,
        )

    def run(self, url: str | None) -> tuple[int, ExtractionSuccessResponse | ExtractionErrorResponse]:
        """
        Call boundary: never raises for extraction failures.

        Returns the HTTP status and the wire envelope.
        """

        try:
            result = self.extract(url)
        except ProductExtractionError as exc:
            log_event(
                logger,
                logging.WARNING,
                "product_extraction_failed",
                url=url,
                error_type=type(exc).__name__,
                status_code=exc.status_code,
                error=exc.message,
            )
            return exc.status_code, ExtractionErrorResponse(error=exc.message)
        except Exception as exc:
            log_event(
                logger,
                logging.ERROR,
                "product_extraction_crashed",
                url=url,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            return 500, ExtractionErrorResponse(error="Failed to extract product information")

        return 200, ExtractionSuccessResponse(
            data=product_to_payload(result.data),
            missing_fields=result.missing_fields,
            extraction_date=result.extraction_date,
        )

    def _complete(self, prompt: str, *, url: str) -> str:
        try:
            reply = self._adapter.generate(prompt, system_prompt=SYSTEM_PROMPT)
        except completion_errors.CompletionRateLimitedError as exc:
            raise UpstreamRateLimitedError("Rate limit exceeded. Please try again later.") from exc
        except completion_errors.CompletionQuotaExceededError as exc:
            raise UpstreamQuotaExceededError(
                "AI credits exhausted. Please add credits to your workspace."
            ) from exc
        except completion_errors.CompletionServiceError as exc:
            log_event(
                logger,
                logging.ERROR,
                "completion_call_failed",
                url=url,
                status_code=exc.status_code,
                error=str(exc),
            )
            raise UpstreamError("AI analysis failed") from exc

        log_event(logger, logging.INFO, "completion_reply_received", url=url, length=len(reply))
        return reply

    @staticmethod
    def _validate_url(url: str | None) -> str:
        candidate = (url or "").strip()
        if not candidate:
            raise InvalidInputError("Product URL is required")

        parsed = urlparse(candidate)
        if parsed.scheme.lower() not in _ALLOWED_SCHEMES or not parsed.netloc:
            raise InvalidInputError("Product URL must be an absolute http(s) URL")
        return candidate


@lru_cache(maxsize=1)
def get_product_extraction_service() -> ProductExtractionService:
    """
    Build and cache the extraction service from environment settings.
    """

    return ProductExtractionService(adapter=build_llm_adapter(get_llm_settings()))
