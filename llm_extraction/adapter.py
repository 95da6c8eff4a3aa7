"""Completion service adapters for product extraction.

Provides a base interface, an adapter for OpenAI-compatible chat
completion APIs and a deterministic mock for testing.
"""

import json
import os
from abc import ABC, abstractmethod
from typing import Optional

from llm_extraction.errors import (
    CompletionQuotaExceededError,
    CompletionRateLimitedError,
    CompletionServiceError,
)


class BaseLLMAdapter(ABC):
    """Abstract base for all completion service adapters."""

    @abstractmethod
    def generate(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        """Send a prompt to the completion service and return the reply text.

        Args:
            prompt: The fully formatted user prompt.
            system_prompt: Optional system message framing the task.

        Returns:
            Raw reply text from the model (expected to contain JSON).

        Raises:
            CompletionServiceError: The call did not succeed. Subclasses
                signal rate limiting (429) and exhausted quota (402).
        """


class OpenAILLMAdapter(BaseLLMAdapter):
    """Adapter for OpenAI-compatible chat completion APIs.

    Makes exactly one non-streaming call per ``generate``. The SDK's own
    retry loop is disabled; callers own retry policy.
    """

    def __init__(
        self,
        model: str = "gpt-4o",
        temperature: float = 0.3,
        max_tokens: int = 4096,
        timeout_seconds: float = 30.0,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
    ) -> None:
        """Initialise the OpenAI adapter.

        Args:
            model: Model identifier.
            temperature: Sampling temperature.
            max_tokens: Maximum tokens in the completion.
            timeout_seconds: Request timeout for the completion call.
            api_key: API key. Falls back to OPENAI_API_KEY env var.
            base_url: Optional base URL for OpenAI-compatible gateways.
        """
        try:
            import openai  # type: ignore[import-untyped]
        except ImportError as exc:
            raise ImportError(
                "openai package is required for OpenAILLMAdapter. "
                "Install it with: pip install openai"
            ) from exc

        resolved_key = api_key or os.environ.get("OPENAI_API_KEY", "")
        client_kwargs: dict = {
            "api_key": resolved_key,
            "timeout": timeout_seconds,
            "max_retries": 0,
        }
        if base_url:
            client_kwargs["base_url"] = base_url

        self._openai = openai
        self._client = openai.OpenAI(**client_kwargs)
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens

    def generate(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        """Call the chat completion API once.

        Args:
            prompt: The fully formatted user prompt.
            system_prompt: Optional system message.

        Returns:
            Raw string content from the model response.
        """
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        openai = self._openai
        try:
            response = self._client.chat.completions.create(
                model=self._model,
                messages=messages,
                temperature=self._temperature,
                max_tokens=self._max_tokens,
                stream=False,
            )
        except openai.RateLimitError as exc:
            raise CompletionRateLimitedError() from exc
        except openai.APIStatusError as exc:
            if exc.status_code == 402:
                raise CompletionQuotaExceededError() from exc
            raise CompletionServiceError(
                f"Completion service returned HTTP {exc.status_code}.",
                status_code=exc.status_code,
            ) from exc
        except openai.APITimeoutError as exc:
            raise CompletionServiceError("Completion service timed out.") from exc
        except openai.APIConnectionError as exc:
            raise CompletionServiceError("Completion service is unreachable.") from exc
        except openai.APIError as exc:
            raise CompletionServiceError("Completion service request failed.") from exc

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""


# ---------------------------------------------------------------------------
# Fixed mock response used for local testing.
# ---------------------------------------------------------------------------
_MOCK_RESPONSE = {
    "name": "Mock Product",
    "slug": "mock-product",
    "description": "Mock product draft for testing purposes.",
    "rich_description": "<p>Mock product draft for testing purposes.</p>",
    "original_price": 49.0,
    "currency": "USD",
    "product_type": "software",
    "features": ["Deterministic output"],
    "benefits": ["No network access required"],
    "faq_data": [{"question": "Is this real?", "answer": "No, it is a fixture."}],
    "howto_data": [{"step": 1, "title": "Run tests", "description": "Use the mock adapter."}],
    "confidence_scores": {"name": 0.95, "description": 0.9, "pricing": 0.5, "overall": 0.8},
}

_MOCK_RESPONSE_JSON = json.dumps(_MOCK_RESPONSE, indent=2)


class MockLLMAdapter(BaseLLMAdapter):
    """Deterministic adapter that returns a fixed valid JSON reply.

    Used for local runs and CI pipelines where no completion service
    is available.
    """

    def generate(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        """Return a fixed JSON string regardless of input."""
        return _MOCK_RESPONSE_JSON
