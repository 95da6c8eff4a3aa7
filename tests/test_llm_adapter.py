"""
tests/test_llm_adapter.py

Error mapping of the OpenAI-compatible completion adapter. The SDK client
is replaced by a stub, so no request ever leaves the process.
"""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import httpx
import openai
import pytest

from llm_extraction.adapter import MockLLMAdapter, OpenAILLMAdapter
from llm_extraction.errors import (
    CompletionQuotaExceededError,
    CompletionRateLimitedError,
    CompletionServiceError,
)
from llm_extraction.validator import parse_extracted_product

_REQUEST = httpx.Request("POST", "https://api.example.test/v1/chat/completions")


def _status_error(cls: type[openai.APIStatusError], status_code: int) -> openai.APIStatusError:
    response = httpx.Response(status_code, request=_REQUEST)
    return cls("upstream error", response=response, body=None)


class _StubCompletions:
    def __init__(self, *, content: str | None = None, error: Exception | None = None) -> None:
        self.content = content
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def create(self, **kwargs: Any) -> Any:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _adapter_with(completions: _StubCompletions) -> OpenAILLMAdapter:
    adapter = OpenAILLMAdapter(model="gpt-4o", api_key="test-key")
    adapter._client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return adapter


class TestOpenAILLMAdapter:
    def test_returns_message_content_and_sends_system_prompt(self) -> None:
        completions = _StubCompletions(content='{"name": "Acme"}')
        adapter = _adapter_with(completions)

        reply = adapter.generate("user prompt", system_prompt="system prompt")

        assert reply == '{"name": "Acme"}'
        call = completions.calls[0]
        assert call["model"] == "gpt-4o"
        assert call["stream"] is False
        assert call["messages"] == [
            {"role": "system", "content": "system prompt"},
            {"role": "user", "content": "user prompt"},
        ]

    def test_client_retries_are_disabled(self) -> None:
        adapter = OpenAILLMAdapter(api_key="test-key", timeout_seconds=12.0)

        assert adapter._client.max_retries == 0

    def test_rate_limit_maps_to_rate_limited_error(self) -> None:
        adapter = _adapter_with(_StubCompletions(error=_status_error(openai.RateLimitError, 429)))

        with pytest.raises(CompletionRateLimitedError) as exc_info:
            adapter.generate("prompt")

        assert exc_info.value.status_code == 429

    def test_payment_required_maps_to_quota_error(self) -> None:
        adapter = _adapter_with(_StubCompletions(error=_status_error(openai.APIStatusError, 402)))

        with pytest.raises(CompletionQuotaExceededError) as exc_info:
            adapter.generate("prompt")

        assert exc_info.value.status_code == 402

    def test_other_status_maps_to_service_error(self) -> None:
        adapter = _adapter_with(
            _StubCompletions(error=_status_error(openai.InternalServerError, 503))
        )

        with pytest.raises(CompletionServiceError) as exc_info:
            adapter.generate("prompt")

        assert exc_info.value.status_code == 503
        assert not isinstance(exc_info.value, CompletionRateLimitedError)

    def test_timeout_maps_to_service_error(self) -> None:
        adapter = _adapter_with(_StubCompletions(error=openai.APITimeoutError(request=_REQUEST)))

        with pytest.raises(CompletionServiceError):
            adapter.generate("prompt")

    def test_connection_error_maps_to_service_error(self) -> None:
        adapter = _adapter_with(
            _StubCompletions(error=openai.APIConnectionError(request=_REQUEST))
        )

        with pytest.raises(CompletionServiceError):
            adapter.generate("prompt")

    def test_unparseable_sdk_response_maps_to_service_error(self) -> None:
        error = openai.APIResponseValidationError(
            response=httpx.Response(200, request=_REQUEST), body=None
        )
        adapter = _adapter_with(_StubCompletions(error=error))

        with pytest.raises(CompletionServiceError):
            adapter.generate("prompt")

    def test_empty_content_returns_empty_string(self) -> None:
        adapter = _adapter_with(_StubCompletions(content=None))

        assert adapter.generate("prompt") == ""


class TestMockLLMAdapter:
    def test_reply_is_a_valid_product_draft(self) -> None:
        product = parse_extracted_product(MockLLMAdapter().generate("anything"))

        assert product.name == "Mock Product"
        assert product.faq_data
