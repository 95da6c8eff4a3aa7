"""Parsing layer for raw completion replies.

Locates the JSON object inside a free-text reply and validates it against
the ExtractedProduct schema.
"""

import json
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from llm_extraction.schema import ExtractedProduct


class ReplyParseError(Exception):
    """Raised when a completion reply cannot be turned into a product draft.

    Attributes:
        stage: Which step failed ("locate", "json_parse" or "schema").
        errors: List of human-readable error descriptions.
        raw_response: The original reply, kept for diagnostics.
    """

    def __init__(
        self,
        stage: str,
        errors: List[str],
        raw_response: str,
    ) -> None:
        self.stage = stage
        self.errors = errors
        self.raw_response = raw_response
        message = (
            f"Completion reply could not be parsed at stage '{stage}': "
            + "; ".join(errors)
        )
        super().__init__(message)


def extract_json_object(text: str) -> Optional[str]:
    """Return the first balanced ``{...}`` substring of ``text``.

    Braces inside JSON string literals (including escaped quotes) are
    ignored while balancing. Returns ``None`` when no opening brace is
    ever closed.

    Args:
        text: Raw reply, possibly wrapped in prose or markdown fences.

    Returns:
        The candidate JSON object text, or ``None``.
    """
    if not text:
        return None

    start = text.find("{")
    while start != -1:
        end = _matching_brace(text, start)
        if end is not None:
            return text[start : end + 1]
        start = text.find("{", start + 1)
    return None


def _matching_brace(text: str, start: int) -> Optional[int]:
    depth = 0
    in_string = False
    escaped = False
    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return index
    return None


def parse_extracted_product(raw_response: str) -> ExtractedProduct:
    """Parse and validate a raw completion reply.

    Steps:
        1. Locate the first balanced JSON object.
        2. Parse it as JSON.
        3. Validate against the ExtractedProduct model.

    Args:
        raw_response: The reply text returned by the completion adapter.

    Returns:
        A validated ExtractedProduct.

    Raises:
        ReplyParseError: If any step fails.
    """
    candidate = extract_json_object(raw_response or "")
    if candidate is None:
        raise ReplyParseError(
            stage="locate",
            errors=["no JSON object found in completion reply"],
            raw_response=raw_response,
        )

    try:
        data: Any = json.loads(candidate)
    except (ValueError, TypeError, RecursionError) as exc:
        raise ReplyParseError(
            stage="json_parse",
            errors=[str(exc)],
            raw_response=raw_response,
        ) from exc

    if not isinstance(data, dict):
        raise ReplyParseError(
            stage="schema",
            errors=["top-level JSON must be an object"],
            raw_response=raw_response,
        )

    try:
        return ExtractedProduct.model_validate(data)
    except ValidationError as exc:
        errors = [
            f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
            for e in exc.errors()
        ]
        raise ReplyParseError(
            stage="schema",
            errors=errors,
            raw_response=raw_response,
        ) from exc


def product_to_payload(product: ExtractedProduct) -> Dict[str, Any]:
    """Serialize a draft for the wire, dropping unset optional scalars."""
    return product.model_dump(mode="json", exclude_none=True)
