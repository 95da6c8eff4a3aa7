"""
tests/test_product_validator.py

JSON location, schema validation and missing-field reporting for
completion replies.
"""

from __future__ import annotations

import pytest

from llm_extraction.schema import EXPECTED_FIELDS, ExtractedProduct, compute_missing_fields
from llm_extraction.validator import (
    ReplyParseError,
    extract_json_object,
    parse_extracted_product,
    product_to_payload,
)


class TestExtractJsonObject:
    def test_finds_object_inside_prose_and_fences(self) -> None:
        reply = 'Here you go:\n```json\n{"name": "Acme", "features": ["a"]}\n```\nThanks!'

        assert extract_json_object(reply) == '{"name": "Acme", "features": ["a"]}'

    def test_balances_nested_objects(self) -> None:
        reply = 'x {"a": {"b": {"c": 1}}, "d": 2} trailing {"e": 3}'

        assert extract_json_object(reply) == '{"a": {"b": {"c": 1}}, "d": 2}'

    def test_ignores_braces_inside_strings(self) -> None:
        reply = '{"description": "use {curly} braces \\" here }", "name": "x"}'

        assert extract_json_object(reply) == reply

    def test_returns_none_without_object(self) -> None:
        assert extract_json_object("no json here") is None
        assert extract_json_object("") is None
        assert extract_json_object("{ never closed") is None


class TestParseExtractedProduct:
    def test_valid_reply(self) -> None:
        product = parse_extracted_product(
            '{"name": " Acme ", "original_price": "$1,299.00", "faq_data": '
            '[{"question": "Q?", "answer": "A."}], "howto_data": null}'
        )

        assert product.name == "Acme"
        assert product.original_price == pytest.approx(1299.0)
        assert product.faq_data[0].question == "Q?"
        assert product.howto_data == []

    def test_unknown_keys_are_kept(self) -> None:
        product = parse_extracted_product('{"name": "Acme", "launch_year": 2021}')

        assert product_to_payload(product)["launch_year"] == 2021

    def test_bare_string_becomes_single_item_list(self) -> None:
        product = parse_extracted_product('{"features": "Fast sync", "benefits": null}')

        assert product.features == ["Fast sync"]
        assert product.benefits == []

    def test_runaway_nesting_fails_at_parse_stage(self) -> None:
        reply = '{"specs": ' + "[" * 100_000 + "]" * 100_000 + "}"

        with pytest.raises(ReplyParseError) as exc_info:
            parse_extracted_product(reply)

        assert exc_info.value.stage == "json_parse"

    def test_structured_list_entries_become_readable_text(self) -> None:
        product = parse_extracted_product(
            '{"features": [{"title": "Sync", "description": "Across devices"}, '
            '{"label": "Offline", "icon": "cloud"}, "Plain"]}'
        )

        assert product.features == ["Sync: Across devices", "Offline - cloud", "Plain"]

    def test_faq_answer_may_be_null(self) -> None:
        product = parse_extracted_product(
            '{"faq_data": [{"question": "Is there a trial?", "answer": null}]}'
        )

        assert product.faq_data[0].question == "Is there a trial?"
        assert product.faq_data[0].answer is None

    def test_bare_pricing_tier_names_become_objects(self) -> None:
        product = parse_extracted_product(
            '{"pricing_tiers": ["Free", {"name": "Pro", "price": 10}, 3, " "]}'
        )

        assert product.pricing_tiers == [{"name": "Free"}, {"name": "Pro", "price": 10}]

    def test_no_object_fails_at_locate_stage(self) -> None:
        with pytest.raises(ReplyParseError) as exc_info:
            parse_extracted_product("Sorry, I cannot help with that.")

        assert exc_info.value.stage == "locate"
        assert exc_info.value.raw_response == "Sorry, I cannot help with that."

    def test_invalid_json_fails_at_parse_stage(self) -> None:
        with pytest.raises(ReplyParseError) as exc_info:
            parse_extracted_product("{name: 'single quotes'}")

        assert exc_info.value.stage == "json_parse"

    def test_wrong_types_fail_at_schema_stage(self) -> None:
        with pytest.raises(ReplyParseError) as exc_info:
            parse_extracted_product('{"faq_data": [{"answer": "an answer without a question"}]}')

        assert exc_info.value.stage == "schema"
        assert exc_info.value.errors


class TestComputeMissingFields:
    def test_everything_missing_for_empty_draft(self) -> None:
        payload = product_to_payload(ExtractedProduct())

        assert compute_missing_fields(payload) == list(EXPECTED_FIELDS)

    def test_blank_and_empty_values_are_missing(self) -> None:
        payload = {
            "name": "Acme",
            "description": "   ",
            "rich_description": "<p>Rich</p>",
            "image_url": "https://acme.test/a.png",
            "original_price": 10,
            "faq_data": [],
            "howto_data": [{"step": 1}],
            "features": ["x"],
            "benefits": {},
        }

        assert compute_missing_fields(payload) == ["description", "faq_data", "benefits"]

    def test_zero_price_is_present(self) -> None:
        payload = {field: "x" for field in EXPECTED_FIELDS}
        payload["original_price"] = 0

        assert compute_missing_fields(payload) == []

    def test_only_expected_fields_are_reported(self) -> None:
        payload = {field: "x" for field in EXPECTED_FIELDS}

        assert compute_missing_fields(payload) == []
