"""
tests/test_html_parsers.py

Metadata and plain-text extraction from product pages.
"""

from __future__ import annotations

from app.extraction.html_parsers import HTMLParsingLayer
from tests.fakes import PRODUCT_PAGE_HTML


class TestExtractMetadata:
    def test_reads_title_description_and_open_graph(self) -> None:
        metadata = HTMLParsingLayer.extract_metadata(PRODUCT_PAGE_HTML)

        assert metadata.title == "Acme Widget Pro"
        assert metadata.description == "The best widget for teams."
        assert metadata.og_title == "Acme Widget Pro | Acme"
        assert metadata.og_description is None
        assert metadata.og_image == "https://acme.test/widget.png"

    def test_missing_tags_leave_fields_empty(self) -> None:
        metadata = HTMLParsingLayer.extract_metadata("<html><body>hello</body></html>")

        assert metadata.title is None
        assert metadata.description is None
        assert metadata.og_image is None
        assert metadata.effective_title is None

    def test_effective_fields_fall_back_to_open_graph(self) -> None:
        html = (
            '<meta property="og:title" content="OG Title">'
            '<meta property="og:description" content="OG description">'
        )
        metadata = HTMLParsingLayer.extract_metadata(html)

        assert metadata.effective_title == "OG Title"
        assert metadata.effective_description == "OG description"

    def test_meta_attribute_match_is_case_insensitive(self) -> None:
        metadata = HTMLParsingLayer.extract_metadata('<META NAME="Description" CONTENT="Shouty">')

        assert metadata.description == "Shouty"

    def test_entities_are_decoded_in_title_and_meta(self) -> None:
        html = (
            "<html><head><title>Tom &amp; Jerry</title>"
            '<meta name="description" content="Cats &amp; mice &quot;live&quot;">'
            "</head></html>"
        )

        metadata = HTMLParsingLayer.extract_metadata(html)

        assert metadata.title == "Tom & Jerry"
        assert metadata.description == 'Cats & mice "live"'

    def test_empty_document(self) -> None:
        metadata = HTMLParsingLayer.extract_metadata("")

        assert metadata.title is None


class TestExtractText:
    def test_drops_scripts_and_styles_and_collapses_whitespace(self) -> None:
        text = HTMLParsingLayer.extract_text(PRODUCT_PAGE_HTML)

        assert "window.tracking" not in text
        assert "color: red" not in text
        assert "Only $49 per month." in text
        assert "  " not in text
        assert text == text.strip()

    def test_output_never_contains_angle_brackets(self) -> None:
        text = HTMLParsingLayer.extract_text("<p>1 &lt; 2 and &lt;b&gt;bold&lt;/b&gt;</p>")

        assert "<" not in text
        assert ">" not in text
        assert "bold" in text

    def test_truncates_to_max_chars(self) -> None:
        html = "<p>" + ("word " * 5000) + "</p>"

        text = HTMLParsingLayer.extract_text(html, max_chars=100)

        assert len(text) <= 100

    def test_default_limit_is_fifteen_thousand_chars(self) -> None:
        html = "<p>" + ("x" * 20000) + "</p>"

        assert len(HTMLParsingLayer.extract_text(html)) == 15000
