"""
BeautifulSoup-based parsing layer for product pages.
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup, Tag

from app.extraction.types import PageMetadata

DEFAULT_MAX_CONTENT_CHARS = 15000

_WHITESPACE = re.compile(r"\s+")
_ANGLE_BRACKETS = re.compile(r"[<>]")


class HTMLParsingLayer:
    """
    Deterministic metadata and text extraction for HTML documents.
    """

    @classmethod
    def extract_metadata(cls, html: str) -> PageMetadata:
        """
        Recover ``<title>``, meta description, og:title, og:description and
        og:image. Each is independent; a missing one stays ``None``.
        """

        soup = BeautifulSoup(html or "", "html.parser")
        return PageMetadata(
            title=cls._extract_title(soup),
            description=cls._meta_content(soup, attribute="name", value="description"),
            og_title=cls._meta_content(soup, attribute="property", value="og:title"),
            og_description=cls._meta_content(soup, attribute="property", value="og:description"),
            og_image=cls._meta_content(soup, attribute="property", value="og:image"),
        )

    @classmethod
    def extract_text(cls, html: str, *, max_chars: int = DEFAULT_MAX_CONTENT_CHARS) -> str:
        """
        Plain-text rendering: scripts and styles dropped, tags stripped,
        no ``<``/``>`` left, whitespace collapsed, truncated to ``max_chars``.
        """

        soup = BeautifulSoup(html or "", "html.parser")
        for node in soup(["script", "style"]):
            node.decompose()
        text = soup.get_text(" ")
        text = _ANGLE_BRACKETS.sub(" ", text)
        text = cls._clean_text(text)
        return text[: max(0, max_chars)].rstrip()

    @staticmethod
    def _extract_title(soup: BeautifulSoup) -> str | None:
        node = soup.find("title")
        if not isinstance(node, Tag):
            return None
        title = node.get_text().strip()
        return title or None

    @staticmethod
    def _meta_content(soup: BeautifulSoup, *, attribute: str, value: str) -> str | None:
        for node in soup.find_all("meta"):
            raw = node.get(attribute)
            if not isinstance(raw, str) or raw.strip().lower() != value:
                continue
            content = node.get("content")
            if isinstance(content, str) and content.strip():
                return content.strip()
        return None

    @staticmethod
    def _clean_text(value: str) -> str:
        return _WHITESPACE.sub(" ", value).strip()
