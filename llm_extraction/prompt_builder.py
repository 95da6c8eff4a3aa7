"""Prompt builder for product page extraction."""

import json
from typing import Optional

SYSTEM_PROMPT = (
    "You are a product data extraction specialist. Extract structured product "
    "information from webpage content and return valid JSON only."
)

_OUTPUT_TEMPLATE = json.dumps(
    {
        "name": "Product name",
        "slug": "url-friendly-slug",
        "description": "Brief 1-2 sentence description",
        "rich_description": "Detailed HTML description with features and benefits",
        "image_url": "Main product image URL (absolute URL)",
        "original_price": 99.99,
        "discounted_price": 49.99,
        "currency": "USD",
        "affiliate_link": "Product purchase/demo link",
        "cta_button_text": "Main call-to-action text",
        "product_type": "software|tool|course|template|other",
        "product_tags": ["tag1", "tag2", "tag3"],
        "meta_title": "SEO optimized title",
        "meta_description": "SEO meta description",
        "keywords": ["keyword1", "keyword2"],
        "focus_keyword": "main SEO keyword",
        "faq_data": [
            {"question": "Q1?", "answer": "A1"},
            {"question": "Q2?", "answer": "A2"},
        ],
        "howto_data": [
            {"step": 1, "title": "Step title", "description": "Step description"},
        ],
        "features": ["Feature 1", "Feature 2", "Feature 3"],
        "benefits": ["Benefit 1", "Benefit 2", "Benefit 3"],
        "use_cases": ["Use case 1", "Use case 2"],
        "pros": ["Pro 1", "Pro 2"],
        "cons": ["Con 1"],
        "pricing_tiers": [
            {"name": "Pro", "price": 19.0, "billing_period": "month", "features": ["Feature"]},
        ],
        "stats_data": {"users": 10000, "satisfaction_rate": 95, "time_saved": "50%"},
        "suggested_category": "ai-tools",
        "confidence_scores": {"name": 0.95, "description": 0.9, "pricing": 0.85, "overall": 0.9},
    },
    indent=2,
)

_RULES = """\
Rules:
- Extract actual content from the webpage.
- If pricing is not found, set the price fields to null.
- Use the product URL for affiliate_link if no specific link is found.
- Generate slug from the product name (lowercase, hyphens).
- Identify product_type from the content.
- Extract or generate relevant keywords.
- Create FAQ entries from the content or return an empty array.
- Suggest the best matching category.
- Provide confidence scores (0.0 to 1.0) for data quality.
- Return a single JSON object and nothing else.
"""


class ProductPromptBuilder:
    """Builds the extraction prompt for one product page.

    Embeds the page URL, scraped metadata and the plain-text rendering of
    the page, followed by the fixed output structure and rules.
    """

    def build_prompt(
        self,
        *,
        url: str,
        content: str,
        title: Optional[str] = None,
        description: Optional[str] = None,
        image_url: Optional[str] = None,
    ) -> str:
        """Build the user prompt.

        Args:
            url: The product page URL.
            content: Plain-text page content, already truncated.
            title: Page title (``<title>`` or og:title).
            description: Meta or og description.
            image_url: og:image URL.

        Returns:
            A fully formatted prompt string.
        """
        return (
            "Analyze this product webpage and extract structured information.\n\n"
            f"URL: {url}\n"
            f"Meta Title: {title or 'N/A'}\n"
            f"Meta Description: {description or 'N/A'}\n"
            f"Meta Image: {image_url or 'N/A'}\n"
            f"Content:\n{content or 'N/A'}\n\n"
            "Extract and return ONLY valid JSON with this exact structure:\n"
            f"{_OUTPUT_TEMPLATE}\n\n"
            f"{_RULES}"
        )
