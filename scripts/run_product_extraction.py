"""
Run product metadata extraction for one URL from the CLI.
"""

from __future__ import annotations

import argparse
import json
import logging
import os

from app.services.product_extraction_service import get_product_extraction_service


def main() -> int:
    parser = argparse.ArgumentParser(description="Draft a product record from a product page URL.")
    parser.add_argument("--url", dest="url", required=True, help="Product page URL (http/https).")
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, os.getenv("LOG_LEVEL", "INFO").strip().upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    status_code, response = get_product_extraction_service().run(args.url)
    print(json.dumps(response.model_dump(mode="json"), indent=2))
    return 0 if status_code == 200 else 1


if __name__ == "__main__":
    raise SystemExit(main())
