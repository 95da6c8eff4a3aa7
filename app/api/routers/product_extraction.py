"""
app/api/routers/product_extraction.py

Product metadata extraction endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.schemas.product_extraction import ExtractionErrorResponse, ProductExtractionRequest
from app.services.product_extraction_service import (
    ProductExtractionService,
    get_product_extraction_service,
)

router = APIRouter(tags=["product-extraction"])


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ExtractionErrorResponse(error=message).model_dump(mode="json"),
    )


@router.post("/extract-product-info")
async def extract_product_info(
    request: Request,
    extraction_service: ProductExtractionService = Depends(get_product_extraction_service),
) -> JSONResponse:
    """
    Fetch a product page and return an AI-drafted product record.

    Always answers with the ``{success, ...}`` envelope.
    """

    try:
        body = await request.json()
    except ValueError:
        return _error(status.HTTP_400_BAD_REQUEST, "Request body must be a JSON object")

    if not isinstance(body, dict):
        return _error(status.HTTP_400_BAD_REQUEST, "Request body must be a JSON object")

    try:
        payload = ProductExtractionRequest.model_validate(body)
    except ValidationError:
        return _error(status.HTTP_400_BAD_REQUEST, "Product URL must be a string")

    status_code, response = await run_in_threadpool(extraction_service.run, payload.url)
    return JSONResponse(status_code=status_code, content=response.model_dump(mode="json"))
