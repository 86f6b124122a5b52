"""
Error types and their HTTP translation.

Business rule violations are raised as ``ProductValidationError`` by
the service layer.  ``product_validation_error_handler`` is registered
on the application and turns them into a 400 response carrying an
``ErrorResponseBody``.
"""

import logging
from datetime import datetime

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from product_store_api.app.schemas.product import ErrorResponseBody


logger = logging.getLogger(__name__)


class ProductValidationError(Exception):
    """Raised when product data or a product type filter is rejected."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


async def product_validation_error_handler(request: Request, exc: ProductValidationError) -> JSONResponse:
    """Render a ``ProductValidationError`` as a 400 ``ErrorResponseBody``."""
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    body = ErrorResponseBody(
        timestamp=datetime.now(),
        status=status.HTTP_400_BAD_REQUEST,
        error=exc.message,
        path=request.url.path,
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=jsonable_encoder(body))
