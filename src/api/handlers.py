"""Exception handlers for the FastAPI application."""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.engine.errors import ValidationError

logger = logging.getLogger(__name__)


def create_error_response(status_code: int, error: str, details: list[str] | None = None) -> JSONResponse:
    content: dict = {"error": error}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


async def loan_validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Invalid loan inputs: 400 with every violation."""
    return create_error_response(status.HTTP_400_BAD_REQUEST, exc.message, exc.details)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Body that is not a JSON object: same shape as a loan validation failure."""
    details = []
    for error in exc.errors():
        loc = ".".join(str(part) for part in error.get("loc", ()))
        details.append(f"{loc}: {error.get('msg', '')}" if loc else error.get("msg", ""))
    return create_error_response(status.HTTP_400_BAD_REQUEST, "Invalid input", details)


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything else, CalculationError included: generic 500, traceback to the log."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return create_error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error")
