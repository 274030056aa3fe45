"""Calculation routes: the primary API entry point."""

from typing import Any

from fastapi import APIRouter, Body

from src.api.schemas import CalculationResponse, ErrorResponse, result_to_response
from src.config import settings
from src.engine.amortization import calculate

router = APIRouter(prefix="/api", tags=["calc"])


@router.post(
    "/calc",
    response_model=CalculationResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def calc(body: dict[str, Any] | None = Body(None)):
    """Loan inputs → summary plus month-by-month schedule.

    Fields may be numbers or numeric strings. downPayment and extraMonthly
    are optional. Validation failures are handled by the app's exception
    handlers and come back as 400 with the full list of problems.
    """
    result = calculate(body or {}, safety_months=settings.safety_months)
    return result_to_response(result)


@router.get("/health")
def health():
    return {"ok": True}
