"""Pydantic schemas for API responses.

Field names are snake_case in Python and camelCase on the wire. Decimal
amounts serialize as JSON numbers.
"""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

from src.models.loan import CalculationResult

Number = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---- Response schemas ----

class LoanInputsResponse(CamelModel):
    price: Number
    down_payment: Number
    annual_rate: Number
    years: Number
    extra_monthly: Number


class ScheduleEntryResponse(CamelModel):
    month: int
    interest: Number
    principal: Number
    payment: Number
    balance: Number


class CalculationResponse(CamelModel):
    inputs: LoanInputsResponse
    principal: Number
    monthly_rate: Number
    num_payments_planned: int
    monthly_payment_base: Number
    monthly_payment_with_extra: Number
    total_interest: Number
    total_payment: Number
    months_to_payoff: int
    paid_off: bool
    schedule: list[ScheduleEntryResponse]


class ErrorResponse(BaseModel):
    error: str
    details: list[str] | None = None


def result_to_response(result: CalculationResult) -> CalculationResponse:
    """Convert engine CalculationResult to API response."""
    req = result.inputs
    return CalculationResponse(
        inputs=LoanInputsResponse(
            price=req.price,
            down_payment=req.down_payment,
            annual_rate=req.annual_rate,
            years=req.years,
            extra_monthly=req.extra_monthly,
        ),
        principal=result.principal,
        monthly_rate=result.monthly_rate,
        num_payments_planned=result.planned_payments,
        monthly_payment_base=result.base_payment,
        monthly_payment_with_extra=result.scheduled_payment,
        total_interest=result.total_interest,
        total_payment=result.total_payment,
        months_to_payoff=result.months_to_payoff,
        paid_off=result.paid_off,
        schedule=[
            ScheduleEntryResponse(
                month=e.month,
                interest=e.interest,
                principal=e.principal,
                payment=e.payment,
                balance=e.balance,
            )
            for e in result.schedule
        ],
    )
