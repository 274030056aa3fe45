"""Fixed-rate amortization with optional extra principal.

Pure functions: raw mapping in, dataclass out. No I/O.
"""

import logging
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any

from src.engine.errors import CalculationError, ValidationError
from src.models.loan import CalculationResult, LoanRequest, ScheduleEntry, ScheduleSummary

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")
RESIDUE = Decimal("1e-12")  # Arithmetic leftovers, far below a cent
MAX_YEARS = 100
SAFETY_MONTHS = 600  # Extra iterations allowed past the planned term


def _cents(value: Decimal) -> Decimal:
    return value.quantize(TWO_PLACES, ROUND_HALF_UP)


def to_decimal(value: Any) -> Decimal | None:
    """Convert a number or numeric string to Decimal.

    Returns None for anything else (bools, blank or non-numeric strings,
    NaN, infinities) so the caller can report it instead of computing with it.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, (int, float)):
        number = Decimal(str(value))
    elif isinstance(value, str):
        try:
            number = Decimal(value.strip())
        except InvalidOperation:
            return None
    else:
        return None
    return number if number.is_finite() else None


def validate_request(raw: Mapping[str, Any]) -> LoanRequest:
    """Coerce and check raw loan inputs, reporting every violation at once.

    Keys follow the wire format: price, downPayment, annualRate, years,
    extraMonthly. downPayment and extraMonthly default to 0.
    """
    values: dict[str, Decimal | None] = {}
    errors: list[str] = []
    for key in ("price", "downPayment", "annualRate", "years", "extraMonthly"):
        value = raw.get(key)
        if isinstance(value, str):
            value = value.strip()
        if key in ("downPayment", "extraMonthly") and value in (None, ""):
            value = 0
        values[key] = to_decimal(value)
        if values[key] is None:
            errors.append(f"{key} must be a number")

    price = values["price"]
    down_payment = values["downPayment"]
    annual_rate = values["annualRate"]
    years = values["years"]
    extra_monthly = values["extraMonthly"]

    if price is not None and not price > 0:
        errors.append("price must be > 0")
    if down_payment is not None and not down_payment >= 0:
        errors.append("downPayment must be >= 0")
    if years is not None and not years > 0:
        errors.append("years must be > 0")
    if annual_rate is not None and not annual_rate >= 0:
        errors.append("annualRate must be >= 0")
    if price is not None and down_payment is not None and down_payment >= price:
        errors.append("downPayment must be less than price")
    if extra_monthly is not None and not extra_monthly >= 0:
        errors.append("extraMonthly must be >= 0")
    # A term shorter than half a month rounds to zero installments
    if years is not None and years > 0 and (years * 12).to_integral_value(rounding=ROUND_HALF_UP) < 1:
        errors.append("years must cover at least one monthly payment")
    if years is not None and years > MAX_YEARS:
        errors.append(f"years must be <= {MAX_YEARS}")

    if errors:
        logger.debug("Rejected loan request: %s", errors)
        raise ValidationError(errors)

    return LoanRequest(
        price=price,
        down_payment=down_payment,
        annual_rate=annual_rate,
        years=years,
        extra_monthly=extra_monthly,
    )


def base_payment(principal: Decimal, monthly_rate: Decimal, num_payments: int) -> Decimal:
    """Level monthly payment that retires ``principal`` in ``num_payments``.

    Unrounded; callers round when emitting.
    """
    if num_payments < 1:
        raise CalculationError(f"num_payments must be >= 1, got {num_payments}")
    if monthly_rate == 0:
        return principal / num_payments

    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + monthly_rate) ** num_payments
    return principal * (monthly_rate * factor) / (factor - 1)


def build_schedule(
    principal: Decimal,
    monthly_rate: Decimal,
    scheduled_payment: Decimal,
    planned_payments: int,
    safety_months: int = SAFETY_MONTHS,
) -> list[ScheduleEntry]:
    """Simulate month-by-month payoff until the balance reaches zero.

    Each row is rounded to cents when appended, so totals built from the rows
    can drift a few cents from the unrounded simulation. The loop gives up
    after ``planned_payments + safety_months`` months; the returned schedule
    then ends with a positive balance.
    """
    schedule: list[ScheduleEntry] = []
    balance = principal
    month = 0
    limit = planned_payments + safety_months

    while balance > 0 and month < limit:
        month += 1
        interest = Decimal("0") if monthly_rate == 0 else balance * monthly_rate
        principal_paid = scheduled_payment - interest

        # Final installment covers only what is left, including arithmetic residue
        if principal_paid > balance or balance - principal_paid < RESIDUE:
            principal_paid = balance
        # Interest-free loans: close out a leftover cent instead of an extra month
        elif monthly_rate == 0 and balance - principal_paid <= TWO_PLACES:
            principal_paid = balance

        new_balance = balance - principal_paid

        schedule.append(ScheduleEntry(
            month=month,
            interest=_cents(interest),
            principal=_cents(principal_paid),
            payment=_cents(principal_paid + interest),
            balance=_cents(new_balance),
        ))

        balance = new_balance

    if balance > 0:
        logger.warning(
            "Schedule stopped at safety bound after %d months with %s outstanding",
            month, _cents(balance),
        )
    return schedule


def summarize(schedule: list[ScheduleEntry]) -> ScheduleSummary:
    """Totals over the rounded schedule rows."""
    return ScheduleSummary(
        total_interest=sum((e.interest for e in schedule), Decimal("0")),
        total_payment=sum((e.payment for e in schedule), Decimal("0")),
        months_to_payoff=len(schedule),
    )


def yearly_summary(schedule: list[ScheduleEntry]) -> list[dict[str, Any]]:
    """Aggregate schedule rows into 12-month blocks.

    Returns list of dicts with keys: year, principal, interest, payment, ending_balance.
    The last block may be shorter than 12 months.
    """
    yearly: list[dict[str, Any]] = []
    year_principal = Decimal("0")
    year_interest = Decimal("0")
    year_payment = Decimal("0")

    for e in schedule:
        year_principal += e.principal
        year_interest += e.interest
        year_payment += e.payment

        if e.month % 12 == 0 or e.month == len(schedule):
            yearly.append({
                "year": (e.month - 1) // 12 + 1,
                "principal": year_principal,
                "interest": year_interest,
                "payment": year_payment,
                "ending_balance": e.balance,
            })
            year_principal = Decimal("0")
            year_interest = Decimal("0")
            year_payment = Decimal("0")

    return yearly


def calculate(raw: Mapping[str, Any], safety_months: int = SAFETY_MONTHS) -> CalculationResult:
    """Validate ``raw`` and produce the full amortization result.

    Raises ValidationError for bad input and CalculationError if the
    arithmetic fails on input that passed validation.
    """
    req = validate_request(raw)
    principal = req.principal
    monthly_rate = req.monthly_rate
    planned = req.planned_payments

    try:
        payment = base_payment(principal, monthly_rate, planned)
        scheduled = payment + req.extra_monthly
        schedule = build_schedule(principal, monthly_rate, scheduled, planned, safety_months)
    except ArithmeticError as e:
        raise CalculationError(f"amortization failed: {e}") from e

    totals = summarize(schedule)
    paid_off = bool(schedule) and schedule[-1].balance == 0
    logger.debug(
        "Amortized %s at %s%% over %d planned months: paid off in %d",
        principal, req.annual_rate, planned, totals.months_to_payoff,
    )

    return CalculationResult(
        inputs=req,
        principal=_cents(principal),
        monthly_rate=monthly_rate,
        planned_payments=planned,
        base_payment=_cents(payment),
        scheduled_payment=_cents(scheduled),
        total_interest=_cents(totals.total_interest),
        total_payment=_cents(totals.total_payment),
        months_to_payoff=totals.months_to_payoff,
        paid_off=paid_off,
        schedule=schedule,
    )
