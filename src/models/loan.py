from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP


@dataclass(frozen=True)
class LoanRequest:
    """Validated loan inputs. Rates are in percent (6 means 6%)."""
    price: Decimal
    annual_rate: Decimal
    years: Decimal
    down_payment: Decimal = Decimal("0")
    extra_monthly: Decimal = Decimal("0")  # Applied to principal every month

    @property
    def principal(self) -> Decimal:
        return self.price - self.down_payment

    @property
    def planned_payments(self) -> int:
        """Nominal installment count, half-up rounded (2.5 months -> 3)."""
        return int((self.years * 12).to_integral_value(rounding=ROUND_HALF_UP))

    @property
    def monthly_rate(self) -> Decimal:
        return self.annual_rate / 100 / 12


@dataclass(frozen=True)
class ScheduleEntry:
    month: int
    interest: Decimal
    principal: Decimal
    payment: Decimal  # interest + principal, rounded once
    balance: Decimal  # Remaining principal after this payment


@dataclass(frozen=True)
class ScheduleSummary:
    total_interest: Decimal = Decimal("0")
    total_payment: Decimal = Decimal("0")
    months_to_payoff: int = 0


@dataclass(frozen=True)
class CalculationResult:
    inputs: LoanRequest
    principal: Decimal
    monthly_rate: Decimal  # Unrounded
    planned_payments: int
    base_payment: Decimal
    scheduled_payment: Decimal  # base_payment + extra_monthly
    total_interest: Decimal
    total_payment: Decimal
    months_to_payoff: int
    paid_off: bool  # False when the schedule stopped at the safety bound
    schedule: list[ScheduleEntry] = field(default_factory=list)
