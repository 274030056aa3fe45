"""Amortization engine exceptions."""


class LoanError(Exception):
    """Base class for errors raised while computing a loan schedule."""


class ValidationError(LoanError):
    """One or more loan inputs violate their constraints.

    ``details`` holds every violation found, in field order, so a caller can
    fix all of them in one round trip.
    """

    def __init__(self, details: list[str]):
        super().__init__("Invalid input")
        self.message = "Invalid input"
        self.details = list(details)


class CalculationError(LoanError):
    """Unexpected failure after validation (payment formula or schedule loop)."""
