"""Canonical loan fixtures used across engine, API and CLI tests.

Standard: $300K purchase, $60K down, 6% annual, 30yr fixed.
Interest-free: $120K, nothing down, 0%, 10yr.
"""

import pytest
from fastapi.testclient import TestClient

from src.api.app import app


@pytest.fixture
def standard_loan() -> dict:
    """$240K financed at 6% for 30 years."""
    return {
        "price": 300000,
        "downPayment": 60000,
        "annualRate": 6,
        "years": 30,
        "extraMonthly": 0,
    }


@pytest.fixture
def accelerated_loan(standard_loan) -> dict:
    """Standard loan with $500/mo extra principal."""
    return {**standard_loan, "extraMonthly": 500}


@pytest.fixture
def interest_free_loan() -> dict:
    """$120K at 0% for 10 years: exactly $1,000/mo."""
    return {
        "price": 120000,
        "downPayment": 0,
        "annualRate": 0,
        "years": 10,
        "extraMonthly": 0,
    }


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)
