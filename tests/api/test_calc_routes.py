from unittest.mock import patch

from fastapi.testclient import TestClient

from src.api.app import app
from src.engine.errors import CalculationError


class TestCalcEndpoint:
    def test_standard_scenario(self, client, standard_loan):
        r = client.post("/api/calc", json=standard_loan)
        assert r.status_code == 200
        data = r.json()
        assert data["principal"] == 240000
        assert data["monthlyRate"] == 0.005
        assert data["numPaymentsPlanned"] == 360
        assert data["monthlyPaymentBase"] == 1438.92
        assert data["monthlyPaymentWithExtra"] == 1438.92
        assert data["monthsToPayoff"] == 360
        assert data["paidOff"] is True
        assert len(data["schedule"]) == 360
        assert data["schedule"][-1]["balance"] == 0

    def test_response_shape(self, client, accelerated_loan):
        data = client.post("/api/calc", json=accelerated_loan).json()
        assert set(data) == {
            "inputs", "principal", "monthlyRate", "numPaymentsPlanned",
            "monthlyPaymentBase", "monthlyPaymentWithExtra", "totalInterest",
            "totalPayment", "monthsToPayoff", "paidOff", "schedule",
        }
        assert data["inputs"] == {
            "price": 300000, "downPayment": 60000, "annualRate": 6,
            "years": 30, "extraMonthly": 500,
        }
        assert set(data["schedule"][0]) == {"month", "interest", "principal", "payment", "balance"}
        assert data["schedule"][0]["month"] == 1
        assert isinstance(data["totalInterest"], float)

    def test_extra_payment_shortens_schedule(self, client, standard_loan, accelerated_loan):
        base = client.post("/api/calc", json=standard_loan).json()
        extra = client.post("/api/calc", json=accelerated_loan).json()
        assert extra["monthsToPayoff"] < base["monthsToPayoff"]
        assert extra["totalInterest"] < base["totalInterest"]

    def test_numeric_strings_accepted(self, client):
        r = client.post("/api/calc", json={"price": "120000", "annualRate": "0", "years": "10"})
        assert r.status_code == 200
        assert r.json()["monthlyPaymentBase"] == 1000

    def test_validation_error(self, client):
        r = client.post("/api/calc", json={"price": -1, "annualRate": 5, "years": -1})
        assert r.status_code == 400
        data = r.json()
        assert data["error"] == "Invalid input"
        assert "price must be > 0" in data["details"]
        assert "years must be > 0" in data["details"]

    def test_down_payment_equal_to_price(self, client):
        r = client.post("/api/calc", json={"price": 1000, "downPayment": 1000, "annualRate": 5, "years": 1})
        assert r.status_code == 400
        assert r.json()["details"] == ["downPayment must be less than price"]

    def test_missing_body(self, client):
        r = client.post("/api/calc")
        assert r.status_code == 400
        assert "price must be a number" in r.json()["details"]

    def test_non_object_body(self, client):
        r = client.post("/api/calc", json=[1, 2, 3])
        assert r.status_code == 400
        assert r.json()["error"] == "Invalid input"

    def test_internal_error_is_generic(self, standard_loan):
        client = TestClient(app, raise_server_exceptions=False)
        with patch("src.api.routes.calc.calculate", side_effect=CalculationError("division by zero")):
            r = client.post("/api/calc", json=standard_loan)
        assert r.status_code == 500
        assert r.json() == {"error": "Server error"}


class TestHealth:
    def test_health(self, client):
        r = client.get("/api/health")
        assert r.status_code == 200
        assert r.json() == {"ok": True}
