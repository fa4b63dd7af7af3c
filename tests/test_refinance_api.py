"""
Tests for the refinance API endpoints.
"""

from unittest.mock import patch


def create_compare_payload():
    return {
        "mortgageBalance": 500000,
        "currentApr": 0.065,
        "currentTermYears": 30,
        "offerRate": 0.0575,
        "offerTermYears": 30,
        "debts": [
            {"balance": 5000, "minPayment": 150, "include": True},
            {"balance": 10000, "minPayment": 300, "include": True},
            {"balance": 4000, "minPayment": 120, "include": True},
        ],
    }


class TestCompareEndpoint:
    """Test cases for POST /api/refinance/compare."""

    def test_compare_returns_all_scenarios(self, client):
        """Test a successful comparison."""
        response = client.post("/api/refinance/compare", json=create_compare_payload())

        assert response.status_code == 200
        data = response.get_json()
        for key in (
            "cashOut",
            "cashOutSamePayment",
            "termReduction",
            "termReductionSamePayment",
            "rateReduction",
            "debtConsolidation",
            "debtConsolidationSamePayment",
        ):
            assert key in data

        rate_reduction = data["rateReduction"]
        assert rate_reduction["newBalance"] == 515000
        assert rate_reduction["closingCosts"] == 15000
        assert rate_reduction["oldPayment"] == 3160.34
        assert "effectiveRatePct" not in rate_reduction
        assert data["debtConsolidation"]["rolledBalance"] == 19000
        assert data["debtConsolidation"]["droppedMinPayments"] == 570
        assert data["warnings"] == []

    def test_compare_saved_scenario(self, client):
        """Test a saved scenario record with percent rates."""
        payload = {
            "scenario": {
                "name": "Smith refi",
                "clientName": "Pat Smith",
                "propertyAddress": "12 Elm St",
                "mortgageBalance": 500000,
                "closingCosts": 20000,
                "offerRate": 5.75,
                "offerTerm": 30,
                "currentApr": 6.5,
                "currentTerm": 30,
            }
        }
        response = client.post("/api/refinance/compare", json=payload)

        assert response.status_code == 200
        assert response.get_json()["rateReduction"]["offerRatePct"] == 5.75

    def test_invalid_input_returns_400(self, client):
        """Test validation errors are reported with field details."""
        payload = create_compare_payload()
        payload["mortgageBalance"] = -5

        response = client.post("/api/refinance/compare", json=payload)

        assert response.status_code == 400
        data = response.get_json()
        assert data["error"] == "Invalid input"
        assert any(d["field"] == "mortgageBalance" for d in data["details"])

    def test_missing_body_returns_400(self, client):
        """Test an empty request is rejected."""
        response = client.post("/api/refinance/compare")

        assert response.status_code == 400

    def test_non_object_body_returns_400(self, client):
        """Test a JSON body that is not an object is rejected."""
        for body in (5, [1, 2], "text"):
            response = client.post("/api/refinance/compare", json=body)

            assert response.status_code == 400
            assert response.get_json()["error"] == "Invalid input"

    def test_huge_balance_is_not_a_server_error(self, client):
        """Test balances too large to round to the cent still compare."""
        payload = create_compare_payload()
        payload["mortgageBalance"] = 1e307

        response = client.post("/api/refinance/compare", json=payload)

        assert response.status_code == 200
        assert response.get_json()["rateReduction"]["termYearsNew"] == 30

    def test_infeasible_offer_serializes_null(self, client):
        """Test non-finite figures are sent as null with a warning."""
        payload = {
            "mortgageBalance": 100000,
            "currentApr": 0.01,
            "currentTermYears": 30,
            "offerRate": 0.12,
            "offerTermYears": 30,
        }
        response = client.post("/api/refinance/compare", json=payload)

        assert response.status_code == 200
        data = response.get_json()
        assert data["termReductionSamePayment"]["termYearsNew"] == 0
        assert data["termReductionSamePayment"]["newPayment"] is None
        assert len(data["warnings"]) >= 1

    def test_unexpected_error_returns_500(self, client):
        """Test unexpected failures are logged and hidden from the caller."""
        with patch(
            "refi_planner.blueprints.refinance.ComparisonService.compare",
            side_effect=RuntimeError("boom"),
        ):
            response = client.post(
                "/api/refinance/compare", json=create_compare_payload()
            )

        assert response.status_code == 500
        assert response.get_json() == {"error": "Internal server error"}


class TestAmortizationEndpoint:
    """Test cases for POST /api/refinance/amortization."""

    def test_schedule(self, client):
        """Test a schedule is returned for a valid loan."""
        response = client.post(
            "/api/refinance/amortization",
            json={"principal": 100000, "annualRate": 0.05, "termYears": 30},
        )

        assert response.status_code == 200
        data = response.get_json()
        assert data["monthlyPayment"] == 536.82
        assert 359 <= len(data["rows"]) <= 360
        assert data["rows"][0]["interest"] == 416.67

    def test_invalid_term(self, client):
        """Test a zero term is rejected."""
        response = client.post(
            "/api/refinance/amortization",
            json={"principal": 100000, "annual_rate": 0.05, "term_years": 0},
        )

        assert response.status_code == 400


def create_saved_scenario():
    return {
        "name": "Smith refi",
        "clientName": "Pat Smith",
        "propertyAddress": "12 Elm St",
        "mortgageBalance": 500000,
        "offerRate": 5.75,
        "offerTerm": 30,
        "currentApr": 6.5,
        "currentTerm": 30,
    }


class TestEmailEndpoint:
    """Test cases for POST /api/refinance/email."""

    def test_rate_reduction_email(self, client):
        """Test the offer email for the rate reduction scenario."""
        response = client.post(
            "/api/refinance/email",
            json={"scenario": create_saved_scenario(), "scenarioKey": "rateReduction"},
        )

        assert response.status_code == 200
        data = response.get_json()
        assert data["scenarioKey"] == "rateReduction"
        assert data["title"] == "Rate Reduction"
        email = data["email"]
        assert "Proposed Exclusively For: Pat Smith" in email
        assert "Property Address: 12 Elm St" in email
        assert "Rate Reduction Refinance Comparison Summary" in email
        assert "Monthly Mortgage Payment: $3,160.34" in email
        assert "New Loan Amount: $515,000.00" in email
        assert "Reduce your mortgage rate and save" in email

    def test_term_reduction_email(self, client):
        """Test the term reduction title and payoff wording."""
        response = client.post(
            "/api/refinance/email",
            json={"scenario": create_saved_scenario(), "scenarioKey": "termReduction"},
        )

        assert response.status_code == 200
        data = response.get_json()
        assert data["title"] == "Term Reduction (15yr)"
        assert "Payoff mortgage 180 months earlier" in data["email"]
        assert "Term: 15 yr" in data["email"]

    def test_unknown_scenario_key_returns_400(self, client):
        """Test an unknown scenario key is rejected."""
        response = client.post(
            "/api/refinance/email",
            json={"scenario": create_saved_scenario(), "scenarioKey": "bogus"},
        )

        assert response.status_code == 400
        data = response.get_json()
        assert any(d["field"] == "scenarioKey" for d in data["details"])

    def test_non_object_body_returns_400(self, client):
        """Test a JSON body that is not an object is rejected."""
        response = client.post("/api/refinance/email", json=5)

        assert response.status_code == 400
