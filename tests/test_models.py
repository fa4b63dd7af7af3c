"""
Tests for refinance input and result models.
"""

import math

import pytest
from pydantic import ValidationError

from refi_planner.models import (
    Debt,
    RefinanceInputs,
    ScenarioRecord,
    ScenarioResult,
)


def create_sample_record_data():
    """Saved scenario payload as the calculator form stores it."""
    return {
        "name": "Smith refi",
        "leadId": "L-1001",
        "clientName": "Pat Smith",
        "propertyAddress": "12 Elm St",
        "campaignDate": "2024-05-01",
        "marketingProduct": "CONV Cash Out Consolidation",
        "mortgageBalance": 500000,
        "closingCosts": 20000,
        "additionalCash": 10000,
        "offerRate": 5.75,
        "offerTerm": 30,
        "currentApr": 6.5,
        "currentTerm": 30,
        "debts": [
            {"balance": 5000, "minPayment": 150, "include": True},
            {"balance": 10000, "minPayment": 300, "include": False},
        ],
        "estimatedMIP": 0.6,
    }


class TestDebt:
    """Test cases for the Debt model."""

    def test_camel_case_and_snake_case(self):
        """Test both key styles are accepted."""
        assert Debt(balance=100, min_payment=10).min_payment == 10
        assert Debt.model_validate({"balance": 100, "minPayment": 10}).min_payment == 10

    def test_include_defaults_to_false(self):
        """Test an unset include flag does not consolidate the debt."""
        assert Debt(balance=100, min_payment=10).include is False


class TestRefinanceInputs:
    """Test cases for boundary validation."""

    def test_valid_inputs(self, sample_inputs):
        """Test the shared sample inputs validate."""
        assert sample_inputs.closing_cost_rate == 0.03
        assert sample_inputs.additional_cash == 0
        assert len(sample_inputs.debts) == 3

    @pytest.mark.parametrize(
        "field,value",
        [
            ("mortgage_balance", -1),
            ("current_apr", 6.5),
            ("offer_rate", -0.01),
            ("current_term_years", 0),
            ("offer_term_years", 60),
            ("additional_cash", -100),
            ("closing_cost_rate", 1.5),
            ("mortgage_balance", math.inf),
            ("mortgage_balance", math.nan),
        ],
    )
    def test_rejects_invalid_values(self, field, value):
        """Test non-sensical or non-finite inputs are rejected."""
        data = {
            "mortgage_balance": 500000,
            "current_apr": 0.065,
            "current_term_years": 30,
            "offer_rate": 0.0575,
            "offer_term_years": 30,
        }
        data[field] = value

        with pytest.raises(ValidationError):
            RefinanceInputs(**data)

    def test_rejects_negative_debts(self):
        """Test negative debt amounts are rejected at the boundary."""
        with pytest.raises(ValidationError) as exc_info:
            RefinanceInputs(
                mortgage_balance=500000,
                current_apr=0.065,
                current_term_years=30,
                offer_rate=0.0575,
                offer_term_years=30,
                debts=[{"balance": -5, "minPayment": 10, "include": True}],
            )
        assert "non-negative" in str(exc_info.value)

    def test_accepts_camel_case(self):
        """Test JSON-style keys."""
        inputs = RefinanceInputs.model_validate(
            {
                "mortgageBalance": 250000,
                "currentApr": 0.07,
                "currentTermYears": 30,
                "offerRate": 0.06,
                "offerTermYears": 20,
            }
        )

        assert inputs.offer_term_years == 20


class TestScenarioRecord:
    """Test cases for saved scenario records."""

    def test_parses_stored_record(self):
        """Test a stored record with camelCase keys."""
        record = ScenarioRecord.model_validate(create_sample_record_data())

        assert record.client_name == "Pat Smith"
        assert record.estimated_mip == 0.6
        assert record.estimated_monthly_taxes == 285.62
        assert record.estimated_monthly_insurance == 264.23
        assert record.debts[1].include is False

    def test_to_inputs_converts_percent_rates(self):
        """Test rates are converted from percent to decimals."""
        inputs = ScenarioRecord.model_validate(create_sample_record_data()).to_inputs()

        assert inputs.current_apr == pytest.approx(0.065)
        assert inputs.offer_rate == pytest.approx(0.0575)
        assert inputs.current_term_years == 30
        assert inputs.additional_cash == 10000
        assert inputs.closing_cost_rate == 0.03
        assert len(inputs.debts) == 2

    def test_requires_client_fields(self):
        """Test that name and client fields are required."""
        data = create_sample_record_data()
        del data["clientName"]

        with pytest.raises(ValidationError):
            ScenarioRecord.model_validate(data)


class TestScenarioResult:
    """Test cases for result serialization."""

    def test_omits_not_applicable_fields(self):
        """Test absent optional fields are dropped rather than zeroed."""
        result = ScenarioResult(
            term_years_new=30,
            mortgage_balance=100000,
            new_balance=103000,
            offer_rate_pct=5.5,
            old_payment=700,
            new_payment=650,
        )
        data = result.to_dict()

        assert data == {
            "termYearsNew": 30,
            "mortgageBalance": 100000,
            "newBalance": 103000,
            "offerRatePct": 5.5,
            "oldPayment": 700,
            "newPayment": 650,
        }
        assert not result.is_infeasible

    def test_results_are_immutable(self):
        """Test results cannot be modified after creation."""
        result = ScenarioResult(
            term_years_new=0,
            mortgage_balance=0,
            new_balance=0,
            offer_rate_pct=0,
            old_payment=0,
            new_payment=0,
        )

        assert result.is_infeasible
        with pytest.raises(ValidationError):
            result.new_payment = 1
