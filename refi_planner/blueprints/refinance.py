"""
Refinance blueprint for scenario comparisons.

This module exposes the calculation engine over HTTP: a full comparison of
every refinance scenario, the homeowner offer email for one scenario and an
amortization schedule for a single loan.
"""

from typing import Any, Literal

from flask import Blueprint, current_app, jsonify, request
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from refi_planner.finance import generate_amortization_schedule
from refi_planner.models.scenario import RefinanceInputs, ScenarioRecord
from refi_planner.reports import generate_email_template
from refi_planner.services.comparison_service import ComparisonService

refinance_bp = Blueprint("refinance", __name__, url_prefix="/api/refinance")

ScenarioKey = Literal[
    "rateReduction",
    "termReduction",
    "termReductionSamePayment",
    "cashOut",
    "cashOutSamePayment",
    "debtConsolidation",
    "debtConsolidationSamePayment",
]

SCENARIO_TITLES = {
    "rateReduction": "Rate Reduction",
    "termReductionSamePayment": "Term Reduction Same Payment",
    "cashOut": "Cash Out",
    "cashOutSamePayment": "Cash Out Same Payment",
    "debtConsolidation": "Debt Consolidation",
    "debtConsolidationSamePayment": "Debt Consolidation Same Payment",
}


class AmortizationRequest(BaseModel):
    """Request body for an amortization schedule."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False
    )

    principal: float = Field(..., ge=0, description="Amount financed")
    annual_rate: float = Field(..., ge=0, lt=1, description="Annual rate (0-1)")
    term_years: float = Field(..., gt=0, le=50, description="Loan term in years")


class EmailRequest(BaseModel):
    """Request body for a homeowner offer email."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    scenario: ScenarioRecord
    scenario_key: ScenarioKey = Field(..., description="Scenario to summarize")


def _validation_error(e: ValidationError) -> Any:
    details = [
        {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
        for err in e.errors()
    ]
    return jsonify({"error": "Invalid input", "details": details}), 400


def _invalid_body() -> Any:
    details = [{"field": "body", "message": "Request body must be a JSON object"}]
    return jsonify({"error": "Invalid input", "details": details}), 400


def _json_object() -> Any:
    """Request JSON as a dict; an empty body becomes {}, other types None."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    return data if isinstance(data, dict) else None


@refinance_bp.route("/compare", methods=["POST"])
def compare() -> Any:
    """Compare the current mortgage against every refinance scenario.

    Accepts either RefinanceInputs (rates as decimals) or
    ``{"scenario": <saved scenario record>}`` (rates in percent).

    Returns:
        JSON response with one result per scenario
    """
    try:
        data = _json_object()
        if data is None:
            return _invalid_body()
        service = ComparisonService(current_app.config.get("REFI_SETTINGS"))

        if "scenario" in data:
            record = ScenarioRecord.model_validate(data["scenario"])
            comparison = service.compare_record(record)
        else:
            inputs = RefinanceInputs.model_validate(data)
            comparison = service.compare(inputs)

        return jsonify(comparison.to_dict()), 200

    except ValidationError as e:
        return _validation_error(e)
    except Exception as e:
        current_app.logger.error(f"Error comparing refinance scenarios: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500


@refinance_bp.route("/email", methods=["POST"])
def email() -> Any:
    """Render the homeowner offer email for one scenario of a saved record.

    Expects ``{"scenario": <saved scenario record>, "scenarioKey": <key>}``
    where the key is one of the comparison result keys.

    Returns:
        JSON response with the scenario title and the plain-text email
    """
    try:
        data = _json_object()
        if data is None:
            return _invalid_body()
        params = EmailRequest.model_validate(data)
        service = ComparisonService(current_app.config.get("REFI_SETTINGS"))
        comparison = service.compare_record(params.scenario)

        title = SCENARIO_TITLES.get(
            params.scenario_key,
            f"Term Reduction ({service.term_reduction_years}yr)",
        )
        result = getattr(comparison, _attribute_name(params.scenario_key))
        text = generate_email_template(
            title,
            params.scenario.client_name,
            params.scenario.property_address,
            result,
            result.old_payment,
            current_term_years=params.scenario.current_term,
        )

        return (
            jsonify(
                {"scenarioKey": params.scenario_key, "title": title, "email": text}
            ),
            200,
        )

    except ValidationError as e:
        return _validation_error(e)
    except Exception as e:
        current_app.logger.error(f"Error generating offer email: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500


@refinance_bp.route("/amortization", methods=["POST"])
def amortization() -> Any:
    """Generate the amortization schedule for a loan.

    Returns:
        JSON response with the monthly schedule and totals
    """
    try:
        data = _json_object()
        if data is None:
            return _invalid_body()
        params = AmortizationRequest.model_validate(data)
        schedule = generate_amortization_schedule(
            params.principal, params.annual_rate, params.term_years
        )
        return jsonify(schedule.model_dump(by_alias=True)), 200

    except ValidationError as e:
        return _validation_error(e)
    except Exception as e:
        current_app.logger.error(f"Error generating amortization schedule: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500


def _attribute_name(scenario_key: str) -> str:
    # termReductionSamePayment -> term_reduction_same_payment
    return "".join(f"_{c.lower()}" if c.isupper() else c for c in scenario_key)
