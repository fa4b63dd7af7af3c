"""
Pydantic models for refinance scenario inputs.

This module defines the debt entries a homeowner may consolidate, the validated
inputs handed to the calculation engine, and the saved scenario record a loan
officer stores and reloads.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Debt(BaseModel):
    """A consumer debt that may be rolled into the new mortgage."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    balance: float = Field(default=0, description="Outstanding balance")
    min_payment: float = Field(default=0, description="Required minimum payment")
    include: bool = Field(
        default=False, description="Whether the debt is consolidated"
    )


class RefinanceInputs(BaseModel):
    """Validated inputs for a refinance comparison (rates as decimals)."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False
    )

    mortgage_balance: float = Field(..., ge=0, description="Current mortgage balance")
    current_apr: float = Field(..., ge=0, lt=1, description="Current APR (0-1)")
    current_term_years: float = Field(
        ..., gt=0, le=50, description="Current term in years"
    )
    offer_rate: float = Field(..., ge=0, lt=1, description="Offered rate (0-1)")
    offer_term_years: float = Field(
        ..., gt=0, le=50, description="Offered term in years"
    )
    additional_cash: float = Field(
        default=0, ge=0, description="Additional cash requested"
    )
    closing_cost_rate: float = Field(
        default=0.03, ge=0, lt=1, description="Closing costs as a fraction of balance"
    )
    debts: List[Debt] = Field(
        default_factory=list, description="Debts available for consolidation"
    )

    @field_validator("debts")
    @classmethod
    def validate_debts(cls, v: List[Debt]) -> List[Debt]:
        for debt in v:
            if debt.balance < 0 or debt.min_payment < 0:
                raise ValueError("Debt balances and minimum payments must be non-negative")
        return v


class ScenarioRecord(BaseModel):
    """
    A saved refinance scenario as persisted by the scenario store.

    Rates are stored in percent (5.75 means 5.75%), as entered on the calculator
    form. Client and campaign fields are informational and ignored by the engine.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(..., min_length=1, description="Scenario name")
    lead_id: Optional[str] = Field(None, description="Lead identifier")
    client_name: str = Field(..., min_length=1, description="Homeowner name")
    property_address: str = Field(..., min_length=1, description="Property address")
    campaign_date: Optional[str] = Field(None, description="Marketing campaign date")
    marketing_product: Optional[str] = Field(None, description="Marketing product")

    mortgage_balance: float = Field(..., ge=0, description="Current mortgage balance")
    closing_costs: float = Field(
        default=0, ge=0, description="Quoted closing costs (informational)"
    )
    additional_cash: float = Field(
        default=0, ge=0, description="Additional cash requested"
    )
    offer_rate: float = Field(..., ge=0, lt=100, description="Offered rate in percent")
    offer_term: float = Field(..., gt=0, le=50, description="Offered term in years")
    current_apr: float = Field(..., ge=0, lt=100, description="Current APR in percent")
    current_term: float = Field(..., gt=0, le=50, description="Current term in years")
    debts: List[Debt] = Field(default_factory=list, description="Debt list")

    estimated_mip: float = Field(
        default=0.55, ge=0, alias="estimatedMIP", description="Estimated MIP rate"
    )
    estimated_monthly_taxes: float = Field(
        default=285.62, ge=0, description="Estimated monthly property taxes"
    )
    estimated_monthly_insurance: float = Field(
        default=264.23, ge=0, description="Estimated monthly insurance"
    )

    def to_inputs(self, closing_cost_rate: float = 0.03) -> RefinanceInputs:
        """Convert the record to engine inputs (percent rates become decimals)."""
        return RefinanceInputs(
            mortgage_balance=self.mortgage_balance,
            current_apr=self.current_apr / 100,
            current_term_years=self.current_term,
            offer_rate=self.offer_rate / 100,
            offer_term_years=self.offer_term,
            additional_cash=self.additional_cash,
            closing_cost_rate=closing_cost_rate,
            debts=self.debts,
        )
