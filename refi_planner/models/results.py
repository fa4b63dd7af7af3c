"""
Pydantic models for refinance scenario results.

Results use snake_case attributes and serialize to the camelCase keys the
presentation layer reads (newBalance, offerRatePct, fiveYear, ...). Fields that
do not apply to a scenario are left as None and dropped on serialization, so an
absent key means "not applicable", never zero.
"""

import math
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

ConsolidationMode = Literal["sameTerm", "samePayment"]


class ScenarioResult(BaseModel):
    """Outcome of a single refinance scenario."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    term_years_new: Union[int, float] = Field(
        ..., description="Resulting loan term in years (0 = infeasible)"
    )
    mortgage_balance: float = Field(..., description="Mortgage balance refinanced")
    closing_costs: Optional[float] = Field(
        None, description="Financed closing cost amount"
    )
    new_balance: float = Field(..., description="Financed principal")
    offer_rate_pct: float = Field(..., description="Applied rate in percent")
    old_payment: float = Field(..., description="Monthly payment before refinance")
    new_payment: float = Field(..., description="Monthly payment after refinance")
    monthly: Optional[float] = Field(None, description="Monthly savings")
    annual: Optional[float] = Field(None, description="Annual savings")
    five_year: Optional[float] = Field(None, description="Five-year savings")
    effective_rate_pct: Optional[float] = Field(
        None, description="Approximate effective rate in percent"
    )
    cash_out: Optional[float] = Field(None, description="Equity extracted")

    @field_validator("term_years_new")
    @classmethod
    def validate_whole_years(cls, v):
        """Report whole-year terms as integers (30.0 -> 30)."""
        if isinstance(v, float) and v.is_integer():
            return int(v)
        return v

    @property
    def is_infeasible(self) -> bool:
        """True when a solved term collapsed to zero."""
        return self.term_years_new == 0

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with camelCase keys, omitting non-applicable fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class DebtConsolidationResult(ScenarioResult):
    """Outcome of rolling consumer debts into the new mortgage."""

    mode: ConsolidationMode = Field(..., description="sameTerm or samePayment")
    rolled_balance: float = Field(..., description="Debt balance rolled in")
    dropped_min_payments: float = Field(
        ..., description="Minimum payments no longer owed"
    )
    old_mortgage_payment: float = Field(..., description="Current mortgage payment")
    old_total_outflow: float = Field(
        ..., description="Current mortgage payment plus rolled debt minimums"
    )
    new_mortgage_payment: float = Field(..., description="New mortgage payment")
    new_total_outflow: float = Field(..., description="New total monthly outflow")


class RefinanceComparison(BaseModel):
    """Every scenario computed for one set of refinance inputs."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    new_mortgage_balance: float = Field(
        ..., description="Mortgage balance plus additional cash requested"
    )
    current_payment: float = Field(..., description="Current mortgage payment")
    current_debt_payment: float = Field(
        ..., description="Minimum payments on included debts"
    )
    cash_out: ScenarioResult
    cash_out_same_payment: ScenarioResult
    term_reduction: ScenarioResult
    term_reduction_same_payment: ScenarioResult
    rate_reduction: ScenarioResult
    debt_consolidation: DebtConsolidationResult
    debt_consolidation_same_payment: DebtConsolidationResult
    warnings: List[str] = Field(default_factory=list)

    def scenarios(self) -> Dict[str, ScenarioResult]:
        """Scenario results keyed by attribute name."""
        return {
            "cash_out": self.cash_out,
            "cash_out_same_payment": self.cash_out_same_payment,
            "term_reduction": self.term_reduction,
            "term_reduction_same_payment": self.term_reduction_same_payment,
            "rate_reduction": self.rate_reduction,
            "debt_consolidation": self.debt_consolidation,
            "debt_consolidation_same_payment": self.debt_consolidation_same_payment,
        }

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for JSON transport; non-finite numbers become None."""
        return _finite_only(self.model_dump(by_alias=True, exclude_none=True))


def _finite_only(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _finite_only(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_finite_only(item) for item in value]
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value
