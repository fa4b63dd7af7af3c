"""
Comparison service for running every refinance scenario on one set of inputs.

This service is the boundary between validated request data and the pure
calculation engine: it derives the new mortgage balance, applies the configured
refinance policy, runs each scenario and flags offers that are infeasible.
"""

import logging
from typing import List, Optional

from refi_planner.config import Settings
from refi_planner.finance import (
    DEFAULT_CLOSING_COST_RATE,
    DEFAULT_TERM_REDUCTION_YEARS,
    TERM_REDUCTION_RATE_MARKDOWN,
    current_payment,
    round2,
    scenario_cash_out_same_payment,
    scenario_debt_consolidation,
    scenario_rate_reduction,
    scenario_term_reduction,
    scenario_term_reduction_same_payment,
)
from refi_planner.models.results import RefinanceComparison
from refi_planner.models.scenario import RefinanceInputs, ScenarioRecord

logger = logging.getLogger(__name__)


class ComparisonService:
    """Service for comparing a current mortgage against refinance offers."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        """Initialize the comparison service.

        Args:
            settings: Application settings supplying refinance policy; the
                engine defaults are used when omitted
        """
        self.logger = logging.getLogger(__name__)
        if settings is not None:
            self.term_reduction_years = settings.term_reduction_years
            self.rate_markdown = settings.term_reduction_rate_markdown
            self.default_closing_cost_rate = settings.closing_cost_rate
        else:
            self.term_reduction_years = DEFAULT_TERM_REDUCTION_YEARS
            self.rate_markdown = TERM_REDUCTION_RATE_MARKDOWN
            self.default_closing_cost_rate = DEFAULT_CLOSING_COST_RATE

    def compare_record(self, record: ScenarioRecord) -> RefinanceComparison:
        """Run the comparison for a saved scenario record."""
        return self.compare(record.to_inputs(self.default_closing_cost_rate))

    def compare(self, inputs: RefinanceInputs) -> RefinanceComparison:
        """Run every refinance scenario for the given inputs.

        Args:
            inputs: Validated refinance inputs (rates as decimals)

        Returns:
            RefinanceComparison with one result per scenario and any warnings
        """
        self.logger.info(
            f"Comparing refinance offers for balance {inputs.mortgage_balance:.2f} "
            f"at offer rate {inputs.offer_rate:.4f}"
        )

        # Closing costs are financed inside each scenario, not added here
        new_mortgage_balance = inputs.mortgage_balance + inputs.additional_cash
        closing_cost_rate = inputs.closing_cost_rate
        common = (
            new_mortgage_balance,
            inputs.current_apr,
            inputs.current_term_years,
            inputs.offer_rate,
        )

        cash_out_same_payment = scenario_cash_out_same_payment(
            *common, inputs.offer_term_years, closing_cost_rate=closing_cost_rate
        )
        cash_out = cash_out_same_payment.model_copy(
            update={
                "cash_out": round2(
                    cash_out_same_payment.cash_out + inputs.additional_cash
                )
            }
        )

        comparison = RefinanceComparison(
            new_mortgage_balance=round2(new_mortgage_balance),
            current_payment=round2(
                current_payment(
                    inputs.mortgage_balance,
                    inputs.current_apr,
                    inputs.current_term_years,
                )
            ),
            current_debt_payment=round2(
                sum(max(d.min_payment, 0) for d in inputs.debts if d.include)
            ),
            cash_out=cash_out,
            cash_out_same_payment=cash_out_same_payment,
            term_reduction=scenario_term_reduction(
                *common,
                self.term_reduction_years,
                closing_cost_rate=closing_cost_rate,
                rate_markdown=self.rate_markdown,
            ),
            term_reduction_same_payment=scenario_term_reduction_same_payment(
                *common,
                closing_cost_rate=closing_cost_rate,
                rate_markdown=self.rate_markdown,
            ),
            rate_reduction=scenario_rate_reduction(
                *common, inputs.offer_term_years, closing_cost_rate=closing_cost_rate
            ),
            debt_consolidation=scenario_debt_consolidation(
                *common,
                inputs.offer_term_years,
                inputs.debts,
                "sameTerm",
                closing_cost_rate=closing_cost_rate,
            ),
            debt_consolidation_same_payment=scenario_debt_consolidation(
                *common,
                inputs.offer_term_years,
                inputs.debts,
                "samePayment",
                closing_cost_rate=closing_cost_rate,
            ),
        )
        comparison.warnings.extend(self._infeasible_warnings(comparison))
        comparison.warnings.extend(self._markdown_warnings(inputs))

        self.logger.info(
            f"Completed refinance comparison with {len(comparison.warnings)} warning(s)"
        )
        return comparison

    def _infeasible_warnings(self, comparison: RefinanceComparison) -> List[str]:
        """Describe scenarios whose solved term collapsed to zero."""
        warnings = []
        for name, result in comparison.scenarios().items():
            if result.is_infeasible:
                message = (
                    f"{name}: the current payment does not cover interest on "
                    f"the new balance at {result.offer_rate_pct:.3f}%"
                )
                self.logger.warning(message)
                warnings.append(message)
        return warnings

    def _markdown_warnings(self, inputs: RefinanceInputs) -> List[str]:
        """Flag term-reduction scenarios whose marked-down rate is negative."""
        if inputs.offer_rate >= self.rate_markdown:
            return []
        warnings = []
        for name in ("term_reduction", "term_reduction_same_payment"):
            message = (
                f"{name}: offer rate {inputs.offer_rate * 100:.3f}% is below the "
                f"{self.rate_markdown * 100:.3f}% markdown, the adjusted rate is negative"
            )
            self.logger.warning(message)
            warnings.append(message)
        return warnings
