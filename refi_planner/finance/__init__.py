"""Refinance calculation engine."""

from .amortization import (
    AmortizationRow,
    AmortizationSchedule,
    generate_amortization_schedule,
)
from .annuity import (
    apr_to_monthly,
    clamp_pos,
    nper,
    pmt,
    pv,
    rate_to_percent,
    round2,
    round_up_years,
    years_to_periods,
)
from .derived import (
    DEFAULT_CLOSING_COST_RATE,
    calculate_loan_amounts,
    current_payment,
    effective_rate_approx,
    savings,
)
from .scenarios import (
    DEFAULT_TERM_REDUCTION_YEARS,
    TERM_REDUCTION_RATE_MARKDOWN,
    scenario_cash_out_same_payment,
    scenario_debt_consolidation,
    scenario_rate_reduction,
    scenario_term_reduction,
    scenario_term_reduction_same_payment,
)

__all__ = [
    "pmt",
    "nper",
    "pv",
    "round2",
    "apr_to_monthly",
    "years_to_periods",
    "clamp_pos",
    "round_up_years",
    "rate_to_percent",
    "current_payment",
    "savings",
    "effective_rate_approx",
    "calculate_loan_amounts",
    "DEFAULT_CLOSING_COST_RATE",
    "TERM_REDUCTION_RATE_MARKDOWN",
    "DEFAULT_TERM_REDUCTION_YEARS",
    "scenario_rate_reduction",
    "scenario_term_reduction",
    "scenario_term_reduction_same_payment",
    "scenario_cash_out_same_payment",
    "scenario_debt_consolidation",
    "AmortizationRow",
    "AmortizationSchedule",
    "generate_amortization_schedule",
]
