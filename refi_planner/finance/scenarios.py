"""
Refinance scenario calculations.

Each function compares a homeowner's current mortgage with one kind of refinance
offer and returns a ScenarioResult. All of them finance closing costs on top of
the mortgage balance, while the old payment is always computed on the raw balance
so the baseline is the loan the homeowner actually has today.

Functions are pure: no I/O, no shared state, inputs are never mutated.
"""

from typing import Iterable, Mapping, Union

from refi_planner.models.results import (
    ConsolidationMode,
    DebtConsolidationResult,
    ScenarioResult,
)
from refi_planner.models.scenario import Debt

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
    ANNUAL_MONTHS,
    DEFAULT_CLOSING_COST_RATE,
    FIVE_YEAR_MONTHS,
    calculate_loan_amounts,
    current_payment,
    effective_rate_approx,
    savings,
)

# Lenders price shorter or accelerated terms a quarter point under the offer.
TERM_REDUCTION_RATE_MARKDOWN = 0.0025
DEFAULT_TERM_REDUCTION_YEARS = 15

DebtLike = Union[Debt, Mapping]


def _solve_term(rate: float, payment: float, loan: float) -> float:
    """Months needed to repay loan at a fixed payment, 0 when the payment is too small."""
    return clamp_pos(nper(rate, -payment, loan))


def _as_debt(debt: DebtLike) -> Debt:
    if isinstance(debt, Debt):
        return debt
    return Debt.model_validate(debt)


def scenario_rate_reduction(
    mortgage_balance: float,
    current_apr: float,
    current_term_years: float,
    offer_rate: float,
    offer_term_years: float,
    *,
    closing_cost_rate: float = DEFAULT_CLOSING_COST_RATE,
) -> ScenarioResult:
    """
    Lower rate, same term.

    The new payment is on the balance plus financed closing costs at the offer
    rate. No effective rate is reported for this scenario.

    Args:
        mortgage_balance: Balance being refinanced
        current_apr: Current APR (decimal)
        current_term_years: Current term in years
        offer_rate: Offered rate (decimal)
        offer_term_years: Offered term in years
        closing_cost_rate: Closing costs as a fraction of the balance

    Returns:
        ScenarioResult without effective_rate_pct
    """
    amounts = calculate_loan_amounts(mortgage_balance, closing_cost_rate)
    preliminary_loan = amounts["preliminary_loan"]

    old_pay = current_payment(mortgage_balance, current_apr, current_term_years)
    new_pay = current_payment(preliminary_loan, offer_rate, offer_term_years)
    sv = savings(old_pay, new_pay)

    return ScenarioResult(
        term_years_new=offer_term_years,
        mortgage_balance=round2(mortgage_balance),
        closing_costs=amounts["closing_costs"],
        new_balance=clamp_pos(preliminary_loan),
        offer_rate_pct=rate_to_percent(offer_rate),
        old_payment=round2(old_pay),
        new_payment=round2(new_pay),
        **sv,
    )


def scenario_term_reduction(
    mortgage_balance: float,
    current_apr: float,
    current_term_years: float,
    offer_rate: float,
    new_term_years: float = DEFAULT_TERM_REDUCTION_YEARS,
    *,
    closing_cost_rate: float = DEFAULT_CLOSING_COST_RATE,
    rate_markdown: float = TERM_REDUCTION_RATE_MARKDOWN,
) -> ScenarioResult:
    """
    Shorter fixed term (e.g. 15 years) at the offer rate less the markdown.

    Args:
        mortgage_balance: Balance being refinanced
        current_apr: Current APR (decimal)
        current_term_years: Current term in years
        offer_rate: Offered rate (decimal), before the markdown
        new_term_years: Term of the new loan in years
        closing_cost_rate: Closing costs as a fraction of the balance
        rate_markdown: Rate reduction applied to the offer (decimal)

    Returns:
        ScenarioResult with effective_rate_pct
    """
    amounts = calculate_loan_amounts(mortgage_balance, closing_cost_rate)
    preliminary_loan = amounts["preliminary_loan"]
    adjusted_rate = offer_rate - rate_markdown

    old_pay = current_payment(mortgage_balance, current_apr, current_term_years)
    new_pay = current_payment(preliminary_loan, adjusted_rate, new_term_years)
    sv = savings(old_pay, new_pay)

    return ScenarioResult(
        term_years_new=new_term_years,
        mortgage_balance=round2(mortgage_balance),
        closing_costs=amounts["closing_costs"],
        new_balance=clamp_pos(preliminary_loan),
        offer_rate_pct=rate_to_percent(adjusted_rate),
        old_payment=round2(old_pay),
        new_payment=round2(new_pay),
        effective_rate_pct=effective_rate_approx(sv["five_year"], preliminary_loan),
        **sv,
    )


def scenario_term_reduction_same_payment(
    mortgage_balance: float,
    current_apr: float,
    current_term_years: float,
    offer_rate: float,
    *,
    closing_cost_rate: float = DEFAULT_CLOSING_COST_RATE,
    rate_markdown: float = TERM_REDUCTION_RATE_MARKDOWN,
) -> ScenarioResult:
    """
    Keep the current payment and pay the new loan off sooner.

    The term is solved at the marked-down offer rate and rounded up to whole
    years. A payment that cannot cover the interest yields a term of 0.
    """
    amounts = calculate_loan_amounts(mortgage_balance, closing_cost_rate)
    preliminary_loan = amounts["preliminary_loan"]
    adjusted_rate = offer_rate - rate_markdown
    monthly_rate = apr_to_monthly(adjusted_rate)

    old_pay = current_payment(mortgage_balance, current_apr, current_term_years)
    periods = _solve_term(monthly_rate, old_pay, preliminary_loan)
    new_pay = abs(pmt(monthly_rate, periods, preliminary_loan))
    sv = savings(old_pay, new_pay)

    return ScenarioResult(
        term_years_new=round_up_years(periods / ANNUAL_MONTHS),
        mortgage_balance=round2(mortgage_balance),
        closing_costs=amounts["closing_costs"],
        new_balance=clamp_pos(preliminary_loan),
        offer_rate_pct=rate_to_percent(adjusted_rate),
        old_payment=round2(old_pay),
        new_payment=round2(new_pay),
        effective_rate_pct=effective_rate_approx(sv["five_year"], preliminary_loan),
        **sv,
    )


def scenario_cash_out_same_payment(
    mortgage_balance: float,
    current_apr: float,
    current_term_years: float,
    offer_rate: float,
    offer_term_years: float,
    *,
    closing_cost_rate: float = DEFAULT_CLOSING_COST_RATE,
) -> ScenarioResult:
    """
    Extract equity while keeping the payment unchanged.

    The largest loan the current payment supports at the offer rate and term is
    solved with pv; the cash out is what remains after repaying the balance and
    the financed closing costs. Savings are zero by construction.

    Args:
        mortgage_balance: Balance being refinanced, including any cash already requested
        current_apr: Current APR (decimal)
        current_term_years: Current term in years
        offer_rate: Offered rate (decimal)
        offer_term_years: Offered term in years
        closing_cost_rate: Closing costs as a fraction of the balance

    Returns:
        ScenarioResult with cash_out and zero savings
    """
    amounts = calculate_loan_amounts(mortgage_balance, closing_cost_rate)
    preliminary_loan = amounts["preliminary_loan"]

    old_pay = current_payment(mortgage_balance, current_apr, current_term_years)
    max_loan = -pv(
        apr_to_monthly(offer_rate), years_to_periods(offer_term_years), old_pay
    )
    cash_out = max_loan - preliminary_loan

    return ScenarioResult(
        term_years_new=offer_term_years,
        mortgage_balance=round2(mortgage_balance),
        closing_costs=amounts["closing_costs"],
        new_balance=clamp_pos(round2(max_loan)),
        offer_rate_pct=rate_to_percent(offer_rate),
        cash_out=round2(cash_out),
        old_payment=round2(old_pay),
        new_payment=round2(old_pay),
        monthly=0,
        annual=0,
        five_year=0,
    )


def scenario_debt_consolidation(
    mortgage_balance: float,
    current_apr: float,
    current_term_years: float,
    offer_rate: float,
    offer_term_years: float,
    debts: Iterable[DebtLike],
    mode: ConsolidationMode = "sameTerm",
    *,
    closing_cost_rate: float = DEFAULT_CLOSING_COST_RATE,
) -> DebtConsolidationResult:
    """
    Roll included debts into the new mortgage.

    Closing costs apply to the mortgage balance only, not to the rolled debts.
    In sameTerm mode the consolidated loan is amortized over the offer term. In
    samePayment mode the current mortgage payment is kept and the term is solved
    and rounded up. Savings compare the old mortgage payment plus the dropped
    debt minimums against the new payment.

    Args:
        mortgage_balance: Balance being refinanced
        current_apr: Current APR (decimal)
        current_term_years: Current term in years
        offer_rate: Offered rate (decimal)
        offer_term_years: Offered term in years
        debts: Debts (Debt models or mappings); only include=True debts are rolled
        mode: "sameTerm" or "samePayment"
        closing_cost_rate: Closing costs as a fraction of the balance

    Returns:
        DebtConsolidationResult
    """
    included = [debt for debt in map(_as_debt, debts) if debt.include]
    rolled = sum(max(debt.balance, 0) for debt in included)
    dropped_mins = sum(max(debt.min_payment, 0) for debt in included)

    old_mortgage_pay = current_payment(
        mortgage_balance, current_apr, current_term_years
    )
    old_total_outflow = old_mortgage_pay + dropped_mins

    amounts = calculate_loan_amounts(mortgage_balance, closing_cost_rate)
    consolidated_balance = amounts["preliminary_loan"] + rolled
    monthly_rate = apr_to_monthly(offer_rate)

    if mode == "samePayment":
        periods = _solve_term(monthly_rate, old_mortgage_pay, consolidated_balance)
        term_years_new = round_up_years(periods / ANNUAL_MONTHS)
        new_pay = abs(pmt(monthly_rate, periods, consolidated_balance))
    else:
        term_years_new = offer_term_years
        new_pay = current_payment(consolidated_balance, offer_rate, offer_term_years)

    new_total_outflow = new_pay
    monthly = round2(old_total_outflow - new_total_outflow)

    return DebtConsolidationResult(
        mode=mode,
        term_years_new=term_years_new,
        mortgage_balance=round2(mortgage_balance),
        closing_costs=amounts["closing_costs"],
        new_balance=clamp_pos(round2(consolidated_balance)),
        offer_rate_pct=rate_to_percent(offer_rate),
        rolled_balance=round2(rolled),
        dropped_min_payments=round2(dropped_mins),
        old_mortgage_payment=round2(old_mortgage_pay),
        old_total_outflow=round2(old_total_outflow),
        old_payment=round2(old_total_outflow),
        new_mortgage_payment=round2(new_pay),
        new_total_outflow=round2(new_total_outflow),
        new_payment=round2(new_pay),
        monthly=monthly,
        annual=round2(monthly * ANNUAL_MONTHS),
        five_year=round2(monthly * FIVE_YEAR_MONTHS),
        effective_rate_pct=effective_rate_approx(
            monthly * FIVE_YEAR_MONTHS, consolidated_balance
        ),
    )
