"""
Derived refinance quantities built on the annuity primitives.

Monthly payment for a balance, payment-delta savings, the approximate effective
rate shown on offers, and closing-cost financing.
"""

from typing import Dict

from .annuity import apr_to_monthly, pmt, round2, years_to_periods

DEFAULT_CLOSING_COST_RATE = 0.03
ANNUAL_MONTHS = 12
FIVE_YEAR_MONTHS = 60


def current_payment(balance: float, apr: float, term_years: float) -> float:
    """
    Monthly principal-and-interest payment for a loan.

    Args:
        balance: Loan balance
        apr: Annual percentage rate (decimal, e.g. 0.065)
        term_years: Loan term in years

    Returns:
        Positive monthly payment, unrounded
    """
    rate = apr_to_monthly(apr)
    periods = years_to_periods(term_years)
    return abs(pmt(rate, periods, balance))


def savings(old_pay: float, new_pay: float) -> Dict[str, float]:
    """
    Savings of new_pay relative to old_pay.

    Annual and five-year figures are derived from the rounded monthly figure,
    never computed independently. Positive means the new payment is cheaper.
    """
    monthly = round2(old_pay - new_pay)
    return {
        "monthly": monthly,
        "annual": round2(monthly * ANNUAL_MONTHS),
        "five_year": round2(monthly * FIVE_YEAR_MONTHS),
    }


def effective_rate_approx(five_year_savings: float, new_balance: float) -> float:
    """
    Indicative rate: five-year savings as a percent of the new balance.

    This is not an IRR or APR; it is the rough figure printed on offer sheets.
    """
    return round2((five_year_savings / max(new_balance, 1)) * 100)


def calculate_loan_amounts(
    balance: float,
    closing_cost_rate: float = DEFAULT_CLOSING_COST_RATE,
    additional_cash: float = 0,
) -> Dict[str, float]:
    """
    Add financed closing costs (and optional cash) to a balance.

    Args:
        balance: Mortgage balance being refinanced
        closing_cost_rate: Closing costs as a fraction of the balance
        additional_cash: Cash requested on top of the preliminary loan

    Returns:
        Dictionary with closing_costs, preliminary_loan and final_loan, money-rounded
    """
    closing_costs = balance * closing_cost_rate
    preliminary_loan = balance + closing_costs
    final_loan = preliminary_loan + additional_cash
    return {
        "closing_costs": round2(closing_costs),
        "preliminary_loan": round2(preliminary_loan),
        "final_loan": round2(final_loan),
    }
