"""
Amortization schedules for refinance offers.

This module splits each monthly payment of a fixed-rate loan into interest and
principal, for the schedule shown next to a scenario's new loan.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .annuity import apr_to_monthly, round2, years_to_periods
from .derived import current_payment


class AmortizationRow(BaseModel):
    """Breakdown of a single monthly payment."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    month: int = Field(..., ge=1, description="Payment number (1-based)")
    beginning_balance: float = Field(..., description="Balance at beginning of month")
    payment: float = Field(..., description="Total payment amount")
    principal: float = Field(..., description="Principal portion of payment")
    interest: float = Field(..., description="Interest portion of payment")
    ending_balance: float = Field(..., ge=0, description="Balance at end of month")


class AmortizationSchedule(BaseModel):
    """Complete amortization schedule for a loan."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    principal: float = Field(..., description="Amount financed")
    annual_rate: float = Field(..., description="Annual rate (decimal)")
    term_years: float = Field(..., description="Loan term in years")
    monthly_payment: float = Field(..., description="Scheduled monthly payment")
    rows: List[AmortizationRow] = Field(
        default_factory=list, description="Monthly payment breakdowns"
    )
    total_payments: int = Field(..., ge=0, description="Number of payments")
    total_interest: float = Field(..., description="Interest paid over the schedule")
    total_principal: float = Field(..., description="Principal paid over the schedule")


def generate_amortization_schedule(
    principal: float, annual_rate: float, term_years: float
) -> AmortizationSchedule:
    """
    Generate the month-by-month schedule for a fixed-rate loan.

    Balances are carried unrounded between months; only the reported figures
    are rounded to the cent. The schedule stops early once the balance is paid.

    Args:
        principal: Amount financed
        annual_rate: Annual interest rate (as decimal, e.g., 0.0575 for 5.75%)
        term_years: Loan term in years

    Returns:
        Complete amortization schedule
    """
    monthly_rate = apr_to_monthly(annual_rate)
    num_payments = years_to_periods(term_years)
    monthly_payment = current_payment(principal, annual_rate, term_years)

    rows = []
    balance = principal
    total_interest = 0.0
    total_principal = 0.0

    for month in range(1, num_payments + 1):
        interest_payment = balance * monthly_rate
        principal_payment = monthly_payment - interest_payment
        new_balance = balance - principal_payment

        total_interest += interest_payment
        total_principal += principal_payment

        rows.append(
            AmortizationRow(
                month=month,
                beginning_balance=round2(balance),
                payment=round2(monthly_payment),
                principal=round2(principal_payment),
                interest=round2(interest_payment),
                ending_balance=round2(max(0, new_balance)),
            )
        )

        balance = new_balance
        if balance <= 0:
            break

    return AmortizationSchedule(
        principal=round2(principal),
        annual_rate=annual_rate,
        term_years=term_years,
        monthly_payment=round2(monthly_payment),
        rows=rows,
        total_payments=len(rows),
        total_interest=round2(total_interest),
        total_principal=round2(total_principal),
    )
