"""
Formatting helpers and the homeowner offer email built from scenario results.
"""

import math
from datetime import datetime
from typing import Optional

from refi_planner.models.results import ScenarioResult

MISSING = "—"


def fmt_money(n: Optional[float]) -> str:
    """Format a dollar amount, or a dash when it is missing or non-finite."""
    if n is None or not math.isfinite(n):
        return MISSING
    return f"${n:,.2f}"


def fmt_percent(n: Optional[float]) -> str:
    """Format a percent figure with three decimals."""
    if n is None or not math.isfinite(n):
        return MISSING
    return f"{n:.3f}%"


def _benefit_text(
    title: str, result: ScenarioResult, current_term_years: Optional[float]
) -> str:
    monthly = result.monthly or 0
    annual = result.annual or 0
    five_year = result.five_year or 0
    cash_out = result.cash_out or 0

    if "Cash Out" in title:
        if cash_out > 0:
            return (
                "Leverage equity and maintain payment with "
                f"{fmt_money(cash_out)} cash out."
            )
        return (
            "Combined mortgage and credit card monthly payment decreases by "
            f"{fmt_money(monthly)}. Over a 12 month period, you save as much as "
            f"{fmt_money(annual)} and over five years, save as much as "
            f"{fmt_money(five_year)}. Your credit card debt is eliminated."
        )
    if "Term Reduction" in title:
        if current_term_years is not None and result.term_years_new:
            months = round((current_term_years - result.term_years_new) * 12)
            return (
                f"Payoff mortgage {months} months earlier while saving "
                f"{fmt_money(five_year)} in mortgage payments."
            )
        return (
            f"Payoff mortgage earlier while saving {fmt_money(five_year)} "
            "in mortgage payments."
        )
    return (
        f"Reduce your mortgage rate and save {fmt_money(five_year)} over five years."
    )


def generate_email_template(
    title: str,
    client_name: str,
    property_address: str,
    result: ScenarioResult,
    old_payment: float,
    current_term_years: Optional[float] = None,
    prepared_at: Optional[datetime] = None,
) -> str:
    """
    Build the outbound offer email for one scenario.

    Args:
        title: Scenario title, e.g. "Term Reduction Same Payment"
        client_name: Homeowner name
        property_address: Property address
        result: Scenario result to summarize
        old_payment: Homeowner's current monthly mortgage payment
        current_term_years: Current loan term, used for term-reduction wording
        prepared_at: Timestamp printed on the email (defaults to now)

    Returns:
        Plain-text email body
    """
    prepared_at = prepared_at or datetime.now()
    term = result.term_years_new if result.term_years_new else MISSING

    lines = [
        "Outbound Refinance Offer Email to Homeowner",
        "",
        "Prepared by: LO Name",
        f"Date: {prepared_at.strftime('%m/%d/%Y %I:%M %p')}",
        "",
        f"Proposed Exclusively For: {client_name}",
        f"Property Address: {property_address}",
        "",
        f"{title} Refinance Comparison Summary",
        "",
        f"You may be eligible to save as much as {fmt_money(result.annual or 0)} per year",
        "",
        _benefit_text(title, result, current_term_years),
        "",
        "Call 1-800-234-5678 today to take advantage of these savings.",
        "",
        "BENEFIT SUMMARY",
        "",
        "Your Current Mortgage + Credit Card Payments",
        f"Monthly Mortgage Payment: {fmt_money(old_payment)}",
        "",
        "Your Refinance Mortgage + Credit Card Estimate",
        f"Monthly Mortgage Payment: {fmt_money(result.new_payment)}",
        "Monthly Credit Card Payment: $0",
        "",
        f"Total Mortgage + Credit Card Payments: {fmt_money(result.new_payment)}",
        "",
        f"Monthly Savings: {fmt_money(result.monthly or 0)}",
        f"Annual Savings: {fmt_money(result.annual or 0)}",
        f"5-Year Savings: {fmt_money(result.five_year or 0)}",
        "",
        "BENEFIT DETAILS",
        "",
        "New Debt Payment: $0",
        f"New Mortgage Payment: {fmt_money(result.new_payment)}",
        f"New Loan Amount: {fmt_money(result.new_balance)}",
        f"Effective Interest Rate: {fmt_percent(result.offer_rate_pct)}",
        f"Term: {term} yr",
    ]
    if result.cash_out and result.cash_out > 0:
        lines.append(f"Cash Out: {fmt_money(result.cash_out)}")
    return "\n".join(lines)
