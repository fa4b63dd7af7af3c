"""
Annuity primitives for refinance calculations.

Spreadsheet-compatible PMT/NPER/PV solvers plus the rounding and unit conversion
helpers the scenario functions share. Outflows are negative, as in a spreadsheet.
None of these functions raise on numeric edge cases: degenerate inputs produce
NaN or a signed infinity, which callers clamp or render as "not available".
"""

import math
import sys

EPSILON = sys.float_info.epsilon
MONTHS_PER_YEAR = 12


def _divide(numerator: float, denominator: float) -> float:
    """Float division that follows IEEE semantics instead of raising."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _compound(rate: float, nper: float) -> float:
    """Return (1 + rate) ** nper, or infinity when the result overflows."""
    try:
        return math.pow(1 + rate, nper)
    except OverflowError:
        return math.inf
    except ValueError:
        return math.nan


def round2(n: float) -> float:
    """
    Round to the cent, half up.

    A machine-epsilon bias is added first so values such as 1.005, which are stored
    as 1.00499999..., still round up. Non-finite values are returned unchanged.
    """
    scaled = (n + EPSILON) * 100
    if not math.isfinite(scaled):
        return n
    return math.floor(scaled + 0.5) / 100


def apr_to_monthly(apr: float) -> float:
    """Nominal annual rate to monthly periodic rate (no compounding adjustment)."""
    return apr / MONTHS_PER_YEAR


def years_to_periods(years: float) -> float:
    """Years to a whole number of monthly periods; NaN and infinity pass through."""
    months = years * MONTHS_PER_YEAR
    if not math.isfinite(months):
        return months
    return math.floor(months + 0.5)


def clamp_pos(n: float, fallback: float = 0) -> float:
    """Return n if it is finite and strictly positive, else fallback."""
    return n if math.isfinite(n) and n > 0 else fallback


def round_up_years(years: float) -> int:
    # 23.1 -> 24, a partial final year still needs payments
    return math.ceil(years)


def rate_to_percent(rate: float) -> float:
    """Decimal rate to percent for display (0.0575 -> 5.75)."""
    return round2(rate * 100)


def pmt(rate: float, nper: float, pv: float, fv: float = 0, type: int = 0) -> float:
    """
    Periodic payment that amortizes pv (and fv) over nper periods.

    Args:
        rate: Periodic interest rate (decimal)
        nper: Number of periods
        pv: Present value (loan principal)
        fv: Future value remaining after the last payment
        type: 0 for payments at period end, 1 for annuity-due

    Returns:
        Payment per period, negative for a positive principal
    """
    if rate == 0:
        return -_divide(pv + fv, nper)
    pvif = _compound(rate, nper)
    p = _divide(rate * (pv * pvif + fv), pvif - 1)
    if type == 1:
        p = _divide(p, 1 + rate)
    return -p


def nper(rate: float, pmt: float, pv: float, fv: float = 0, type: int = 0) -> float:
    """
    Number of periods needed to amortize pv with a fixed payment.

    The payment must be signed opposite to pv (pass -payment for a loan). When the
    payment does not cover the periodic interest the result is NaN; callers clamp
    it with clamp_pos.

    Args:
        rate: Periodic interest rate (decimal)
        pmt: Payment per period (negative for an outflow)
        pv: Present value (loan principal)
        fv: Future value remaining after the last payment
        type: 0 for payments at period end, 1 for annuity-due

    Returns:
        Number of periods, possibly fractional
    """
    if rate == 0:
        return -_divide(pv + fv, pmt)
    if type == 1:
        pmt *= 1 + rate
    ratio = _divide(pmt - rate * fv, pmt + rate * pv)
    if not ratio > 0 or 1 + rate <= 0:
        return math.nan
    return _divide(math.log(ratio), math.log(1 + rate))


def pv(rate: float, nper: float, pmt: float, fv: float = 0, type: int = 0) -> float:
    """
    Present value supported by a fixed payment over nper periods.

    Args:
        rate: Periodic interest rate (decimal)
        nper: Number of periods
        pmt: Payment per period
        fv: Future value remaining after the last payment
        type: 0 for payments at period end, 1 for annuity-due

    Returns:
        Present value, negative for a positive payment
    """
    if rate == 0:
        return -(pmt * nper + fv)
    pvif = _compound(rate, nper)
    if type == 1:
        pmt *= 1 + rate
    return -_divide(pmt * (pvif - 1) / rate + fv, pvif)
