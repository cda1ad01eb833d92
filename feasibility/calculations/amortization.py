"""
Loan Repayment Calculations

Implements level-principal repayment with an interest-only grace period,
reported as yearly interest, principal and total repayment series.
"""

from typing import List, Dict

from feasibility.calculations.rounding import round_half_up

DEFAULT_ANNUAL_RATE_PERCENT = 2.0
DEFAULT_GRACE_MONTHS = 60
DEFAULT_REPAYMENT_MONTHS = 120
MONTHS_PER_YEAR = 12


def _whole_years(months: int, label: str) -> int:
    """Convert a month count to years, rejecting partial years."""
    if months <= 0 or months % MONTHS_PER_YEAR != 0:
        raise ValueError(f"{label} must be a positive multiple of 12 months")
    return months // MONTHS_PER_YEAR


def calculate_grace_interest(loan_principal: float, monthly_rate: float) -> float:
    """Monthly interest during the grace period, rounded to the unit."""
    return round_half_up(loan_principal * monthly_rate)


def generate_repayment_schedule(
    loan_principal: float,
    annual_rate_percent: float = DEFAULT_ANNUAL_RATE_PERCENT,
    grace_months: int = DEFAULT_GRACE_MONTHS,
    repayment_months: int = DEFAULT_REPAYMENT_MONTHS,
) -> Dict[str, List[float]]:
    """
    Generate yearly repayment figures for a level-principal loan.

    During the grace period only interest is paid, so every grace year
    carries the same interest (rounded monthly interest * 12). During the
    repayment period the balance drops by a fixed monthly principal payment
    and interest is recomputed on the remaining balance each month.

    The reported yearly principal is round(loan / repayment years), which is
    computed independently of the monthly paydown and can differ from
    12 * the monthly payment by a few units.

    Args:
        loan_principal: Loan principal amount
        annual_rate_percent: Annual interest rate in percent (2 = 2%)
        grace_months: Interest-only months (multiple of 12)
        repayment_months: Amortizing months (multiple of 12)

    Returns:
        Dict with "interest", "principal_repayment" and "total_repayment"
        lists, one value per year of the loan term

    Raises:
        ValueError: If a term is not a positive number of whole years
    """
    grace_years = _whole_years(grace_months, "grace_months")
    repayment_years = _whole_years(repayment_months, "repayment_months")

    monthly_rate = annual_rate_percent / 100 / MONTHS_PER_YEAR

    # Grace period
    grace_interest_month = calculate_grace_interest(loan_principal, monthly_rate)
    interest = [grace_interest_month * MONTHS_PER_YEAR] * grace_years

    # Repayment period
    principal_payment_month = round_half_up(loan_principal / repayment_months)
    principal_payment_year = round_half_up(loan_principal / repayment_years)
    principal_repayment = [0.0] * grace_years + [
        principal_payment_year
    ] * repayment_years

    balance = loan_principal
    for _ in range(repayment_years):
        year_interest = 0.0
        for _ in range(MONTHS_PER_YEAR):
            year_interest += round_half_up(balance * monthly_rate)
            balance -= principal_payment_month
        interest.append(year_interest)

    total_repayment = [
        interest[year] + principal_repayment[year]
        for year in range(grace_years + repayment_years)
    ]

    return {
        "interest": interest,
        "principal_repayment": principal_repayment,
        "total_repayment": total_repayment,
    }


def calculate_total_interest(schedule: Dict[str, List[float]]) -> float:
    """Calculate total interest paid over the loan term."""
    return sum(schedule["interest"])


def calculate_total_principal(schedule: Dict[str, List[float]]) -> float:
    """Calculate total principal reported as repaid over the loan term."""
    return sum(schedule["principal_repayment"])
