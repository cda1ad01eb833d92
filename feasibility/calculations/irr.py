"""
IRR and NPV Calculations

Implements IRR by bisection over the rate interval [-1, 1].
"""

import logging
from typing import List

import numpy as np

logger = logging.getLogger(__name__)

RATE_LOWER_BOUND = -1.0
RATE_UPPER_BOUND = 1.0
TOLERANCE = 1e-21
MAX_ITERATIONS = 200


class IRRConvergenceError(ValueError):
    """Raised when bisection exhausts its iteration budget."""


def calculate_present_value(cash_flow: float, rate: float, period: int) -> float:
    """
    Discount a single cash flow back to period 0.

    A rate of exactly -1 gives an infinite (or NaN) present value rather
    than raising ZeroDivisionError.
    """
    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        value = np.float64(cash_flow) / (1.0 + np.float64(rate)) ** period
    return float(value)


def calculate_npv(cash_flows: List[float], discount_rate: float) -> float:
    """
    Calculate NPV (Net Present Value) of cash flows.

    Args:
        cash_flows: Array of cash flows (negative = outflow, positive = inflow)
        discount_rate: Annual discount rate (e.g., 0.10 for 10%)

    Returns:
        NPV value
    """
    npv = 0.0
    for period, cf in enumerate(cash_flows):
        npv += calculate_present_value(cf, discount_rate, period)
    return npv


def calculate_irr(
    cash_flows: List[float], max_iterations: int = MAX_ITERATIONS
) -> float:
    """
    Calculate IRR (Internal Rate of Return) using bisection.

    Each step evaluates NPV at the midpoint of [low, high]. A positive NPV
    means the rate is too low, so the lower bound moves up; otherwise the
    upper bound moves down. Stops once two consecutive midpoints differ by
    less than TOLERANCE or |NPV| <= TOLERANCE.

    When the series has no root in [-1, 1] the midpoints converge onto the
    nearest bound and that bound is returned.

    Args:
        cash_flows: Array of periodic cash flows
        max_iterations: Bisection step budget

    Returns:
        Rate as decimal (e.g., 0.15 for 15%)

    Raises:
        ValueError: If no cash flows are given
        IRRConvergenceError: If neither stop condition is met within
            max_iterations steps
    """
    if not cash_flows:
        raise ValueError("At least 1 cash flow required")

    low = RATE_LOWER_BOUND
    high = RATE_UPPER_BOUND
    last_guess = RATE_UPPER_BOUND

    for _ in range(max_iterations):
        guess = (low + high) / 2
        settled = abs(last_guess - guess) < TOLERANCE
        last_guess = guess

        npv = calculate_npv(cash_flows, guess)

        if npv > 0:
            low = guess
        else:
            high = guess

        # A NaN NPV also stops the search.
        if settled or not abs(npv) > TOLERANCE:
            return guess

    logger.warning(
        "IRR bisection stopped after %d iterations at rate %r", max_iterations, last_guess
    )
    raise IRRConvergenceError(
        f"IRR calculation did not converge within {max_iterations} iterations"
    )
