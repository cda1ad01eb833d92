"""
Coverage Ratio Calculations

Averages yearly profit-to-debt ratios over the projection horizon.
A zero denominator yields inf/NaN for that year (IEEE-754), which then
propagates into the average instead of raising.
"""

from typing import List

import numpy as np


def _mean_of_ratios(numerators: List[float], denominators: List[float]) -> float:
    """Arithmetic mean of numerators[i] / denominators[i]."""
    if len(numerators) != len(denominators):
        raise ValueError("Ratio series must have the same length")
    if not numerators:
        raise ValueError("Ratio series must not be empty")

    with np.errstate(divide="ignore", invalid="ignore"):
        ratios = np.asarray(numerators, dtype=np.float64) / np.asarray(
            denominators, dtype=np.float64
        )

    # Accumulate left to right; np.mean/sum use pairwise summation.
    total = 0.0
    for ratio in ratios.tolist():
        total += ratio
    return total / len(ratios)


def interest_coverage_ratio(
    operating_profit: List[float], interest: List[float]
) -> float:
    """
    Calculate the interest coverage ratio (ICR / RTI).

    Mean over the horizon of operating profit / interest paid.
    """
    return _mean_of_ratios(operating_profit, interest)


def debt_service_ratio(
    operating_profit: List[float], total_repayment: List[float]
) -> float:
    """
    Calculate the debt service ratio (DSR).

    Mean over the horizon of operating profit / (interest + principal).
    """
    return _mean_of_ratios(operating_profit, total_repayment)


def is_undefined(ratio: float) -> bool:
    """True when a ratio is NaN or infinite (some denominator was zero)."""
    return not np.isfinite(ratio)
