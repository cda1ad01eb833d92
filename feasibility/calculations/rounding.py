"""
Rounding helpers.

Every rounded figure in the projections (renovation reserves, monthly
interest, repayment amounts) goes through round_half_up so the whole engine
follows one policy. Python's round() does banker's rounding and is not used.
"""

import math


def round_half_up(value: float) -> float:
    """
    Round to the nearest integer, with halves going toward +infinity.

    Compares the fractional part against 0.5 instead of flooring value + 0.5,
    since that sum can itself round up (0.49999999999999994 + 0.5 == 1.0).

    Examples:
        round_half_up(2.5) -> 3.0
        round_half_up(-2.5) -> -2.0
    """
    whole = float(math.floor(value))
    if value - whole >= 0.5:
        return whole + 1.0
    return whole
