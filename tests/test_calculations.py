"""
Tests for the loan feasibility calculation engine.
"""

import math

import pytest
from feasibility.calculations.rounding import round_half_up
from feasibility.calculations.cashflow import (
    fund_for_renovation_schedule,
    operating_profit_series,
    irr_cash_flows,
)
from feasibility.calculations.amortization import (
    generate_repayment_schedule,
    calculate_total_interest,
)
from feasibility.calculations.ratios import (
    interest_coverage_ratio,
    debt_service_ratio,
    is_undefined,
)
from feasibility.calculations.irr import (
    calculate_irr,
    calculate_npv,
    calculate_present_value,
    IRRConvergenceError,
)


class TestRounding:
    """Test the shared rounding policy."""

    def test_halves_round_up(self):
        """Halves go up, unlike Python's banker's rounding."""
        assert round_half_up(2.5) == 3.0
        assert round_half_up(47.5) == 48.0
        assert round_half_up(0.5) == 1.0

    def test_negative_halves_round_toward_positive(self):
        """Negative halves go toward +infinity."""
        assert round_half_up(-2.5) == -2.0
        assert round_half_up(-2.6) == -3.0

    def test_returns_float(self):
        """Rounded values stay floats."""
        assert isinstance(round_half_up(1.2), float)

    def test_just_below_half(self):
        """Largest double below 0.5 rounds down, though 0.5 + it == 1.0."""
        assert round_half_up(0.49999999999999994) == 0.0
        assert fund_for_renovation_schedule(12.499999999999998, 0)[6] == 0

    def test_large_integers_unchanged(self):
        """Integers past 2**52 are already whole and stay put."""
        assert round_half_up(4503599627370497.0) == 4503599627370497.0
        assert round_half_up(9007199254740990.0) == 9007199254740990.0


class TestRenovationSchedule:
    """Test renovation reserve schedule."""

    def test_reserve_years(self):
        """Reserves at years 7, 10 and 15 only."""
        schedule = fund_for_renovation_schedule(6000000, 4000000)
        expected = [0.0] * 15
        expected[6] = 400000
        expected[9] = 500000
        expected[14] = 800000
        assert schedule == expected

    def test_reserves_are_rounded(self):
        """Reserves are rounded to the unit."""
        schedule = fund_for_renovation_schedule(36950380.16565876, 52000000)
        assert schedule[6] == 3558015
        assert schedule[9] == 4447519
        assert schedule[14] == 7116030

    def test_zero_cost(self):
        """No project cost means no reserve."""
        assert fund_for_renovation_schedule(0, 0) == [0.0] * 15


class TestOperatingProfit:
    """Test operating profit series."""

    def test_constant_without_reserve(self):
        """Every year equals sales - cost + own labor when no reserve applies."""
        profit = operating_profit_series(100, 50, 10, [0.0] * 15)
        assert profit == [60] * 15

    def test_reserve_deducted_per_year(self):
        """Renovation reserve is only deducted in its own year."""
        renovation = fund_for_renovation_schedule(6000000, 4000000)
        profit = operating_profit_series(20000000, 6000000, 1000000, renovation)
        assert len(profit) == 15
        assert profit[0] == 15000000
        assert profit[6] == 14600000
        assert profit[9] == 14500000
        assert profit[14] == 14200000


class TestIRRCashFlows:
    """Test IRR cash flow series."""

    def test_series_shape(self):
        """Investment in year 0, rounded reserves in years 7, 10, 15."""
        cfs = irr_cash_flows(100, 50, 10, 200)
        assert cfs == [-140, 60, 60, 60, 60, 60, 50, 60, 60, 48, 60, 60, 60, 60, 40]

    def test_regular_years_not_rounded(self):
        """Years without a reserve carry unrounded revenue."""
        cfs = irr_cash_flows(100.25, 50, 10, 200)
        assert cfs[1] == 60.25
        assert cfs[0] == -139.75
        # 60.25 - 12.5 = 47.75
        assert cfs[9] == 48


class TestRepaymentSchedule:
    """Test grace period + level principal repayment."""

    def test_grace_period_interest(self):
        """Grace years pay rounded monthly interest * 12 and no principal."""
        schedule = generate_repayment_schedule(1200000)
        assert schedule["interest"][:5] == [24000] * 5
        assert schedule["principal_repayment"][:5] == [0] * 5

    def test_repayment_period(self):
        """Interest falls with the balance; yearly principal is flat."""
        schedule = generate_repayment_schedule(1200000)
        assert schedule["interest"][5:] == [
            22900, 20500, 18100, 15700, 13300, 10900, 8500, 6100, 3700, 1300,
        ]
        assert schedule["principal_repayment"][5:] == [120000] * 10

    def test_total_repayment(self):
        """Total repayment is interest + principal each year."""
        schedule = generate_repayment_schedule(1200000)
        assert len(schedule["total_repayment"]) == 15
        for year in range(15):
            assert schedule["total_repayment"][year] == (
                schedule["interest"][year] + schedule["principal_repayment"][year]
            )

    def test_example_loan_interest(self):
        """Monthly rounding of interest on the declining balance."""
        schedule = generate_repayment_schedule(34880000)
        assert schedule["interest"] == [
            697596, 697596, 697596, 697596, 697596,
            665626, 595867, 526107, 456346, 386587,
            316827, 247066, 177307, 107546, 37785,
        ]
        assert schedule["principal_repayment"][5:] == [3488000] * 10

    def test_total_interest(self):
        """Total interest sums the yearly interest."""
        schedule = generate_repayment_schedule(1200000)
        assert calculate_total_interest(schedule) == 241000

    def test_custom_terms(self):
        """Schedule length follows the loan term."""
        schedule = generate_repayment_schedule(
            1200000, annual_rate_percent=3, grace_months=24, repayment_months=36
        )
        assert len(schedule["interest"]) == 5
        assert schedule["interest"][:2] == [36000, 36000]
        assert schedule["principal_repayment"] == [0, 0, 400000, 400000, 400000]

    def test_partial_year_terms_rejected(self):
        """Terms must be whole years."""
        with pytest.raises(ValueError):
            generate_repayment_schedule(1200000, grace_months=30)
        with pytest.raises(ValueError):
            generate_repayment_schedule(1200000, repayment_months=0)

    def test_zero_principal(self):
        """A zero loan repays nothing."""
        schedule = generate_repayment_schedule(0)
        assert schedule["total_repayment"] == [0] * 15


class TestRatios:
    """Test coverage ratio aggregation."""

    def test_identical_series_give_one(self):
        """Ratio of a series to itself averages to exactly 1."""
        series = [float(v) for v in range(1, 16)]
        assert interest_coverage_ratio(series, series) == 1.0
        assert debt_service_ratio(series, series) == 1.0

    def test_mean_of_yearly_ratios(self):
        """Mean of yearly ratios, not ratio of totals."""
        profit = [10.0] * 15
        debt = [5.0] * 5 + [10.0] * 10
        assert debt_service_ratio(profit, debt) == pytest.approx((5 * 2 + 10) / 15)

    def test_zero_denominator_is_infinite(self):
        """Division by zero propagates as inf instead of raising."""
        ratio = interest_coverage_ratio([10.0] * 15, [0.0] * 15)
        assert math.isinf(ratio)
        assert is_undefined(ratio)

    def test_zero_over_zero_is_nan(self):
        """0/0 propagates as NaN."""
        ratio = debt_service_ratio([0.0] * 15, [0.0] * 15)
        assert math.isnan(ratio)
        assert is_undefined(ratio)

    def test_length_mismatch(self):
        """Series must line up year by year."""
        with pytest.raises(ValueError):
            interest_coverage_ratio([1.0] * 15, [1.0] * 14)


class TestIRRCalculations:
    """Test present value, NPV and bisection IRR."""

    def test_present_value(self):
        """Discount one cash flow."""
        assert calculate_present_value(121, 0.10, 2) == pytest.approx(100)
        assert calculate_present_value(50, 0.10, 0) == 50

    def test_present_value_at_minus_one(self):
        """Rate of -1 gives inf instead of ZeroDivisionError."""
        assert math.isinf(calculate_present_value(100, -1.0, 3))

    def test_calculate_npv(self):
        """Test NPV calculation."""
        npv = calculate_npv([-100, 50, 50, 50], 0.10)
        assert npv > 0

    def test_calculate_irr_simple(self):
        """Investment of 100, returns of 110 after 1 year = 10% return."""
        cash_flows = [-100, 110] + [0] * 13
        rate = calculate_irr(cash_flows)
        assert rate == pytest.approx(0.10, abs=1e-12)
        assert abs(calculate_npv(cash_flows, rate)) < 1e-9

    def test_single_sign_change_zeroes_npv(self):
        """Solved rate leaves NPV within 1e-9 of zero."""
        cash_flows = [-1000] + [100] * 14
        rate = calculate_irr(cash_flows)
        assert rate == pytest.approx(0.048410646745862373, abs=1e-12)
        assert abs(calculate_npv(cash_flows, rate)) < 1e-9

    def test_projection_series(self):
        """IRR of a projected cash flow series."""
        rate = calculate_irr(irr_cash_flows(100, 50, 10, 200))
        assert rate == pytest.approx(0.4197624722178749, abs=1e-12)

    def test_no_root_returns_bound(self):
        """Without a sign change the search settles on a bound."""
        assert calculate_irr([100] * 15) == 1.0
        assert calculate_irr([-100] * 15) == -1.0

    def test_iteration_cap(self):
        """Running out of iterations raises instead of returning a guess."""
        with pytest.raises(IRRConvergenceError):
            calculate_irr([-1000] + [100] * 14, max_iterations=5)

    def test_empty_cash_flows(self):
        """At least one cash flow is required."""
        with pytest.raises(ValueError):
            calculate_irr([])
