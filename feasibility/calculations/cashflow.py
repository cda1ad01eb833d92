"""
Cash Flow Calculations

Builds the 15-year yearly series used by the loan feasibility ratios:
renovation reserves, operating profit (DSR/ICR path) and net cash flow
(IRR path). Index 0 is the first business year.
"""

from typing import List, Dict

from feasibility.calculations.rounding import round_half_up

PROJECTION_YEARS = 15

# Renovation reserve as a share of total project cost, keyed by year index.
# Years 7, 10 and 15 of the projection.
RENOVATION_RATES: Dict[int, float] = {
    6: 0.04,
    9: 0.05,
    14: 0.08,
}


def calculate_total_project_cost(
    production_cost: float, init_business_investment: float
) -> float:
    """Total project cost = production cost + initial business investment."""
    return production_cost + init_business_investment


def calculate_base_revenue(
    sales: float, production_cost: float, own_labor_cost: float
) -> float:
    """
    Yearly revenue before any reserve or investment deduction.

    Owner labor cost is added back because it is already included in the
    production cost but is not paid out to a third party.
    """
    return sales - production_cost + own_labor_cost


def fund_for_renovation_schedule(
    production_cost: float, init_business_investment: float
) -> List[float]:
    """
    Calculate the renovation reserve required in each projection year.

    Args:
        production_cost: Cost of sales plus SG&A
        init_business_investment: Initial investment (land + facilities)

    Returns:
        15 yearly amounts, zero except years 7, 10 and 15
    """
    total_project_cost = calculate_total_project_cost(
        production_cost, init_business_investment
    )

    schedule = [0.0] * PROJECTION_YEARS
    for year, rate in RENOVATION_RATES.items():
        schedule[year] = round_half_up(total_project_cost * rate)

    return schedule


def operating_profit_series(
    sales: float,
    production_cost: float,
    own_labor_cost: float,
    renovation_schedule: List[float],
) -> List[float]:
    """
    Calculate yearly operating profit.

    profit = sales - production cost + own labor cost - renovation reserve

    Args:
        sales: Yearly sales
        production_cost: Cost of sales plus SG&A
        own_labor_cost: Owner labor cost
        renovation_schedule: Output of fund_for_renovation_schedule()

    Returns:
        15 yearly operating profit values
    """
    return [
        sales - production_cost + own_labor_cost - renovation_schedule[year]
        for year in range(PROJECTION_YEARS)
    ]


def irr_cash_flows(
    sales: float,
    production_cost: float,
    own_labor_cost: float,
    init_business_investment: float,
) -> List[float]:
    """
    Calculate yearly net cash flows for the IRR calculation.

    Year 0 carries the initial investment as an outflow. Renovation years
    deduct their reserve from revenue and are rounded; every other year is
    the unrounded base revenue.

    Returns:
        15 yearly cash flows
    """
    revenue = calculate_base_revenue(sales, production_cost, own_labor_cost)
    total_project_cost = calculate_total_project_cost(
        production_cost, init_business_investment
    )

    cash_flows = [revenue] * PROJECTION_YEARS
    cash_flows[0] = revenue - init_business_investment

    for year, rate in RENOVATION_RATES.items():
        cash_flows[year] = round_half_up(revenue - total_project_cost * rate)

    return cash_flows
