"""
Loan Feasibility Calculators

Wires the series, repayment and ratio modules into the two pass/fail checks
used for a loan application:

- dsr_icr_calculator: interest coverage (RTI) and debt service (DSR) ratios
- irr_calculator: internal rate of return of the 15-year cash flows

Inputs:
    sales: Yearly sales (production volume * unit price)
    production_cost: Cost of sales plus SG&A
    own_labor_cost: Owner labor cost
    init_business_investment: Initial investment (land purchase + facilities)
    loan_principal: Loan principal (DSR/ICR only)
"""

import logging
from typing import Dict, Optional, Union

from feasibility.calculations import amortization, cashflow, irr, ratios

logger = logging.getLogger(__name__)

COVERAGE_THRESHOLD = 1.0
IRR_HURDLE_RATE = 0.06


class InvalidInputError(ValueError):
    """Raised by validate_inputs() for inputs the ratios are not defined for."""


def validate_inputs(
    sales: float,
    production_cost: float,
    own_labor_cost: float,
    init_business_investment: float,
    loan_principal: Optional[float] = None,
) -> None:
    """
    Reject negative core inputs and a non-positive loan principal.

    Not called by default: the calculators accept any numbers and let a zero
    denominator show up as inf/NaN in the result.

    Raises:
        InvalidInputError: On the first offending input
    """
    core_inputs = {
        "sales": sales,
        "production_cost": production_cost,
        "own_labor_cost": own_labor_cost,
        "init_business_investment": init_business_investment,
    }
    for name, value in core_inputs.items():
        if value < 0:
            raise InvalidInputError(f"{name} must not be negative")

    if loan_principal is not None and loan_principal <= 0:
        raise InvalidInputError("loan_principal must be greater than zero")


def dsr_icr_calculator(
    sales: float,
    production_cost: float,
    own_labor_cost: float,
    init_business_investment: float,
    loan_principal: float,
    validate: bool = False,
) -> Dict[str, Union[float, bool]]:
    """
    Simulate the 15-year interest coverage and debt service ratios.

    Operating profit deducts the renovation reserve in years 7, 10 and 15.
    The loan is repaid at 2% over 60 grace months and 120 level-principal
    months. Passes when both averaged ratios exceed 1.

    Returns:
        {"rti": float, "dsr": float, "status": bool}
    """
    if validate:
        validate_inputs(
            sales, production_cost, own_labor_cost, init_business_investment, loan_principal
        )

    renovation = cashflow.fund_for_renovation_schedule(
        production_cost, init_business_investment
    )
    operating_profit = cashflow.operating_profit_series(
        sales, production_cost, own_labor_cost, renovation
    )
    schedule = amortization.generate_repayment_schedule(loan_principal)

    rti = ratios.interest_coverage_ratio(operating_profit, schedule["interest"])
    dsr = ratios.debt_service_ratio(operating_profit, schedule["total_repayment"])
    status = rti > COVERAGE_THRESHOLD and dsr > COVERAGE_THRESHOLD

    if ratios.is_undefined(rti) or ratios.is_undefined(dsr):
        logger.debug("Undefined coverage ratio for loan principal %r", loan_principal)
    logger.debug("DSR/ICR result: rti=%r dsr=%r status=%s", rti, dsr, status)

    return {"rti": rti, "dsr": dsr, "status": status}


def irr_calculator(
    sales: float,
    production_cost: float,
    own_labor_cost: float,
    init_business_investment: float,
    validate: bool = False,
) -> Dict[str, Union[float, bool]]:
    """
    Simulate the 15-year internal rate of return.

    Passes when the IRR exceeds 6%.

    Returns:
        {"irr": float, "status": bool}

    Raises:
        IRRConvergenceError: If the bisection solver does not converge
    """
    if validate:
        validate_inputs(sales, production_cost, own_labor_cost, init_business_investment)

    cash_flows = cashflow.irr_cash_flows(
        sales, production_cost, own_labor_cost, init_business_investment
    )
    rate = irr.calculate_irr(cash_flows)
    status = rate > IRR_HURDLE_RATE

    logger.debug("IRR result: irr=%r status=%s", rate, status)

    return {"irr": rate, "status": status}
