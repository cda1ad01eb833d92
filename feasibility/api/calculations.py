"""
Loan feasibility calculation API endpoints.

These endpoints accept business inputs and return the calculated ratios.
"""

import math

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field
from typing import List, Optional

from feasibility.calculations import amortization, calculators, cashflow, irr
from feasibility.config import get_settings

router = APIRouter()


def _finite_or_none(value: float) -> Optional[float]:
    """JSON has no inf/NaN; undefined ratios are returned as null."""
    return value if math.isfinite(value) else None


class IRRInput(BaseModel):
    """Input for the IRR feasibility check."""

    sales: float
    production_cost: float
    own_labor_cost: float
    init_business_investment: float


class DsrIcrInput(IRRInput):
    """Input for the DSR/ICR feasibility check."""

    loan_principal: float


class DsrIcrResponse(BaseModel):
    """Averaged coverage ratios and pass/fail status."""

    rti: Optional[float] = None
    dsr: Optional[float] = None
    status: bool


class IRRResponse(BaseModel):
    """IRR, pass/fail status and the projected cash flows."""

    irr: float
    status: bool
    cash_flows: List[float]


@router.post("/dsr-icr", response_model=DsrIcrResponse)
async def calculate_dsr_icr(inputs: DsrIcrInput):
    """Calculate the 15-year interest coverage and debt service ratios."""
    try:
        result = calculators.dsr_icr_calculator(
            sales=inputs.sales,
            production_cost=inputs.production_cost,
            own_labor_cost=inputs.own_labor_cost,
            init_business_investment=inputs.init_business_investment,
            loan_principal=inputs.loan_principal,
            validate=get_settings().strict_validation,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return DsrIcrResponse(
        rti=_finite_or_none(result["rti"]),
        dsr=_finite_or_none(result["dsr"]),
        status=result["status"],
    )


@router.post("/irr", response_model=IRRResponse)
async def calculate_irr_check(inputs: IRRInput):
    """Calculate the 15-year IRR feasibility check."""
    try:
        if get_settings().strict_validation:
            calculators.validate_inputs(
                inputs.sales,
                inputs.production_cost,
                inputs.own_labor_cost,
                inputs.init_business_investment,
            )
        cash_flows = cashflow.irr_cash_flows(
            inputs.sales,
            inputs.production_cost,
            inputs.own_labor_cost,
            inputs.init_business_investment,
        )
        rate = irr.calculate_irr(cash_flows)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return IRRResponse(
        irr=rate, status=rate > calculators.IRR_HURDLE_RATE, cash_flows=cash_flows
    )


class CashFlowIRRInput(BaseModel):
    """Input for solving IRR on an arbitrary cash flow series."""

    cash_flows: List[float]


class CashFlowIRRResponse(BaseModel):
    """Solved rate and the NPV left at that rate."""

    irr: float
    npv: Optional[float] = None


@router.post("/irr/cash-flows", response_model=CashFlowIRRResponse)
async def calculate_cash_flow_irr(inputs: CashFlowIRRInput):
    """Solve IRR for given cash flows."""
    try:
        rate = irr.calculate_irr(inputs.cash_flows)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    npv = irr.calculate_npv(inputs.cash_flows, rate)
    return CashFlowIRRResponse(irr=rate, npv=_finite_or_none(npv))


# 50 years per loan phase
MAX_TERM_MONTHS = 600


class RepaymentInput(BaseModel):
    """Input for the repayment schedule."""

    loan_principal: float
    annual_rate_percent: float = amortization.DEFAULT_ANNUAL_RATE_PERCENT
    grace_months: int = Field(
        amortization.DEFAULT_GRACE_MONTHS, gt=0, le=MAX_TERM_MONTHS
    )
    repayment_months: int = Field(
        amortization.DEFAULT_REPAYMENT_MONTHS, gt=0, le=MAX_TERM_MONTHS
    )


@router.post("/repayment-schedule")
async def calculate_repayment_schedule(inputs: RepaymentInput):
    """Generate yearly interest, principal and total repayment."""
    try:
        schedule = amortization.generate_repayment_schedule(
            loan_principal=inputs.loan_principal,
            annual_rate_percent=inputs.annual_rate_percent,
            grace_months=inputs.grace_months,
            repayment_months=inputs.repayment_months,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {
        **schedule,
        "total_interest": amortization.calculate_total_interest(schedule),
        "total_principal": amortization.calculate_total_principal(schedule),
    }
