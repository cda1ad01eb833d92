"""
Loan Feasibility Calculation Engine

Pure numeric modules for the DSR/ICR and IRR loan feasibility checks.
"""

from feasibility.calculations import amortization, cashflow, irr, ratios
from feasibility.calculations import calculators
from feasibility.calculations.calculators import dsr_icr_calculator, irr_calculator

__all__ = [
    "amortization",
    "calculators",
    "cashflow",
    "irr",
    "ratios",
    "dsr_icr_calculator",
    "irr_calculator",
]
