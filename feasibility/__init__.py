"""
Loan feasibility calculator: DSR, ICR and IRR over a 15-year projection.
"""

__version__ = "0.1.0"
