"""
API routes for the loan feasibility calculators.
"""

from fastapi import APIRouter

from feasibility.api import calculations

router = APIRouter()

# Include sub-routers
router.include_router(calculations.router, prefix="/calculate", tags=["calculations"])
