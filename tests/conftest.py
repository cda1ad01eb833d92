"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "golden: marks regression tests on recorded values")


@pytest.fixture
def example_inputs():
    """Documented example business (smart-farm loan application)."""
    return {
        "sales": 35300429.75241912,
        "production_cost": 36950380.16565876,
        "own_labor_cost": 20680000,
        "init_business_investment": 52000000,
        "loan_principal": 34880000,
    }


@pytest.fixture
def irr_inputs(example_inputs):
    """Example inputs without the loan principal."""
    return {k: v for k, v in example_inputs.items() if k != "loan_principal"}
