"""
Run both feasibility calculators on the documented example inputs
and print the results.
"""
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from feasibility.calculations import dsr_icr_calculator, irr_calculator

# sales = production volume * unit price
SALES = 35300429.75241912
# cost of sales + SG&A
PRODUCTION_COST = 36950380.16565876
# sales / owner labor cost ratio
OWN_LABOR_COST = 20680000
# land purchase + facilities
INIT_BUSINESS_INVESTMENT = 52000000
LOAN_PRINCIPAL = 34880000


def main():
    print(
        dsr_icr_calculator(
            sales=SALES,
            production_cost=PRODUCTION_COST,
            own_labor_cost=OWN_LABOR_COST,
            init_business_investment=INIT_BUSINESS_INVESTMENT,
            loan_principal=LOAN_PRINCIPAL,
        )
    )
    print(
        irr_calculator(
            sales=SALES,
            production_cost=PRODUCTION_COST,
            own_labor_cost=OWN_LABOR_COST,
            init_business_investment=INIT_BUSINESS_INVESTMENT,
        )
    )


if __name__ == "__main__":
    main()
