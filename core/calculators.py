from __future__ import annotations

from functools import singledispatch

from core.amortization import amortize
from core.compliance import validate_auto_loan, validate_mortgage, validate_personal_loan
from core.investment import project
from core.models import (
    AutoLoanInputs,
    AutoLoanResult,
    InvestmentInputs,
    InvestmentResult,
    MortgageInputs,
    MortgageResult,
    PersonalLoanInputs,
    PersonalLoanResult,
)
from core.presets import DEFAULT_CONFIG, RegulatoryConfig


def calculate_mortgage(
    inputs: MortgageInputs, config: RegulatoryConfig = DEFAULT_CONFIG
) -> MortgageResult:
    """Monthly PITI breakdown, schedule and compliance findings for a mortgage.

    Taxes, insurance and HOA dues are carried into ``total_cost`` for every
    month of the term; PMI is part of the monthly payment but is left out of
    ``total_cost``.
    """

    principal = inputs.loan_amount - inputs.down_payment
    total_months = inputs.loan_term_years * 12
    pi, schedule = amortize(principal, inputs.interest_rate / 100 / 12, total_months)

    monthly_taxes = inputs.property_tax / 12
    monthly_insurance = inputs.home_insurance / 12
    monthly_pmi = principal * (inputs.pmi_rate / 100) / 12
    monthly_hoa = inputs.hoa_fees

    total_interest = sum(e.interest for e in schedule)
    total_cost = principal + total_interest + (monthly_taxes + monthly_insurance + monthly_hoa) * total_months

    return MortgageResult(
        principal=principal,
        monthly_payment=pi + monthly_taxes + monthly_insurance + monthly_pmi + monthly_hoa,
        total_interest=total_interest,
        total_cost=total_cost,
        principal_and_interest=pi,
        monthly_taxes=monthly_taxes,
        monthly_insurance=monthly_insurance,
        monthly_pmi=monthly_pmi,
        monthly_hoa=monthly_hoa,
        loan_to_value=principal / inputs.loan_amount * 100,
        amortization=tuple(schedule),
        compliance_warnings=tuple(validate_mortgage(inputs, config)),
    )


def calculate_auto_loan(
    inputs: AutoLoanInputs, config: RegulatoryConfig = DEFAULT_CONFIG
) -> AutoLoanResult:
    """Finance a vehicle purchase.

    Sales tax and additional fees are rolled into the amount financed; down
    payment and trade-in reduce it.  ``total_cost`` is the total of payments
    (principal plus interest).
    """

    sales_tax = inputs.vehicle_price * (inputs.sales_tax_rate / 100)
    purchase_cost = inputs.vehicle_price + sales_tax + inputs.additional_fees
    principal = purchase_cost - inputs.down_payment - inputs.trade_in_value
    payment, schedule = amortize(principal, inputs.interest_rate / 100 / 12, inputs.loan_term_years * 12)
    total_interest = sum(e.interest for e in schedule)

    return AutoLoanResult(
        principal=principal,
        monthly_payment=payment,
        total_interest=total_interest,
        total_cost=principal + total_interest,
        sales_tax=sales_tax,
        purchase_cost=purchase_cost,
        loan_to_value=principal / inputs.vehicle_price * 100,
        amortization=tuple(schedule),
        compliance_warnings=tuple(validate_auto_loan(inputs, config)),
    )


def calculate_personal_loan(
    inputs: PersonalLoanInputs, config: RegulatoryConfig = DEFAULT_CONFIG
) -> PersonalLoanResult:
    """Installment schedule for a personal loan.

    The origination fee is paid up front and only shows up in ``total_cost``.
    ``debt_to_income`` is ``None`` unless a positive monthly income is given.
    """

    principal = inputs.loan_amount
    origination_fee = inputs.loan_amount * (inputs.origination_fee_rate / 100)
    payment, schedule = amortize(principal, inputs.interest_rate / 100 / 12, inputs.loan_term_months)
    total_interest = sum(e.interest for e in schedule)

    dti = None
    if inputs.monthly_income is not None and inputs.monthly_income > 0:
        dti = payment / inputs.monthly_income * 100

    return PersonalLoanResult(
        principal=principal,
        monthly_payment=payment,
        total_interest=total_interest,
        total_cost=principal + total_interest + origination_fee,
        origination_fee=origination_fee,
        debt_to_income=dti,
        amortization=tuple(schedule),
        compliance_warnings=tuple(validate_personal_loan(inputs, config)),
    )


def calculate_investment(
    inputs: InvestmentInputs, config: RegulatoryConfig = DEFAULT_CONFIG
) -> InvestmentResult:
    """Investment growth projection.

    ``config`` is accepted for a uniform calculator signature; no regulatory
    rules apply to investments.
    """

    return project(inputs)


@singledispatch
def calculate(inputs, config: RegulatoryConfig = DEFAULT_CONFIG):
    """Run the calculator matching the type of ``inputs``."""
    raise TypeError(f"No calculator for {type(inputs).__name__}")


calculate.register(MortgageInputs, calculate_mortgage)
calculate.register(AutoLoanInputs, calculate_auto_loan)
calculate.register(PersonalLoanInputs, calculate_personal_loan)
calculate.register(InvestmentInputs, calculate_investment)
