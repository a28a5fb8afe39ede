import pytest
from pydantic import ValidationError

from core.amortization import monthly_payment
from core.calculators import (
    calculate,
    calculate_auto_loan,
    calculate_investment,
    calculate_mortgage,
    calculate_personal_loan,
)
from core.errors import InvalidInputError
from core.models import (
    AutoLoanInputs,
    AutoLoanResult,
    InvestmentInputs,
    InvestmentResult,
    MortgageInputs,
    MortgageResult,
    PersonalLoanInputs,
    parse_loan_inputs,
)


def _mortgage(**overrides):
    data = dict(
        loan_amount=1_000_000_000,
        interest_rate=8.5,
        loan_term_years=15,
        down_payment=200_000_000,
    )
    data.update(overrides)
    return MortgageInputs(**data)


def test_mortgage_example():
    result = calculate_mortgage(_mortgage())
    assert result.principal == 800_000_000
    assert result.principal_and_interest == pytest.approx(7_879_888, rel=1e-3)
    assert result.principal_and_interest == pytest.approx(monthly_payment(800_000_000, 8.5, 180))
    assert len(result.amortization) == 180
    assert result.amortization[-1].balance == 0.0
    assert result.loan_to_value == pytest.approx(80.0)
    assert result.compliance_warnings == ()
    # no escrow items: the monthly payment is P&I only
    assert result.monthly_payment == result.principal_and_interest


def test_mortgage_piti_breakdown():
    result = calculate_mortgage(
        _mortgage(property_tax=12_000_000, home_insurance=3_600_000, pmi_rate=0.6, hoa_fees=500_000)
    )
    assert result.monthly_taxes == pytest.approx(1_000_000)
    assert result.monthly_insurance == pytest.approx(300_000)
    assert result.monthly_pmi == pytest.approx(800_000_000 * 0.006 / 12)
    assert result.monthly_hoa == 500_000
    assert result.monthly_payment == pytest.approx(
        result.principal_and_interest + 1_000_000 + 300_000 + result.monthly_pmi + 500_000
    )
    # taxes, insurance and HOA over 180 months; PMI is not part of the total
    expected_total = result.principal + result.total_interest + (1_000_000 + 300_000 + 500_000) * 180
    assert result.total_cost == pytest.approx(expected_total)


def test_mortgage_total_interest_matches_schedule():
    result = calculate_mortgage(_mortgage())
    assert result.total_interest == pytest.approx(result.amortization[-1].cumulative_interest)
    assert result.total_interest == pytest.approx(result.principal_and_interest * 180 - 800_000_000, rel=1e-9)


def test_mortgage_fully_paid_down_rejected():
    with pytest.raises(InvalidInputError):
        calculate_mortgage(_mortgage(down_payment=1_000_000_000))


def test_auto_loan_example():
    inputs = AutoLoanInputs(
        vehicle_price=300_000_000,
        down_payment=50_000_000,
        trade_in_value=0,
        interest_rate=9,
        loan_term_years=5,
        sales_tax_rate=10,
        additional_fees=5_000_000,
    )
    result = calculate_auto_loan(inputs)
    assert result.sales_tax == pytest.approx(30_000_000)
    assert result.purchase_cost == pytest.approx(335_000_000)
    assert result.principal == pytest.approx(285_000_000)
    assert len(result.amortization) == 60
    assert result.monthly_payment == pytest.approx(monthly_payment(285_000_000, 9, 60))
    assert result.total_cost == pytest.approx(result.principal + result.total_interest)
    assert result.loan_to_value == pytest.approx(95.0)
    assert result.compliance_warnings == ()


def test_auto_loan_trade_in_reduces_principal():
    inputs = AutoLoanInputs(
        vehicle_price=200_000_000,
        down_payment=20_000_000,
        trade_in_value=30_000_000,
        interest_rate=9,
        loan_term_years=3,
        sales_tax_rate=0,
    )
    assert calculate_auto_loan(inputs).principal == pytest.approx(150_000_000)


def test_auto_loan_nothing_financed_rejected():
    inputs = AutoLoanInputs(
        vehicle_price=100_000_000,
        down_payment=100_000_000,
        interest_rate=9,
        loan_term_years=3,
        sales_tax_rate=0,
    )
    with pytest.raises(InvalidInputError):
        calculate_auto_loan(inputs)


def test_personal_loan_dti_example():
    inputs = PersonalLoanInputs(
        loan_amount=50_000_000,
        interest_rate=15,
        loan_term_months=36,
        origination_fee_rate=3,
        monthly_income=4_200_000,
    )
    result = calculate_personal_loan(inputs)
    assert result.debt_to_income == pytest.approx(result.monthly_payment / 4_200_000 * 100)
    assert result.debt_to_income > 40
    assert any(
        w.severity == "error" and w.field == "monthlyIncome" for w in result.compliance_warnings
    )
    assert result.origination_fee == pytest.approx(1_500_000)
    assert result.total_cost == pytest.approx(50_000_000 + result.total_interest + 1_500_000)
    assert len(result.amortization) == 36


@pytest.mark.parametrize("income", [None, 0])
def test_personal_loan_without_income_has_no_dti(income):
    inputs = PersonalLoanInputs(
        loan_amount=10_000_000, interest_rate=15, loan_term_months=12, monthly_income=income
    )
    result = calculate_personal_loan(inputs)
    assert result.debt_to_income is None
    assert all(w.field != "monthlyIncome" for w in result.compliance_warnings)


def test_zero_rate_personal_loan():
    inputs = PersonalLoanInputs(loan_amount=12_000_000, interest_rate=0, loan_term_months=12)
    result = calculate_personal_loan(inputs)
    assert result.monthly_payment == pytest.approx(1_000_000)
    assert result.total_interest == 0


def test_calculate_dispatches_on_input_type():
    assert isinstance(calculate(_mortgage()), MortgageResult)
    auto = AutoLoanInputs(
        vehicle_price=100_000_000, down_payment=10_000_000, interest_rate=9, loan_term_years=2, sales_tax_rate=0
    )
    assert isinstance(calculate(auto), AutoLoanResult)
    inv = InvestmentInputs(
        initial_investment=1_000_000, monthly_contribution=0, interest_rate=5, investment_duration_years=1
    )
    assert isinstance(calculate(inv), InvestmentResult)
    assert calculate(inv) == calculate_investment(inv)
    with pytest.raises(TypeError):
        calculate({"loan_amount": 1})


def test_camel_case_aliases_accepted():
    inputs = MortgageInputs.model_validate(
        {"loanAmount": 1_000_000_000, "interestRate": 8.5, "loanTermYears": 15, "downPayment": 200_000_000}
    )
    assert inputs == _mortgage()
    assert inputs.model_dump(by_alias=True)["loanTermYears"] == 15


def test_parse_loan_inputs_uses_kind():
    parsed = parse_loan_inputs(
        {"kind": "personal", "loanAmount": 5_000_000, "interestRate": 12, "loanTermMonths": 12}
    )
    assert isinstance(parsed, PersonalLoanInputs)
    with pytest.raises(ValidationError):
        parse_loan_inputs({"kind": "boat", "loanAmount": 1})


@pytest.mark.parametrize(
    "field, value",
    [
        ("loan_amount", 0),
        ("loan_amount", float("nan")),
        ("interest_rate", -1),
        ("loan_term_years", 0),
        ("down_payment", float("inf")),
    ],
)
def test_invalid_inputs_rejected_at_construction(field, value):
    with pytest.raises(ValidationError):
        _mortgage(**{field: value})


def test_results_are_frozen():
    result = calculate_mortgage(_mortgage())
    with pytest.raises(ValidationError):
        result.monthly_payment = 1
