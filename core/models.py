from __future__ import annotations

from typing import Annotated, Any, Dict, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel


class _Record(BaseModel):
    """Immutable value record.

    Inputs accept either the Python attribute names (``loan_amount``) or the
    camelCase names used by the web forms (``loanAmount``).  NaN and infinity
    are rejected at construction.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        allow_inf_nan=False,
    )


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------


class MortgageInputs(_Record):
    """Home purchase financed with a fixed-rate mortgage.

    ``loan_amount`` is the property price the down payment is taken from; the
    financed principal is ``loan_amount - down_payment``.  ``property_tax`` and
    ``home_insurance`` are annual amounts, ``hoa_fees`` is monthly and
    ``pmi_rate`` is an annual percentage of the financed principal.
    """

    kind: Literal["mortgage"] = "mortgage"
    loan_amount: float = Field(gt=0)
    interest_rate: float = Field(ge=0)
    loan_term_years: int = Field(ge=1)
    down_payment: float = Field(ge=0)
    property_tax: float = Field(default=0.0, ge=0)
    home_insurance: float = Field(default=0.0, ge=0)
    pmi_rate: float = Field(default=0.0, ge=0)
    hoa_fees: float = Field(default=0.0, ge=0)


class AutoLoanInputs(_Record):
    kind: Literal["auto"] = "auto"
    vehicle_price: float = Field(gt=0)
    down_payment: float = Field(ge=0)
    trade_in_value: float = Field(default=0.0, ge=0)
    interest_rate: float = Field(ge=0)
    loan_term_years: int = Field(ge=1)
    sales_tax_rate: float = Field(ge=0)
    additional_fees: float = Field(default=0.0, ge=0)


class PersonalLoanInputs(_Record):
    """Unsecured installment loan.

    The origination fee is charged up front and is not financed.
    ``monthly_income`` is optional; without it no debt-to-income ratio is
    computed.
    """

    kind: Literal["personal"] = "personal"
    loan_amount: float = Field(gt=0)
    interest_rate: float = Field(ge=0)
    loan_term_months: int = Field(ge=1)
    origination_fee_rate: float = Field(default=0.0, ge=0)
    monthly_income: Optional[float] = Field(default=None, ge=0)


class InvestmentInputs(_Record):
    initial_investment: float = Field(ge=0)
    monthly_contribution: float = Field(ge=0)
    interest_rate: float = Field(ge=0, le=100)
    investment_duration_years: int = Field(ge=1, le=50)
    # 1 = annually, 4 = quarterly, 12 = monthly, 365 = daily
    compounding_frequency: int = Field(default=12, ge=1, le=365)
    inflation_rate: float = Field(default=0.0, ge=0, le=20)


LoanInputs = Annotated[
    Union[MortgageInputs, AutoLoanInputs, PersonalLoanInputs],
    Field(discriminator="kind"),
]

_loan_inputs_adapter = TypeAdapter(LoanInputs)


def parse_loan_inputs(data: Dict[str, Any]):
    """Build the matching loan input record from a mapping carrying ``kind``."""
    return _loan_inputs_adapter.validate_python(data)


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


class AmortizationEntry(_Record):
    month: int
    payment: float
    principal: float
    interest: float
    balance: float
    cumulative_interest: float


class ComplianceWarning(_Record):
    """A regulatory finding for one input field.

    ``error`` means the input breaches a hard ceiling, ``warning`` means the
    value is unusual but allowed.  ``field`` is the input's camelCase form
    name (``monthlyIncome``), matching the aliases the inputs accept.
    """

    severity: Literal["warning", "error"]
    message: str
    field: str


class LoanResult(_Record):
    principal: float
    monthly_payment: float
    total_interest: float
    total_cost: float
    amortization: Tuple[AmortizationEntry, ...] = ()
    compliance_warnings: Tuple[ComplianceWarning, ...] = ()


class MortgageResult(LoanResult):
    principal_and_interest: float
    monthly_taxes: float
    monthly_insurance: float
    monthly_pmi: float
    monthly_hoa: float
    loan_to_value: float


class AutoLoanResult(LoanResult):
    sales_tax: float
    purchase_cost: float
    loan_to_value: float


class PersonalLoanResult(LoanResult):
    origination_fee: float
    debt_to_income: Optional[float] = None


class ProjectionRow(_Record):
    year: int
    value: float
    contributions: float
    interest: float


class InvestmentResult(_Record):
    future_value: float
    total_contributions: float
    interest_earned: float
    real_value: float
    projections: Tuple[ProjectionRow, ...] = ()
