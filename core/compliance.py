"""OJK compliance rules for mortgage, auto and personal loans.

Every rule is evaluated against the same input snapshot and appends its own
finding, so one call reports every breach rather than the first one.  Ceiling
breaches are ``error``; a rate far above the product base rate is only a
``warning``.
"""
from __future__ import annotations

from functools import singledispatch
from typing import Any, Dict, Iterable, List

from pydantic.alias_generators import to_camel

from core.amortization import monthly_payment
from core.models import (
    AutoLoanInputs,
    ComplianceWarning,
    MortgageInputs,
    PersonalLoanInputs,
)
from core.presets import DEFAULT_CONFIG, RegulatoryConfig


def _error(message: str, field: str) -> ComplianceWarning:
    return ComplianceWarning(severity="error", message=message, field=to_camel(field))


def _warning(message: str, field: str) -> ComplianceWarning:
    return ComplianceWarning(severity="warning", message=message, field=to_camel(field))


def _market_rate_warning(base_rate: float) -> ComplianceWarning:
    return _warning(
        "Interest rate is significantly higher than current market rate "
        f"(BI Rate + spread: {base_rate}%)",
        "interest_rate",
    )


def validate_mortgage(
    inputs: MortgageInputs, config: RegulatoryConfig = DEFAULT_CONFIG
) -> List[ComplianceWarning]:
    res: List[ComplianceWarning] = []
    limits = config.limits

    if inputs.interest_rate > limits.max_mortgage_rate:
        res.append(
            _error(
                f"Interest rate exceeds maximum allowed rate of {limits.max_mortgage_rate}% "
                "for mortgages in Indonesia",
                "interest_rate",
            )
        )

    if inputs.loan_term_years > limits.max_loan_term_mortgage:
        res.append(
            _error(
                f"Loan term exceeds maximum allowed term of {limits.max_loan_term_mortgage} "
                "years for mortgages in Indonesia",
                "loan_term_years",
            )
        )

    ltv = (inputs.loan_amount - inputs.down_payment) / inputs.loan_amount * 100
    if ltv > limits.max_loan_to_value_mortgage:
        res.append(
            _error(
                f"Loan-to-value ratio of {ltv:.1f}% exceeds maximum allowed LTV of "
                f"{limits.max_loan_to_value_mortgage}%",
                "down_payment",
            )
        )

    down_pct = inputs.down_payment / inputs.loan_amount * 100
    if down_pct < limits.min_down_payment_mortgage:
        res.append(
            _error(
                f"Down payment of {down_pct:.1f}% is below minimum required "
                f"{limits.min_down_payment_mortgage}%",
                "down_payment",
            )
        )

    base = config.rates.mortgage_base_rate
    if inputs.interest_rate > base + config.warning_spreads.mortgage:
        res.append(_market_rate_warning(base))

    return res


def validate_auto_loan(
    inputs: AutoLoanInputs, config: RegulatoryConfig = DEFAULT_CONFIG
) -> List[ComplianceWarning]:
    res: List[ComplianceWarning] = []
    limits = config.limits

    if inputs.interest_rate > limits.max_auto_loan_rate:
        res.append(
            _error(
                f"Interest rate exceeds maximum allowed rate of {limits.max_auto_loan_rate}% "
                "for auto loans in Indonesia",
                "interest_rate",
            )
        )

    if inputs.loan_term_years > limits.max_loan_term_auto_loan:
        res.append(
            _error(
                f"Loan term exceeds maximum allowed term of {limits.max_loan_term_auto_loan} "
                "years for auto loans in Indonesia",
                "loan_term_years",
            )
        )

    base = config.rates.auto_loan_base_rate
    if inputs.interest_rate > base + config.warning_spreads.auto:
        res.append(_market_rate_warning(base))

    return res


def validate_personal_loan(
    inputs: PersonalLoanInputs, config: RegulatoryConfig = DEFAULT_CONFIG
) -> List[ComplianceWarning]:
    res: List[ComplianceWarning] = []
    limits = config.limits

    if inputs.interest_rate > limits.max_personal_loan_rate:
        res.append(
            _error(
                f"Interest rate exceeds maximum allowed rate of {limits.max_personal_loan_rate}% "
                "for personal loans in Indonesia",
                "interest_rate",
            )
        )

    if inputs.loan_term_months > limits.max_loan_term_personal_loan:
        res.append(
            _error(
                f"Loan term exceeds maximum allowed term of {limits.max_loan_term_personal_loan} "
                "months for personal loans in Indonesia",
                "loan_term_months",
            )
        )

    if inputs.monthly_income is not None and inputs.monthly_income > 0:
        payment = monthly_payment(inputs.loan_amount, inputs.interest_rate, inputs.loan_term_months)
        dti = payment / inputs.monthly_income * 100
        if dti > limits.max_debt_to_income_ratio:
            res.append(
                _error(
                    f"Debt-to-income ratio of {dti:.1f}% exceeds maximum allowed DTI of "
                    f"{limits.max_debt_to_income_ratio}%",
                    "monthly_income",
                )
            )

    base = config.rates.personal_loan_base_rate
    if inputs.interest_rate > base + config.warning_spreads.personal:
        res.append(_market_rate_warning(base))

    return res


@singledispatch
def validate(inputs, config: RegulatoryConfig = DEFAULT_CONFIG) -> List[ComplianceWarning]:
    """Run the rule set matching the type of ``inputs``."""
    raise TypeError(f"No compliance rules for {type(inputs).__name__}")


validate.register(MortgageInputs, validate_mortgage)
validate.register(AutoLoanInputs, validate_auto_loan)
validate.register(PersonalLoanInputs, validate_personal_loan)


def has_errors(warnings: Iterable[ComplianceWarning]) -> bool:
    return any(w.severity == "error" for w in warnings)


def errors_only(warnings: Iterable[ComplianceWarning]) -> List[ComplianceWarning]:
    return [w for w in warnings if w.severity == "error"]


def warnings_only(warnings: Iterable[ComplianceWarning]) -> List[ComplianceWarning]:
    return [w for w in warnings if w.severity == "warning"]


def suggested_rate(product: str, config: RegulatoryConfig = DEFAULT_CONFIG) -> float:
    """Base rate offered for ``product`` ("mortgage", "auto" or "personal").

    Any other product name falls back to the BI Rate itself.
    """

    rates = config.rates
    if product == "mortgage":
        return rates.mortgage_base_rate
    if product == "auto":
        return rates.auto_loan_base_rate
    if product == "personal":
        return rates.personal_loan_base_rate
    return rates.bi_rate


def banking_info(config: RegulatoryConfig = DEFAULT_CONFIG) -> Dict[str, Any]:
    """Snapshot of the reference rate, limits and suggested rates for display."""

    return {
        "bi_rate": config.rates.bi_rate,
        "last_updated": config.rates.last_updated,
        "compliance_rules": config.limits.model_dump(),
        "suggested_rates": {
            "mortgage": config.rates.mortgage_base_rate,
            "auto_loan": config.rates.auto_loan_base_rate,
            "personal_loan": config.rates.personal_loan_base_rate,
        },
    }
