import logging

import streamlit as st
from pydantic import ValidationError

from core.calculators import calculate_personal_loan
from core.compliance import suggested_rate
from core.errors import InvalidInputError
from core.models import PersonalLoanInputs
from core.presets import DEFAULT_CONFIG
from core.utils import format_currency
from ui.components import metric_row, render_compliance_alert, render_loan_charts, render_pdf_download

logger = logging.getLogger(__name__)


def render_personal_loan_calculator(config=DEFAULT_CONFIG):
    limits = config.limits
    st.header("Personal Loan Calculator")
    st.caption("Compliant with Indonesian Banking Regulations (OJK)")

    c1, c2 = st.columns(2)
    with c1:
        amount = st.number_input(
            "Loan Amount (Rp)", value=50_000_000.0, step=1_000_000.0, key="pl_amount"
        )
        rate = st.number_input(
            "Interest Rate %",
            value=suggested_rate("personal", config),
            step=0.25,
            key="pl_rate",
            help=f"Current BI Rate: {config.rates.bi_rate}% | Max allowed: {limits.max_personal_loan_rate}%",
        )
        term = st.number_input(
            "Loan Term (months)",
            value=36,
            step=1,
            key="pl_term",
            help=f"Maximum allowed: {limits.max_loan_term_personal_loan} months (Indonesian banking regulation)",
        )
    with c2:
        fee_rate = st.number_input("Origination Fee %", value=3.0, step=0.5, key="pl_fee")
        income = st.number_input(
            "Monthly Income (Rp)",
            value=4_200_000.0,
            step=100_000.0,
            key="pl_income",
            help=f"Used to calculate debt-to-income ratio (Max DTI: {limits.max_debt_to_income_ratio}%). "
            "Leave at 0 to skip.",
        )

    try:
        inputs = PersonalLoanInputs(
            loan_amount=amount,
            interest_rate=rate,
            loan_term_months=term,
            origination_fee_rate=fee_rate,
            monthly_income=income if income > 0 else None,
        )
        result = calculate_personal_loan(inputs, config)
    except (InvalidInputError, ValidationError) as exc:
        logger.warning("Personal loan calculation rejected: %s", exc)
        st.error(f"Cannot calculate: {exc}")
        return None

    st.session_state["personal_loan_calc"] = {
        "monthly_payment": result.monthly_payment,
        "debt_to_income": result.debt_to_income,
        "errors": sum(w.severity == "error" for w in result.compliance_warnings),
    }

    render_compliance_alert(result.compliance_warnings)
    st.caption(f"Monthly Payment: {format_currency(result.monthly_payment)}")
    if result.debt_to_income is not None:
        st.caption(f"Debt-to-Income Ratio: {result.debt_to_income:.1f}%")
    metric_row(
        [
            ("Monthly Payment", result.monthly_payment),
            ("Total Interest", result.total_interest),
            ("Origination Fee", result.origination_fee),
            ("Total Cost", result.total_cost),
        ]
    )
    render_loan_charts(result)
    render_pdf_download(inputs, result, "personal_loan_report.pdf")
    return result
