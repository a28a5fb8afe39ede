import logging

import streamlit as st
from pydantic import ValidationError

from core.calculators import calculate_mortgage
from core.compliance import suggested_rate
from core.errors import InvalidInputError
from core.models import MortgageInputs
from core.presets import DEFAULT_CONFIG
from core.utils import format_currency, format_percent
from ui.components import metric_row, render_compliance_alert, render_loan_charts, render_pdf_download

logger = logging.getLogger(__name__)


def render_mortgage_calculator(config=DEFAULT_CONFIG):
    """Mortgage form, PITI breakdown, charts and report download."""
    limits = config.limits
    st.header("Mortgage Calculator")
    st.caption("Compliant with Indonesian Banking Regulations (OJK)")

    c1, c2 = st.columns(2)
    with c1:
        loan_amount = st.number_input(
            "Home Price (Rp)", value=1_000_000_000.0, step=10_000_000.0, key="mtg_loan_amount"
        )
        down_payment = st.number_input(
            "Down Payment (Rp)",
            value=200_000_000.0,
            step=10_000_000.0,
            key="mtg_down_payment",
            help=f"Minimum {format_percent(limits.min_down_payment_mortgage, 0)} of the home price",
        )
        rate = st.number_input(
            "Interest Rate %",
            value=suggested_rate("mortgage", config),
            step=0.125,
            key="mtg_rate",
            help=f"Current BI Rate: {config.rates.bi_rate}% | Max allowed: {limits.max_mortgage_rate}%",
        )
        term = st.number_input(
            "Loan Term (years)",
            value=15,
            step=1,
            key="mtg_term",
            help=f"Maximum allowed: {limits.max_loan_term_mortgage} years (Indonesian banking regulation)",
        )
    with c2:
        property_tax = st.number_input(
            "Property Tax (annual, Rp)", value=10_000_000.0, step=500_000.0, key="mtg_tax"
        )
        insurance = st.number_input(
            "Home Insurance (annual, Rp)", value=3_000_000.0, step=500_000.0, key="mtg_ins"
        )
        pmi_rate = st.number_input("PMI Rate % (annual)", value=0.5, step=0.05, key="mtg_pmi")
        hoa = st.number_input("HOA Fees (monthly, Rp)", value=500_000.0, step=50_000.0, key="mtg_hoa")

    try:
        inputs = MortgageInputs(
            loan_amount=loan_amount,
            interest_rate=rate,
            loan_term_years=term,
            down_payment=down_payment,
            property_tax=property_tax,
            home_insurance=insurance,
            pmi_rate=pmi_rate,
            hoa_fees=hoa,
        )
        result = calculate_mortgage(inputs, config)
    except (InvalidInputError, ValidationError) as exc:
        logger.warning("Mortgage calculation rejected: %s", exc)
        st.error(f"Cannot calculate: {exc}")
        return None

    st.session_state["mortgage_calc"] = {
        "principal": result.principal,
        "monthly_payment": result.monthly_payment,
        "principal_and_interest": result.principal_and_interest,
        "loan_to_value": result.loan_to_value,
        "errors": sum(w.severity == "error" for w in result.compliance_warnings),
    }

    render_compliance_alert(result.compliance_warnings)
    st.caption(f"Monthly Payment: {format_currency(result.monthly_payment)}")
    st.caption(f"Loan Amount: {format_currency(result.principal)} • LTV: {result.loan_to_value:.1f}%")
    if result.loan_to_value > 80:
        st.caption(f"PMI required (LTV > 80% | Max LTV: {limits.max_loan_to_value_mortgage}%)")
    else:
        st.caption("PMI not required (LTV ≤ 80%)")
    metric_row(
        [
            ("Principal & Interest", result.principal_and_interest),
            ("Taxes", result.monthly_taxes),
            ("Insurance", result.monthly_insurance),
            ("PMI", result.monthly_pmi),
            ("HOA", result.monthly_hoa),
        ]
    )
    metric_row([("Total Interest", result.total_interest), ("Total Cost", result.total_cost)])
    render_loan_charts(result)
    render_pdf_download(inputs, result, "mortgage_report.pdf")
    return result
