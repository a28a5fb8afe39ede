import logging

import streamlit as st
from pydantic import ValidationError

from core.calculators import calculate_auto_loan
from core.compliance import suggested_rate
from core.errors import InvalidInputError
from core.models import AutoLoanInputs
from core.presets import DEFAULT_CONFIG
from core.utils import format_currency
from ui.components import metric_row, render_compliance_alert, render_loan_charts, render_pdf_download

logger = logging.getLogger(__name__)


def render_auto_loan_calculator(config=DEFAULT_CONFIG):
    limits = config.limits
    st.header("Auto Loan Calculator")
    st.caption("Compliant with Indonesian Banking Regulations (OJK)")

    c1, c2 = st.columns(2)
    with c1:
        price = st.number_input(
            "Vehicle Price (Rp)", value=300_000_000.0, step=5_000_000.0, key="auto_price"
        )
        down_payment = st.number_input(
            "Down Payment (Rp)", value=50_000_000.0, step=5_000_000.0, key="auto_down"
        )
        trade_in = st.number_input("Trade-in Value (Rp)", value=0.0, step=5_000_000.0, key="auto_trade_in")
        tax_rate = st.number_input("Sales Tax Rate %", value=10.0, step=0.5, key="auto_tax")
    with c2:
        rate = st.number_input(
            "Interest Rate %",
            value=suggested_rate("auto", config),
            step=0.125,
            key="auto_rate",
            help=f"Current BI Rate: {config.rates.bi_rate}% | Max allowed: {limits.max_auto_loan_rate}%",
        )
        term = st.number_input(
            "Loan Term (years)",
            value=5,
            step=1,
            key="auto_term",
            help=f"Maximum allowed: {limits.max_loan_term_auto_loan} years (Indonesian banking regulation)",
        )
        fees = st.number_input(
            "Additional Fees (Rp)", value=5_000_000.0, step=500_000.0, key="auto_fees"
        )

    try:
        inputs = AutoLoanInputs(
            vehicle_price=price,
            down_payment=down_payment,
            trade_in_value=trade_in,
            interest_rate=rate,
            loan_term_years=term,
            sales_tax_rate=tax_rate,
            additional_fees=fees,
        )
        result = calculate_auto_loan(inputs, config)
    except (InvalidInputError, ValidationError) as exc:
        logger.warning("Auto loan calculation rejected: %s", exc)
        st.error(f"Cannot calculate: {exc}")
        return None

    st.session_state["auto_loan_calc"] = {
        "principal": result.principal,
        "monthly_payment": result.monthly_payment,
        "loan_to_value": result.loan_to_value,
        "payments": len(result.amortization),
    }

    render_compliance_alert(result.compliance_warnings)
    st.caption(f"Monthly Payment: {format_currency(result.monthly_payment)}")
    st.caption(
        f"Purchase Cost: {format_currency(result.purchase_cost)} • "
        f"Amount Financed: {format_currency(result.principal)} • LTV: {result.loan_to_value:.1f}%"
    )
    metric_row(
        [
            ("Monthly Payment", result.monthly_payment),
            ("Total Interest", result.total_interest),
            ("Total of Payments", result.total_cost),
        ]
    )
    render_loan_charts(result)
    render_pdf_download(inputs, result, "auto_loan_report.pdf")
    return result
