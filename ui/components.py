"""Widgets shared by the calculator pages."""
import logging

import pandas as pd
import streamlit as st

from core.amortization import schedule_frame
from core.compliance import banking_info, errors_only, warnings_only
from core.presets import DEFAULT_CONFIG
from core.utils import format_currency, format_percent
from export.pdf_export import build_report

logger = logging.getLogger(__name__)


def render_compliance_alert(warnings):
    """Show OJK findings: errors in red, warnings in yellow, success otherwise."""
    if not warnings:
        st.success(
            "Compliant with Indonesian Banking Regulations: all loan parameters meet "
            "OJK (Otoritas Jasa Keuangan) requirements."
        )
        return
    errors = errors_only(warnings)
    if errors:
        st.error(
            "Non-Compliant with Indonesian Banking Regulations\n\n"
            + "\n".join(f"- {w.message}" for w in errors)
        )
    notes = warnings_only(warnings)
    if notes:
        st.warning(
            "Banking Regulation Warnings\n\n" + "\n".join(f"- {w.message}" for w in notes)
        )


def render_loan_charts(result):
    """Balance, principal/interest split and cumulative interest over the term."""
    df = schedule_frame(result.amortization)
    if df.empty:
        return
    st.subheader("Remaining Balance")
    st.line_chart(df[["balance"]])
    st.subheader("Principal vs Interest")
    st.bar_chart(df[["principal", "interest"]])
    with st.expander("Amortization Schedule"):
        st.dataframe(df, use_container_width=True)


def render_pdf_download(inputs, result, file_name: str):
    try:
        data = build_report(inputs, result)
    except Exception:
        logger.exception("PDF report failed for %s", type(inputs).__name__)
        st.warning("PDF report could not be generated.")
        return
    st.download_button(
        "Download PDF Report",
        data=data,
        file_name=file_name,
        mime="application/pdf",
    )


def render_banking_info(config=DEFAULT_CONFIG):
    """Sidebar panel with the BI Rate, suggested rates and OJK ceilings."""
    info = banking_info(config)
    st.sidebar.header("Indonesian Banking Info")
    st.sidebar.caption(
        f"BI Rate: {format_percent(info['bi_rate'])} (updated {info['last_updated'].isoformat()})"
    )
    suggested = pd.DataFrame(
        {"Suggested Rate": [format_percent(v) for v in info["suggested_rates"].values()]},
        index=["Mortgage", "Auto Loan", "Personal Loan"],
    )
    st.sidebar.table(suggested)
    limits = info["compliance_rules"]
    st.sidebar.caption(
        f"Max mortgage LTV {format_percent(limits['max_loan_to_value_mortgage'], 0)} • "
        f"Max DTI {format_percent(limits['max_debt_to_income_ratio'], 0)} • "
        f"Min mortgage down payment {format_percent(limits['min_down_payment_mortgage'], 0)}"
    )


def metric_row(items):
    """Render ``(label, amount)`` pairs as currency metrics in one row."""
    cols = st.columns(len(items))
    for col, (label, amount) in zip(cols, items):
        col.metric(label, format_currency(amount))
