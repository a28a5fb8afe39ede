import logging

import streamlit as st
from pydantic import ValidationError

from core.calculators import calculate_investment
from core.errors import InvalidInputError
from core.investment import projection_frame
from core.models import InvestmentInputs
from core.utils import compounding_label, format_currency
from ui.components import metric_row, render_pdf_download

logger = logging.getLogger(__name__)

FREQUENCIES = [1, 4, 12, 365]


def render_investment_calculator():
    st.header("Investment Growth Calculator")

    c1, c2 = st.columns(2)
    with c1:
        initial = st.number_input(
            "Initial Investment (Rp)", value=25_000_000.0, step=1_000_000.0, key="inv_initial"
        )
        monthly = st.number_input(
            "Monthly Contribution (Rp)", value=2_000_000.0, step=100_000.0, key="inv_monthly"
        )
        rate = st.number_input("Annual Return %", value=12.0, step=0.5, key="inv_rate")
    with c2:
        years = st.number_input("Duration (years)", value=10, step=1, key="inv_years")
        freq = st.selectbox(
            "Compounding",
            FREQUENCIES,
            index=FREQUENCIES.index(12),
            format_func=compounding_label,
            key="inv_freq",
        )
        inflation = st.number_input(
            "Inflation Rate %",
            value=3.5,
            step=0.25,
            key="inv_inflation",
            help="Used to calculate inflation-adjusted returns",
        )

    try:
        inputs = InvestmentInputs(
            initial_investment=initial,
            monthly_contribution=monthly,
            interest_rate=rate,
            investment_duration_years=years,
            compounding_frequency=freq,
            inflation_rate=inflation,
        )
        result = calculate_investment(inputs)
    except (InvalidInputError, ValidationError) as exc:
        logger.warning("Investment projection rejected: %s", exc)
        st.error(f"Cannot calculate: {exc}")
        return None

    st.session_state["investment_calc"] = {
        "future_value": result.future_value,
        "total_contributions": result.total_contributions,
        "real_value": result.real_value,
    }

    st.caption(f"Future Value: {format_currency(result.future_value)}")
    metric_row(
        [
            ("Future Value", result.future_value),
            ("Total Contributions", result.total_contributions),
            ("Interest Earned", result.interest_earned),
            ("Real Value", result.real_value),
        ]
    )
    df = projection_frame(result)
    st.subheader("Growth Over Time")
    st.line_chart(df[["value", "contributions"]])
    with st.expander("Yearly Projections"):
        st.dataframe(df, use_container_width=True)
    render_pdf_download(inputs, result, "investment_report.pdf")
    return result
