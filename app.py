import streamlit as st

from core.presets import DISCLAIMER, load_config
from finkalk.logging_config import configure_logging, get_logger
from ui.auto_loan import render_auto_loan_calculator
from ui.components import render_banking_info
from ui.investment import render_investment_calculator
from ui.mortgage import render_mortgage_calculator
from ui.personal_loan import render_personal_loan_calculator

configure_logging()
logger = get_logger("app")

st.set_page_config(page_title="Indonesian Loan & Investment Calculator", layout="wide")


@st.cache_resource
def _config():
    config = load_config()
    logger.info("Loaded regulatory config (BI Rate %.2f%%)", config.rates.bi_rate)
    return config


config = _config()

st.markdown(
    """
    <style>
    @media (max-width: 600px) {
        div[class^='stColumn'] {flex: 1 1 100% !important;}
    }
    input, select {width: 100% !important;}
    </style>
    """,
    unsafe_allow_html=True,
)

pages = ["Mortgage", "Auto Loan", "Personal Loan", "Investment"]
nav = st.sidebar.radio("Calculator", pages, key="nav")
render_banking_info(config)

st.title("Indonesian Loan & Investment Calculator")
st.caption("BI Rate aware defaults • OJK compliance checks • Amortization schedules • PDF reports")

if nav == "Mortgage":
    render_mortgage_calculator(config)
elif nav == "Auto Loan":
    render_auto_loan_calculator(config)
elif nav == "Personal Loan":
    render_personal_loan_calculator(config)
elif nav == "Investment":
    render_investment_calculator()

st.caption(DISCLAIMER)
