"""PDF reports for loan and investment results."""
from __future__ import annotations

import io
import logging
from datetime import date
from typing import Dict, List, Optional, Sequence, Tuple

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import PageBreak, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from core.amortization import schedule_frame, schedule_totals
from core.investment import projection_frame
from core.models import (
    AmortizationEntry,
    AutoLoanInputs,
    AutoLoanResult,
    ComplianceWarning,
    InvestmentInputs,
    InvestmentResult,
    MortgageInputs,
    MortgageResult,
    PersonalLoanInputs,
    PersonalLoanResult,
)
from core.presets import DISCLAIMER
from core.utils import compounding_label, format_currency, format_percent

logger = logging.getLogger(__name__)

Rows = List[Tuple[str, str]]
Sections = Dict[str, Rows]

TABLE_STYLE = TableStyle(
    [
        ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
        ("BOX", (0, 0), (-1, -1), 1, colors.black),
        ("INNERGRID", (0, 0), (-1, -1), 0.5, colors.grey),
    ]
)
SCHEDULE_STYLE = TableStyle(
    [
        ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
        ("BOX", (0, 0), (-1, -1), 1, colors.black),
        ("INNERGRID", (0, 0), (-1, -1), 0.25, colors.grey),
        ("FONTSIZE", (0, 0), (-1, -1), 7),
        ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
    ]
)


def _mortgage_sections(inputs: MortgageInputs, result: MortgageResult) -> Sections:
    return {
        "Loan Details": [
            ("Home Price", format_currency(inputs.loan_amount)),
            ("Down Payment", format_currency(inputs.down_payment)),
            ("Loan Amount", format_currency(result.principal)),
            ("Interest Rate", format_percent(inputs.interest_rate)),
            ("Loan Term", f"{inputs.loan_term_years} years"),
        ],
        "Monthly Costs": [
            ("Property Tax (Annual)", format_currency(inputs.property_tax)),
            ("Home Insurance (Annual)", format_currency(inputs.home_insurance)),
            ("PMI Rate", f"{format_percent(inputs.pmi_rate)} annually"),
            ("HOA Fees (Monthly)", format_currency(inputs.hoa_fees)),
        ],
        "Payment Summary": [
            ("Monthly Payment", format_currency(result.monthly_payment)),
            ("Principal & Interest", format_currency(result.principal_and_interest)),
            ("Monthly Property Tax", format_currency(result.monthly_taxes)),
            ("Monthly Insurance", format_currency(result.monthly_insurance)),
            ("Monthly PMI", format_currency(result.monthly_pmi)),
            ("Monthly HOA", format_currency(result.monthly_hoa)),
        ],
        "Loan Summary": [
            ("Total Interest", format_currency(result.total_interest)),
            ("Total Cost", format_currency(result.total_cost)),
            ("Loan-to-Value Ratio", f"{result.loan_to_value:.1f}%"),
        ],
    }


def _auto_loan_sections(inputs: AutoLoanInputs, result: AutoLoanResult) -> Sections:
    return {
        "Vehicle Details": [
            ("Vehicle Price", format_currency(inputs.vehicle_price)),
            ("Down Payment", format_currency(inputs.down_payment)),
            ("Trade-in Value", format_currency(inputs.trade_in_value)),
            ("Sales Tax Rate", format_percent(inputs.sales_tax_rate)),
            ("Additional Fees", format_currency(inputs.additional_fees)),
            ("Amount Financed", format_currency(result.principal)),
        ],
        "Loan Terms": [
            ("Interest Rate", format_percent(inputs.interest_rate)),
            ("Loan Term", f"{inputs.loan_term_years} years"),
        ],
        "Payment Summary": [
            ("Monthly Payment", format_currency(result.monthly_payment)),
            ("Total Interest", format_currency(result.total_interest)),
            ("Total of Payments", format_currency(result.total_cost)),
            ("Loan-to-Value Ratio", f"{result.loan_to_value:.1f}%"),
        ],
    }


def _personal_loan_sections(inputs: PersonalLoanInputs, result: PersonalLoanResult) -> Sections:
    details = [
        ("Loan Amount", format_currency(inputs.loan_amount)),
        ("Interest Rate", format_percent(inputs.interest_rate)),
        ("Loan Term", f"{inputs.loan_term_months} months"),
        ("Origination Fee Rate", format_percent(inputs.origination_fee_rate)),
    ]
    if inputs.monthly_income:
        details.append(("Monthly Income", format_currency(inputs.monthly_income)))
    summary = [
        ("Monthly Payment", format_currency(result.monthly_payment)),
        ("Total Interest", format_currency(result.total_interest)),
        ("Origination Fee", format_currency(result.origination_fee)),
        ("Total Cost", format_currency(result.total_cost)),
    ]
    if result.debt_to_income is not None:
        summary.append(("Debt-to-Income Ratio", f"{result.debt_to_income:.1f}%"))
    return {"Loan Details": details, "Payment Summary": summary}


_LOAN_REPORTS = {
    MortgageInputs: ("Mortgage Loan Report", MortgageResult, _mortgage_sections),
    AutoLoanInputs: ("Auto Loan Report", AutoLoanResult, _auto_loan_sections),
    PersonalLoanInputs: ("Personal Loan Report", PersonalLoanResult, _personal_loan_sections),
}


def _lookup(inputs, result):
    try:
        title, result_cls, sections = _LOAN_REPORTS[type(inputs)]
    except KeyError:
        raise TypeError(f"No loan report for {type(inputs).__name__}") from None
    if not isinstance(result, result_cls):
        raise TypeError(
            f"{type(inputs).__name__} must be reported with a {result_cls.__name__}, "
            f"got {type(result).__name__}"
        )
    return title, sections


def loan_report_rows(inputs, result) -> Sections:
    """Section title -> (label, value) rows for a loan report."""
    _, sections = _lookup(inputs, result)
    return sections(inputs, result)


def investment_report_rows(inputs: InvestmentInputs, result: InvestmentResult) -> Sections:
    return {
        "Investment Details": [
            ("Initial Investment", format_currency(inputs.initial_investment)),
            ("Monthly Contribution", format_currency(inputs.monthly_contribution)),
            ("Interest Rate", format_percent(inputs.interest_rate)),
            ("Investment Duration", f"{inputs.investment_duration_years} years"),
            ("Compounding Frequency", compounding_label(inputs.compounding_frequency)),
            ("Inflation Rate", format_percent(inputs.inflation_rate)),
        ],
        "Investment Summary": [
            ("Future Value", format_currency(result.future_value)),
            ("Total Contributions", format_currency(result.total_contributions)),
            ("Interest Earned", format_currency(result.interest_earned)),
            ("Real Value (Inflation-Adjusted)", format_currency(result.real_value)),
        ],
    }


def schedule_rows(schedule: Sequence[AmortizationEntry]) -> List[List[str]]:
    """Header plus one formatted row per payment."""
    df = schedule_frame(schedule)
    rows = [["Payment", "Payment Amt", "Principal", "Interest", "Balance", "Cum. Interest"]]
    for month, r in df.iterrows():
        rows.append(
            [
                str(month),
                format_currency(r["payment"]),
                format_currency(r["principal"]),
                format_currency(r["interest"]),
                format_currency(r["balance"]),
                format_currency(r["cumulative_interest"]),
            ]
        )
    return rows


def _header(title: str, styles) -> list:
    return [
        Paragraph(f"<b>{title}</b>", styles["Title"]),
        Paragraph(f"Generated on {date.today().isoformat()}", styles["Normal"]),
        Spacer(1, 12),
    ]


def _section_tables(sections: Sections) -> list:
    story = []
    for name, rows in sections.items():
        t = Table([[name, ""]] + [list(r) for r in rows], hAlign="LEFT", colWidths=[200, 280])
        t.setStyle(TABLE_STYLE)
        story += [t, Spacer(1, 12)]
    return story


def _warnings_table(warnings: Sequence[ComplianceWarning], styles) -> list:
    if not warnings:
        return []
    body = styles["BodyText"]
    rows = [["Severity", "Field", "Message"]] + [
        [w.severity.upper(), w.field, Paragraph(w.message, body)] for w in warnings
    ]
    t = Table(rows, hAlign="LEFT", colWidths=[60, 100, 320])
    t.setStyle(TABLE_STYLE)
    return [Paragraph("<b>OJK Compliance Findings</b>", styles["Heading3"]), Spacer(1, 6), t, Spacer(1, 12)]


def _schedule_pages(schedule: Sequence[AmortizationEntry], styles) -> list:
    if not schedule:
        return []
    t = Table(schedule_rows(schedule), hAlign="LEFT", repeatRows=1)
    t.setStyle(SCHEDULE_STYLE)
    totals = schedule_totals(schedule)
    summary = Table(
        [
            ["Schedule Summary", ""],
            ["Total Principal", format_currency(totals["total_principal"])],
            ["Total Interest", format_currency(totals["total_interest"])],
            ["Total Payments", format_currency(totals["total_payments"])],
            ["Final Payment", format_currency(totals["final_payment"])],
        ],
        hAlign="LEFT",
        colWidths=[200, 280],
    )
    summary.setStyle(TABLE_STYLE)
    return [
        PageBreak(),
        Paragraph(f"<b>Complete Amortization Schedule ({len(schedule)} payments)</b>", styles["Heading2"]),
        Spacer(1, 6),
        t,
        Spacer(1, 12),
        summary,
    ]


def _projection_pages(result: InvestmentResult, styles) -> list:
    if not result.projections:
        return []
    df = projection_frame(result)
    rows = [["Year", "Total Value", "Contributions", "Interest Earned"]]
    for year, r in df.iterrows():
        rows.append(
            [str(year), format_currency(r["value"]), format_currency(r["contributions"]), format_currency(r["interest"])]
        )
    t = Table(rows, hAlign="LEFT", repeatRows=1)
    t.setStyle(SCHEDULE_STYLE)
    return [PageBreak(), Paragraph("<b>Growth Projections</b>", styles["Heading2"]), Spacer(1, 6), t]


def _render(story: list, out_path: Optional[str]) -> bytes:
    buf = io.BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=A4, leftMargin=36, rightMargin=36, topMargin=36, bottomMargin=36)
    doc.build(story)
    data = buf.getvalue()
    if out_path:
        with open(out_path, "wb") as f:
            f.write(data)
    return data


def build_loan_report(inputs, result, out_path: Optional[str] = None) -> bytes:
    """Render a mortgage, auto or personal loan result as PDF bytes.

    Raises ``TypeError`` when ``result`` was not produced for the kind of
    ``inputs`` given.  When ``out_path`` is set the PDF is also written there.
    """

    title, sections = _lookup(inputs, result)
    styles = getSampleStyleSheet()
    story = _header(title, styles)
    story += _section_tables(sections(inputs, result))
    story += _warnings_table(result.compliance_warnings, styles)
    story += [Paragraph(f"<font size=8>{DISCLAIMER}</font>", styles["Normal"])]
    story += _schedule_pages(result.amortization, styles)
    data = _render(story, out_path)
    logger.debug("Built %s (%d payments, %d bytes)", title, len(result.amortization), len(data))
    return data


def build_investment_report(
    inputs: InvestmentInputs, result: InvestmentResult, out_path: Optional[str] = None
) -> bytes:
    styles = getSampleStyleSheet()
    story = _header("Investment Growth Report", styles)
    story += _section_tables(investment_report_rows(inputs, result))
    story += [Paragraph(f"<font size=8>{DISCLAIMER}</font>", styles["Normal"])]
    story += _projection_pages(result, styles)
    data = _render(story, out_path)
    logger.debug("Built Investment Growth Report (%d years, %d bytes)", len(result.projections), len(data))
    return data


def build_report(inputs, result, out_path: Optional[str] = None) -> bytes:
    """Render any calculator result; picks the report from the input type."""
    if isinstance(inputs, InvestmentInputs):
        if not isinstance(result, InvestmentResult):
            raise TypeError(
                f"InvestmentInputs must be reported with an InvestmentResult, got {type(result).__name__}"
            )
        return build_investment_report(inputs, result, out_path)
    return build_loan_report(inputs, result, out_path)
