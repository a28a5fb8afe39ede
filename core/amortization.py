"""Fixed-payment amortization shared by every loan calculator."""
from __future__ import annotations

import math
from typing import Dict, List, Sequence, Tuple

import pandas as pd

from core.errors import InvalidInputError
from core.models import AmortizationEntry

SCHEDULE_COLUMNS = ["month", "payment", "principal", "interest", "balance", "cumulative_interest"]


def _check_finite(**values) -> None:
    for name, value in values.items():
        if not math.isfinite(value):
            raise InvalidInputError(f"{name} must be a finite number", context={name: value})


def annuity_payment(principal: float, periodic_rate: float, num_periods: int) -> float:
    """Level payment that retires ``principal`` over ``num_periods`` periods.

    ``periodic_rate`` is the rate per period as a fraction (``0.085 / 12`` for
    8.5% a year paid monthly).  A zero rate degenerates to straight-line
    repayment because the annuity formula would divide by zero.
    """

    _check_finite(principal=principal, periodic_rate=periodic_rate, num_periods=num_periods)
    if num_periods < 1 or int(num_periods) != num_periods:
        raise InvalidInputError(
            "Number of periods must be a whole number of at least 1",
            context={"num_periods": num_periods},
        )
    if periodic_rate < 0:
        raise InvalidInputError(
            "Periodic rate cannot be negative", context={"periodic_rate": periodic_rate}
        )
    n = int(num_periods)
    if periodic_rate == 0:
        return principal / n
    # expm1/log1p keep (1 + r)^n - 1 accurate for very small rates
    growth_less_one = math.expm1(n * math.log1p(periodic_rate))
    return principal * periodic_rate * (growth_less_one + 1) / growth_less_one


def monthly_payment(principal: float, annual_rate_pct: float, num_months: int) -> float:
    """Monthly installment for a nominal annual rate given in percent.

    Both the loan calculators and the debt-to-income rule go through this
    function so the two can never disagree on the payment.
    """

    return annuity_payment(principal, annual_rate_pct / 100 / 12, num_months)


def amortize(
    principal: float, periodic_rate: float, num_periods: int
) -> Tuple[float, List[AmortizationEntry]]:
    """Build the full payment schedule for a fixed-rate installment loan.

    Returns the level payment and one :class:`AmortizationEntry` per period.
    Arithmetic is plain double precision without intermediate rounding.  The
    running balance is floored at zero and the final row's balance is set to
    exactly zero so float drift never leaves a residual.

    Raises :class:`InvalidInputError` when ``principal <= 0``, when
    ``num_periods`` is not a whole number of at least one, or when the rate is
    negative.  A zero rate is valid.
    """

    _check_finite(principal=principal)
    if principal <= 0:
        raise InvalidInputError(
            "Financed principal must be greater than zero", context={"principal": principal}
        )
    payment = annuity_payment(principal, periodic_rate, num_periods)
    n = int(num_periods)

    schedule: List[AmortizationEntry] = []
    balance = float(principal)
    cumulative_interest = 0.0
    for month in range(1, n + 1):
        interest = balance * periodic_rate
        principal_paid = payment - interest
        balance = max(balance - principal_paid, 0.0)
        if month == n:
            balance = 0.0
        cumulative_interest += interest
        schedule.append(
            AmortizationEntry(
                month=month,
                payment=payment,
                principal=principal_paid,
                interest=interest,
                balance=balance,
                cumulative_interest=cumulative_interest,
            )
        )
    return payment, schedule


def schedule_totals(schedule: Sequence[AmortizationEntry]) -> Dict[str, float]:
    """Summaries printed under a schedule: principal, interest, payments, final payment."""

    total_principal = sum(e.principal for e in schedule)
    total_interest = sum(e.interest for e in schedule)
    return {
        "total_principal": total_principal,
        "total_interest": total_interest,
        "total_payments": total_principal + total_interest,
        "final_payment": schedule[-1].payment if schedule else 0.0,
    }


def schedule_frame(schedule: Sequence[AmortizationEntry]) -> pd.DataFrame:
    """Return the schedule as a DataFrame indexed by month, for charts and tables."""

    if not schedule:
        return pd.DataFrame(columns=SCHEDULE_COLUMNS).set_index("month")
    df = pd.DataFrame([e.model_dump() for e in schedule], columns=SCHEDULE_COLUMNS)
    return df.set_index("month")
