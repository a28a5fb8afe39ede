"""Compound growth of a lump sum plus periodic contributions."""
from __future__ import annotations

import math
from typing import List

import pandas as pd

from core.errors import InvalidInputError
from core.models import InvestmentInputs, InvestmentResult, ProjectionRow


def _future_value(initial: float, contribution: float, rate: float, periods: int) -> float:
    """Lump-sum compounding plus the ordinary-annuity value of the contributions.

    Raises :class:`InvalidInputError` when the value does not fit in a float.
    """

    if rate == 0:
        value = initial + contribution * periods
    else:
        try:
            growth = (1 + rate) ** periods
        except OverflowError:
            raise InvalidInputError(
                "Investment value is too large to compute",
                context={"rate": rate, "periods": periods},
            ) from None
        value = initial * growth + contribution * (growth - 1) / rate
    if not math.isfinite(value):
        raise InvalidInputError(
            "Investment value is too large to compute",
            context={"initial": initial, "contribution": contribution, "periods": periods},
        )
    return value


def project(inputs: InvestmentInputs) -> InvestmentResult:
    """Project an investment to the end of its horizon.

    Contributions are entered per month but compounded per period: the monthly
    amount is rescaled to ``monthly_contribution * 12 / compounding_frequency``
    and paid at the end of each compounding period.  This keeps the yearly
    total contributed identical across frequencies; it is a modelling choice,
    not an exact model of monthly deposits under e.g. annual compounding.

    Projections are reported once per year, not once per compounding period.
    """

    freq = inputs.compounding_frequency
    years = inputs.investment_duration_years
    rate = inputs.interest_rate / 100 / freq
    contribution = inputs.monthly_contribution * 12 / freq

    future_value = _future_value(inputs.initial_investment, contribution, rate, years * freq)
    total_contributions = inputs.initial_investment + inputs.monthly_contribution * 12 * years
    real_value = future_value / (1 + inputs.inflation_rate / 100) ** years

    projections: List[ProjectionRow] = []
    for year in range(1, years + 1):
        value = _future_value(inputs.initial_investment, contribution, rate, year * freq)
        contributed = inputs.initial_investment + inputs.monthly_contribution * 12 * year
        projections.append(
            ProjectionRow(year=year, value=value, contributions=contributed, interest=value - contributed)
        )

    return InvestmentResult(
        future_value=future_value,
        total_contributions=total_contributions,
        interest_earned=future_value - total_contributions,
        real_value=real_value,
        projections=tuple(projections),
    )


def projection_frame(result: InvestmentResult) -> pd.DataFrame:
    """Yearly projections as a DataFrame indexed by year."""

    columns = ["year", "value", "contributions", "interest"]
    df = pd.DataFrame([p.model_dump() for p in result.projections], columns=columns)
    return df.set_index("year")
