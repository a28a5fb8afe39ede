"""Regulatory defaults and rate presets for Indonesian consumer lending.

The values below are the static reference set the calculators ship with.  They
are bundled in a :class:`RegulatoryConfig` that every calculator and rule
accepts as an explicit ``config`` argument, so a caller can evaluate a scenario
against different limits or a newer BI Rate without touching module state.
"""
from __future__ import annotations

import json
import os
from datetime import date
from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

CONFIG_ENV_VAR = "FINKALK_CONFIG"


class ReferenceRates(BaseModel):
    """Bank Indonesia reference rate and the product base rates derived from it."""

    model_config = ConfigDict(frozen=True)

    bi_rate: float = 5.00
    last_updated: date = date(2025, 8, 20)
    mortgage_base_rate: float = 8.5  # BI Rate + 3.5% spread
    auto_loan_base_rate: float = 9.0  # BI Rate + 4.0% spread
    personal_loan_base_rate: float = 15.0  # BI Rate + 10.0% spread


class ComplianceLimits(BaseModel):
    """Hard OJK ceilings. Rates and ratios in percent."""

    model_config = ConfigDict(frozen=True)

    max_mortgage_rate: float = 18.0
    max_auto_loan_rate: float = 20.0
    max_personal_loan_rate: float = 24.0
    max_loan_to_value_mortgage: float = 90.0
    max_debt_to_income_ratio: float = 40.0
    min_down_payment_mortgage: float = 10.0
    max_loan_term_mortgage: int = 25  # years
    max_loan_term_auto_loan: int = 7  # years
    max_loan_term_personal_loan: int = 60  # months


class RateWarningSpreads(BaseModel):
    """Points above the product base rate at which a rate is flagged as unusual."""

    model_config = ConfigDict(frozen=True)

    mortgage: float = 3.0
    auto: float = 3.0
    personal: float = 5.0


class RegulatoryConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    rates: ReferenceRates = Field(default_factory=ReferenceRates)
    limits: ComplianceLimits = Field(default_factory=ComplianceLimits)
    warning_spreads: RateWarningSpreads = Field(default_factory=RateWarningSpreads)


DEFAULT_CONFIG = RegulatoryConfig()


def load_config(path: Optional[str] = None) -> RegulatoryConfig:
    """Load a :class:`RegulatoryConfig` from a JSON file.

    ``path`` falls back to the ``FINKALK_CONFIG`` environment variable.  With
    neither set the built-in defaults are returned.  Keys missing from the file
    keep their default values, e.g. ``{"rates": {"bi_rate": 5.75}}`` only moves
    the BI Rate.
    """

    path = path or os.getenv(CONFIG_ENV_VAR)
    if not path:
        return DEFAULT_CONFIG
    with Path(path).open("r", encoding="utf-8") as f:
        data = json.load(f)
    return RegulatoryConfig.model_validate(data)


# Suggested rates by credit tier (BI Rate + spreads, August 2025).
CREDIT_SCORE_PRESETS: Dict[str, Dict[str, float]] = {
    "excellent": {"min": 800, "max": 850, "mortgage_rate": 8.5, "auto_rate": 9.0, "personal_rate": 15.0},
    "very_good": {"min": 740, "max": 799, "mortgage_rate": 9.5, "auto_rate": 10.0, "personal_rate": 16.5},
    "good": {"min": 670, "max": 739, "mortgage_rate": 10.5, "auto_rate": 11.0, "personal_rate": 18.0},
    "fair": {"min": 580, "max": 669, "mortgage_rate": 12.0, "auto_rate": 13.0, "personal_rate": 20.0},
    "poor": {"min": 300, "max": 579, "mortgage_rate": 14.0, "auto_rate": 15.0, "personal_rate": 22.0},
}


def preset_rates_for_credit(tier: str) -> Dict[str, float]:
    """Return the preset row for a credit tier; raises ``KeyError`` for unknown tiers."""
    return CREDIT_SCORE_PRESETS[tier]


def credit_tier_for_score(score) -> str:
    """Map a numeric credit score to one of the preset tiers.

    Scores that cannot be read as a number fall into ``"poor"``.
    """
    try:
        s = float(score)
    except (TypeError, ValueError):
        return "poor"
    for tier, row in CREDIT_SCORE_PRESETS.items():
        if s >= row["min"]:
            return tier
    return "poor"


DISCLAIMER = (
    "Results are estimates for planning purposes only. Figures assume a fixed rate for the "
    "full term and the regulatory limits and BI Rate shown at the time of calculation. "
    "Lender pricing, fees, and OJK requirements prevail; confirm the final terms with your bank."
)
