"""Display formatting in the Indonesian (id-ID) locale.

The core never rounds; these helpers are the only place amounts are rounded
for display.
"""
from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal


def _group(amount: float) -> str:
    whole = Decimal(str(abs(amount))).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    text = f"{int(whole):,}".replace(",", ".")
    return f"-{text}" if amount < 0 and int(whole) != 0 else text


def format_number(amount: float) -> str:
    """``1234567.6`` -> ``"1.234.568"``."""
    return _group(amount)


def format_currency(amount: float) -> str:
    """``1234567.6`` -> ``"Rp 1.234.568"``; negatives as ``"-Rp 5.000"``."""
    text = _group(amount)
    if text.startswith("-"):
        return f"-Rp {text[1:]}"
    return f"Rp {text}"


def format_percent(rate: float, digits: int = 2) -> str:
    """Format a percentage value (``8.5`` meaning 8.5%) as ``"8,50%"``."""
    return f"{rate:.{digits}f}".replace(".", ",") + "%"


def parse_formatted_number(value: str) -> int:
    """Inverse of :func:`format_currency` for whole rupiah.

    Everything except digits and a minus sign is dropped; input that leaves no
    digits parses as ``0``.
    """

    cleaned = re.sub(r"[^\d-]", "", value or "")
    match = re.match(r"-?\d+", cleaned)
    return int(match.group()) if match else 0


def compounding_label(frequency: int) -> str:
    labels = {1: "Annually", 4: "Quarterly", 12: "Monthly", 365: "Daily"}
    return labels.get(frequency, f"{frequency} times per year")
