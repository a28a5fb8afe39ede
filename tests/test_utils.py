import pytest

from core.utils import (
    compounding_label,
    format_currency,
    format_number,
    format_percent,
    parse_formatted_number,
)


@pytest.mark.parametrize(
    "amount, expected",
    [
        (0, "Rp 0"),
        (999, "Rp 999"),
        (1_234_567.6, "Rp 1.234.568"),
        (7_879_888.5, "Rp 7.879.889"),
        (-5_000, "-Rp 5.000"),
        (-0.4, "Rp 0"),
    ],
)
def test_format_currency(amount, expected):
    assert format_currency(amount) == expected


def test_format_number_and_percent():
    assert format_number(1_000_000) == "1.000.000"
    assert format_percent(8.5) == "8,50%"
    assert format_percent(10, 0) == "10%"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Rp 1.234.568", 1_234_568),
        ("-Rp 5.000", -5_000),
        ("", 0),
        (None, 0),
        ("abc", 0),
    ],
)
def test_parse_formatted_number(text, expected):
    assert parse_formatted_number(text) == expected


def test_compounding_label():
    assert compounding_label(4) == "Quarterly"
    assert compounding_label(365) == "Daily"
    assert compounding_label(2) == "2 times per year"
