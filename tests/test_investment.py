import pytest
from pydantic import ValidationError

from core.calculators import calculate_investment
from core.errors import InvalidInputError
from core.investment import project, projection_frame
from core.models import InvestmentInputs


def _inputs(**overrides):
    data = dict(
        initial_investment=25_000_000,
        monthly_contribution=2_000_000,
        interest_rate=12,
        investment_duration_years=10,
        compounding_frequency=12,
        inflation_rate=3.5,
    )
    data.update(overrides)
    return InvestmentInputs(**data)


def test_example_projection():
    result = calculate_investment(_inputs())
    assert result.total_contributions == 265_000_000
    assert result.real_value == pytest.approx(result.future_value / 1.035 ** 10)
    assert result.interest_earned == pytest.approx(result.future_value - 265_000_000)
    r = 0.01
    growth = (1 + r) ** 120
    expected = 25_000_000 * growth + 2_000_000 * (growth - 1) / r
    assert result.future_value == pytest.approx(expected)


def test_lump_sum_only():
    result = calculate_investment(
        _inputs(initial_investment=10_000_000, monthly_contribution=0, interest_rate=10,
                investment_duration_years=2, compounding_frequency=1, inflation_rate=0)
    )
    assert result.future_value == pytest.approx(12_100_000)
    assert result.real_value == pytest.approx(result.future_value)


def test_zero_rate_sums_contributions():
    result = calculate_investment(_inputs(interest_rate=0, inflation_rate=0))
    assert result.future_value == pytest.approx(265_000_000)
    assert result.interest_earned == pytest.approx(0)


def test_contributions_rescaled_per_period():
    # quarterly compounding pays 3 months of contributions per period
    result = calculate_investment(
        _inputs(initial_investment=0, monthly_contribution=1_000, interest_rate=0,
                investment_duration_years=1, compounding_frequency=4)
    )
    assert result.future_value == pytest.approx(12_000)


def test_yearly_projections():
    result = calculate_investment(_inputs())
    assert [p.year for p in result.projections] == list(range(1, 11))
    assert result.projections[-1].value == pytest.approx(result.future_value)
    assert result.projections[0].contributions == 25_000_000 + 24_000_000
    values = [p.value for p in result.projections]
    assert values == sorted(values)


def test_projection_frame():
    df = projection_frame(calculate_investment(_inputs()))
    assert df.index.name == "year"
    assert list(df.columns) == ["value", "contributions", "interest"]
    assert len(df) == 10


def test_monthly_compounding_without_contributions():
    result = calculate_investment(_inputs(monthly_contribution=0, inflation_rate=0))
    assert result.future_value == pytest.approx(25_000_000 * (1 + 0.12 / 12) ** 120)
    assert result.total_contributions == 25_000_000


@pytest.mark.parametrize(
    "field, value",
    [("interest_rate", 100.5), ("investment_duration_years", 51), ("inflation_rate", 21)],
)
def test_out_of_range_inputs_rejected(field, value):
    with pytest.raises(ValidationError):
        _inputs(**{field: value})


def test_extreme_rate_raises_invalid_input():
    inputs = InvestmentInputs.model_construct(
        initial_investment=1,
        monthly_contribution=1,
        interest_rate=1000,
        investment_duration_years=100,
        compounding_frequency=365,
        inflation_rate=0,
    )
    with pytest.raises(InvalidInputError):
        project(inputs)


def test_value_beyond_float_range_raises_invalid_input():
    inputs = _inputs(initial_investment=1e308, interest_rate=100, investment_duration_years=50, compounding_frequency=1)
    with pytest.raises(InvalidInputError, match="too large"):
        calculate_investment(inputs)


def test_upper_bounds_still_compute():
    result = calculate_investment(
        _inputs(interest_rate=100, investment_duration_years=50, compounding_frequency=365, inflation_rate=20)
    )
    assert result.future_value > result.total_contributions
