import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from core.amortization import amortize

principals = st.floats(min_value=1_000.0, max_value=5_000_000_000.0, allow_nan=False, allow_infinity=False)
annual_rates = st.one_of(
    st.just(0.0),
    st.floats(min_value=0.01, max_value=30.0, allow_nan=False, allow_infinity=False),
)
periods = st.integers(min_value=1, max_value=360)


@settings(max_examples=60, deadline=None)
@given(principal=principals, rate=annual_rates, n=periods)
def test_final_balance_is_zero(principal, rate, n):
    _, schedule = amortize(principal, rate / 100 / 12, n)
    assert len(schedule) == n
    assert schedule[-1].balance == 0.0


@settings(max_examples=60, deadline=None)
@given(principal=principals, rate=annual_rates, n=periods)
def test_principal_portions_sum_to_principal(principal, rate, n):
    _, schedule = amortize(principal, rate / 100 / 12, n)
    assert sum(e.principal for e in schedule) == pytest.approx(principal, rel=1e-6)


@settings(max_examples=60, deadline=None)
@given(principal=principals, rate=annual_rates, n=periods)
def test_rows_are_consistent(principal, rate, n):
    payment, schedule = amortize(principal, rate / 100 / 12, n)
    previous_balance = principal
    previous_cumulative = 0.0
    for e in schedule:
        assert e.payment == payment
        assert e.payment == pytest.approx(e.principal + e.interest)
        assert e.balance <= previous_balance
        assert e.balance >= 0.0
        assert e.cumulative_interest >= previous_cumulative
        previous_balance = e.balance
        previous_cumulative = e.cumulative_interest
