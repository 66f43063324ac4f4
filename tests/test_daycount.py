"""Tests for the QuantLib-backed day count conventions."""

from datetime import date, datetime

import pytest

from volcurve.conventions import (
    ACT_360,
    ACT_365F,
    BUS_252,
    DayCountConvention,
    get_day_count_convention,
    resolve_day_counter,
)


def test_act_365f_year_fraction():
    assert ACT_365F.year_fraction(date(2024, 1, 1), date(2025, 1, 1)) == pytest.approx(366 / 365)
    assert ACT_365F.day_count(date(2024, 1, 1), date(2025, 1, 1)) == 366


def test_act_360_year_fraction():
    assert ACT_360.year_fraction(date(2024, 1, 1), date(2024, 6, 29)) == pytest.approx(0.5)


def test_accepts_datetimes_and_strings():
    yf = ACT_365F.year_fraction(datetime(2024, 1, 1, 17, 30), "2024-01-31")
    assert yf == pytest.approx(30 / 365)


def test_business_252_counts_trading_days():
    # Tue 2 Jan to Tue 9 Jan: 2, 3, 4, 5 and 8 Jan
    assert BUS_252.year_fraction(date(2024, 1, 2), date(2024, 1, 9)) == pytest.approx(5 / 252)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("ACT/365F", "ACT/365F"),
        ("act/365", "ACT/365F"),
        ("Actual/360", "ACT/360"),
        ("30/360", "30U/360"),
        ("30E/360", "30E/360"),
        ("ACT/ACT ISDA", "ACT/ACT"),
        ("bus/252", "BUS/252"),
    ],
)
def test_registry_lookup(name, expected):
    convention = get_day_count_convention(name)
    assert isinstance(convention, DayCountConvention)
    assert convention.name == expected


def test_unknown_convention():
    with pytest.raises(ValueError, match="Unknown day count convention"):
        get_day_count_convention("ACT/364")


def test_resolve_day_counter():
    class Monthly:
        def year_fraction(self, start, end):
            return ((end.year - start.year) * 12 + end.month - start.month) / 12.0

    custom = Monthly()
    assert resolve_day_counter("ACT/365F") is ACT_365F
    assert resolve_day_counter(ACT_360) is ACT_360
    assert resolve_day_counter(custom) is custom
    with pytest.raises(TypeError):
        resolve_day_counter(365)
