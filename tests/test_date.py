"""Tests for date helpers."""

from datetime import date, datetime

import pandas as pd
import pytest

from volcurve.utils.date import add_tenor, to_date


@pytest.mark.parametrize(
    "value",
    [
        date(2024, 3, 15),
        datetime(2024, 3, 15, 9, 30),
        pd.Timestamp("2024-03-15 16:00"),
        "2024-03-15",
        "20240315",
    ],
)
def test_to_date(value):
    result = to_date(value)
    assert result == date(2024, 3, 15)
    assert type(result) is date


def test_to_date_rejects_bad_input():
    with pytest.raises(ValueError):
        to_date("15/03/2024")
    with pytest.raises(TypeError):
        to_date(20240315)


@pytest.mark.parametrize(
    "tenor, expected",
    [
        ("10D", date(2024, 2, 10)),
        ("1W", date(2024, 2, 7)),
        ("1M", date(2024, 2, 29)),
        ("3m", date(2024, 4, 30)),
        ("1Y", date(2025, 1, 31)),
    ],
)
def test_add_tenor(tenor, expected):
    assert add_tenor(date(2024, 1, 31), tenor) == expected


def test_add_tenor_rejects_bad_tenor():
    with pytest.raises(ValueError, match="tenor"):
        add_tenor(date(2024, 1, 31), "1Q")
