"""Tests for the variance curve builder and its configuration."""

from datetime import date

import pytest

from volcurve import CurveConfig, VarianceCurveBuilder
from volcurve.errors import ExtrapolationError, InvalidVolatilityError, UnsortedDatesError
from volcurve.interpolation import CubicSplineInterpolator, LinearInterpolator
from volcurve.schema import VolQuote

CURVE_DATE = date(2024, 1, 2)


def test_build_from_tenor_quotes():
    builder = VarianceCurveBuilder(CURVE_DATE)
    builder.add_tenor_quote("3M", 0.20)
    builder.add_tenor_quote("6M", 0.22)
    builder.add_tenor_quote("1Y", 0.25)

    curve = builder.build(underlying="SX5E")

    assert curve.underlying == "SX5E"
    assert curve.dates == (date(2024, 4, 2), date(2024, 7, 2), date(2025, 1, 2))
    assert curve.max_time == pytest.approx(366 / 365)
    assert curve.black_vol(curve.times[0]) == pytest.approx(0.20)
    assert curve.black_vol(date(2025, 1, 2)) == pytest.approx(0.25)
    assert isinstance(curve.interpolator, LinearInterpolator)
    assert not curve.allows_extrapolation


def test_out_of_order_quotes_rejected():
    builder = VarianceCurveBuilder("2024-01-02")
    builder.add_quote("2024-07-02", 0.22)
    builder.add_quote(date(2024, 4, 2), 0.20)

    assert [q.expiry for q in builder.quotes] == [date(2024, 7, 2), date(2024, 4, 2)]
    with pytest.raises(UnsortedDatesError):
        builder.build()


def test_vols_in_percent():
    builder = VarianceCurveBuilder(CURVE_DATE, CurveConfig(vols_in_percent=True))
    quote = builder.add_tenor_quote("6M", 22.0)
    assert quote.volatility == pytest.approx(0.22)
    assert quote.tenor == "6M"


def test_config_applied_to_curve():
    config = CurveConfig(
        day_count="ACT/360",
        interpolation_method="CUBIC",
        allow_extrapolation=True,
    )
    builder = VarianceCurveBuilder(CURVE_DATE, config)
    builder.add_quotes(
        [
            VolQuote(date(2024, 6, 30), 0.20),
            VolQuote(date(2024, 12, 27), 0.22),
            VolQuote(date(2025, 12, 22), 0.25),
        ]
    )

    curve = builder.build()

    assert str(curve.day_count) == "ACT/360"
    assert curve.times == pytest.approx((0.5, 1.0, 2.0))
    assert isinstance(curve.interpolator, CubicSplineInterpolator)
    assert curve.black_variance(3.0) == pytest.approx(0.125 * 1.5)


def test_extrapolation_off_by_default():
    builder = VarianceCurveBuilder(CURVE_DATE)
    builder.add_tenor_quote("1M", 0.3)
    curve = builder.build()
    with pytest.raises(ExtrapolationError):
        curve.black_variance(1.0)


def test_duplicate_expiries_rejected():
    builder = VarianceCurveBuilder(CURVE_DATE)
    builder.add_tenor_quote("3M", 0.2)
    builder.add_quote("2024-04-02", 0.21)
    with pytest.raises(UnsortedDatesError):
        builder.build()


def test_build_without_quotes():
    with pytest.raises(ValueError, match="At least one"):
        VarianceCurveBuilder(CURVE_DATE).build()


@pytest.mark.parametrize("vol", [-0.2, float("nan"), float("inf")])
def test_invalid_vol_quote_rejected(vol):
    with pytest.raises(InvalidVolatilityError, match="non-negative"):
        VolQuote(date(2024, 4, 2), vol)


def test_config_from_mapping():
    config = CurveConfig.from_mapping({"day_count": "ACT/360", "allow_extrapolation": True})
    assert config.day_count == "ACT/360"
    assert config.allow_extrapolation
    assert config.interpolation_method == "LINEAR"


def test_config_rejects_unknown_keys():
    with pytest.raises(ValueError, match="Unknown curve config keys"):
        CurveConfig.from_mapping({"daycount": "ACT/360"})


def test_config_rejects_unknown_names():
    with pytest.raises(ValueError, match="day count"):
        CurveConfig(day_count="ACT/364")
    with pytest.raises(ValueError, match="interpolation method"):
        CurveConfig(interpolation_method="AKIMA")
