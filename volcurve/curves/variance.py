"""
Black volatility curve modelled as a cumulative variance curve.

Market Black volatilities quoted for a strip of expiry dates are turned into
knots ``(t_i, t_i * vol_i**2)`` and interpolated on variance. The variance at
the reference date is zero and is never stored as a knot.
"""
import logging
import math
import threading
from dataclasses import dataclass
from datetime import date, datetime
from typing import List, Sequence, Tuple, Union

from volcurve.conventions.daycount import DayCounter
from volcurve.errors import (
    ArityMismatchError,
    ExtrapolationError,
    InvalidFirstDateError,
    NegativeTimeError,
    NonFiniteTimeError,
    UnsortedDatesError,
    VolCurveError,
    check_volatility,
)
from volcurve.interpolation import Interpolator, InterpolatorFactory, get_interpolator_factory
from volcurve.utils.date import to_date

from .base import VarianceTermStructure

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime, str]


@dataclass(frozen=True)
class _CurveState:
    """Everything derived from one quote set. Replaced as a whole."""

    dates: Tuple[date, ...]
    volatilities: Tuple[float, ...]
    times: Tuple[float, ...]
    variances: Tuple[float, ...]
    interpolator: Interpolator

    @property
    def max_date(self) -> date:
        return self.dates[-1]


class BlackVarianceCurve(VarianceTermStructure):
    """
    Black volatility term structure interpolated on cumulative variance.

    Below the first knot variance grows linearly from zero; between knots the
    interpolator is used; beyond the last knot, when extrapolation is allowed,
    the variance at the last knot is scaled linearly in time.
    """

    def __init__(
        self,
        reference_date: DateLike,
        day_count: Union[str, DayCounter],
        dates: Sequence[DateLike],
        volatilities: Sequence[float],
        underlying: str = "",
        interpolator: Union[str, InterpolatorFactory] = "LINEAR",
        name: str = "",
    ):
        """
        Build the curve from market quotes.

        Args:
            reference_date: Date at which variance is zero
            day_count: Day-count convention turning dates into times
            dates: Expiry dates, strictly after the reference date and increasing
            volatilities: Black volatilities, one per date
            underlying: Optional label of the underlying asset
            interpolator: Interpolation method name or factory ``(times, values) -> Interpolator``
            name: Optional curve name
        """
        super().__init__(reference_date, day_count, name or underlying)
        self._underlying = underlying
        self._interpolator_factory = get_interpolator_factory(interpolator)
        self._state_lock = threading.Lock()
        self._state = self._build_state(dates, volatilities)
        logger.debug(
            "Built %s with %s knots up to t=%.6f",
            self,
            len(self._state.times),
            self._state.times[-1],
        )

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    def _build_state(
        self, dates: Sequence[DateLike], volatilities: Sequence[float]
    ) -> _CurveState:
        if len(dates) != len(volatilities):
            raise ArityMismatchError(len(dates), len(volatilities))
        if len(dates) == 0:
            raise VolCurveError("At least one quote is required to build a variance curve")

        quote_dates = tuple(to_date(d) for d in dates)
        vols = tuple(check_volatility(v, i) for i, v in enumerate(volatilities))

        # Variance at the reference date must be zero, so a quote there would be lost
        if quote_dates[0] <= self.reference_date:
            raise InvalidFirstDateError(quote_dates[0], self.reference_date)

        times: List[float] = []
        variances: List[float] = []
        for j, (quote_date, vol) in enumerate(zip(quote_dates, vols, strict=True)):
            t = self.time_from_reference(quote_date)
            if j == 0 and t <= 0.0:
                # e.g. a business-day count over a non-business first date
                raise InvalidFirstDateError(quote_date, self.reference_date)
            if j > 0 and t <= times[j - 1]:
                raise UnsortedDatesError(j, times[j - 1], t, quote_date)
            times.append(t)
            variances.append(t * vol * vol)

        for j in range(1, len(variances)):
            if variances[j] < variances[j - 1]:
                logger.warning(
                    "Cumulative variance decreasing at knot %s (%s): %.8f < %.8f",
                    j,
                    quote_dates[j],
                    variances[j],
                    variances[j - 1],
                )

        return _CurveState(
            dates=quote_dates,
            volatilities=vols,
            times=tuple(times),
            variances=tuple(variances),
            interpolator=self._interpolator_factory(times, variances),
        )

    def reset(self, dates: Sequence[DateLike], volatilities: Sequence[float]) -> None:
        """
        Replace the whole quote set and notify observers.

        The new knots and interpolant are built before anything is swapped
        in, so a failed rebuild leaves the curve unchanged and silent.
        """
        new_state = self._build_state(dates, volatilities)
        with self._state_lock:
            self._state = new_state
        logger.debug(
            "Rebuilt %s with %s knots up to t=%.6f",
            self,
            len(new_state.times),
            new_state.times[-1],
        )
        self.update()

    def update(self) -> None:
        """Forward a change notification to every registered observer."""
        self.notify_observers()

    # ------------------------------------------------------------------
    # Inspectors
    # ------------------------------------------------------------------
    @property
    def underlying(self) -> str:
        return self._underlying

    @property
    def max_date(self) -> date:
        return self._state.max_date

    @property
    def max_time(self) -> float:
        return self._state.times[-1]

    @property
    def dates(self) -> Tuple[date, ...]:
        return self._state.dates

    @property
    def volatilities(self) -> Tuple[float, ...]:
        return self._state.volatilities

    @property
    def times(self) -> Tuple[float, ...]:
        return self._state.times

    @property
    def variances(self) -> Tuple[float, ...]:
        return self._state.variances

    @property
    def interpolator(self) -> Interpolator:
        return self._state.interpolator

    def knots(self) -> List[Tuple[float, float]]:
        """Knots as (time, cumulative variance) pairs."""
        state = self._state
        return list(zip(state.times, state.variances, strict=True))

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------
    def _black_variance_impl(self, t: float, extrapolate: bool) -> float:
        if not math.isfinite(t):
            raise NonFiniteTimeError(t)
        if t < 0.0:
            raise NegativeTimeError(t)

        state = self._state
        times = state.times
        interpolator = state.interpolator

        if t <= times[0]:
            return interpolator(times[0], extrapolate) * t / times[0]
        if t <= times[-1]:
            return interpolator(t, extrapolate)
        if not extrapolate:
            raise ExtrapolationError(t, times[-1])
        # Scale the variance at the last knot rather than extending the interpolant
        return interpolator(times[-1], extrapolate) * t / times[-1]

    def __repr__(self) -> str:
        return (
            f"BlackVarianceCurve(reference_date={self.reference_date}, "
            f"day_count={self.day_count}, "
            f"dates={list(self.dates)}, "
            f"volatilities={list(self.volatilities)}, "
            f"underlying='{self.underlying}')"
        )
