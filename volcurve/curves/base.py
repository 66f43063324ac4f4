"""
Base class for Black variance term structures.
"""

import math
import numbers
from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Union

from volcurve.conventions.daycount import DayCounter, resolve_day_counter
from volcurve.observer import Observable
from volcurve.utils.date import to_date

TimeOrDate = Union[datetime, date, str, float]

# Stand-in maturity when a volatility is asked for at time zero
ZERO_MATURITY_GUARD = 1.0e-5


class VarianceTermStructure(Observable, ABC):
    """Term structure of cumulative Black variance.

    Subclasses provide :meth:`_black_variance_impl`; volatilities, forward
    variances and forward volatilities are all derived from it.
    """

    def __init__(
        self,
        reference_date: Union[date, str],
        day_count: Union[str, DayCounter] = "ACT/365F",
        name: str = "",
    ):
        """
        Initialize term structure.

        Args:
            reference_date: Date at which time and variance are zero
            day_count: Day-count convention (name or object) converting dates to times
            name: Optional name for identification
        """
        super().__init__()
        self._reference_date = to_date(reference_date)
        self._day_count = resolve_day_counter(day_count)
        self.name = name
        self._extrapolate = False

    @property
    def reference_date(self) -> date:
        return self._reference_date

    @property
    def day_count(self) -> DayCounter:
        return self._day_count

    # ------------------------------------------------------------------
    # Extrapolation switch
    # ------------------------------------------------------------------
    def enable_extrapolation(self) -> None:
        self._extrapolate = True

    def disable_extrapolation(self) -> None:
        self._extrapolate = False

    @property
    def allows_extrapolation(self) -> bool:
        return self._extrapolate

    # ------------------------------------------------------------------
    # Domain
    # ------------------------------------------------------------------
    @property
    def min_date(self) -> date:
        return self._reference_date

    @property
    def min_time(self) -> float:
        return 0.0

    @property
    @abstractmethod
    def max_date(self) -> date:
        pass

    @property
    @abstractmethod
    def max_time(self) -> float:
        pass

    def time_from_reference(self, d: Union[datetime, date, str]) -> float:
        """Elapsed time from the reference date under the curve's day count."""
        return self._day_count.year_fraction(self._reference_date, to_date(d))

    def _to_time(self, t: TimeOrDate) -> float:
        if isinstance(t, numbers.Real):
            return float(t)
        return self.time_from_reference(t)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def black_variance(self, t: TimeOrDate, extrapolate: bool = False) -> float:
        """Cumulative Black variance from the reference date to ``t``."""
        return self._black_variance_impl(
            self._to_time(t), extrapolate or self._extrapolate
        )

    def black_vol(self, t: TimeOrDate, extrapolate: bool = False) -> float:
        """Black volatility implied by the cumulative variance at ``t``."""
        time = self._to_time(t)
        maturity = ZERO_MATURITY_GUARD if time == 0.0 else time
        variance = self.black_variance(maturity, extrapolate)
        return math.sqrt(variance / maturity)

    def black_forward_variance(
        self, t1: TimeOrDate, t2: TimeOrDate, extrapolate: bool = False
    ) -> float:
        """Variance accrued between ``t1`` and ``t2``."""
        time1 = self._to_time(t1)
        time2 = self._to_time(t2)
        if time2 < time1:
            raise ValueError(f"t2 ({time2}) must not be before t1 ({time1})")
        return self.black_variance(time2, extrapolate) - self.black_variance(
            time1, extrapolate
        )

    def black_forward_vol(
        self, t1: TimeOrDate, t2: TimeOrDate, extrapolate: bool = False
    ) -> float:
        """Volatility of the variance accrued between ``t1`` and ``t2``."""
        time1 = self._to_time(t1)
        time2 = self._to_time(t2)
        if time2 < time1:
            raise ValueError(f"t2 ({time2}) must not be before t1 ({time1})")
        if time2 == time1:
            time1 = max(time1 - ZERO_MATURITY_GUARD, 0.0)
            time2 = time2 + ZERO_MATURITY_GUARD
        forward_variance = self.black_forward_variance(time1, time2, extrapolate)
        if forward_variance < 0.0:
            raise ValueError(
                f"Negative forward variance ({forward_variance}) between {time1} and {time2}"
            )
        return math.sqrt(forward_variance / (time2 - time1))

    @abstractmethod
    def _black_variance_impl(self, t: float, extrapolate: bool) -> float:
        """Cumulative variance at time ``t`` (years)."""
        pass

    def __str__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.name})"
            if self.name
            else self.__class__.__name__
        )
