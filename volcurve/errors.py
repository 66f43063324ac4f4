"""
Exceptions raised while building and querying variance curves.

Every error is a contract violation detected from the inputs, so all of them
derive from :class:`ValueError` and none of them is retried.
"""

import math
from datetime import date
from typing import Optional


class VolCurveError(ValueError):
    """Base class for variance curve construction and query errors."""

    pass


class ArityMismatchError(VolCurveError):
    """Raised when the date and volatility sequences differ in length."""

    def __init__(self, n_dates: int, n_vols: int):
        self.n_dates = n_dates
        self.n_vols = n_vols
        super().__init__(
            f"mismatch between date vector ({n_dates}) and black vol vector ({n_vols})"
        )


class InvalidFirstDateError(VolCurveError):
    """Raised when the first quote date is on or before the reference date."""

    def __init__(self, first_date: date, reference_date: date):
        self.first_date = first_date
        self.reference_date = reference_date
        super().__init__(
            f"first date {first_date} must be after reference date {reference_date}"
        )


class UnsortedDatesError(VolCurveError):
    """Raised when quote dates do not map to strictly increasing times."""

    def __init__(
        self,
        index: int,
        previous_time: float,
        time: float,
        quote_date: Optional[date] = None,
    ):
        self.index = index
        self.previous_time = previous_time
        self.time = time
        self.quote_date = quote_date
        super().__init__(
            f"dates must be sorted and unique: time {time} at index {index}"
            f" ({quote_date}) is not after previous time {previous_time}"
        )


class NegativeTimeError(VolCurveError):
    """Raised when a curve is queried at a negative time."""

    def __init__(self, time: float):
        self.time = time
        super().__init__(f"negative time ({time}) not allowed")


class ExtrapolationError(VolCurveError):
    """Raised when a query beyond the last knot is made without extrapolation."""

    def __init__(self, time: float, max_time: float):
        self.time = time
        self.max_time = max_time
        super().__init__(
            f"time ({time}) greater than max time ({max_time})"
            " and extrapolation not allowed"
        )


class InterpolationRangeError(VolCurveError):
    """Raised by an interpolator asked for a point outside its knots."""

    def __init__(self, x: float, x_min: float, x_max: float):
        self.x = x
        self.x_min = x_min
        self.x_max = x_max
        super().__init__(
            f"interpolation range is [{x_min}, {x_max}]: extrapolation at {x} not allowed"
        )


class NonFiniteTimeError(VolCurveError):
    """Raised when a curve is queried at a NaN or infinite time."""

    def __init__(self, time: float):
        self.time = time
        super().__init__(f"non-finite time ({time}) not allowed")


class InvalidVolatilityError(VolCurveError):
    """Raised for a negative or non-finite Black volatility."""

    def __init__(self, volatility: float, index: Optional[int] = None):
        self.volatility = volatility
        self.index = index
        where = f" at index {index}" if index is not None else ""
        super().__init__(
            f"volatility{where} must be finite and non-negative: {volatility}"
        )


def check_volatility(volatility: float, index: Optional[int] = None) -> float:
    """Return ``volatility`` as a float, rejecting negative and non-finite values."""
    vol = float(volatility)
    if not math.isfinite(vol) or vol < 0.0:
        raise InvalidVolatilityError(vol, index)
    return vol
