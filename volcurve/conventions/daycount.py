"""
QuantLib-backed day count conventions.

A variance curve turns quote dates into elapsed times with one of these
conventions. Any object exposing ``year_fraction(start, end)`` can be used in
their place.
"""

from datetime import date, datetime
from typing import Protocol, Union, runtime_checkable

import QuantLib as ql

from volcurve.utils.date import to_date

DateLike = Union[date, datetime, str]


def _to_ql_date(dt: DateLike) -> ql.Date:
    """Convert a Python date-like to a QuantLib Date."""
    py_date = to_date(dt)
    return ql.Date(py_date.day, py_date.month, py_date.year)


@runtime_checkable
class DayCounter(Protocol):
    """Anything able to turn a pair of dates into a time span in years."""

    def year_fraction(self, start: DateLike, end: DateLike) -> float:
        ...


class DayCountConvention:
    """Base class for QuantLib-backed day count conventions."""

    def __init__(self, name: str, ql_daycount: ql.DayCounter):
        self.name = name
        self._ql_daycount = ql_daycount

    def year_fraction(self, start: DateLike, end: DateLike) -> float:
        """Calculate year fraction between two dates using QuantLib."""
        return self._ql_daycount.yearFraction(_to_ql_date(start), _to_ql_date(end))

    def day_count(self, start: DateLike, end: DateLike) -> int:
        """Calculate number of days between two dates."""
        return self._ql_daycount.dayCount(_to_ql_date(start), _to_ql_date(end))

    def __eq__(self, other) -> bool:
        if not isinstance(other, DayCountConvention):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"


class Actual360(DayCountConvention):
    """ACT/360 day count convention."""

    def __init__(self):
        super().__init__("ACT/360", ql.Actual360())


class Actual365Fixed(DayCountConvention):
    """ACT/365F day count convention.

    The usual choice for option expiries quoted against calendar dates.
    """

    def __init__(self):
        super().__init__("ACT/365F", ql.Actual365Fixed())


class Thirty360European(DayCountConvention):
    """30E/360 (30/360 European) day count convention."""

    def __init__(self):
        super().__init__("30E/360", ql.Thirty360(ql.Thirty360.European))


class Thirty360US(DayCountConvention):
    """30U/360 (30/360 US - Bond Basis) day count convention."""

    def __init__(self):
        super().__init__("30U/360", ql.Thirty360(ql.Thirty360.BondBasis))


class ActualActualISDA(DayCountConvention):
    """ACT/ACT ISDA day count convention."""

    def __init__(self):
        super().__init__("ACT/ACT", ql.ActualActual(ql.ActualActual.ISDA))


class Business252(DayCountConvention):
    """BUS/252 day count convention on the Brazilian settlement calendar.

    Counts business days only, so variance accrues in trading time.
    """

    def __init__(self):
        super().__init__("BUS/252", ql.Business252(ql.Brazil()))


# Pre-defined day count convention instances
ACT_360 = Actual360()
ACT_365F = Actual365Fixed()
THIRTY_360E = Thirty360European()
THIRTY_360U = Thirty360US()
ACT_ACT = ActualActualISDA()
BUS_252 = Business252()

# Registry
DAY_COUNT_CONVENTIONS = {
    "ACT/360": ACT_360,
    "ACTUAL/360": ACT_360,
    "ACT/365F": ACT_365F,
    "ACT/365": ACT_365F,
    "ACTUAL/365F": ACT_365F,
    "30E/360": THIRTY_360E,
    "30/360E": THIRTY_360E,
    "30/360 EUROPEAN": THIRTY_360E,
    "30U/360": THIRTY_360U,
    "30/360": THIRTY_360U,
    "30/360 US": THIRTY_360U,
    "ACT/ACT": ACT_ACT,
    "ACTUAL/ACTUAL": ACT_ACT,
    "ACT/ACT ISDA": ACT_ACT,
    "BUS/252": BUS_252,
    "BUSINESS/252": BUS_252,
}


def get_day_count_convention(name: str) -> DayCountConvention:
    """Get a day count convention by name."""
    name_upper = name.upper()
    if name_upper not in DAY_COUNT_CONVENTIONS:
        raise ValueError(
            f"Unknown day count convention: {name}. "
            f"Available: {list(DAY_COUNT_CONVENTIONS.keys())}"
        )
    return DAY_COUNT_CONVENTIONS[name_upper]


def resolve_day_counter(day_count: Union[str, DayCounter]) -> DayCounter:
    """Return a day counter from a registry name or a day-counter object."""
    if isinstance(day_count, str):
        return get_day_count_convention(day_count)
    if not isinstance(day_count, DayCounter):
        raise TypeError(
            f"Day count must be a name or expose year_fraction(): {day_count!r}"
        )
    return day_count
