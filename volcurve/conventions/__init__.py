"""Market conventions used to convert dates into curve times."""

from .daycount import (
    ACT_360,
    ACT_365F,
    ACT_ACT,
    BUS_252,
    DAY_COUNT_CONVENTIONS,
    THIRTY_360E,
    THIRTY_360U,
    DayCountConvention,
    DayCounter,
    get_day_count_convention,
    resolve_day_counter,
)

__all__ = [
    "DayCountConvention",
    "DayCounter",
    "DAY_COUNT_CONVENTIONS",
    "ACT_360",
    "ACT_365F",
    "ACT_ACT",
    "BUS_252",
    "THIRTY_360E",
    "THIRTY_360U",
    "get_day_count_convention",
    "resolve_day_counter",
]
