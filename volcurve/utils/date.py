import re
from datetime import date, datetime
from typing import Union

from dateutil.relativedelta import relativedelta
from pandas import Timestamp

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"

_TENOR_RE = re.compile(r"^\s*(\d+)\s*([DWMY])\s*$", re.IGNORECASE)


def to_date(date_like: Union[str, date, datetime, Timestamp]) -> date:
    """
    Convert a string, datetime or pandas Timestamp to a plain date.
    Accepts 'YYYY-MM-DD' and 'YYYYMMDD' string formats.
    """
    if isinstance(date_like, Timestamp):
        return date_like.date()
    if isinstance(date_like, datetime):
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(date_like, fmt).date()
            except ValueError:
                continue
        raise ValueError(f"Unsupported date string format: {date_like!r}")
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def tenor_to_relativedelta(tenor: str) -> relativedelta:
    """
    Parse a tenor such as '10D', '1W', '3M' or '2Y'.
    """
    match = _TENOR_RE.match(tenor)
    if match is None:
        raise ValueError(f"Unsupported tenor format: {tenor!r}")
    count = int(match.group(1))
    unit = match.group(2).upper()
    if unit == "D":
        return relativedelta(days=count)
    if unit == "W":
        return relativedelta(weeks=count)
    if unit == "M":
        return relativedelta(months=count)
    return relativedelta(years=count)


def add_tenor(start: Union[str, date, datetime], tenor: str) -> date:
    """
    Calendar date `tenor` after `start`, without business day adjustment.
    Month ends roll back to the last day of the target month.
    """
    return to_date(start) + tenor_to_relativedelta(tenor)
