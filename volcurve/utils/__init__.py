from .date import add_tenor, tenor_to_relativedelta, to_date

__all__ = ["add_tenor", "tenor_to_relativedelta", "to_date"]
