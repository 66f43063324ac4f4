"""
Market quote schemas for variance curve construction.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from volcurve.errors import check_volatility


@dataclass(frozen=True)
class VolQuote:
    """Black volatility observed for one expiry."""

    expiry: date
    volatility: float
    tenor: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "volatility", check_volatility(self.volatility))
