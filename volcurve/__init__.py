"""Black Volatility Variance Curves.

This package turns Black volatilities quoted for a strip of expiries into a
continuous cumulative-variance curve usable at any maturity.

Key modules:
- curves: BlackVarianceCurve and its builder
- interpolation: Pluggable interpolation strategies
- conventions: Day count conventions
- data: Quote loading from tables
- observer: Change notification for dependants
"""

from .config import CurveConfig
from .curves import BlackVarianceCurve, VarianceCurveBuilder, VarianceTermStructure
from .errors import (
    ArityMismatchError,
    ExtrapolationError,
    InterpolationRangeError,
    InvalidFirstDateError,
    InvalidVolatilityError,
    NegativeTimeError,
    NonFiniteTimeError,
    UnsortedDatesError,
    VolCurveError,
)
from .observer import Observable

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Curves
    "BlackVarianceCurve",
    "VarianceCurveBuilder",
    "VarianceTermStructure",
    "CurveConfig",
    "Observable",
    # Exceptions
    "VolCurveError",
    "ArityMismatchError",
    "InvalidFirstDateError",
    "UnsortedDatesError",
    "NegativeTimeError",
    "NonFiniteTimeError",
    "InvalidVolatilityError",
    "ExtrapolationError",
    "InterpolationRangeError",
]
