"""
Base class for one-dimensional interpolation strategies.
"""
from abc import ABC, abstractmethod
from typing import List, Sequence

import numpy as np

from volcurve.errors import InterpolationRangeError


class Interpolator(ABC):
    """Base class for interpolation on sorted knots.

    Concrete strategies implement :meth:`_value`, which may assume nothing
    about ``x`` except that the range check has already passed. Outside the
    knots a strategy extrapolates in its own native way.
    """

    min_points = 1

    def __init__(self, times: Sequence[float], values: Sequence[float]):
        """
        Initialize interpolator.

        Args:
            times: Strictly increasing knot abscissas
            values: Knot ordinates, index-aligned with ``times``
        """
        if len(times) != len(values):
            raise ValueError("Times and values must have same length")
        if len(times) < self.min_points:
            raise ValueError(
                f"{self.__class__.__name__} needs at least {self.min_points} point(s)"
            )

        self.times = np.asarray(times, dtype=float)
        self.values = np.asarray(values, dtype=float)

        if np.any(np.diff(self.times) <= 0.0):
            raise ValueError("Times must be strictly increasing")

    @property
    def x_min(self) -> float:
        return float(self.times[0])

    @property
    def x_max(self) -> float:
        return float(self.times[-1])

    def is_in_range(self, x: float) -> bool:
        return self.x_min <= x <= self.x_max

    def evaluate(self, x: float, extrapolate: bool = False) -> float:
        """Interpolated value at ``x``.

        Raises:
            InterpolationRangeError: ``x`` is outside the knots and
                ``extrapolate`` is False
        """
        if not extrapolate and not self.is_in_range(x):
            raise InterpolationRangeError(x, self.x_min, self.x_max)
        return float(self._value(x))

    def __call__(self, x: float, extrapolate: bool = False) -> float:
        return self.evaluate(x, extrapolate)

    def evaluate_many(self, xs: Sequence[float], extrapolate: bool = False) -> List[float]:
        """Interpolate values at multiple points."""
        return [self.evaluate(x, extrapolate) for x in xs]

    @abstractmethod
    def _value(self, x: float) -> float:
        """Strategy-specific value at ``x``."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({len(self.times)} knots)"
