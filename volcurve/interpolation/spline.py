"""
Smooth interpolation methods backed by scipy.
"""
from typing import Sequence

from scipy.interpolate import CubicSpline, PchipInterpolator

from .base import Interpolator


class CubicSplineInterpolator(Interpolator):
    """Natural cubic spline (zero second derivative at both ends).

    Smooth, but may overshoot between knots and so does not guarantee a
    non-decreasing variance curve.
    """

    min_points = 2

    def __init__(self, times: Sequence[float], values: Sequence[float]):
        super().__init__(times, values)
        self._spline = CubicSpline(self.times, self.values, bc_type="natural", extrapolate=True)

    def _value(self, x: float) -> float:
        return self._spline(x)

    def derivative(self, x: float) -> float:
        return float(self._spline(x, 1))


class MonotoneCubicInterpolator(Interpolator):
    """Shape-preserving piecewise cubic Hermite interpolation (PCHIP).

    Monotone data stays monotone between knots, so non-decreasing
    cumulative variances give a non-decreasing curve.
    """

    min_points = 2

    def __init__(self, times: Sequence[float], values: Sequence[float]):
        super().__init__(times, values)
        self._pchip = PchipInterpolator(self.times, self.values, extrapolate=True)

    def _value(self, x: float) -> float:
        return self._pchip(x)

    def derivative(self, x: float) -> float:
        return float(self._pchip.derivative()(x))
