"""
Piecewise linear and piecewise flat interpolation.
"""
import numpy as np

from .base import Interpolator


class LinearInterpolator(Interpolator):
    """Linear interpolation between knots.

    On cumulative variance this is the flat-forward-variance assumption:
    forward variance is constant between consecutive expiries. Outside the
    knots the first or last segment is extended.
    """

    def _value(self, x: float) -> float:
        if len(self.times) == 1:
            return self.values[0]

        # Index of the segment, clamped so the end segments extend outward
        i = int(np.searchsorted(self.times, x)) - 1
        i = min(max(i, 0), len(self.times) - 2)

        t1, t2 = self.times[i], self.times[i + 1]
        v1, v2 = self.values[i], self.values[i + 1]

        weight = (x - t1) / (t2 - t1)
        return v1 + weight * (v2 - v1)


class BackwardFlatInterpolator(Interpolator):
    """Step function taking the value of the next knot at or after ``x``.

    Simple but discontinuous at the knots.
    """

    def _value(self, x: float) -> float:
        if x >= self.times[-1]:
            return self.values[-1]
        i = int(np.searchsorted(self.times, x, side="left"))
        return self.values[i]
