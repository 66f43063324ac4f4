"""
Factory functions for creating interpolators by name.
"""
from typing import Callable, Dict, Sequence, Type, Union

from .base import Interpolator
from .linear import BackwardFlatInterpolator, LinearInterpolator
from .spline import CubicSplineInterpolator, MonotoneCubicInterpolator

InterpolatorFactory = Callable[[Sequence[float], Sequence[float]], Interpolator]

INTERPOLATION_METHODS: Dict[str, Type[Interpolator]] = {
    "LINEAR": LinearInterpolator,
    "BACKWARD_FLAT": BackwardFlatInterpolator,
    "CUBIC": CubicSplineInterpolator,
    "CUBIC_SPLINE": CubicSplineInterpolator,
    "MONOTONE_CUBIC": MonotoneCubicInterpolator,
    "PCHIP": MonotoneCubicInterpolator,
}


def get_interpolator_factory(method: Union[str, InterpolatorFactory]) -> InterpolatorFactory:
    """
    Resolve an interpolation method.

    Args:
        method: Method name, or a callable ``(times, values) -> Interpolator``
            which is returned unchanged

    Returns:
        Callable building an interpolator from knot arrays
    """
    if callable(method):
        return method

    method_upper = method.upper()
    if method_upper not in INTERPOLATION_METHODS:
        raise ValueError(
            f"Unknown interpolation method: {method}. "
            f"Available: {', '.join(INTERPOLATION_METHODS)}"
        )
    return INTERPOLATION_METHODS[method_upper]


def create_interpolator(
    method: Union[str, InterpolatorFactory],
    times: Sequence[float],
    values: Sequence[float],
) -> Interpolator:
    """
    Create an interpolator based on method name.

    Args:
        method: Interpolation method name or factory callable
        times: Knot times
        values: Values to interpolate

    Returns:
        Configured interpolator
    """
    return get_interpolator_factory(method)(times, values)
