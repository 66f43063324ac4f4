"""
Interpolation methods for variance curves.

A curve is built with a pluggable strategy: any class or callable taking
``(times, values)`` and returning an :class:`Interpolator` will do.
"""

# Base classes
from .base import Interpolator

# Factory and utilities
from .factory import (
    INTERPOLATION_METHODS,
    InterpolatorFactory,
    create_interpolator,
    get_interpolator_factory,
)

# Linear interpolation methods
from .linear import BackwardFlatInterpolator, LinearInterpolator

# Spline interpolation methods
from .spline import CubicSplineInterpolator, MonotoneCubicInterpolator

__all__ = [
    # Base classes
    'Interpolator',

    # Linear interpolation methods
    'LinearInterpolator',
    'BackwardFlatInterpolator',

    # Spline interpolation methods
    'CubicSplineInterpolator',
    'MonotoneCubicInterpolator',

    # Factory and utilities
    'INTERPOLATION_METHODS',
    'InterpolatorFactory',
    'create_interpolator',
    'get_interpolator_factory',
]
