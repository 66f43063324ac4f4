"""
Curves package - variance term structures built from volatility quotes.

Main APIs:
---------
    - BlackVarianceCurve: Black volatility curve interpolated on cumulative variance
    - VarianceCurveBuilder: Build a BlackVarianceCurve from quotes and a CurveConfig
    - VarianceTermStructure: Base class deriving vols and forward quantities
"""

from .base import VarianceTermStructure
from .builder import VarianceCurveBuilder
from .variance import BlackVarianceCurve

__all__ = [
    "BlackVarianceCurve",
    "VarianceCurveBuilder",
    "VarianceTermStructure",
]
