"""Configuration for building variance curves."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

from volcurve.conventions.daycount import get_day_count_convention
from volcurve.interpolation import get_interpolator_factory


@dataclass(frozen=True)
class CurveConfig:
    """Configuration knobs for :class:`VarianceCurveBuilder`."""

    day_count: str = "ACT/365F"
    # Examples: "LINEAR", "BACKWARD_FLAT", "CUBIC", "MONOTONE_CUBIC".
    interpolation_method: str = "LINEAR"
    # Turns the curve's extrapolation switch on, so queries beyond the last
    # expiry succeed without passing extrapolate=True.
    allow_extrapolation: bool = False
    # Quotes given as 20.0 rather than 0.20.
    vols_in_percent: bool = False

    def __post_init__(self):
        # Fail on unknown names at configuration time rather than at build time
        get_day_count_convention(self.day_count)
        get_interpolator_factory(self.interpolation_method)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> CurveConfig:
        """Build a config from a plain dict, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(mapping) - known
        if unknown:
            raise ValueError(
                f"Unknown curve config keys: {sorted(unknown)}. Available: {sorted(known)}"
            )
        return cls(**dict(mapping))
