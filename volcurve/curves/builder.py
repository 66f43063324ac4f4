"""High-level builder for Black variance curves."""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Sequence, Union

from volcurve.config import CurveConfig
from volcurve.schema.quotes import VolQuote
from volcurve.utils.date import add_tenor, to_date

from .variance import BlackVarianceCurve

logger = logging.getLogger(__name__)


class VarianceCurveBuilder:
    """Collects volatility quotes and builds a :class:`BlackVarianceCurve`."""

    def __init__(self, reference_date: Union[date, str], config: CurveConfig | None = None):
        self.reference_date = to_date(reference_date)
        self.config = config or CurveConfig()
        self._quotes: List[VolQuote] = []

    # ------------------------------------------------------------------
    # Quotes
    # ------------------------------------------------------------------
    def _scale(self, volatility: float) -> float:
        return volatility / 100.0 if self.config.vols_in_percent else volatility

    def add_quote(self, expiry: Union[date, str], volatility: float) -> VolQuote:
        quote = VolQuote(expiry=to_date(expiry), volatility=self._scale(volatility))
        self._quotes.append(quote)
        return quote

    def add_tenor_quote(self, tenor: str, volatility: float) -> VolQuote:
        quote = VolQuote(
            expiry=add_tenor(self.reference_date, tenor),
            volatility=self._scale(volatility),
            tenor=tenor,
        )
        self._quotes.append(quote)
        return quote

    def add_quotes(self, quotes: Sequence[VolQuote]) -> None:
        """Add already-scaled quotes."""
        self._quotes.extend(quotes)

    @property
    def quotes(self) -> List[VolQuote]:
        return list(self._quotes)

    # ------------------------------------------------------------------
    # Build
    # ------------------------------------------------------------------
    def build(self, underlying: str = "") -> BlackVarianceCurve:
        """
        Build the curve from the quotes in the order they were added.

        Quotes are not reordered: out-of-order or duplicate expiries raise
        :class:`~volcurve.errors.UnsortedDatesError`.
        """
        if not self._quotes:
            raise ValueError("At least one volatility quote is required to build the curve")

        quotes = self.quotes
        logger.debug(
            "Building variance curve for %s from %s quotes (%s, %s)",
            underlying or "<unnamed>",
            len(quotes),
            self.config.day_count,
            self.config.interpolation_method,
        )
        curve = BlackVarianceCurve(
            reference_date=self.reference_date,
            day_count=self.config.day_count,
            dates=[q.expiry for q in quotes],
            volatilities=[q.volatility for q in quotes],
            underlying=underlying,
            interpolator=self.config.interpolation_method,
        )
        if self.config.allow_extrapolation:
            curve.enable_extrapolation()
        return curve
