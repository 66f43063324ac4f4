"""Quote schemas."""

from .quotes import VolQuote

__all__ = ["VolQuote"]
