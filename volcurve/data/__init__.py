"""
Data loading for volatility quotes.
"""

from .loaders import quotes_from_frame, read_vol_quotes_csv

__all__ = ["quotes_from_frame", "read_vol_quotes_csv"]
