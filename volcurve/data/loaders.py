"""
Load volatility quotes from tabular data.

Expected columns: ``vol`` and either ``expiry`` (a date) or ``tenor``
(e.g. ``3M``, resolved against the reference date).
"""

import logging
from datetime import date
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from volcurve.schema.quotes import VolQuote
from volcurve.utils.date import add_tenor, to_date

logger = logging.getLogger(__name__)


def quotes_from_frame(
    frame: pd.DataFrame,
    reference_date: Optional[Union[date, str]] = None,
    vols_in_percent: bool = False,
) -> List[VolQuote]:
    """
    Convert a DataFrame of quotes into VolQuote objects.

    Args:
        frame: Quotes table with a ``vol`` column and an ``expiry`` or ``tenor`` column
        reference_date: Needed when expiries are given as tenors
        vols_in_percent: Divide vols by 100

    Returns:
        List of VolQuote objects in row order; rows without a vol are skipped
    """
    columns = {str(c).lower(): c for c in frame.columns}
    if "vol" not in columns:
        raise ValueError(f"Quotes table needs a 'vol' column, got {list(frame.columns)}")
    if "expiry" not in columns and "tenor" not in columns:
        raise ValueError(
            f"Quotes table needs an 'expiry' or 'tenor' column, got {list(frame.columns)}"
        )
    use_expiry = "expiry" in columns
    if not use_expiry and reference_date is None:
        raise ValueError("reference_date is required to resolve tenor quotes")

    quotes = []
    skipped = 0
    for _, row in frame.iterrows():
        vol = row[columns["vol"]]
        if pd.isna(vol):
            skipped += 1
            continue
        vol = float(vol) / 100.0 if vols_in_percent else float(vol)

        if use_expiry:
            quotes.append(VolQuote(expiry=to_date(row[columns["expiry"]]), volatility=vol))
        else:
            tenor = str(row[columns["tenor"]]).strip()
            quotes.append(
                VolQuote(expiry=add_tenor(reference_date, tenor), volatility=vol, tenor=tenor)
            )

    logger.debug("Loaded %s vol quotes (%s rows skipped)", len(quotes), skipped)
    return quotes


def read_vol_quotes_csv(
    path: Union[str, Path],
    reference_date: Optional[Union[date, str]] = None,
    vols_in_percent: bool = False,
) -> List[VolQuote]:
    """Read quotes from a CSV file. See :func:`quotes_from_frame`."""
    frame = pd.read_csv(path, dtype=str)
    return quotes_from_frame(frame, reference_date, vols_in_percent)
