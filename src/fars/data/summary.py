"""
FARS Summary Orchestration (Imperative Shell)

Reads the requested years through ``reader.read_years`` and hands the
successful frames to the functional core in ``src/fars/analysis/summary.py``.

Package Location: src/fars/data/summary.py
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

import pandas as pd

from .reader import PathLike, YearLike, read_years
from ..analysis.summary import EmptySummaryError, count_by_month

logger = logging.getLogger(__name__)


def summarize_years(
    years: Union[YearLike, Iterable[YearLike]],
    data_dir: Optional[PathLike] = None,
) -> pd.DataFrame:
    """
    Count fatal accidents per month for each requested year.

    Years whose file is missing or unreadable are skipped with a warning
    (see ``read_years``); only the years that loaded get a column.

    Example::

        summarize_years([2013, 2014], data_dir="data")
        #     MONTH  2013  2014
        # 0       1  2230  2168
        # ...
        # 11     12  2457  2323

    Args:
        years: A single year or an iterable of years.
        data_dir: Directory holding the year files.

    Returns:
        DataFrame with 12 rows: a ``MONTH`` column and one int column per
        loaded year.

    Raises:
        EmptySummaryError: If *years* is empty or no year could be read.
    """
    results = read_years(years, data_dir=data_dir)
    loaded = [r for r in results if r.ok]

    if not loaded:
        requested = [r.year for r in results]
        raise EmptySummaryError(
            f"no FARS data could be read for years: {requested}"
        )

    skipped = len(results) - len(loaded)
    if skipped:
        logger.info(
            "Summarizing %d of %d requested years (%d skipped).",
            len(loaded), len(results), skipped,
        )

    return count_by_month(r.data for r in loaded)
