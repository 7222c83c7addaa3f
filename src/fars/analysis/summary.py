"""
FARS Month-by-Year Counts (Functional Core)

Pure functions only. No I/O, no side effects.
Input is a list of ``[MONTH, year]`` DataFrames, output is a pivoted table.

Package Location: src/fars/analysis/summary.py

Output shape:
    Exactly 12 rows, one per month (1..12), in a ``MONTH`` column.  One
    integer count column per distinct year, labelled with the int year and
    sorted ascending.  A month with no accidents in a year counts 0.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

import pandas as pd

MONTHS: List[int] = list(range(1, 13))


class EmptySummaryError(ValueError):
    """
    Raised when there is no data to summarize, either because no years
    were requested or because every requested year was skipped.
    """
    pass


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def count_by_month(frames: Iterable[Optional[pd.DataFrame]]) -> pd.DataFrame:
    """
    Stack per-year ``[MONTH, year]`` frames and count accidents per month.

    ``None`` entries (skipped years) are ignored.

    Args:
        frames: DataFrames with at least ``MONTH`` and ``year`` columns.

    Returns:
        DataFrame with a ``MONTH`` column and one count column per year.

    Raises:
        EmptySummaryError: If no frames remain after dropping ``None``.
    """
    present = [df for df in frames if df is not None]
    if not present:
        raise EmptySummaryError("no FARS data available to summarize")

    combined = pd.concat(present, ignore_index=True)

    counts = (
        combined.groupby(["year", "MONTH"])
        .size()
        .unstack("year", fill_value=0)
        .reindex(MONTHS, fill_value=0)
        .astype(int)
    )
    counts = counts.reindex(columns=sorted(counts.columns))
    counts.columns.name = None
    counts.index.name = "MONTH"

    return counts.reset_index()
