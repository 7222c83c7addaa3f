"""
FARS State Selection & Coordinate Cleaning (Functional Core)

Pure functions only. No I/O, no side effects.  Every function returns a
new DataFrame; the input frame is never modified.

Package Location: src/fars/analysis/states.py

Coordinate Sentinel Rule:
    The source feed marks an unknown location with out-of-range values:
    ``LONGITUD > 900`` or ``LATITUDE > 90``.  These are replaced with NaN
    by :func:`mask_sentinel_coordinates` and a record with either
    coordinate missing is dropped by :func:`valid_coordinates`, so it never
    reaches the bounds computation or the plotted point set.
"""

from __future__ import annotations

from typing import Dict, Tuple

import numpy as np
import pandas as pd

_LON_SENTINEL: float = 900.0
_LAT_SENTINEL: float = 90.0


class InvalidStateError(ValueError):
    """Raised when a state code does not appear in a year's ``STATE`` column."""

    def __init__(self, state_num: int) -> None:
        super().__init__(f"invalid STATE number: {state_num}")
        self.state_num = state_num


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def select_state(df: pd.DataFrame, state_num: int) -> pd.DataFrame:
    """
    Return the rows of *df* whose ``STATE`` equals *state_num*.

    ``STATE`` is compared numerically, so a column read as strings (or
    holding a stray non-numeric cell) still matches; non-numeric codes
    never match.

    Raises:
        InvalidStateError: If *state_num* is not present in ``df['STATE']``.
    """
    codes = pd.to_numeric(df["STATE"], errors="coerce")
    match = codes == state_num
    if not match.any():
        raise InvalidStateError(state_num)

    return df.loc[match].copy()


def mask_sentinel_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    """
    Replace sentinel coordinates with NaN.

    Args:
        df: Frame with ``LONGITUD`` and ``LATITUDE`` columns.

    Returns:
        Copy of *df* with float coordinate columns; sentinel values are NaN.
    """
    out = df.copy()
    lon = pd.to_numeric(out["LONGITUD"], errors="coerce").astype(float)
    lat = pd.to_numeric(out["LATITUDE"], errors="coerce").astype(float)
    out["LONGITUD"] = np.where(lon > _LON_SENTINEL, np.nan, lon)
    out["LATITUDE"] = np.where(lat > _LAT_SENTINEL, np.nan, lat)
    return out


def valid_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    """Drop records with a missing longitude or latitude."""
    return df.dropna(subset=["LONGITUD", "LATITUDE"])


def coordinate_bounds(df: pd.DataFrame) -> Dict[str, Tuple[float, float]]:
    """
    Compute the longitude / latitude range covered by *df*.

    Args:
        df: Frame of valid coordinates (see :func:`valid_coordinates`).

    Returns:
        ``{'lon': (min, max), 'lat': (min, max)}``.

    Raises:
        ValueError: If *df* is empty.
    """
    if df.empty:
        raise ValueError("cannot compute bounds of an empty coordinate set")

    return {
        "lon": (float(df["LONGITUD"].min()), float(df["LONGITUD"].max())),
        "lat": (float(df["LATITUDE"].min()), float(df["LATITUDE"].max())),
    }
