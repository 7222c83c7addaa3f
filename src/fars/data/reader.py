"""
FARS File Reader (Imperative Shell)

Builds canonical FARS file names, loads a year file into a DataFrame and
reads a batch of years with per-year failure isolation.

Package Location: src/fars/data/reader.py

File naming:
   One file per calendar year, ``accident_<year>.csv.bz2``.  Names are
   resolved against ``data_dir`` (the working directory when omitted);
   absolute names are used as-is.

Batch policy:
   ``read_years`` never aborts the batch.  A year whose file is missing or
   malformed is logged as a warning and returned as a skipped
   :class:`YearResult`, positionally aligned with the requested years.
"""

from __future__ import annotations

import logging
import numbers
import re
import warnings
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

import pandas as pd

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

FILENAME_TEMPLATE: str = "accident_{year}.csv.bz2"
_FILENAME_RE = re.compile(r"^accident_(\d+)\.csv\.bz2$")

REQUIRED_COLUMNS: tuple = ("MONTH", "STATE", "LONGITUD", "LATITUDE")

YearLike = Union[int, float, str]
PathLike = Union[str, Path]


class FarsFileNotFoundError(FileNotFoundError):
    """Raised when a FARS year file does not exist on disk."""

    def __init__(self, filename: PathLike) -> None:
        super().__init__(f"file '{filename}' does not exist")
        self.filename = str(filename)


class SchemaError(ValueError):
    """Raised when a loaded FARS file lacks one or more required columns."""

    def __init__(self, filename: PathLike, missing: Sequence[str]) -> None:
        self.filename = str(filename)
        self.missing = list(missing)
        super().__init__(
            f"file '{filename}' is missing required columns: "
            f"{', '.join(self.missing)}"
        )


class YearResult:
    """Outcome of reading one year inside :func:`read_years`.

    Exactly one of ``data`` / ``reason`` is set.

    Attributes:
        year: The requested year, coerced to int.
        data: ``[MONTH, year]`` DataFrame on success, else ``None``.
        reason: Why the year was skipped, else ``None``.
    """

    __slots__ = ("year", "data", "reason")

    def __init__(
        self,
        year: int,
        data: Optional[pd.DataFrame] = None,
        reason: Optional[str] = None,
    ) -> None:
        self.year = year
        self.data = data
        self.reason = reason

    @property
    def ok(self) -> bool:
        return self.data is not None

    def __repr__(self) -> str:
        if self.ok:
            return f"YearResult(year={self.year}, rows={len(self.data)})"
        return f"YearResult(year={self.year}, skipped={self.reason!r})"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def coerce_int(value: YearLike) -> int:
    """
    Coerce a year or state code to ``int``, truncating toward zero.

    Accepts ints, floats and numeric strings (``"2013"``, ``"2013.7"``).

    Raises:
        ValueError: If *value* is not numeric.
    """
    if isinstance(value, str):
        value = value.strip()
        try:
            return int(value)
        except ValueError:
            pass
        try:
            return int(float(value))
        except ValueError:
            raise ValueError(f"expected a number, got '{value}'")
    return int(value)


def make_filename(year: YearLike) -> str:
    """
    Return the canonical FARS file name for *year*.

    Example::

        make_filename(2013)    # 'accident_2013.csv.bz2'
        make_filename(2013.7)  # 'accident_2013.csv.bz2'
    """
    return FILENAME_TEMPLATE.format(year=coerce_int(year))


def read_fars(
    filename: PathLike,
    required: Sequence[str] = REQUIRED_COLUMNS,
) -> pd.DataFrame:
    """
    Load one FARS CSV (optionally bz2-compressed) into a DataFrame.

    The frame is returned exactly as parsed: header row gives the column
    names and pandas infers the dtypes.  Parser warnings (mixed dtypes and
    the like) are silenced; hard parse errors propagate.

    Args:
        filename: Path to the file.  Relative paths resolve against the
            working directory.
        required: Columns that must be present.  Pass ``()`` to skip the
            check.

    Returns:
        Parsed DataFrame.

    Raises:
        FarsFileNotFoundError: If *filename* does not exist.
        SchemaError: If any of *required* is absent.
    """
    path = Path(filename)
    if not path.exists():
        raise FarsFileNotFoundError(filename)

    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        df = pd.read_csv(path, low_memory=False)

    missing = [col for col in required if col not in df.columns]
    if missing:
        raise SchemaError(filename, missing)

    return df


def read_years(
    years: Union[YearLike, Iterable[YearLike]],
    data_dir: Optional[PathLike] = None,
) -> List[YearResult]:
    """
    Read the ``MONTH`` column of each requested year's file.

    Each year is attempted independently.  On success the result holds a
    two-column DataFrame ``[MONTH, year]`` where ``year`` is the requested
    year.  On any failure a warning ``invalid year: <year>`` is logged and
    the result is skipped; the remaining years are still read.

    Args:
        years: A single year or an iterable of years.
        data_dir: Directory holding the year files.  Defaults to the
            working directory.

    Returns:
        One :class:`YearResult` per input year, in input order.
    """
    results: List[YearResult] = []
    for raw_year in _as_year_list(years):
        try:
            year = coerce_int(raw_year)
            df = read_fars(year_path(year, data_dir))
            month_df = df.assign(year=year)[["MONTH", "year"]]
        except Exception as exc:
            logger.warning(
                "invalid year: %s", raw_year,
                extra={"year": raw_year, "reason": str(exc)},
            )
            results.append(YearResult(_safe_year(raw_year), reason=str(exc)))
            continue
        results.append(YearResult(year, data=month_df))
    return results


def year_path(year: YearLike, data_dir: Optional[PathLike] = None) -> Path:
    """
    Resolve the file for *year* against *data_dir*.

    Without *data_dir* the bare file name is returned, so it resolves
    against the working directory.
    """
    filename = make_filename(year)
    if data_dir is None:
        return Path(filename)
    return Path(data_dir) / filename


def available_years(data_dir: Optional[PathLike] = None) -> List[int]:
    """
    List the years that have an ``accident_<year>.csv.bz2`` file.

    Args:
        data_dir: Directory to scan.  Defaults to the working directory.

    Returns:
        Sorted list of years.  Empty if the directory has no year files or
        does not exist.
    """
    root = Path(data_dir) if data_dir is not None else Path.cwd()
    if not root.is_dir():
        return []

    years = set()
    for path in root.iterdir():
        match = _FILENAME_RE.match(path.name)
        if match and path.is_file():
            years.add(int(match.group(1)))
    return sorted(years)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _as_year_list(years: Union[YearLike, Iterable[YearLike]]) -> list:
    # numbers.Real also covers numpy scalars such as np.int64(2013).
    if isinstance(years, (numbers.Real, str)):
        return [years]
    return list(years)


def _safe_year(raw_year: YearLike):
    # Keep the caller's value when it cannot be coerced so the skip is traceable.
    try:
        return coerce_int(raw_year)
    except (TypeError, ValueError):
        return raw_year
