"""Shared fixtures: small synthetic FARS year files written to tmp_path."""

from pathlib import Path

import pandas as pd
import pytest


def _accidents(rows):
    return pd.DataFrame(
        rows, columns=["ST_CASE", "STATE", "MONTH", "LONGITUD", "LATITUDE"]
    )


# 2013: Alabama (1) x4, one with unknown location; Wisconsin (55) x2.
_ROWS_2013 = [
    (10001, 1, 1, -86.30, 32.36),
    (10002, 1, 1, -87.10, 33.50),
    (10003, 1, 7, 999.9999, 99.9999),
    (10004, 1, 12, -85.50, 31.20),
    (550001, 55, 3, -89.40, 43.07),
    (550002, 55, 3, -88.00, 44.50),
]

# 2014: Alabama only.
_ROWS_2014 = [
    (10001, 1, 2, -86.80, 33.52),
    (10002, 1, 2, -86.60, 34.73),
    (10003, 1, 2, -88.04, 30.69),
    (10004, 1, 12, -86.30, 32.36),
]


def write_year(data_dir: Path, year: int, df: pd.DataFrame) -> Path:
    path = data_dir / f"accident_{year}.csv.bz2"
    df.to_csv(path, index=False)
    return path


@pytest.fixture
def data_dir(tmp_path):
    write_year(tmp_path, 2013, _accidents(_ROWS_2013))
    write_year(tmp_path, 2014, _accidents(_ROWS_2014))
    return tmp_path


@pytest.fixture
def in_data_dir(data_dir, monkeypatch):
    """Run the test with the data directory as the working directory."""
    monkeypatch.chdir(data_dir)
    return data_dir


@pytest.fixture
def accidents():
    return _accidents


@pytest.fixture
def year_writer():
    return write_year
