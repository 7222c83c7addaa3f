"""
FARS Data Package (Imperative Shell)

This package handles all file I/O for the FARS system.

Modules:
- reader:  File naming, single-file loading, per-year batch reads
- summary: Month-by-year summary orchestration
"""

from .reader import (
    REQUIRED_COLUMNS,
    FarsFileNotFoundError,
    SchemaError,
    YearResult,
    available_years,
    coerce_int,
    make_filename,
    read_fars,
    read_years,
    year_path,
)
from .summary import summarize_years

__all__ = [
    # Reader
    'REQUIRED_COLUMNS',
    'FarsFileNotFoundError',
    'SchemaError',
    'YearResult',
    'available_years',
    'coerce_int',
    'make_filename',
    'read_fars',
    'read_years',
    'year_path',
    # Summary
    'summarize_years',
]
