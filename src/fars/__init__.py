"""
pyfars - FARS fatal accident summaries and state maps

A small Python package for the US NHTSA Fatality Analysis Reporting
System (FARS) annual accident files, using the Functional Core,
Imperative Shell architecture.

Structure:
- data/     : Imperative Shell (file naming, loading, batch reads)
- analysis/ : Functional Core (pure transformations)
- plotting/ : (plotting functions)
- reports/  : orchestration and file output
"""

from .data import (
    REQUIRED_COLUMNS,
    FarsFileNotFoundError,
    SchemaError,
    YearResult,
    available_years,
    make_filename,
    read_fars,
    read_years,
    summarize_years,
)
from .analysis import EmptySummaryError, InvalidStateError
from .reports import map_state

__version__ = "0.1.0"

__all__ = [
    'REQUIRED_COLUMNS',
    'FarsFileNotFoundError',
    'SchemaError',
    'YearResult',
    'available_years',
    'make_filename',
    'read_fars',
    'read_years',
    'summarize_years',
    'EmptySummaryError',
    'InvalidStateError',
    'map_state',
]
