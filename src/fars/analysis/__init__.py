"""
FARS Analysis Package (Functional Core)

This package contains pure transformation functions with no I/O.
All functions accept DataFrames and return new DataFrames or plain values.

Modules:
- summary: Month-by-year accident counts
- states:  State selection and coordinate sentinel handling
"""

from .summary import (
    EmptySummaryError,
    count_by_month,
)

from .states import (
    InvalidStateError,
    select_state,
    mask_sentinel_coordinates,
    valid_coordinates,
    coordinate_bounds,
)

__all__ = [
    # Summary
    'EmptySummaryError',
    'count_by_month',
    # States
    'InvalidStateError',
    'select_state',
    'mask_sentinel_coordinates',
    'valid_coordinates',
    'coordinate_bounds',
]
