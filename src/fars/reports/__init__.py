"""
FARS Reports Package (Imperative Shell)

Orchestrates data loading, plot generation, and CSV / HTML output.
No analysis logic lives here — this package calls the functional core
(src/fars/analysis/) and plotting (src/fars/plotting/) via the data
reader (src/fars/data/reader.py).

Modules:
    generators: map_state(), build_state_map() and the ReportGenerator
                class for writing summaries and maps to disk.
"""

from .generators import (
    ReportGenerator,
    build_state_map,
    map_state,
)

__all__ = [
    'ReportGenerator',
    'build_state_map',
    'map_state',
]
