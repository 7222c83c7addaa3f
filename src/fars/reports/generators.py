"""
FARS Report Generator (Imperative Shell)

Thin orchestration layer: resolves year files, calls reader.py to load
DataFrames, runs the functional core, calls plotting functions to build
figures and writes CSV / HTML outputs.

Package Location: src/fars/reports/generators.py

Usage::

    from pathlib import Path
    from fars.reports.generators import ReportGenerator

    gen = ReportGenerator(data_dir=Path("data"), output_dir=Path("outputs"))
    gen.write_summary([2013, 2014, 2015])
    gen.write_state_map(state_num=1, year=2013)
    # Writes:
    #   outputs/summary_2013-2015.csv
    #   outputs/state_1_2013.html
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

import pandas as pd
import plotly.graph_objects as go

from ..analysis.states import (
    coordinate_bounds,
    mask_sentinel_coordinates,
    select_state,
    valid_coordinates,
)
from ..data.reader import (
    PathLike,
    YearLike,
    coerce_int,
    read_fars,
    year_path,
)
from ..data.summary import summarize_years
from ..plotting.state_map import plot_state_map

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def map_state(
    state_num: YearLike,
    year: YearLike,
    data_dir: Optional[PathLike] = None,
    show: bool = False,
) -> Optional[go.Figure]:
    """
    Map every fatal accident in one state for one year.

    Args:
        state_num: FARS state code (coerced to int).
        year: Year whose file is loaded.
        data_dir: Directory holding the year files.
        show: Also call ``fig.show()`` on the result.

    Returns:
        The figure, or ``None`` when there is nothing to plot.

    Raises:
        FarsFileNotFoundError: If the year's file does not exist.
        SchemaError: If the year's file lacks required columns.
        InvalidStateError: If *state_num* is not in the year's data.
    """
    data = read_fars(year_path(year, data_dir))

    state = coerce_int(state_num)
    df_state = select_state(data, state)

    fig = build_state_map(df_state, state, coerce_int(year))
    if fig is not None and show:
        fig.show()
    return fig


def build_state_map(
    df_state: pd.DataFrame,
    state_num: int,
    year: int,
) -> Optional[go.Figure]:
    """
    Build the accident map for rows already filtered to one state.

    An empty frame is a valid outcome: the notice ``no accidents to plot``
    is logged and ``None`` is returned.  The same applies when every row has
    sentinel coordinates, since no map extent can be derived.

    Args:
        df_state: Accident rows for a single state.
        state_num: State code, used in the title and log fields.
        year: Year, used in the title and log fields.

    Returns:
        Figure, or ``None`` if nothing can be plotted.
    """
    if df_state.empty:
        logger.info(
            "no accidents to plot",
            extra={"state": state_num, "year": year},
        )
        return None

    points = valid_coordinates(mask_sentinel_coordinates(df_state))
    if points.empty:
        logger.info(
            "no accidents to plot",
            extra={"state": state_num, "year": year, "unlocated": len(df_state)},
        )
        return None

    dropped = len(df_state) - len(points)
    if dropped:
        logger.debug(
            "Omitting %d accident(s) with unknown location.", dropped,
            extra={"state": state_num, "year": year},
        )

    title = f"Fatal accidents – state {state_num}, {year} ({len(points)} located)"
    return plot_state_map(points, coordinate_bounds(points), title=title)


class ReportGenerator:
    """
    Writes FARS summary tables and state maps to an output directory.

    Responsibilities
    ----------------
    - Delegate file access to ``reader.py`` / ``summary.py``.
    - Call pure plotting functions from the functional core.
    - Write the summary as CSV and maps as standalone HTML.

    Args:
        data_dir: Directory holding ``accident_<year>.csv.bz2`` files.
        output_dir: Directory for generated files; created on first write.
    """

    def __init__(self, data_dir: PathLike, output_dir: PathLike) -> None:
        self.data_dir = Path(data_dir)
        self.output_dir = Path(output_dir)

    def write_summary(self, years: Union[YearLike, Iterable[YearLike]]) -> Path:
        """
        Summarize *years* and write ``summary_<first>-<last>.csv``.

        The file name uses the first and last years that actually loaded.

        Returns:
            Path of the written CSV.

        Raises:
            EmptySummaryError: If no year could be read.
        """
        table = summarize_years(years, data_dir=self.data_dir)
        year_cols = [c for c in table.columns if c != "MONTH"]
        first, last = year_cols[0], year_cols[-1]
        name = f"summary_{first}.csv" if first == last else f"summary_{first}-{last}.csv"

        out_path = self._ensure_output_dir() / name
        table.to_csv(out_path, index=False)
        logger.info("Summary written to %s", out_path)
        return out_path

    def write_state_map(
        self,
        state_num: YearLike,
        year: YearLike,
    ) -> Optional[Path]:
        """
        Map one state/year and write ``state_<state>_<year>.html``.

        Returns:
            Path of the written HTML, or ``None`` if there was nothing to plot.

        Raises:
            FarsFileNotFoundError: If the year's file does not exist.
            InvalidStateError: If the state code is not in the data.
        """
        fig = map_state(state_num, year, data_dir=self.data_dir)
        if fig is None:
            return None

        out_path = (
            self._ensure_output_dir()
            / f"state_{coerce_int(state_num)}_{coerce_int(year)}.html"
        )
        fig.write_html(str(out_path), include_plotlyjs="cdn")
        logger.info("State map written to %s", out_path)
        return out_path

    def _ensure_output_dir(self) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        return self.output_dir
