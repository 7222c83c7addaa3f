"""
FARS State Accident Map (Functional Core)

Pure function – no file I/O, no side effects.
Input: DataFrame of valid accident coordinates + bounds dict.
Output: plotly.graph_objects.Figure.

Package Location: src/fars/plotting/state_map.py

Base map:
    Plotly's built-in geography with US state borders (``showsubunits``),
    clipped to the accident bounds plus a small margin.  A mercator
    projection is used because plotly ignores axis ranges under the
    default ``albers usa`` projection of the ``usa`` scope.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

import pandas as pd
import plotly.graph_objects as go

# ---------------------------------------------------------------------------
# Layout constants
# ---------------------------------------------------------------------------

_MARKER_COLOR = "#d62728"
_MARKER_SIZE = 3

# Degrees added on each side of the data range so edge points stay visible.
_PAD_DEG = 0.25

_LAND_COLOR = "rgb(243, 243, 243)"
_BORDER_COLOR = "rgb(120, 120, 120)"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def plot_state_map(
    df_points: pd.DataFrame,
    bounds: Dict[str, Tuple[float, float]],
    title: Optional[str] = None,
) -> go.Figure:
    """
    Build a point map of accident locations over US state borders.

    Args:
        df_points: Frame with float ``LONGITUD`` and ``LATITUDE`` columns,
            one row per accident.  Rows must already be free of missing
            coordinates.
        bounds: ``{'lon': (min, max), 'lat': (min, max)}`` as returned by
            ``fars.analysis.states.coordinate_bounds``.
        title: Optional figure title.

    Returns:
        ``plotly.graph_objects.Figure`` ready for ``fig.show()`` or
        ``fig.write_html()``.

    Raises:
        ValueError: If ``df_points`` is missing coordinate columns.
    """
    missing = [c for c in ("LONGITUD", "LATITUDE") if c not in df_points.columns]
    if missing:
        raise ValueError(f"df_points is missing required columns: {missing}")

    lon_range = _padded(bounds["lon"])
    lat_range = _padded(bounds["lat"])

    fig = go.Figure(
        go.Scattergeo(
            lon=df_points["LONGITUD"].tolist(),
            lat=df_points["LATITUDE"].tolist(),
            mode="markers",
            marker={"color": _MARKER_COLOR, "size": _MARKER_SIZE},
            name="Fatal accident",
            hovertemplate="lon %{lon:.4f}<br>lat %{lat:.4f}<extra></extra>",
        )
    )

    fig.update_geos(
        scope="north america",
        projection_type="mercator",
        showsubunits=True,
        subunitcolor=_BORDER_COLOR,
        showcountries=True,
        countrycolor=_BORDER_COLOR,
        showland=True,
        landcolor=_LAND_COLOR,
        lonaxis_range=list(lon_range),
        lataxis_range=list(lat_range),
    )
    fig.update_layout(
        title=title,
        showlegend=False,
        margin={"l": 10, "r": 10, "t": 50 if title else 10, "b": 10},
    )

    return fig


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _padded(span: Tuple[float, float]) -> Tuple[float, float]:
    lo, hi = span
    return lo - _PAD_DEG, hi + _PAD_DEG
