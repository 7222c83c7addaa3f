import logging

import pandas as pd
import plotly.graph_objects as go
import pytest

from fars.analysis.states import InvalidStateError
from fars.analysis.summary import EmptySummaryError
from fars.data.reader import FarsFileNotFoundError
from fars.plotting.state_map import plot_state_map
from fars.reports.generators import ReportGenerator, build_state_map, map_state


# ---------------------------------------------------------------------------
# plot_state_map
# ---------------------------------------------------------------------------

def test_plot_state_map_points_and_range():
    points = pd.DataFrame({"LONGITUD": [-86.3, -85.5], "LATITUDE": [32.36, 31.2]})
    bounds = {"lon": (-86.3, -85.5), "lat": (31.2, 32.36)}

    fig = plot_state_map(points, bounds, title="t")

    assert isinstance(fig, go.Figure)
    assert len(fig.data) == 1
    assert list(fig.data[0].lon) == [-86.3, -85.5]
    assert list(fig.data[0].lat) == [32.36, 31.2]

    lon_lo, lon_hi = fig.layout.geo.lonaxis.range
    lat_lo, lat_hi = fig.layout.geo.lataxis.range
    assert lon_lo < -86.3 and lon_hi > -85.5
    assert lat_lo < 31.2 and lat_hi > 32.36
    assert fig.layout.geo.showsubunits is True


def test_plot_state_map_requires_coordinates():
    with pytest.raises(ValueError):
        plot_state_map(pd.DataFrame({"LONGITUD": [1.0]}), {"lon": (0, 1), "lat": (0, 1)})


# ---------------------------------------------------------------------------
# map_state / build_state_map
# ---------------------------------------------------------------------------

def test_map_state_excludes_sentinel_coordinates(data_dir):
    fig = map_state(1, 2013, data_dir=data_dir)

    assert fig is not None
    lons = list(fig.data[0].lon)
    lats = list(fig.data[0].lat)
    assert len(lons) == 3
    assert all(lon < 900 for lon in lons)
    assert all(lat <= 90 for lat in lats)

    lon_lo, lon_hi = fig.layout.geo.lonaxis.range
    lat_lo, lat_hi = fig.layout.geo.lataxis.range
    assert lon_hi < 0
    assert lat_hi < 40
    assert lon_lo < -87.1 and lat_lo < 31.2


def test_map_state_accepts_string_codes(in_data_dir):
    fig = map_state("55", "2013")

    assert fig is not None
    assert len(fig.data[0].lon) == 2


def test_map_state_invalid_state(data_dir):
    with pytest.raises(InvalidStateError) as excinfo:
        map_state(999, 2013, data_dir=data_dir)

    assert excinfo.value.state_num == 999


def test_map_state_missing_year(data_dir):
    with pytest.raises(FarsFileNotFoundError) as excinfo:
        map_state(1, 1999, data_dir=data_dir)

    assert "accident_1999.csv.bz2" in str(excinfo.value)


def test_build_state_map_empty_logs_notice(caplog):
    empty = pd.DataFrame(columns=["STATE", "LONGITUD", "LATITUDE"])

    with caplog.at_level(logging.INFO, logger="fars"):
        fig = build_state_map(empty, 1, 2013)

    assert fig is None
    assert any(r.getMessage() == "no accidents to plot" for r in caplog.records)


def test_build_state_map_all_unlocated(caplog, accidents):
    df = accidents([(1, 1, 1, 999.9999, 99.9999), (2, 1, 2, 999.9999, 40.0)])

    with caplog.at_level(logging.INFO, logger="fars"):
        fig = build_state_map(df, 1, 2013)

    assert fig is None
    assert any(r.getMessage() == "no accidents to plot" for r in caplog.records)


# ---------------------------------------------------------------------------
# ReportGenerator
# ---------------------------------------------------------------------------

def test_write_summary(data_dir, tmp_path):
    gen = ReportGenerator(data_dir=data_dir, output_dir=tmp_path / "out")

    out_path = gen.write_summary([2013, 2014, 1999])

    assert out_path.name == "summary_2013-2014.csv"
    table = pd.read_csv(out_path)
    assert list(table.columns) == ["MONTH", "2013", "2014"]
    assert len(table) == 12


def test_write_summary_single_year(data_dir, tmp_path):
    gen = ReportGenerator(data_dir=data_dir, output_dir=tmp_path / "out")

    assert gen.write_summary(2014).name == "summary_2014.csv"


def test_write_summary_nothing_readable(data_dir, tmp_path):
    gen = ReportGenerator(data_dir=data_dir, output_dir=tmp_path / "out")

    with pytest.raises(EmptySummaryError):
        gen.write_summary([1999])


def test_write_state_map(data_dir, tmp_path):
    gen = ReportGenerator(data_dir=data_dir, output_dir=tmp_path / "out")

    out_path = gen.write_state_map(55, 2013)

    assert out_path == tmp_path / "out" / "state_55_2013.html"
    assert out_path.exists()
    assert "plotly" in out_path.read_text().lower()


def test_map_state_with_non_numeric_state_cell(tmp_path, accidents, year_writer):
    year_writer(tmp_path, 2013, accidents([
        (1, 1, 1, -86.30, 32.36),
        (2, 1, 2, -87.10, 33.50),
        (3, "XX", 3, -85.50, 31.20),
    ]))

    fig = map_state(1, 2013, data_dir=tmp_path)

    assert fig is not None
    assert list(fig.data[0].lon) == pytest.approx([-86.3, -87.1])
