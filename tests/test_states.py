import math

import pandas as pd
import pytest

from fars.analysis.states import (
    InvalidStateError,
    coordinate_bounds,
    mask_sentinel_coordinates,
    select_state,
    valid_coordinates,
)


@pytest.fixture
def frame():
    return pd.DataFrame({
        "STATE":    [1, 1, 1, 55],
        "LONGITUD": [-86.3, 999.9999, -85.5, -89.4],
        "LATITUDE": [32.36, 33.0, 99.9999, 43.07],
    })


def test_select_state_filters_rows(frame):
    out = select_state(frame, 55)

    assert len(out) == 1
    assert out["STATE"].tolist() == [55]


def test_select_state_invalid(frame):
    with pytest.raises(InvalidStateError) as excinfo:
        select_state(frame, 999)

    assert excinfo.value.state_num == 999
    assert "999" in str(excinfo.value)


def test_mask_sentinel_coordinates_does_not_mutate(frame):
    original = frame.copy()

    out = mask_sentinel_coordinates(frame)

    pd.testing.assert_frame_equal(frame, original)
    assert math.isnan(out.loc[1, "LONGITUD"])
    assert out.loc[1, "LATITUDE"] == pytest.approx(33.0)
    assert math.isnan(out.loc[2, "LATITUDE"])
    assert out.loc[0, "LONGITUD"] == pytest.approx(-86.3)


def test_valid_coordinates_drops_any_sentinel(frame):
    out = valid_coordinates(mask_sentinel_coordinates(frame))

    assert out.index.tolist() == [0, 3]


def test_coordinate_bounds_exclude_sentinels(frame):
    points = valid_coordinates(mask_sentinel_coordinates(select_state(frame, 1)))

    bounds = coordinate_bounds(points)

    assert bounds["lon"] == pytest.approx((-86.3, -86.3))
    assert bounds["lat"] == pytest.approx((32.36, 32.36))


def test_coordinate_bounds_empty():
    empty = pd.DataFrame({"LONGITUD": [], "LATITUDE": []})
    with pytest.raises(ValueError):
        coordinate_bounds(empty)


def test_select_state_with_non_numeric_state_cell():
    mixed = pd.DataFrame({
        "STATE":    ["1", "1", "XX"],
        "LONGITUD": [-86.3, -87.1, -85.5],
        "LATITUDE": [32.36, 33.5, 31.2],
    })

    out = select_state(mixed, 1)

    assert out.index.tolist() == [0, 1]
    with pytest.raises(InvalidStateError):
        select_state(mixed, 55)
