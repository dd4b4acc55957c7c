from __future__ import annotations

import numpy as np
import pytest

from line_chart.data_model import ChartData
from line_chart.geometry import PlotGeometry, Point, VerticalScale, Viewport


def test_chart_data_aggregates_and_order():
    data = ChartData([3, 1.5, 9, -2])
    assert data.count == 4
    assert len(data) == 4
    assert data.min() == -2
    assert data.max() == 9
    assert data.only_points() == (3.0, 1.5, 9.0, -2.0)
    assert list(data) == [3.0, 1.5, 9.0, -2.0]
    assert data[2] == 9.0


def test_chart_data_is_read_only():
    data = ChartData([1, 2, 3])
    with pytest.raises(ValueError):
        data.as_array()[0] = 10.0


def test_chart_data_does_not_alias_input():
    src = [1.0, 2.0]
    data = ChartData(src)
    src[0] = 99.0
    assert data[0] == 1.0


def test_empty_series_fails_fast():
    with pytest.raises(ValueError):
        ChartData([])


@pytest.mark.parametrize("bad", [[1.0, float("nan")], [float("inf"), 2.0], [[1, 2], [3, 4]]])
def test_invalid_samples_rejected(bad):
    with pytest.raises(ValueError):
        ChartData(bad)


def test_viewport_must_be_positive():
    with pytest.raises(ValueError):
        Viewport(0, 100)
    with pytest.raises(ValueError):
        Viewport(100, -1)


def test_single_sample_has_no_step_width():
    with pytest.raises(ValueError):
        PlotGeometry(ChartData([4.0]), Viewport(100, 100))


def test_polyline_spans_full_width():
    geo = PlotGeometry(ChartData([1, 2, 3, 4, 5]), Viewport(200, 100))
    pts = geo.polyline()
    assert pts[0].x == 0.0
    assert pts[-1].x == pytest.approx(200.0)
    xs = np.array([p.x for p in pts])
    assert np.allclose(np.diff(xs), 50.0)


def test_sum_scale_normalises_by_max_plus_min():
    geo = PlotGeometry(ChartData([2, 6]), Viewport(10, 80))
    assert geo.step_height == pytest.approx(10.0)
    assert geo.sample_position(1) == Point(10.0, 60.0)


def test_range_scale_spans_viewport_height():
    geo = PlotGeometry(ChartData([2, 6]), Viewport(10, 80), VerticalScale.RANGE)
    assert geo.value_to_y(2) == 0.0
    assert geo.value_to_y(6) == pytest.approx(80.0)


def test_range_scale_flat_series_is_centred():
    geo = PlotGeometry(ChartData([5, 5, 5]), Viewport(10, 80), VerticalScale.RANGE)
    assert geo.step_height == 0.0
    assert geo.value_to_y(5) == 40.0


def test_vertical_scale_accepts_string_value():
    geo = PlotGeometry(ChartData([1, 2]), Viewport(10, 10), "range")
    assert geo.vertical_scale is VerticalScale.RANGE


def test_index_at_floors():
    geo = PlotGeometry(ChartData([1, 2, 3]), Viewport(100, 10))
    assert geo.index_at(0) == 0
    assert geo.index_at(49.9) == 0
    assert geo.index_at(50) == 1
    assert geo.index_at(-0.5) == -1


def test_index_at_only_snaps_upward_within_range():
    geo = PlotGeometry(ChartData([1, 2, 3]), Viewport(100, 10))
    # a hair left of the first sample is still outside
    assert geo.index_at(-1e-10) == -1
    # a hair below a boundary snaps to the sample sitting on it
    assert geo.index_at(50 - 1e-12) == 1
    # a hair below count * step stays on the last sample
    assert geo.index_at(150 - 1e-10) == 2
    assert geo.index_at(150) == 3
