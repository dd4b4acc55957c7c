from __future__ import annotations

import pytest

from line_chart.data_model import ChartData
from line_chart.geometry import ORIGIN, PlotGeometry, Point, VerticalScale, Viewport
from line_chart.resolver import DEFAULT_LEFT_MARGIN, ClosestPointResolver
from line_chart.ui_state import TrackingState

SAMPLES = [8, 23, 54, 32, 12, 37, 7, 23, 43]


def _resolver(values=SAMPLES, **kw) -> ClosestPointResolver:
    return ClosestPointResolver(ChartData(values), **kw)


PREVIEW = [
    282.502, 284.495, 283.51, 285.019, 285.197, 286.118, 288.737, 288.455,
    289.391, 287.691, 285.878, 286.46, 286.252, 284.652, 284.129, 284.188,
]


@pytest.mark.parametrize("values", [
    [1.0, 2.0],
    [5, 9, 2],
    SAMPLES,
    PREVIEW,
    [float(v % 7 + 1) for v in range(101)],
])
@pytest.mark.parametrize("width", [400.0, 333.0, 517.5, 1000.0])
def test_forward_mapping_round_trips_to_same_index(values, width):
    resolver = _resolver(values)
    vp = Viewport(width, 240)
    geo = PlotGeometry(resolver.data, vp)
    for i in range(resolver.data.count):
        x = DEFAULT_LEFT_MARGIN + geo.index_to_x(i)
        hit = resolver.resolve(Point(x, 10), vp)
        assert hit is not None
        assert hit.index == i
        assert hit.value == values[i]


def test_pointer_at_fifth_step_resolves_index_four():
    resolver = _resolver()
    width = 400.0
    vp = Viewport(width, 240)
    p = resolver.closest_data_point(Point(DEFAULT_LEFT_MARGIN + 4 * (width / 8), 0), vp)

    assert resolver.state.current_index == 4
    assert resolver.state.current_value == 12
    assert p.x == pytest.approx(4 * 50.0)
    # SUM scale: 240 / (54 + 7)
    assert p.y == pytest.approx(12 * 240 / 61)


def test_step_width_is_viewport_width_over_gaps():
    geo = PlotGeometry(ChartData(SAMPLES), Viewport(400, 240))
    assert geo.step_width == pytest.approx(50.0)


def test_pointer_left_of_margin_keeps_previous_index():
    resolver = _resolver()
    vp = Viewport(400, 240)
    resolver.closest_data_point(Point(DEFAULT_LEFT_MARGIN + 150, 0), vp)
    assert resolver.state.current_index == 3

    p = resolver.closest_data_point(Point(DEFAULT_LEFT_MARGIN - 1, 0), vp)

    assert p == ORIGIN
    assert resolver.state.current_index == 3
    assert resolver.state.current_value == 32


def test_pointer_a_hair_left_of_margin_keeps_previous_index():
    resolver = _resolver()
    vp = Viewport(400, 240)
    resolver.closest_data_point(Point(DEFAULT_LEFT_MARGIN + 150, 0), vp)

    p = resolver.closest_data_point(Point(DEFAULT_LEFT_MARGIN - 1e-10, 0), vp)

    assert p == ORIGIN
    assert resolver.state.current_index == 3
    assert resolver.resolve(Point(DEFAULT_LEFT_MARGIN - 1e-10, 0), vp) is None


def test_pointer_a_hair_inside_upper_end_stays_on_last_sample():
    resolver = _resolver()
    vp = Viewport(400, 240)
    p = resolver.closest_data_point(Point(DEFAULT_LEFT_MARGIN + 9 * 50 - 1e-7, 0), vp)

    assert resolver.state.current_index == 8
    assert resolver.state.current_value == 43
    assert p.x == pytest.approx(400.0)


def test_pointer_beyond_last_step_keeps_previous_index():
    resolver = _resolver()
    vp = Viewport(400, 240)
    resolver.closest_data_point(Point(DEFAULT_LEFT_MARGIN + 10, 0), vp)
    assert resolver.state.current_index == 0

    # last valid index is 8; 9 steps past the margin is outside
    p = resolver.closest_data_point(Point(DEFAULT_LEFT_MARGIN + 9 * 50 + 1, 0), vp)

    assert p == ORIGIN
    assert resolver.state.current_index == 0


def test_resolve_is_pure():
    state = TrackingState(current_index=7, current_value=23.0)
    resolver = _resolver(state=state)
    hit = resolver.resolve(Point(DEFAULT_LEFT_MARGIN, 0), Viewport(400, 240))
    assert hit is not None and hit.index == 0
    assert state.current_index == 7


def test_resolve_outside_returns_none():
    assert _resolver().resolve(Point(-500, 0), Viewport(400, 240)) is None


def test_two_equal_positive_samples_do_not_fault():
    resolver = _resolver([1, 1])
    p = resolver.closest_data_point(Point(DEFAULT_LEFT_MARGIN, 0), Viewport(100, 240))
    assert p == Point(0.0, 120.0)


def test_zero_sum_series_faults_under_sum_scale():
    resolver = _resolver([0, 0])
    with pytest.raises(ZeroDivisionError):
        resolver.closest_data_point(Point(DEFAULT_LEFT_MARGIN, 0), Viewport(100, 240))


def test_range_scale_handles_zero_and_negative_values():
    resolver = _resolver([-10, 0, 10], vertical_scale=VerticalScale.RANGE)
    vp = Viewport(200, 100)
    assert resolver.closest_data_point(Point(DEFAULT_LEFT_MARGIN, 0), vp) == Point(0.0, 0.0)
    assert resolver.closest_data_point(Point(DEFAULT_LEFT_MARGIN + 100, 0), vp) == Point(100.0, 50.0)
    assert resolver.closest_data_point(Point(DEFAULT_LEFT_MARGIN + 200, 0), vp) == Point(200.0, 100.0)


def test_custom_left_margin():
    resolver = _resolver(left_margin=0)
    hit = resolver.resolve(Point(0, 0), Viewport(400, 240))
    assert hit is not None and hit.index == 0


@pytest.mark.parametrize("values", [[], [5.0]])
def test_degenerate_series_rejected_at_construction(values):
    with pytest.raises(ValueError):
        ClosestPointResolver(ChartData(values))
