from __future__ import annotations

import pytest

tk = pytest.importorskip("tkinter")

from line_chart.config import ChartSettings, load_config


@pytest.fixture
def app(tmp_path, monkeypatch):
    monkeypatch.setenv("LINE_CHART_CONFIG", str(tmp_path / "cfg.json"))
    from linechart_demo import LineChartDemoApp

    try:
        a = LineChartDemoApp(settings=ChartSettings())
    except tk.TclError as e:
        pytest.skip(f"Tk display not available: {e}")
    a.withdraw()
    yield a
    a.destroy()


def test_builds_preview_charts(app):
    assert len(app.charts) == 2
    assert app.charts[0].data.only_points()[:3] == (8.0, 23.0, 54.0)
    assert app.charts[1].data.count == 16


def test_value_change_updates_status(app):
    app._on_value_change(0, 4)
    assert app.status_var.get() == "Series 1: index 4 = 12.0"


def test_style_change_rebuilds_and_persists(app, tmp_path):
    old = app.charts[0]
    app.var_style.set("line_view_dark_mode")
    app._on_settings_change()
    assert app.charts[0] is not old
    assert app.charts[0].chart_style.background_color == "#000000"

    app.save_settings()
    assert load_config(tmp_path / "cfg.json").style == "line_view_dark_mode"


def test_failed_rebuild_keeps_charts_and_restores_settings(app, monkeypatch):
    import linechart_demo

    monkeypatch.setattr(linechart_demo, "PREVIEW_SERIES", [("Flat", [0, 0]), ("Full chart", [1, 2, 3])])
    errors = []
    monkeypatch.setattr(linechart_demo.messagebox, "showerror", lambda title, msg: errors.append(title))

    app.var_scale.set("range")
    app._on_settings_change()
    kept = list(app.charts)
    assert [c.data.count for c in kept] == [2, 3]

    # [0, 0] has no usable height under the sum scale
    app.var_scale.set("sum")
    app._on_settings_change()

    assert errors == ["Chart settings"]
    assert app.charts == kept
    assert all(c.winfo_exists() for c in kept)
    assert app.settings.vertical_scale == "range"
    assert app.var_scale.get() == "range"
    assert len(app.charts_frame.winfo_children()) == 2
