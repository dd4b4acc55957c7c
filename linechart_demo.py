import logging
import os
import traceback
from typing import List, Optional

import tkinter as tk
from tkinter import ttk, messagebox

from line_chart.config import ChartSettings, load_config, save_config
from line_chart.geometry import VerticalScale
from line_chart.line_view import LineView
from line_chart.style import get_style, style_names

logger = logging.getLogger("linechart_demo")

# -----------------------------
# Sample data
# -----------------------------

PREVIEW_SERIES = [
    ("Full chart", [8, 23, 54, 32, 12, 37, 7, 23, 43]),
    ("Full chart", [
        282.502, 284.495, 283.51, 285.019, 285.197, 286.118, 288.737, 288.455,
        289.391, 287.691, 285.878, 286.46, 286.252, 284.652, 284.129, 284.188,
    ]),
]


# -----------------------------
# App
# -----------------------------

class LineChartDemoApp(tk.Tk):
    def __init__(self, settings: Optional[ChartSettings] = None):
        super().__init__()
        self.title("Line chart")
        self.geometry("720x760")
        self.minsize(360, 400)

        self.settings = settings if settings is not None else load_config()
        self.var_style = tk.StringVar(value=self.settings.style)
        self.var_scale = tk.StringVar(value=self.settings.vertical_scale)
        self.status_var = tk.StringVar(value="Ready.")
        self.charts: List[LineView] = []

        self._build_ui()
        self._build_charts()

    def _build_ui(self):
        bar = ttk.Frame(self, padding=(8, 8, 8, 0))
        bar.pack(side="top", fill="x")

        ttk.Label(bar, text="Style:").pack(side="left")
        style_combo = ttk.Combobox(
            bar,
            textvariable=self.var_style,
            state="readonly",
            width=32,
            values=style_names(),
        )
        style_combo.pack(side="left", padx=(6, 0))
        style_combo.bind("<<ComboboxSelected>>", lambda _e: self._on_settings_change())

        ttk.Label(bar, text="Vertical scale:").pack(side="left", padx=(10, 0))
        scale_combo = ttk.Combobox(
            bar,
            textvariable=self.var_scale,
            state="readonly",
            width=8,
            values=[s.value for s in VerticalScale],
        )
        scale_combo.pack(side="left", padx=(6, 0))
        scale_combo.bind("<<ComboboxSelected>>", lambda _e: self._on_settings_change())

        ttk.Button(bar, text="Save settings", command=self.save_settings).pack(side="right")

        self.charts_frame = ttk.Frame(self, padding=8)
        self.charts_frame.pack(side="top", fill="both", expand=True)

        status = ttk.Label(self, textvariable=self.status_var, anchor="w", padding=(8, 2))
        status.pack(side="bottom", fill="x")

    def _build_charts(self):
        # Build the replacements first so a failure leaves the current charts in place.
        style = get_style(self.settings.style)
        built: List[LineView] = []
        try:
            for i, (title, values) in enumerate(PREVIEW_SERIES):
                built.append(LineView(
                    self.charts_frame,
                    values,
                    title=title,
                    legend=f"Series {i + 1}",
                    style=style,
                    value_specifier=self.settings.value_specifier,
                    value_change_callback=lambda idx, n=i: self._on_value_change(n, idx),
                    on_gesture_ended_callback=lambda: self.set_status("Ready."),
                    vertical_scale=VerticalScale(self.settings.vertical_scale),
                    chart_height=self.settings.chart_height,
                    gutter=self.settings.legend_gutter,
                    pointer_offset=self.settings.pointer_offset,
                ))
        except Exception:
            for chart in built:
                chart.destroy()
            raise

        for chart in self.charts:
            chart.destroy()
        for chart in built:
            chart.pack(side="top", fill="both", expand=True, pady=(0, 12))
        self.charts = built

    def _on_value_change(self, chart_no: int, index: Optional[int]):
        chart = self.charts[chart_no]
        if index is None:
            return
        value = chart.data[index]
        self.set_status(f"Series {chart_no + 1}: index {index} = {chart.value_specifier % value}")

    def _on_settings_change(self):
        previous = (self.settings.style, self.settings.vertical_scale)
        self.settings.style = self.var_style.get()
        self.settings.vertical_scale = self.var_scale.get()
        try:
            self._build_charts()
        except (ValueError, ZeroDivisionError) as e:
            logger.exception("Could not rebuild charts")
            self.settings.style, self.settings.vertical_scale = previous
            self.var_style.set(previous[0])
            self.var_scale.set(previous[1])
            messagebox.showerror("Chart settings", str(e))
            return
        self.set_status(f"Style: {self.settings.style}, scale: {self.settings.vertical_scale}")

    def save_settings(self):
        try:
            path = save_config(self.settings)
        except (OSError, KeyError, ValueError) as e:
            messagebox.showerror("Save failed", str(e))
            return
        self.set_status(f"Saved: {path}")

    def set_status(self, msg: str):
        self.status_var.set(msg)


def main():
    logging.basicConfig(
        level=os.environ.get("LINE_CHART_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        app = LineChartDemoApp()
    except tk.TclError:
        traceback.print_exc()
        raise SystemExit("Could not open a Tk window (is a display available?)")
    app.mainloop()


if __name__ == "__main__":
    main()
