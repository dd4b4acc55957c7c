from __future__ import annotations

import logging
import tkinter as tk
from tkinter import ttk
from typing import Optional, Tuple

from PIL import ImageTk

from .geometry import PlotGeometry, Point, Viewport
from .gradient import gradient_fill_image, interpolate_color
from .legend import Legend
from .magnifier import Magnifier
from .style import Colors

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())

# room above the plot for the magnifier label
PLOT_TOP = 40
PLOT_BOTTOM_PAD = 10
LINE_WIDTH = 3
KNOB_RADIUS = 6


class CanvasPanel:
    def __init__(self, owner, parent: tk.Widget, *, actor) -> None:
        self.owner = owner
        self.actor = actor

        frame = ttk.Frame(parent)
        self.frame = frame
        frame.pack(side="top", fill="both", expand=True)

        owner.canvas = tk.Canvas(
            frame,
            height=owner.chart_height + PLOT_TOP + PLOT_BOTTOM_PAD,
            background=owner.chart_style.background_color,
            highlightthickness=0,
        )
        owner.canvas.pack(side="top", fill="both", expand=True)
        owner.canvas.bind("<Configure>", actor._on_canvas_configure)
        owner.canvas.bind("<ButtonPress-1>", actor._on_press)
        owner.canvas.bind("<B1-Motion>", actor._on_drag)
        owner.canvas.bind("<ButtonRelease-1>", actor._on_release)

        owner.legend_overlay = Legend(owner.canvas, owner.chart_style, specifier=owner.value_specifier)
        owner.magnifier = Magnifier(owner.canvas, owner.chart_style, specifier=owner.value_specifier)


class CanvasActor:
    def __init__(self, owner) -> None:
        object.__setattr__(self, "owner", owner)

    def __getattr__(self, name):
        return getattr(self.owner, name)

    def __setattr__(self, name, value) -> None:
        if name == "owner":
            object.__setattr__(self, name, value)
            return
        setattr(self.owner, name, value)

    # ---------- geometry ----------
    def _viewport(self) -> Optional[Viewport]:
        cw = self.canvas.winfo_width()
        if cw <= 1:
            # not mapped yet
            cw = self.canvas.winfo_reqwidth()
        if cw <= self.gutter + 1:
            return None
        return Viewport(cw - self.gutter, self.chart_height)

    def _to_canvas(self, p: Point) -> Tuple[float, float]:
        return (self.gutter + p.x, PLOT_TOP + self.chart_height - p.y)

    # ---------- events ----------
    def _on_canvas_configure(self, _evt=None):
        # Avoid thrashing when resizing: schedule a single re-render
        if getattr(self, "_render_after_id", None) is not None:
            try:
                self.after_cancel(self._render_after_id)
            except tk.TclError:
                pass
        self._render_after_id = self.after(30, self._render_chart)

    def _on_press(self, event):
        self.tracker.drag_started(Point(event.x, event.y))
        self._on_drag(event)

    def _on_drag(self, event):
        vp = self._viewport()
        if vp is None:
            return
        self.tracker.drag_changed(Point(float(event.x), float(event.y)), vp)

    def _on_release(self, _event):
        self.tracker.drag_ended()

    # ---------- drawing ----------
    def _render_chart(self):
        self._render_after_id = None
        self.canvas.delete("all")
        vp = self._viewport()
        if vp is None:
            self._geometry = None
            return
        geo = PlotGeometry(self.data, vp, self.resolver.vertical_scale)
        self._geometry = geo
        style = self.chart_style

        self.legend_overlay.draw(geo, left=self.gutter, top=PLOT_TOP)

        pts = geo.polyline()
        fill = gradient_fill_image(pts, vp, style.gradient_color)
        self._fill_photo = ImageTk.PhotoImage(fill)
        self.canvas.create_image(self.gutter, PLOT_TOP, image=self._fill_photo, anchor="nw", tags=("fill",))

        last = len(pts) - 1
        for i in range(last):
            x0, y0 = self._to_canvas(pts[i])
            x1, y1 = self._to_canvas(pts[i + 1])
            color = interpolate_color(style.gradient_color, (i + 0.5) / last)
            self.canvas.create_line(
                x0, y0, x1, y1,
                fill=color,
                width=LINE_WIDTH,
                capstyle="round",
                tags=("line",),
            )

        logger.debug("rendered %d samples into %sx%s", self.data.count, vp.width, vp.height)
        self._redraw_tracking()

    def _redraw_tracking(self, _state=None):
        self.canvas.delete("indicator")
        self.magnifier.clear()
        geo = getattr(self, "_geometry", None)
        st = self.tracking_state
        if geo is None or not st.tracking:
            return

        cx, cy = self._to_canvas(geo.sample_position(st.current_index))
        self.canvas.create_line(
            cx, PLOT_TOP, cx, PLOT_TOP + self.chart_height,
            fill=self.chart_style.legend_text_color,
            tags=("indicator",),
        )
        r = KNOB_RADIUS
        self.canvas.create_oval(
            cx - r, cy - r, cx + r, cy + r,
            fill=Colors.indicator_knob,
            outline="#FFFFFF",
            width=2,
            tags=("indicator",),
        )
        self.magnifier.draw(st.current_value, cx, PLOT_TOP - 6)
