from __future__ import annotations

import logging
import tkinter as tk
from tkinter import ttk
from typing import Callable, Iterable, Optional, Union

from .data_model import ChartData
from .drag import DEFAULT_GUTTER, DragTracker
from .geometry import PlotGeometry, VerticalScale, Viewport
from .magnifier import DEFAULT_SPECIFIER, validate_specifier
from .resolver import DEFAULT_LEFT_MARGIN, ClosestPointResolver
from .style import ChartStyle, Styles
from .ui_panel_canvas import CanvasActor, CanvasPanel
from .ui_panel_header import HeaderPanel
from .ui_state import TrackingState

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


class LineView(ttk.Frame):
    """
    Axis-free line chart with gradient fill, legend guides and a drag readout.

    Dragging with the left button tracks the closest sample; the tracked
    index/value live in ``tracking_state`` and are shown by the magnifier.
    """

    def __init__(
        self,
        parent: tk.Widget,
        data: Union[ChartData, Iterable[float]],
        *,
        title: Optional[str] = None,
        legend: Optional[str] = None,
        style: ChartStyle = Styles.line_chart_style_one,
        value_specifier: Optional[str] = DEFAULT_SPECIFIER,
        value_change_callback: Optional[Callable[[Optional[int]], None]] = None,
        on_gesture_ended_callback: Optional[Callable[[], None]] = None,
        vertical_scale: VerticalScale = VerticalScale.SUM,
        chart_height: int = 240,
        gutter: float = DEFAULT_GUTTER,
        pointer_offset: float = DEFAULT_LEFT_MARGIN,
    ) -> None:
        # Validate everything before any widget exists.
        chart_data = data if isinstance(data, ChartData) else ChartData(data)
        specifier = validate_specifier(value_specifier if value_specifier is not None else DEFAULT_SPECIFIER)
        if int(chart_height) <= 0:
            raise ValueError("chart_height must be > 0")
        scale = VerticalScale(vertical_scale)
        # Degenerate vertical scales (e.g. a zero sum) fail here, not mid-drag.
        PlotGeometry(chart_data, Viewport(1, int(chart_height)), scale).step_height

        super().__init__(parent)
        self.data = chart_data
        self.title_text = title
        self.legend_text = legend
        self.chart_style = style
        self.value_specifier = specifier
        self.chart_height = int(chart_height)
        self.gutter = float(gutter)

        self.tracking_state = TrackingState()
        self.resolver = ClosestPointResolver(
            self.data,
            left_margin=pointer_offset,
            vertical_scale=scale,
            state=self.tracking_state,
        )
        self.tracker = DragTracker(
            self.resolver,
            gutter=self.gutter,
            value_change_callback=value_change_callback,
            on_gesture_ended_callback=on_gesture_ended_callback,
        )

        self._geometry: Optional[PlotGeometry] = None
        self._render_after_id = None
        self._fill_photo = None

        self.canvas_actor = CanvasActor(self)
        self.header_panel = HeaderPanel(self, self)
        self.canvas_panel = CanvasPanel(self, self, actor=self.canvas_actor)
        self.tracking_state.subscribe(self.canvas_actor._redraw_tracking)
        logger.debug("LineView created: %r title=%r", self.data, title)

    @property
    def current_index(self) -> int:
        return self.tracking_state.current_index

    @property
    def current_value(self) -> float:
        return self.tracking_state.current_value

    def redraw(self) -> None:
        self.canvas_actor._render_chart()
