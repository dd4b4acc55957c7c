from __future__ import annotations

import logging
from typing import Callable, Optional

from .geometry import Point, Viewport
from .resolver import ClosestPointResolver
from .ui_state import TrackingState

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())

DEFAULT_GUTTER = 30.0
DEFAULT_INDICATOR_Y = 32.0


class DragTracker:
    """
    Drives the idle/tracking interaction for one chart.

    idle -> tracking on drag start (or the first move); tracking -> idle on
    drag end. Every move re-resolves the closest sample and reports the
    current index through ``value_change_callback``.
    """

    def __init__(
        self,
        resolver: ClosestPointResolver,
        *,
        gutter: float = DEFAULT_GUTTER,
        indicator_y: float = DEFAULT_INDICATOR_Y,
        value_change_callback: Optional[Callable[[Optional[int]], None]] = None,
        on_gesture_ended_callback: Optional[Callable[[], None]] = None,
    ) -> None:
        self.resolver = resolver
        self.gutter = float(gutter)
        self.indicator_y = float(indicator_y)
        self.value_change_callback = value_change_callback
        self.on_gesture_ended_callback = on_gesture_ended_callback

    @property
    def state(self) -> TrackingState:
        return self.resolver.state

    def drag_started(self, point: Point) -> None:
        self.state.drag_location = point
        self.state.opacity = 1.0
        self.state.notify()

    def drag_changed(self, point: Point, viewport: Viewport) -> Point:
        st = self.state
        st.drag_location = point
        st.indicator_location = Point(max(point.x - self.gutter, 0.0), self.indicator_y)
        st.opacity = 1.0
        st.closest_point = self.resolver.closest_data_point(point, viewport)
        st.notify()
        if self.value_change_callback is not None:
            self._invoke("value_change_callback", self.value_change_callback, st.current_index)
        return st.closest_point

    def drag_ended(self) -> None:
        self.state.reset()
        if self.on_gesture_ended_callback is not None:
            self._invoke("on_gesture_ended_callback", self.on_gesture_ended_callback)

    def _invoke(self, name: str, fn: Callable, *args) -> None:
        try:
            fn(*args)
        except Exception:
            logger.exception("%s raised", name)
            raise
