from __future__ import annotations

import logging
from typing import Optional

from .data_model import ChartData
from .geometry import ORIGIN, PlotGeometry, Point, ResolvedPoint, VerticalScale, Viewport
from .ui_state import TrackingState

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())

# Pointer x is shifted by this many px before it is divided by the step width.
DEFAULT_LEFT_MARGIN = 15.0


class ClosestPointResolver:
    """
    Resolve a pointer location to the nearest sample along the X axis.

    ``resolve`` is pure. ``closest_data_point`` additionally records the hit
    in the shared :class:`TrackingState` so the magnifier can display it.
    A pointer outside the plotted range is a no-op: the state keeps its
    previous index/value and ``ORIGIN`` is returned.
    """

    def __init__(
        self,
        data: ChartData,
        *,
        left_margin: float = DEFAULT_LEFT_MARGIN,
        vertical_scale: VerticalScale = VerticalScale.SUM,
        state: Optional[TrackingState] = None,
    ) -> None:
        if data.count < 2:
            raise ValueError(
                f"Need at least two samples to resolve pointer positions; got {data.count}."
            )
        self.data = data
        self.left_margin = float(left_margin)
        self.vertical_scale = VerticalScale(vertical_scale)
        self.state = state if state is not None else TrackingState()

    def geometry(self, viewport: Viewport) -> PlotGeometry:
        return PlotGeometry(self.data, viewport, self.vertical_scale)

    def resolve(self, point: Point, viewport: Viewport) -> Optional[ResolvedPoint]:
        geo = self.geometry(viewport)
        index = geo.index_at(point.x - self.left_margin)
        if not (0 <= index < self.data.count):
            return None
        value = self.data[index]
        return ResolvedPoint(
            x=geo.index_to_x(index),
            y=geo.value_to_y(value),
            index=index,
            value=value,
        )

    def closest_data_point(self, point: Point, viewport: Viewport) -> Point:
        hit = self.resolve(point, viewport)
        if hit is None:
            logger.debug("pointer %s outside plot (width=%s); keeping index %s",
                         point, viewport.width, self.state.current_index)
            return ORIGIN
        self.state.current_index = hit.index
        self.state.current_value = hit.value
        return hit.position
