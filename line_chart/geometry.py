from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import List

from .data_model import ChartData

# A pointer sitting exactly on a sample's mapped x must not land one index
# short after float division; only upward snapping uses this tolerance.
_FLOOR_EPS = 1e-9


class VerticalScale(str, Enum):
    # height / (max + min); only meaningful for positive, comparable values
    SUM = "sum"
    # height / (max - min), offset by min
    RANGE = "range"


@dataclass(frozen=True)
class Point:
    x: float
    y: float


ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True)
class Viewport:
    width: float
    height: float

    def __post_init__(self) -> None:
        if not (self.width > 0 and self.height > 0):
            raise ValueError(f"Viewport must have positive size; got {self.width}x{self.height}")


@dataclass(frozen=True)
class ResolvedPoint:
    x: float
    y: float
    index: int
    value: float

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)


class PlotGeometry:
    """
    Maps sample indices/values to pixel space inside a viewport.

    Samples are spaced evenly: the first at x=0, the last at x=width.
    y is measured upward from the bottom edge of the viewport.
    """

    def __init__(self, data: ChartData, viewport: Viewport, vertical_scale: VerticalScale = VerticalScale.SUM) -> None:
        if data.count < 2:
            raise ValueError("At least two samples are needed to compute a step width.")
        self.data = data
        self.viewport = viewport
        self.vertical_scale = VerticalScale(vertical_scale)

    @property
    def step_width(self) -> float:
        return float(self.viewport.width) / float(self.data.count - 1)

    @property
    def step_height(self) -> float:
        lo = self.data.min()
        hi = self.data.max()
        if self.vertical_scale == VerticalScale.SUM:
            # Zero sum raises ZeroDivisionError (e.g. [0, 0]).
            return float(self.viewport.height) / float(hi + lo)
        if self.vertical_scale == VerticalScale.RANGE:
            if hi == lo:
                return 0.0
            return float(self.viewport.height) / float(hi - lo)
        raise ValueError(f"Unsupported vertical scale: {self.vertical_scale}")

    def value_to_y(self, value: float) -> float:
        if self.vertical_scale == VerticalScale.SUM:
            return float(value) * self.step_height
        if self.vertical_scale == VerticalScale.RANGE:
            if self.data.max() == self.data.min():
                return float(self.viewport.height) / 2.0
            return (float(value) - self.data.min()) * self.step_height
        raise ValueError(f"Unsupported vertical scale: {self.vertical_scale}")

    def index_to_x(self, index: int) -> float:
        return float(index) * self.step_width

    def index_at(self, x_offset: float) -> int:
        x_offset = float(x_offset)
        if x_offset < 0:
            return -1
        q = x_offset / self.step_width
        i = int(math.floor(q))
        # snap up only when q sits just below the next in-range index
        if i + 1 < self.data.count and (i + 1) - q <= _FLOOR_EPS:
            i += 1
        return i

    def sample_position(self, index: int) -> Point:
        return Point(self.index_to_x(index), self.value_to_y(self.data[index]))

    def polyline(self) -> List[Point]:
        return [self.sample_position(i) for i in range(self.data.count)]
