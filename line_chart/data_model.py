from __future__ import annotations

from typing import Iterable, Iterator, Tuple

import numpy as np


class ChartData:
    """
    Ordered, read-only sample series for one chart.

    Insertion order is the X ordering; values are stored as a float64 array
    that is marked non-writeable so consumers cannot mutate it in place.
    """

    __slots__ = ("_points",)

    def __init__(self, points: Iterable[float]) -> None:
        arr = np.asarray(list(points), dtype=np.float64)
        if arr.ndim != 1:
            raise ValueError("points must be a flat sequence of numbers")
        if arr.size == 0:
            raise ValueError("ChartData requires at least one sample")
        if not np.all(np.isfinite(arr)):
            raise ValueError("ChartData samples must be finite numbers")
        arr.setflags(write=False)
        self._points = arr

    @property
    def count(self) -> int:
        return int(self._points.size)

    def only_points(self) -> Tuple[float, ...]:
        return tuple(float(v) for v in self._points)

    def as_array(self) -> np.ndarray:
        # read-only view; writes raise ValueError
        return self._points

    def min(self) -> float:
        return float(self._points.min())

    def max(self) -> float:
        return float(self._points.max())

    def __len__(self) -> int:
        return self.count

    def __getitem__(self, index: int) -> float:
        return float(self._points[index])

    def __iter__(self) -> Iterator[float]:
        return iter(self.only_points())

    def __repr__(self) -> str:
        return f"ChartData(count={self.count}, min={self.min()}, max={self.max()})"
