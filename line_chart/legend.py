from __future__ import annotations

from typing import TYPE_CHECKING, List

from .data_model import ChartData
from .geometry import PlotGeometry
from .magnifier import DEFAULT_SPECIFIER, format_value
from .style import ChartStyle

if TYPE_CHECKING:
    import tkinter as tk

LEGEND_STEPS = 4


def y_legend_values(data: ChartData, steps: int = LEGEND_STEPS) -> List[float]:
    """Evenly spaced guide values from min to max (steps + 1 of them)."""
    lo = data.min()
    hi = data.max()
    step = (hi - lo) / float(steps)
    return [lo + step * i for i in range(steps + 1)]


class Legend:
    """Horizontal guide lines across the plot with their values in the left gutter."""

    TAG = "legend"

    def __init__(self, canvas: tk.Canvas, style: ChartStyle, *, specifier: str = DEFAULT_SPECIFIER) -> None:
        self.canvas = canvas
        self.style = style
        self.specifier = specifier

    def clear(self) -> None:
        self.canvas.delete(self.TAG)

    def draw(self, geometry: PlotGeometry, *, left: float, top: float) -> None:
        self.clear()
        height = geometry.viewport.height
        right = left + geometry.viewport.width
        values = y_legend_values(geometry.data)
        for i, v in enumerate(values):
            y = top + height - geometry.value_to_y(v)
            # the lowest guide is solid, the rest dashed
            dash = () if i == 0 else (5, 3)
            self.canvas.create_line(
                left, y, right, y,
                fill=self.style.legend_text_color,
                dash=dash,
                tags=(self.TAG,),
            )
            self.canvas.create_text(
                left - 4, y,
                text=format_value(v, self.specifier),
                anchor="e",
                fill=self.style.legend_text_color,
                font=("TkDefaultFont", 8),
                tags=(self.TAG,),
            )
