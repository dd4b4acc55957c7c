from __future__ import annotations

from typing import TYPE_CHECKING

from .style import ChartStyle

if TYPE_CHECKING:
    import tkinter as tk

DEFAULT_SPECIFIER = "%.1f"


def validate_specifier(specifier: str) -> str:
    """Return specifier unchanged if it formats exactly one float, else raise ValueError."""
    if not isinstance(specifier, str) or not specifier:
        raise ValueError("value specifier must be a non-empty printf-style string, e.g. '%.1f'")
    try:
        specifier % 0.0
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid value specifier {specifier!r}: {e}") from e
    return specifier


def format_value(value: float, specifier: str = DEFAULT_SPECIFIER) -> str:
    return specifier % float(value)


class Magnifier:
    """Formatted readout of the tracked value, drawn above the indicator."""

    TAG = "magnifier"

    def __init__(self, canvas: tk.Canvas, style: ChartStyle, *, specifier: str = DEFAULT_SPECIFIER) -> None:
        self.canvas = canvas
        self.style = style
        self.specifier = validate_specifier(specifier)

    def clear(self) -> None:
        self.canvas.delete(self.TAG)

    def draw(self, value: float, x: float, y: float) -> None:
        self.clear()
        text = format_value(value, self.specifier)
        pad_x, pad_y = 8, 4
        tid = self.canvas.create_text(
            x, y,
            text=text,
            anchor="s",
            fill="#FFFFFF",
            font=("TkDefaultFont", 18, "bold"),
            tags=(self.TAG,),
        )
        x0, y0, x1, y1 = self.canvas.bbox(tid)
        rid = self.canvas.create_rectangle(
            x0 - pad_x, y0 - pad_y, x1 + pad_x, y1 + pad_y,
            fill=self.style.accent_color,
            outline=self.style.drop_shadow_color,
            tags=(self.TAG,),
        )
        self.canvas.tag_lower(rid, tid)
