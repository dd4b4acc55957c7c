from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np
from PIL import Image, ImageColor, ImageDraw

from .geometry import Point, Viewport
from .style import GradientColor


def hex_to_rgb(color: str) -> Tuple[int, int, int]:
    r, g, b = ImageColor.getrgb(color)[:3]
    return int(r), int(g), int(b)


def rgb_to_hex(rgb: Sequence[int]) -> str:
    r, g, b = (max(0, min(255, int(round(c)))) for c in rgb[:3])
    return f"#{r:02X}{g:02X}{b:02X}"


def interpolate_color(gradient: GradientColor, t: float) -> str:
    """Blend start->end at t (clamped to 0..1) and return #RRGGBB."""
    t = min(1.0, max(0.0, float(t)))
    a = np.array(hex_to_rgb(gradient.start), dtype=np.float64)
    b = np.array(hex_to_rgb(gradient.end), dtype=np.float64)
    return rgb_to_hex(a + (b - a) * t)


def vertical_gradient(width: int, height: int, gradient: GradientColor, *, max_alpha: int = 255) -> Image.Image:
    """
    RGBA image whose colour runs start->end left to right and whose alpha
    fades from max_alpha at the top to 0 at the bottom.
    """
    width = max(1, int(width))
    height = max(1, int(height))
    a = np.array(hex_to_rgb(gradient.start), dtype=np.float64)
    b = np.array(hex_to_rgb(gradient.end), dtype=np.float64)

    tx = np.linspace(0.0, 1.0, width)[None, :, None]           # 1xWx1
    rgb = a + (b - a) * tx                                      # 1xWx3
    rgb = np.broadcast_to(rgb, (height, width, 3))

    alpha = np.linspace(float(max_alpha), 0.0, height)[:, None]  # Hx1
    alpha = np.broadcast_to(alpha, (height, width))

    rgba = np.dstack([rgb, alpha]).round().clip(0, 255).astype(np.uint8)
    return Image.fromarray(rgba)


def gradient_fill_image(
    points: Sequence[Point],
    viewport: Viewport,
    gradient: GradientColor,
    *,
    max_alpha: int = 110,
) -> Image.Image:
    """
    Area under the polyline, filled with the fading gradient.

    ``points`` are in plot coordinates (y up from the bottom edge); the
    returned image has the viewport's size with y down.
    """
    w = max(1, int(round(viewport.width)))
    h = max(1, int(round(viewport.height)))
    fill = vertical_gradient(w, h, gradient, max_alpha=max_alpha)
    if len(points) < 2:
        return Image.new("RGBA", (w, h), (0, 0, 0, 0))

    poly = [(float(p.x), float(h) - float(p.y)) for p in points]
    poly = [(poly[0][0], float(h))] + poly + [(poly[-1][0], float(h))]

    mask = Image.new("L", (w, h), 0)
    ImageDraw.Draw(mask).polygon(poly, fill=255)

    # keep the fade, cut everything outside the polygon
    fill_alpha = np.asarray(fill.getchannel("A"), dtype=np.uint16)
    cut = np.asarray(mask, dtype=np.uint16)
    fill.putalpha(Image.fromarray(((fill_alpha * cut) // 255).astype(np.uint8)))
    return fill
