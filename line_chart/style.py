from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Dict, List, Optional


class Colors:
    color1 = "#E2FAE7"
    color1_accent = "#72BF82"
    color3 = "#9EC6D9"
    color3_accent = "#4AA8D9"
    orange_start = "#FF782C"
    orange_end = "#EC2301"
    legend_color = "#E8E7EA"
    indicator_knob = "#FF57A6"
    gradient_upper_blue = "#C2E8FF"
    gradient_pure_blue = "#6FCDEC"
    gradient_lower_blue = "#6381FF"
    gradient_neon_blue = "#5FBAF5"
    gradient_neon_purple = "#972EB0"
    gradient_purple = "#AE5ED9"
    gradient_neon_green = "#7EE6C5"
    gradient_neon_pink = "#FF5BAF"
    legend_text = "#A7A6A8"
    legend_dark_color = "#545454"
    indicator_knob_dark = "#AB59EC"
    dark_background = "#000000"
    light_background = "#FFFFFF"


@dataclass(frozen=True)
class GradientColor:
    start: str
    end: str

    def reversed(self) -> "GradientColor":
        return GradientColor(self.end, self.start)


class GradientColors:
    orange = GradientColor(Colors.orange_start, Colors.orange_end)
    blue = GradientColor(Colors.gradient_pure_blue, Colors.gradient_lower_blue)
    green = GradientColor(Colors.color1_accent, "#9EE6A4")
    blue_purple = GradientColor(Colors.gradient_pure_blue, Colors.gradient_purple)
    purple = GradientColor(Colors.gradient_purple, Colors.gradient_neon_purple)
    prpl_pink = GradientColor(Colors.gradient_purple, Colors.gradient_neon_pink)
    prpl_neon = GradientColor(Colors.gradient_neon_purple, Colors.gradient_neon_pink)
    orng_pink = GradientColor(Colors.orange_start, Colors.gradient_neon_pink)


@dataclass(frozen=True)
class ChartStyle:
    background_color: str
    accent_color: str
    second_gradient_color: str
    text_color: str
    legend_text_color: str
    drop_shadow_color: str = "#808080"
    # optional explicit fill; defaults to accent -> second gradient color
    gradient: Optional[GradientColor] = None

    @property
    def gradient_color(self) -> GradientColor:
        if self.gradient is not None:
            return self.gradient
        return GradientColor(self.accent_color, self.second_gradient_color)

    def with_gradient(self, gradient: Optional[GradientColor]) -> "ChartStyle":
        return replace(self, gradient=gradient)

    def to_dict(self) -> dict:
        out = {}
        for f in fields(self):
            v = getattr(self, f.name)
            if isinstance(v, GradientColor):
                v = {"start": v.start, "end": v.end}
            out[f.name] = v
        return out


class Styles:
    line_chart_style_one = ChartStyle(
        background_color=Colors.light_background,
        accent_color=Colors.orange_start,
        second_gradient_color=Colors.orange_end,
        text_color="#000000",
        legend_text_color="#808080",
    )
    bar_chart_style_orange_light = ChartStyle(
        background_color=Colors.light_background,
        accent_color=Colors.orange_start,
        second_gradient_color=Colors.orange_end,
        text_color="#000000",
        legend_text_color="#808080",
    )
    bar_chart_style_orange_dark = ChartStyle(
        background_color=Colors.dark_background,
        accent_color=Colors.orange_start,
        second_gradient_color=Colors.orange_end,
        text_color="#FFFFFF",
        legend_text_color="#808080",
    )
    bar_chart_style_neon_blue_light = ChartStyle(
        background_color=Colors.light_background,
        accent_color=Colors.gradient_neon_blue,
        second_gradient_color=Colors.gradient_neon_blue,
        text_color="#000000",
        legend_text_color="#808080",
    )
    bar_chart_style_neon_blue_dark = ChartStyle(
        background_color=Colors.dark_background,
        accent_color=Colors.gradient_neon_blue,
        second_gradient_color=Colors.gradient_neon_blue,
        text_color="#FFFFFF",
        legend_text_color="#808080",
    )
    bar_chart_midnight_green_light = ChartStyle(
        background_color=Colors.light_background,
        accent_color="#0B7C8B",
        second_gradient_color="#04C6A1",
        text_color="#2E3A4B",
        legend_text_color="#808080",
    )
    bar_chart_midnight_green_dark = ChartStyle(
        background_color="#243A4B",
        accent_color="#04C6A1",
        second_gradient_color="#04C6A1",
        text_color="#FFFFFF",
        legend_text_color="#FFFFFF",
    )
    pie_chart_style_one = ChartStyle(
        background_color=Colors.light_background,
        accent_color=Colors.orange_end,
        second_gradient_color=Colors.orange_start,
        text_color="#000000",
        legend_text_color="#808080",
    )
    line_view_dark_mode = ChartStyle(
        background_color=Colors.dark_background,
        accent_color=Colors.orange_start,
        second_gradient_color=Colors.orange_end,
        text_color="#FFFFFF",
        legend_text_color="#FFFFFF",
    )


def style_names() -> List[str]:
    return [n for n, v in vars(Styles).items() if isinstance(v, ChartStyle)]


def all_styles() -> Dict[str, ChartStyle]:
    return {n: getattr(Styles, n) for n in style_names()}


def get_style(name: str) -> ChartStyle:
    presets = all_styles()
    try:
        return presets[name]
    except KeyError:
        raise KeyError(f"Unknown chart style {name!r}; expected one of: {', '.join(presets)}") from None
