from __future__ import annotations

import json
import logging
import math
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Optional

from .geometry import VerticalScale
from .magnifier import DEFAULT_SPECIFIER, validate_specifier
from .style import get_style

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())

CONFIG_ENV_VAR = "LINE_CHART_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".line_chart_config.json"


@dataclass
class ChartSettings:
    style: str = "line_chart_style_one"
    value_specifier: str = DEFAULT_SPECIFIER
    vertical_scale: str = VerticalScale.SUM.value
    chart_height: int = 240
    legend_gutter: int = 30
    pointer_offset: float = 15.0

    def validate(self) -> "ChartSettings":
        get_style(self.style)
        validate_specifier(self.value_specifier)
        VerticalScale(self.vertical_scale)
        # int()/float() raise TypeError on None and ValueError on junk strings
        self.chart_height = int(self.chart_height)
        self.legend_gutter = int(self.legend_gutter)
        self.pointer_offset = float(self.pointer_offset)
        if self.chart_height <= 0:
            raise ValueError("chart_height must be > 0")
        if self.legend_gutter < 0:
            raise ValueError("legend_gutter must be >= 0")
        if not math.isfinite(self.pointer_offset):
            raise ValueError("pointer_offset must be a finite number")
        return self


def config_path(path: Optional[Path] = None) -> Path:
    """
    Resolution order:
    1) explicit path argument
    2) LINE_CHART_CONFIG env var
    3) ~/.line_chart_config.json
    """
    if path is not None:
        return Path(path)
    env = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if env:
        return Path(env).expanduser()
    return DEFAULT_CONFIG_PATH


def load_config(path: Optional[Path] = None) -> ChartSettings:
    p = config_path(path)
    if not p.exists():
        return ChartSettings()

    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        # A corrupt file must not block the app.
        logger.warning("Ignoring unreadable chart config %s: %s", p, e)
        return ChartSettings()
    if not isinstance(data, dict):
        logger.warning("Ignoring chart config %s: expected a JSON object", p)
        return ChartSettings()

    known = {f.name for f in fields(ChartSettings)}
    merged = {**asdict(ChartSettings()), **{k: v for k, v in data.items() if k in known}}
    try:
        return ChartSettings(**merged).validate()
    except (KeyError, TypeError, ValueError) as e:
        logger.warning("Invalid chart config %s (%s); using defaults", p, e)
        return ChartSettings()


def save_config(settings: ChartSettings, path: Optional[Path] = None) -> Path:
    settings.validate()
    p = config_path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    tmp = p.with_suffix(p.suffix + ".tmp")
    tmp.write_text(json.dumps(asdict(settings), indent=2), encoding="utf-8")
    tmp.replace(p)
    logger.info("Saved chart config to %s", p)
    return p
