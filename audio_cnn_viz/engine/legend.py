"""
Color Scale Legend
==================
Static gradient bar for the diverging color scale. Labels show the bounds
declared by the caller (normally -1 and 1), never the data range.
"""
from __future__ import annotations

from dataclasses import dataclass

from audio_cnn_viz import config
from audio_cnn_viz.engine.colors import COOL_RGB, NEUTRAL_RGB, RGB, WARM_RGB, rgb_string
from audio_cnn_viz.engine.svg import escape


@dataclass(frozen=True)
class ColorScale:
    width: float
    height: float
    min_value: float
    max_value: float

    @property
    def stops(self) -> tuple[tuple[int, RGB], ...]:
        """Gradient stops as ``(percent, rgb)``."""
        return ((0, WARM_RGB), (50, NEUTRAL_RGB), (100, COOL_RGB))

    @property
    def low_label(self) -> str:
        return f"Low ({self.min_value:g})"

    @property
    def high_label(self) -> str:
        return f"High ({self.max_value:g})"

    def css_gradient(self) -> str:
        stops = ", ".join(f"{rgb_string(color)} {pct}%" for pct, color in self.stops)
        return f"linear-gradient(to right, {stops})"

    def to_html(self) -> str:
        return (
            '<div class="color-scale">'
            f'<span class="cs-label">{escape(self.low_label)}</span>'
            f'<div class="cs-bar" style="width:{self.width:g}px;height:{self.height:g}px;'
            f'background:{self.css_gradient()}"></div>'
            f'<span class="cs-label">{escape(self.high_label)}</span>'
            "</div>"
        )


def render_color_scale(
    width: float = config.LEGEND_WIDTH,
    height: float = config.LEGEND_HEIGHT,
    min_value: float = config.LEGEND_MIN,
    max_value: float = config.LEGEND_MAX,
) -> ColorScale:
    return ColorScale(width=width, height=height, min_value=min_value, max_value=max_value)
