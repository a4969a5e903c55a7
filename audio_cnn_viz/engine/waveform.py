"""
Waveform Path Renderer
======================
Turns raw audio samples into one continuous vector path inside a fixed
viewport. Non-finite samples are dropped; every remaining sample becomes
exactly one vertex, in temporal order (no resampling).
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from audio_cnn_viz import config
from audio_cnn_viz.engine.svg import escape, svg_document, svg_path


logger = logging.getLogger("audio_cnn_viz.engine.waveform")

TRACE_COLOR = "#2563eb"
BASELINE_COLOR = "#d6d3d1"

Vertex = tuple[float, float]


@dataclass(frozen=True)
class WaveformPath:
    """Vertices of the trace plus the viewport they were scaled into."""
    width: float = config.WAVEFORM_WIDTH
    height: float = config.WAVEFORM_HEIGHT
    vertices: tuple[Vertex, ...] = ()
    sample_min: float = 0.0
    sample_max: float = 0.0
    title: str = ""

    @classmethod
    def empty(
        cls,
        width: float = config.WAVEFORM_WIDTH,
        height: float = config.WAVEFORM_HEIGHT,
        title: str = "",
    ) -> WaveformPath:
        return cls(width=width, height=height, title=title)

    @property
    def is_empty(self) -> bool:
        return not self.vertices

    @property
    def center_y(self) -> float:
        return self.height / 2

    @property
    def scale_y(self) -> float:
        return self.height * config.WAVEFORM_AMPLITUDE

    def path_data(self) -> str:
        """SVG path commands, ``M x y L x y ...`` with two decimals."""
        if self.is_empty:
            return ""
        commands = [
            f"{'M' if i == 0 else 'L'} {x:.2f} {y:.2f}"
            for i, (x, y) in enumerate(self.vertices)
        ]
        if len(self.vertices) == 1:
            # zero-length segment; the round line cap draws it as a dot
            commands.append("h 0")
        return " ".join(commands)

    def baseline_data(self) -> str:
        return f"M 0 {self.center_y:g} H {self.width:g}"

    def to_svg(self) -> str:
        if self.is_empty:
            return ""
        body = [
            svg_path(self.baseline_data(), BASELINE_COLOR, 1),
            svg_path(
                self.path_data(),
                TRACE_COLOR,
                2,
                stroke_linejoin="round",
                stroke_linecap="round",
            ),
        ]
        return svg_document(
            self.width,
            self.height,
            body,
            style=f"display:block;max-width:100%;max-height:{self.height:g}px",
        )

    def to_html(self) -> str:
        if self.is_empty:
            return ""
        return (
            '<figure class="waveform">'
            f"{self.to_svg()}"
            f"<figcaption>Waveform Preview: <span>{escape(self.title)}</span></figcaption>"
            "</figure>"
        )


def finite_samples(samples: Sequence[float | None]) -> np.ndarray:
    """Samples with null, NaN and +/-Inf entries removed."""
    arr = np.asarray([np.nan if s is None else s for s in samples], dtype=np.float64)
    return arr[np.isfinite(arr)]


def render_waveform(
    samples: Sequence[float | None],
    *,
    width: float = config.WAVEFORM_WIDTH,
    height: float = config.WAVEFORM_HEIGHT,
    title: str = "",
) -> WaveformPath:
    """
    Scale samples into a ``width`` x ``height`` viewport.

    x spreads the samples evenly from 0 to ``width``; y maps ``max`` to
    ``center - scale`` and ``min`` to ``center + scale`` with
    ``scale = height * 0.45``. A constant signal, or a single sample, lies
    flat on the center line.
    """
    valid = finite_samples(samples)
    if valid.size == 0:
        logger.debug("No finite waveform samples to render")
        return WaveformPath.empty(width=width, height=height, title=title)

    n = valid.size
    center_y = height / 2
    scale_y = height * config.WAVEFORM_AMPLITUDE
    lo = float(valid.min())
    hi = float(valid.max())
    span = hi - lo

    if n == 1:
        xs = np.zeros(1)
    else:
        xs = np.arange(n, dtype=np.float64) / (n - 1) * width

    if span > 0:
        ys = center_y - ((valid - lo) / span - 0.5) * 2 * scale_y
    else:
        ys = np.full(n, center_y)

    return WaveformPath(
        width=width,
        height=height,
        vertices=tuple(zip(xs.tolist(), ys.tolist())),
        sample_min=lo,
        sample_max=hi,
        title=title,
    )
