"""
Feature Map Renderer
====================
Renders a 2-D tensor as a grid of unit colored cells.

Each tensor is normalized by its own maximum absolute value, so two maps
are contrast-stretched independently and equal colors across maps do not
imply equal magnitudes. The legend only communicates the abstract [-1, 1]
domain.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

import numpy as np

from audio_cnn_viz import config
from audio_cnn_viz.engine.colors import RGB, color_array, rgb_string
from audio_cnn_viz.engine.svg import escape, svg_document, svg_rect
from audio_cnn_viz.schemas import LayerData


logger = logging.getLogger("audio_cnn_viz.engine.feature_map")


@dataclass(frozen=True)
class DisplayBox:
    """Maximum on-screen size; ``None`` means the full container extent."""
    max_width: float | None = None
    max_height: float | None = None

    def fit(self, width: int, height: int) -> tuple[float, float] | None:
        """Largest size within the box that keeps the ``width:height`` ratio."""
        scales = []
        if self.max_width is not None:
            scales.append(self.max_width / width)
        if self.max_height is not None:
            scales.append(self.max_height / height)
        if not scales:
            return None
        scale = min(scales)
        return width * scale, height * scale


COMPACT_BOX = DisplayBox(max_width=config.INTERNAL_MAX_WIDTH)
SPECTROGRAM_BOX = DisplayBox()
DEFAULT_BOX = DisplayBox(
    max_width=config.FEATURE_MAP_MAX_WIDTH,
    max_height=config.FEATURE_MAP_MAX_HEIGHT,
)


@dataclass(frozen=True)
class FeatureMapCell:
    """One tensor element drawn as a 1x1 square at ``(x, y) = (column, row)``."""
    x: int
    y: int
    value: float
    color: RGB


@dataclass(frozen=True, eq=False)
class FeatureMap:
    """Drawable grid for one tensor (or the explicit empty result)."""
    width: int = 0
    height: int = 0
    abs_max: float = 0.0
    normalized: np.ndarray = field(default_factory=lambda: np.zeros((0, 0)))
    colors: np.ndarray = field(default_factory=lambda: np.zeros((0, 0, 3), dtype=np.int64))
    caption: str = ""
    title: str = ""
    box: DisplayBox = DEFAULT_BOX

    @classmethod
    def empty(cls, caption: str = "", title: str = "") -> FeatureMap:
        return cls(caption=caption, title=title or caption)

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    def color_at(self, row: int, column: int) -> RGB:
        r, g, b = self.colors[row, column]
        return int(r), int(g), int(b)

    def iter_cells(self) -> Iterator[FeatureMapCell]:
        for i in range(self.height):
            for j in range(self.width):
                yield FeatureMapCell(
                    x=j,
                    y=i,
                    value=float(self.normalized[i, j]),
                    color=self.color_at(i, j),
                )

    def display_size(self) -> tuple[float, float] | None:
        if self.is_empty:
            return None
        return self.box.fit(self.width, self.height)

    def to_svg(self) -> str:
        """Self-contained ``<svg>``; the empty map renders nothing."""
        if self.is_empty:
            return ""

        size = self.display_size()
        ratio = f"aspect-ratio:{self.width}/{self.height}"
        if size is None:
            style = f"display:block;width:100%;{ratio}"
        else:
            style = f"display:block;width:100%;max-width:{size[0]:.2f}px;{ratio}"

        cells = [
            svg_rect(cell.x, cell.y, 1, 1, rgb_string(cell.color))
            for cell in self.iter_cells()
        ]
        return svg_document(self.width, self.height, cells, style=style)

    def to_html(self, subtitle: str = "Visual representation of extracted features") -> str:
        if self.is_empty:
            return ""
        sub = f'<p class="fm-subtitle">{escape(subtitle)}</p>' if subtitle else ""
        return (
            '<figure class="feature-map">'
            f"{self.to_svg()}"
            f'<figcaption><h2 class="fm-title" title="{escape(self.caption)}">'
            f"{escape(self.title)}</h2>{sub}</figcaption>"
            "</figure>"
        )


def _to_grid(values: list[list[float | None]]) -> np.ndarray:
    """Dense float grid, width taken from the first row; gaps become 0."""
    height = len(values)
    width = len(values[0])
    grid = np.zeros((height, width), dtype=np.float64)
    for i, row in enumerate(values):
        cells = [0.0 if v is None else v for v in row[:width]]
        grid[i, : len(cells)] = cells
    grid[~np.isfinite(grid)] = 0.0
    return grid


def render_feature_map(
    layer: LayerData,
    *,
    title: str | None = None,
    compact: bool = False,
    is_spectrogram: bool = False,
) -> FeatureMap:
    """
    Render one tensor.

    Parameters
    ----------
    layer : LayerData
        Tensor with a height x width ``values`` grid.
    title : str, optional
        Heading shown under the map; defaults to the shape caption.
    compact : bool
        Small fixed-width box used for internal layers.
    is_spectrogram : bool
        Full-width box used for the input spectrogram.

    Returns
    -------
    FeatureMap
        ``FeatureMap.empty()`` when the tensor has no rows or no columns.
    """
    caption = layer.shape_label
    heading = caption if title is None else title

    if layer.is_empty:
        logger.debug("Skipping empty tensor %r", heading)
        return FeatureMap.empty(caption=caption, title=heading)

    grid = _to_grid(layer.values)
    abs_max = float(np.max(np.abs(grid)))
    normalized = np.zeros_like(grid) if abs_max == 0 else grid / abs_max

    if compact:
        box = COMPACT_BOX
    elif is_spectrogram:
        box = SPECTROGRAM_BOX
    else:
        box = DEFAULT_BOX

    height, width = grid.shape
    return FeatureMap(
        width=width,
        height=height,
        abs_max=abs_max,
        normalized=normalized,
        colors=color_array(normalized),
        caption=caption,
        title=heading,
        box=box,
    )
