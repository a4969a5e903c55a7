"""
Report Export
=============
Static matplotlib rendition of one classification result.

Draws from the same render primitives as the page (FeatureMap colors and
WaveformPath vertices), so the report and the page always agree.
"""
from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

from audio_cnn_viz import config
from audio_cnn_viz.engine.feature_map import FeatureMap, render_feature_map
from audio_cnn_viz.engine.layers import split_layers
from audio_cnn_viz.engine.waveform import BASELINE_COLOR, TRACE_COLOR, render_waveform
from audio_cnn_viz.schemas import ApiResponse


logger = logging.getLogger("audio_cnn_viz.export")


def _feature_map_image(feature_map: FeatureMap) -> np.ndarray:
    """(H, W, 3) float image in [0, 1] for ``imshow``."""
    return np.clip(feature_map.colors / 255.0, 0.0, 1.0)


def _draw_feature_map(ax, feature_map: FeatureMap, title: str) -> None:
    if feature_map.is_empty:
        ax.text(0.5, 0.5, "N/A", ha="center", va="center", fontsize=8)
    else:
        ax.imshow(_feature_map_image(feature_map), interpolation="nearest")
        ax.set_xlabel(feature_map.caption, fontsize=7)
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_title(title, fontsize=9)


def save_report(
    response: ApiResponse,
    path: Path,
    dpi: int | None = None,
    top_k: int = config.TOP_K_PREDICTIONS,
) -> Path:
    """Save predictions, inputs and main layer maps as one figure.

    Parameters
    ----------
    response : ApiResponse
    path : output file; the format follows the suffix (.png, .pdf, .svg ...)
    dpi : defaults to ``config.REPORT_DPI``
    top_k : number of predictions to chart
    """
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    path = Path(path)
    dpi = dpi or config.REPORT_DPI

    partition = split_layers(response.visualizations)
    main_maps = [(name, render_feature_map(data)) for name, data in partition.main]
    n_cols = max(2, len(main_maps))
    half = n_cols // 2

    fig = plt.figure(figsize=(max(10.0, 2.5 * n_cols), 10))
    grid = fig.add_gridspec(3, n_cols, height_ratios=[1, 2, 2])

    # Predictions
    ax_pred = fig.add_subplot(grid[0, :])
    top = response.top_predictions(top_k)
    labels = [pred.display_name for pred in top][::-1]
    percents = [pred.percent for pred in top][::-1]
    ax_pred.barh(labels, percents, color="#6366f1")
    for y, pct in enumerate(percents):
        ax_pred.text(pct + 1, y, f"{pct:.1f}%", va="center", fontsize=8)
    ax_pred.set_xlim(0, 110)
    ax_pred.set_title("Top Predictions", fontsize=10)

    # Inputs
    spectrogram = render_feature_map(response.input_spectogram, is_spectrogram=True)
    _draw_feature_map(fig.add_subplot(grid[1, :half]), spectrogram, "Input Spectrogram")

    waveform = render_waveform(response.waveform.values, title=response.waveform.title)
    ax_wave = fig.add_subplot(grid[1, half:])
    ax_wave.axhline(waveform.center_y, color=BASELINE_COLOR, linewidth=1)
    if not waveform.is_empty:
        xs, ys = zip(*waveform.vertices)
        ax_wave.plot(xs, ys, color=TRACE_COLOR, linewidth=1.2, marker="o" if len(xs) == 1 else None)
    ax_wave.set_xlim(0, waveform.width)
    ax_wave.set_ylim(waveform.height, 0)  # SVG y axis points down
    ax_wave.set_xticks([])
    ax_wave.set_yticks([])
    ax_wave.set_title(f"Audio Waveform ({waveform.title})", fontsize=9)

    # Main layers
    if main_maps:
        for col, (name, feature_map) in enumerate(main_maps):
            _draw_feature_map(fig.add_subplot(grid[2, col]), feature_map, name)
    else:
        ax_empty = fig.add_subplot(grid[2, :])
        ax_empty.text(0.5, 0.5, "No layer outputs", ha="center", va="center", fontsize=9)
        ax_empty.axis("off")

    fig.suptitle("Convolutional Layer Outputs", fontsize=11)
    fig.tight_layout()

    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(str(path), dpi=dpi, bbox_inches="tight")
    plt.close(fig)
    logger.info("Saved report: %s", path)
    return path
