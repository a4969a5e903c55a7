"""Visualization transforms: pure functions from tensors to drawables."""
from __future__ import annotations

from audio_cnn_viz.engine.colors import COOL_RGB, NEUTRAL_RGB, WARM_RGB, color_array, get_color
from audio_cnn_viz.engine.feature_map import FeatureMap, FeatureMapCell, render_feature_map
from audio_cnn_viz.engine.layers import LayerPartition, child_label, split_layers
from audio_cnn_viz.engine.legend import ColorScale, render_color_scale
from audio_cnn_viz.engine.waveform import WaveformPath, render_waveform


__all__ = [
    "COOL_RGB",
    "ColorScale",
    "FeatureMap",
    "FeatureMapCell",
    "LayerPartition",
    "NEUTRAL_RGB",
    "WARM_RGB",
    "WaveformPath",
    "child_label",
    "color_array",
    "get_color",
    "render_color_scale",
    "render_feature_map",
    "render_waveform",
    "split_layers",
]
