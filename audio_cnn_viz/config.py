"""
Visualizer Configuration
========================
Centralized configuration for the visualizer and its host application.
All settings are read from environment variables with sensible defaults.
"""
from __future__ import annotations

import os


# =============================================================================
# Inference Endpoint
# =============================================================================
INFERENCE_URL: str = os.environ.get("AUDIO_CNN_INFERENCE_URL", "http://localhost:8000/")

# Seconds; the transport layer owns the timeout, the renderers never block
INFERENCE_TIMEOUT: float = float(os.environ.get("AUDIO_CNN_INFERENCE_TIMEOUT", "120"))

ACCEPTED_EXTENSIONS: tuple[str, ...] = (".wav",)

# =============================================================================
# Server Configuration
# =============================================================================
HOST: str = os.environ.get("AUDIO_CNN_HOST", "0.0.0.0")
PORT: int = int(os.environ.get("AUDIO_CNN_PORT", "8002"))
LOG_LEVEL: str = os.environ.get("AUDIO_CNN_LOG_LEVEL", "INFO").upper()
LOG_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# =============================================================================
# Display Configuration
# =============================================================================
TOP_K_PREDICTIONS: int = 3
LAYER_GRID_COLUMNS: int = 5

# Waveform viewport (trace stays within 90% of the height)
WAVEFORM_WIDTH: int = 600
WAVEFORM_HEIGHT: int = 300
WAVEFORM_AMPLITUDE: float = 0.45

# Feature-map display boxes, in CSS pixels
FEATURE_MAP_MAX_WIDTH: int = 500
FEATURE_MAP_MAX_HEIGHT: int = 220
INTERNAL_MAX_WIDTH: int = 128

# Color-scale legend (declared bounds, not data bounds)
LEGEND_WIDTH: int = 200
LEGEND_HEIGHT: int = 16
LEGEND_MIN: float = -1
LEGEND_MAX: float = 1

# =============================================================================
# Report Export
# =============================================================================
REPORT_DPI: int = int(os.environ.get("AUDIO_CNN_REPORT_DPI", "150"))
