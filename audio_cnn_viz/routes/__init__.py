"""Routes package."""
from __future__ import annotations

from audio_cnn_viz.routes import health, visualize


__all__ = ["health", "visualize"]
