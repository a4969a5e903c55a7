"""
Audio CNN Visualizer
====================
Turns the output of a remote audio classifier into interactive diagrams.

Provides:
- Diverging color mapping and per-tensor feature-map grids
- Waveform vector paths and the color-scale legend
- Main/internal layer grouping for the convolutional layer grid
- A FastAPI host page, an inference client and a static report export
"""
from __future__ import annotations


__version__ = "0.1.0"
