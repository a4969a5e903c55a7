# ============================================================================
# Audio CNN Visualizer - Import Validation Tests
# ============================================================================
# Purpose: Verify all critical modules import successfully
# ============================================================================

import pytest


class TestCoreImports:
    """Test that third-party dependencies import without errors."""

    def test_import_numpy(self):
        """Test NumPy import."""
        import numpy as np
        assert hasattr(np, "__version__")

    def test_import_pydantic(self):
        """Test pydantic v2 import."""
        import pydantic
        assert pydantic.VERSION.startswith("2")

    def test_import_fastapi(self):
        """Test FastAPI import."""
        import fastapi
        assert hasattr(fastapi, "FastAPI")

    def test_import_requests(self):
        """Test requests import."""
        import requests
        assert hasattr(requests, "Session")

    def test_import_matplotlib(self):
        """Test matplotlib import."""
        import matplotlib
        assert hasattr(matplotlib, "__version__")


class TestProjectImports:
    """Test that project modules import without errors."""

    def test_package_version(self):
        from audio_cnn_viz import __version__
        assert __version__ == "0.1.0"

    def test_engine_exports(self):
        import audio_cnn_viz.engine as engine
        for name in engine.__all__:
            assert hasattr(engine, name)

    @pytest.mark.smoke
    @pytest.mark.parametrize("module", [
        "audio_cnn_viz.config",
        "audio_cnn_viz.schemas",
        "audio_cnn_viz.labels",
        "audio_cnn_viz.client",
        "audio_cnn_viz.session",
        "audio_cnn_viz.view",
        "audio_cnn_viz.export",
        "audio_cnn_viz.app",
        "audio_cnn_viz.routes",
    ])
    def test_import_module(self, module):
        import importlib
        assert importlib.import_module(module) is not None


class TestConfiguration:
    """Test configuration values."""

    def test_display_constants(self):
        from audio_cnn_viz import config
        assert config.TOP_K_PREDICTIONS == 3
        assert (config.WAVEFORM_WIDTH, config.WAVEFORM_HEIGHT) == (600, 300)
        assert (config.LEGEND_MIN, config.LEGEND_MAX) == (-1, 1)

    def test_labels_cover_esc50(self):
        from audio_cnn_viz.labels import ESC50_EMOJI_MAP, get_emoji_for_class
        assert len(ESC50_EMOJI_MAP) == 50
        assert get_emoji_for_class("not_a_class") == "📢"
