# ============================================================================
# Audio CNN Visualizer - Pytest Configuration
# ============================================================================
# Purpose: Shared fixtures and configuration for all tests
# ============================================================================

import math
import os

import pytest


# =============================================================================
# Environment Configuration
# =============================================================================

@pytest.fixture(scope="session", autouse=True)
def configure_environment():
    """Configure environment for testing."""
    os.environ["PYTHONIOENCODING"] = "utf-8"
    os.environ["MPLBACKEND"] = "Agg"
    yield


# =============================================================================
# Payload Fixtures
# =============================================================================

@pytest.fixture
def sample_payload():
    """Raw JSON-shaped classifier response, as decoded from the wire."""
    return {
        "predictions": [
            {"class": "dog", "confidence": 0.82},
            {"class": "crying_baby", "confidence": 0.11},
            {"class": "rooster", "confidence": 0.04},
            {"class": "pig", "confidence": 0.03},
        ],
        "visualizations": {
            "conv1": {"shape": [16, 2, 3], "values": [[1.0, -2.0, 0.5], [0.0, 4.0, -4.0]]},
            "layer1.conv2": {"shape": [2, 2], "values": [[0.2, 0.1], [0.0, -0.3]]},
            "conv1.relu": {"shape": [2, 2], "values": [[0.0, 1.0], [2.0, 0.0]]},
            "layer1": {"shape": [32, 2, 2], "values": [[1.0, -1.0], [0.5, -0.5]]},
            "layer1.conv1": {"shape": [2, 2], "values": [[0.5, 0.5], [0.5, 0.5]]},
        },
        "input_spectogram": {
            "shape": [1, 3, 4],
            "values": [[0.0, 1.0, 2.0, 3.0], [-1.0, -2.0, -3.0, -4.0], [0.5, 0.5, 0.5, 0.5]],
        },
        "waveform": {
            "values": [0.0, 0.5, -0.5, 1.0, math.nan, -1.0],
            "sample_rate": 44100,
            "duration": 5.0,
        },
    }


@pytest.fixture
def api_response(sample_payload):
    """Validated aggregate root."""
    from audio_cnn_viz.schemas import ApiResponse
    return ApiResponse.model_validate(sample_payload)


@pytest.fixture
def make_layer():
    """Factory for ``LayerData`` from a values grid."""
    from audio_cnn_viz.schemas import LayerData

    def _make(values, shape=None):
        if shape is None:
            shape = [len(values), len(values[0]) if values else 0]
        return LayerData(shape=shape, values=values)

    return _make


# =============================================================================
# Pytest Hooks
# =============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")
    config.addinivalue_line("markers", "smoke: mark as smoke test")
