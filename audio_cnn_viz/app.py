"""
FastAPI Application
===================
Host page for the visualizer.

Start with::

    uvicorn audio_cnn_viz.app:app --host 0.0.0.0 --port 8002 --reload
"""
from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from audio_cnn_viz import __version__, config
from audio_cnn_viz.routes.health import router as health_router
from audio_cnn_viz.routes.visualize import close_client
from audio_cnn_viz.routes.visualize import router as visualize_router


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
logger = logging.getLogger("audio_cnn_viz")


# ---------------------------------------------------------------------------
# Lifespan — release the HTTP session on shutdown
# ---------------------------------------------------------------------------
@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    logger.info("Starting audio CNN visualizer v%s …", __version__)
    logger.info("Inference endpoint: %s", config.INFERENCE_URL)
    yield
    close_client()
    logger.info("Shutting down audio CNN visualizer.")


# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Audio CNN Visualizer",
    description=(
        "Uploads a WAV file to the audio classifier and renders its "
        "predictions, input spectrogram, waveform and per-layer feature maps."
    ),
    version=__version__,
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(visualize_router)
