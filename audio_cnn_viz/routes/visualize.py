"""
Visualization Routes
====================
Upload page, upload-and-classify, and render-an-existing-response.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse

from audio_cnn_viz import config
from audio_cnn_viz.client import InferenceClient
from audio_cnn_viz.schemas import ApiResponse
from audio_cnn_viz.session import ClassificationSession, RequestState, SessionSnapshot
from audio_cnn_viz.view import VisualizationView


logger = logging.getLogger("audio_cnn_viz.routes.visualize")

router = APIRouter(tags=["visualize"])


# Module-level singleton
_client: InferenceClient | None = None


def get_client() -> InferenceClient:
    """Get or create the shared inference client."""
    global _client  # noqa: PLW0603
    if _client is None:
        _client = InferenceClient()
    return _client


def close_client() -> None:
    global _client  # noqa: PLW0603
    if _client is not None:
        _client.close()
        _client = None


def get_view() -> VisualizationView:
    return VisualizationView()


@router.get("/", response_class=HTMLResponse)
async def index(view: VisualizationView = Depends(get_view)) -> HTMLResponse:
    """Idle page with the upload form."""
    return HTMLResponse(view.render_page(SessionSnapshot()))


@router.post("/visualize", response_class=HTMLResponse)
async def visualize(
    audio: UploadFile = File(...),
    client: InferenceClient = Depends(get_client),
    view: VisualizationView = Depends(get_view),
) -> HTMLResponse:
    """
    Classify an uploaded WAV file and render the result page.

    Returns 200 with the visualizations, or 502 with an error-only page
    when the inference call fails.
    """
    file_name = audio.filename or "upload.wav"
    if not file_name.lower().endswith(config.ACCEPTED_EXTENSIONS):
        raise HTTPException(status_code=400, detail=f"Unsupported file type: {file_name}")

    contents = await audio.read()
    if not contents:
        raise HTTPException(status_code=400, detail="Empty audio file")

    session = ClassificationSession()
    snapshot = await run_in_threadpool(session.submit, file_name, contents, client.classify)

    status_code = 200 if snapshot.state is RequestState.RESOLVED else 502
    return HTMLResponse(view.render_page(snapshot), status_code=status_code)


@router.post("/render", response_class=HTMLResponse)
async def render(
    payload: ApiResponse,
    view: VisualizationView = Depends(get_view),
) -> HTMLResponse:
    """Render an already-decoded classifier response (no network call)."""
    snapshot = SessionSnapshot(state=RequestState.RESOLVED, result=payload)
    logger.info("Rendering %d layer maps", len(payload.visualizations))
    return HTMLResponse(view.render_page(snapshot))
