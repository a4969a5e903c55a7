"""
Health Check Routes
===================
Provides ``/health`` and ``/health/live`` for container orchestrators.
"""
from __future__ import annotations

from fastapi import APIRouter

from audio_cnn_viz.schemas import HealthResponse, LiveResponse


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Basic health probe — always returns ``{"status": "healthy"}``."""
    return HealthResponse(status="healthy")


@router.get("/live", response_model=LiveResponse)
async def liveness() -> LiveResponse:
    """Liveness probe — confirms the process is running."""
    return LiveResponse(live=True)
