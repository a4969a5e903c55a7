"""
Pydantic Schemas
================
Models for the classifier payload and the host application API.

The classifier response is the single unit of state held by the view.
All payload models are frozen: a new response replaces the previous one
wholesale, nothing is patched in place.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Classifier Payload Schemas
# =============================================================================

class Prediction(BaseModel):
    """Single ranked class prediction."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    class_name: str = Field(..., alias="class", min_length=1, examples=["dog_bark"])
    confidence: float = Field(..., ge=0.0, le=1.0, examples=[0.87])

    @property
    def display_name(self) -> str:
        return self.class_name.replace("_", " ")

    @property
    def percent(self) -> float:
        return self.confidence * 100


class LayerData(BaseModel):
    """A 2-D tensor as produced by the classifier.

    ``shape`` is descriptive only; ``values`` is the renderable grid and is
    always height x width (higher-rank tensors arrive pre-flattened).
    """
    model_config = ConfigDict(frozen=True)

    shape: list[int] = Field(default_factory=list, examples=[[32, 64, 109]])
    values: list[list[float | None]] = Field(
        default_factory=list,
        examples=[[[0.1, -0.4], [0.25, 0.0]]],
    )

    @property
    def is_empty(self) -> bool:
        return not self.values or not self.values[0]

    @property
    def shape_label(self) -> str:
        return " x ".join(str(dim) for dim in self.shape)


class WaveformData(BaseModel):
    """Raw audio samples; may contain null or non-finite entries."""
    model_config = ConfigDict(frozen=True)

    values: list[float | None] = Field(default_factory=list)
    sample_rate: float = Field(..., examples=[44100])
    duration: float = Field(..., examples=[5.0])

    @property
    def title(self) -> str:
        return f"{self.duration:.2f}s * {self.sample_rate:g}Hz"


class ApiResponse(BaseModel):
    """Aggregate root returned by the inference endpoint."""
    model_config = ConfigDict(frozen=True)

    predictions: list[Prediction] = Field(default_factory=list)
    visualizations: dict[str, LayerData] = Field(default_factory=dict)
    input_spectogram: LayerData
    waveform: WaveformData

    def top_predictions(self, k: int = 3) -> list[Prediction]:
        """First ``k`` predictions; the producer already sorts them."""
        return list(self.predictions[:k])


class ClassifyRequest(BaseModel):
    """Outbound request body for the inference endpoint."""
    audio_data: str = Field(..., description="Base64-encoded raw file bytes")


# =============================================================================
# Host Application Schemas
# =============================================================================

class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str = Field(default="healthy", examples=["healthy"])


class LiveResponse(BaseModel):
    """Liveness probe response — indicates process is running."""
    live: bool = Field(default=True, examples=[True])


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., examples=["Api Error Bad Gateway"])
    detail: str | None = Field(default=None)
