"""
Inference Client
================
Posts an audio file to the remote classifier and decodes the response.

One request, one terminal outcome: either a validated ``ApiResponse`` or an
``InferenceError`` carrying a single human-readable message. No retries.
"""
from __future__ import annotations

import base64
import logging

import requests
from pydantic import ValidationError

from audio_cnn_viz import config
from audio_cnn_viz.schemas import ApiResponse, ClassifyRequest


logger = logging.getLogger("audio_cnn_viz.client")


class InferenceError(RuntimeError):
    """Transport, HTTP or payload failure talking to the classifier."""


def encode_audio(audio_bytes: bytes) -> str:
    """Base64 text of the raw file bytes."""
    return base64.b64encode(audio_bytes).decode("ascii")


class InferenceClient:
    """Thin ``requests`` wrapper around the classification endpoint."""

    def __init__(
        self,
        url: str | None = None,
        timeout: float | None = None,
        http: requests.Session | None = None,
    ) -> None:
        self.url = url or config.INFERENCE_URL
        self.timeout = config.INFERENCE_TIMEOUT if timeout is None else timeout
        self._http = http or requests.Session()

    def classify(self, audio_bytes: bytes) -> ApiResponse:
        """
        Classify raw audio file bytes.

        Raises
        ------
        InferenceError
            On timeout, connection failure, non-2xx status, or a body that is
            not a valid ``ApiResponse``.
        """
        payload = ClassifyRequest(audio_data=encode_audio(audio_bytes)).model_dump()
        headers = {"Content-Type": "application/json"}

        try:
            response = self._http.post(
                self.url, json=payload, headers=headers, timeout=self.timeout
            )
        except requests.exceptions.Timeout as exc:
            logger.warning("Inference request to %s timed out", self.url)
            raise InferenceError("Inference API timeout.") from exc
        except requests.exceptions.RequestException as exc:
            logger.warning("Inference request to %s failed: %s", self.url, exc)
            raise InferenceError(f"Inference API request failed: {exc}") from exc

        if not response.ok:
            logger.warning("Inference API returned %s %s", response.status_code, response.reason)
            raise InferenceError(f"Api Error {response.reason}")

        try:
            result = ApiResponse.model_validate(response.json())
        except ValidationError as exc:
            raise InferenceError(
                f"Invalid inference response: {exc.error_count()} validation error(s)"
            ) from exc
        except ValueError as exc:
            raise InferenceError(f"Invalid inference response: {exc}") from exc

        logger.info(
            "Received %d predictions and %d layer maps",
            len(result.predictions),
            len(result.visualizations),
        )
        return result

    def close(self) -> None:
        self._http.close()
