"""
Classification Session
======================
Explicit lifecycle for one upload: ``idle -> pending -> resolved | failed``.

At most one request is outstanding. Starting a new one clears the previous
result and error; a terminal transition installs a brand-new snapshot, so
the view only ever sees a complete result or a single error message.
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import Enum

from audio_cnn_viz.client import InferenceError
from audio_cnn_viz.schemas import ApiResponse


logger = logging.getLogger("audio_cnn_viz.session")

READ_ERROR_MESSAGE = "Failed to read the file."


class RequestState(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    RESOLVED = "resolved"
    FAILED = "failed"


class RequestPendingError(RuntimeError):
    """Raised when a new file is submitted while a request is in flight."""


@dataclass(frozen=True)
class SessionSnapshot:
    state: RequestState = RequestState.IDLE
    file_name: str = ""
    result: ApiResponse | None = None
    error: str | None = None

    @property
    def is_pending(self) -> bool:
        return self.state is RequestState.PENDING


class ClassificationSession:
    """Holds the single current snapshot and enforces legal transitions."""

    def __init__(self) -> None:
        self._snapshot = SessionSnapshot()

    @property
    def snapshot(self) -> SessionSnapshot:
        return self._snapshot

    @property
    def state(self) -> RequestState:
        return self._snapshot.state

    def begin(self, file_name: str) -> SessionSnapshot:
        if self._snapshot.is_pending:
            raise RequestPendingError(
                f"A request for {self._snapshot.file_name!r} is still pending"
            )
        self._snapshot = SessionSnapshot(state=RequestState.PENDING, file_name=file_name)
        logger.info("Classifying %s", file_name)
        return self._snapshot

    def resolve(self, response: ApiResponse) -> SessionSnapshot:
        self._require_pending("resolve")
        self._snapshot = replace(self._snapshot, state=RequestState.RESOLVED, result=response)
        logger.info("Resolved %s", self._snapshot.file_name)
        return self._snapshot

    def fail(self, message: str) -> SessionSnapshot:
        self._require_pending("fail")
        self._snapshot = replace(
            self._snapshot, state=RequestState.FAILED, result=None, error=message
        )
        logger.warning("Failed %s: %s", self._snapshot.file_name, message)
        return self._snapshot

    def submit(
        self,
        file_name: str,
        audio_bytes: bytes,
        classify: Callable[[bytes], ApiResponse],
    ) -> SessionSnapshot:
        """Run one full upload -> classify -> terminal-state cycle."""
        self.begin(file_name)
        if not audio_bytes:
            return self.fail(READ_ERROR_MESSAGE)
        try:
            response = classify(audio_bytes)
        except InferenceError as exc:
            return self.fail(str(exc) or "An unknown error occurred.")
        return self.resolve(response)

    def _require_pending(self, action: str) -> None:
        if not self._snapshot.is_pending:
            raise RuntimeError(f"Cannot {action} from state {self._snapshot.state.value!r}")
