# ============================================================================
# Audio CNN Visualizer - Session Lifecycle Tests
# ============================================================================
# Purpose: idle -> pending -> resolved | failed transitions
# ============================================================================

import pytest

from audio_cnn_viz.client import InferenceError
from audio_cnn_viz.session import (
    READ_ERROR_MESSAGE,
    ClassificationSession,
    RequestPendingError,
    RequestState,
)


class TestTransitions:
    def test_starts_idle(self):
        session = ClassificationSession()
        assert session.state is RequestState.IDLE
        assert session.snapshot.result is None
        assert session.snapshot.error is None

    def test_begin_enters_pending(self):
        session = ClassificationSession()
        snapshot = session.begin("dog.wav")
        assert snapshot.is_pending
        assert snapshot.file_name == "dog.wav"

    def test_second_begin_while_pending_rejected(self):
        session = ClassificationSession()
        session.begin("a.wav")
        with pytest.raises(RequestPendingError):
            session.begin("b.wav")

    def test_resolve_requires_pending(self, api_response):
        with pytest.raises(RuntimeError):
            ClassificationSession().resolve(api_response)

    def test_fail_requires_pending(self):
        with pytest.raises(RuntimeError):
            ClassificationSession().fail("boom")


class TestSubmit:
    def test_success(self, api_response):
        session = ClassificationSession()
        snapshot = session.submit("dog.wav", b"RIFF", lambda data: api_response)
        assert snapshot.state is RequestState.RESOLVED
        assert snapshot.result is api_response
        assert snapshot.error is None

    def test_classifier_receives_bytes(self, api_response):
        seen = []

        def classify(data):
            seen.append(data)
            return api_response

        ClassificationSession().submit("dog.wav", b"abc", classify)
        assert seen == [b"abc"]

    def test_failure_clears_previous_result(self, api_response):
        session = ClassificationSession()
        session.submit("dog.wav", b"RIFF", lambda data: api_response)

        def broken(data):
            raise InferenceError("Api Error Bad Gateway")

        snapshot = session.submit("cat.wav", b"RIFF", broken)
        assert snapshot.state is RequestState.FAILED
        assert snapshot.result is None
        assert snapshot.error == "Api Error Bad Gateway"
        assert snapshot.file_name == "cat.wav"

    def test_new_submit_clears_previous_error(self, api_response):
        session = ClassificationSession()
        session.submit("a.wav", b"", lambda data: api_response)
        assert session.snapshot.error == READ_ERROR_MESSAGE

        snapshot = session.submit("b.wav", b"RIFF", lambda data: api_response)
        assert snapshot.error is None
        assert snapshot.result is api_response

    def test_empty_bytes_fail_without_calling_classifier(self):
        def classify(data):
            raise AssertionError("should not be called")

        snapshot = ClassificationSession().submit("empty.wav", b"", classify)
        assert snapshot.state is RequestState.FAILED
        assert snapshot.error == READ_ERROR_MESSAGE

    def test_unexpected_errors_propagate(self):
        def classify(data):
            raise KeyError("bug")

        with pytest.raises(KeyError):
            ClassificationSession().submit("a.wav", b"RIFF", classify)
