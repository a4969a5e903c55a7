# ============================================================================
# Audio CNN Visualizer - Inference Client Tests
# ============================================================================
# Purpose: Request encoding and failure normalization (HTTP mocked)
# ============================================================================

import base64
from unittest.mock import MagicMock

import pytest
import requests

from audio_cnn_viz.client import InferenceClient, InferenceError, encode_audio
from audio_cnn_viz.schemas import ApiResponse


def _http_returning(status=200, reason="OK", body=None, json_error=None):
    response = MagicMock()
    response.ok = 200 <= status < 300
    response.status_code = status
    response.reason = reason
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = body
    http = MagicMock(spec=requests.Session)
    http.post.return_value = response
    return http


class TestEncoding:
    def test_encode_audio(self):
        assert encode_audio(b"RIFF\x00\x01") == base64.b64encode(b"RIFF\x00\x01").decode()


class TestClassify:
    def test_success(self, sample_payload):
        http = _http_returning(body=sample_payload)
        client = InferenceClient(url="http://classifier.test/", timeout=5, http=http)

        result = client.classify(b"RIFF")

        assert isinstance(result, ApiResponse)
        assert result.predictions[0].class_name == "dog"

    def test_request_body(self, sample_payload):
        http = _http_returning(body=sample_payload)
        InferenceClient(url="http://classifier.test/", timeout=5, http=http).classify(b"RIFF")

        args, kwargs = http.post.call_args
        assert args[0] == "http://classifier.test/"
        assert kwargs["json"] == {"audio_data": base64.b64encode(b"RIFF").decode()}
        assert kwargs["headers"]["Content-Type"] == "application/json"
        assert kwargs["timeout"] == 5

    def test_http_error_status(self):
        http = _http_returning(status=502, reason="Bad Gateway")
        client = InferenceClient(url="http://classifier.test/", http=http)
        with pytest.raises(InferenceError, match="Api Error Bad Gateway"):
            client.classify(b"RIFF")

    def test_timeout(self):
        http = MagicMock(spec=requests.Session)
        http.post.side_effect = requests.exceptions.Timeout()
        client = InferenceClient(url="http://classifier.test/", http=http)
        with pytest.raises(InferenceError, match="timeout"):
            client.classify(b"RIFF")

    def test_connection_error(self):
        http = MagicMock(spec=requests.Session)
        http.post.side_effect = requests.exceptions.ConnectionError("refused")
        client = InferenceClient(url="http://classifier.test/", http=http)
        with pytest.raises(InferenceError, match="request failed"):
            client.classify(b"RIFF")

    def test_invalid_json(self):
        http = _http_returning(json_error=ValueError("Expecting value"))
        client = InferenceClient(url="http://classifier.test/", http=http)
        with pytest.raises(InferenceError, match="Invalid inference response"):
            client.classify(b"RIFF")

    def test_schema_mismatch(self):
        http = _http_returning(body={"predictions": []})
        client = InferenceClient(url="http://classifier.test/", http=http)
        with pytest.raises(InferenceError, match="validation error"):
            client.classify(b"RIFF")

    def test_defaults_from_config(self):
        from audio_cnn_viz import config

        client = InferenceClient(http=MagicMock(spec=requests.Session))
        assert client.url == config.INFERENCE_URL
        assert client.timeout == config.INFERENCE_TIMEOUT
