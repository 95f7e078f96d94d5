"""
Unit tests for shared utilities
"""

import base64
import json

import pytest
from shared.utils import (
    Logger,
    decode_body,
    get_header,
    lambda_response
)


class TestLambdaResponses:
    """Test Lambda response builders"""

    def test_lambda_response_structure(self):
        response = lambda_response(400, "Invalid signature")

        assert response["statusCode"] == 400
        assert response["body"] == "Invalid signature"
        assert response["headers"]["Content-Type"] == "text/plain"

    def test_no_content_response_has_empty_body(self):
        response = lambda_response(204)

        assert response["statusCode"] == 204
        assert response["body"] == ""


class TestHeaders:
    """Test case-insensitive header lookup"""

    def test_exact_name(self):
        assert get_header({"x-intdash-signature-256": "abc"}, "x-intdash-signature-256") == "abc"

    def test_mixed_case_name(self):
        headers = {"X-Intdash-Signature-256": "abc"}
        assert get_header(headers, "x-intdash-signature-256") == "abc"

    def test_missing_header(self):
        assert get_header({"content-type": "application/json"}, "x-intdash-signature-256") is None

    def test_no_headers(self):
        assert get_header(None, "x-intdash-signature-256") is None


class TestDecodeBody:
    """Test raw body extraction"""

    def test_plain_body(self):
        assert decode_body({"body": '{"a": 1}'}) == b'{"a": 1}'

    def test_missing_body(self):
        assert decode_body({"body": None}) == b""

    def test_base64_body(self):
        event = {"body": base64.b64encode(b"raw bytes").decode(), "isBase64Encoded": True}
        assert decode_body(event) == b"raw bytes"

    def test_invalid_base64_body(self):
        with pytest.raises(ValueError):
            decode_body({"body": "not base64!", "isBase64Encoded": True})


class TestLogger:
    """Test Logger utility"""

    def test_logger_initialization(self):
        logger = Logger(service_name="test_service")
        assert logger.service_name == "test_service"

    def test_logger_info(self, capsys):
        logger = Logger()
        logger.info("Test message", measurement_uuid="123", action="test")

        captured = capsys.readouterr()
        entry = json.loads(captured.out)
        assert entry["message"] == "Test message"
        assert entry["level"] == "INFO"
        assert entry["measurement_uuid"] == "123"

    def test_logger_error_renders_exceptions(self, capsys):
        logger = Logger()
        logger.error("Error occurred", error=ValueError("boom"))

        captured = capsys.readouterr()
        entry = json.loads(captured.out)
        assert entry["level"] == "ERROR"
        assert entry["error"] == "boom"

    def test_logger_respects_level(self, capsys):
        logger = Logger(level="WARNING")
        logger.info("hidden")
        logger.warning("shown")

        captured = capsys.readouterr()
        assert "hidden" not in captured.out
        assert "shown" in captured.out

    def test_logger_level_from_environment(self, monkeypatch, capsys):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        logger = Logger()
        logger.debug("debug line")

        assert "debug line" in capsys.readouterr().out
