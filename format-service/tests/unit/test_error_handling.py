"""
Unit tests for error responses and the exception hierarchy.
"""

import json
import logging

import pytest

from docformat.utils.error_handling import (
    ERROR_SEVERITY_MAP,
    ErrorCode,
    ErrorSeverity,
    DecodeError,
    EncodeError,
    FormattingError,
    create_error_response,
)


class TestCreateErrorResponse:
    """Test cases for create_error_response()."""

    @pytest.mark.parametrize("error_code, status_code, level", [
        (ErrorCode.INVALID_FILE, 400, logging.INFO),
        (ErrorCode.FORMATTING_FAILED, 500, logging.ERROR),
    ])
    def test_status_and_log_level(self, caplog, error_code, status_code, level):
        with caplog.at_level(logging.DEBUG, logger="docformat.utils.error_handling"):
            response = create_error_response(error_code, details="internal detail")

        assert response.status_code == status_code
        assert "internal detail" not in response.body.decode("utf-8")

        records = [r for r in caplog.records if "internal detail" in r.getMessage()]
        assert [r.levelno for r in records] == [level]

    def test_body_is_fixed_message(self):
        response = create_error_response(ErrorCode.INVALID_FILE)
        assert json.loads(response.body) == {"error": "Upload a valid .docx file."}

    def test_every_code_has_a_severity(self):
        assert set(ERROR_SEVERITY_MAP) == set(ErrorCode)
        assert set(ERROR_SEVERITY_MAP.values()) == set(ErrorSeverity)


class TestExceptions:
    """Test cases for the stage-carrying exceptions."""

    def test_stages(self):
        assert FormattingError("x").stage == "pipeline"
        assert DecodeError("x").stage == "decode"
        assert EncodeError("x").stage == "encode"
        assert FormattingError("x", stage="assemble").stage == "assemble"
