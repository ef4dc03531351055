"""
Centralized error handling for the docformat API.

The service exposes exactly two error kinds to callers: an invalid upload
(400) and a failed formatting run (500). Both carry a fixed, user-facing
message; stage-specific detail is only ever written to the server log.
"""

import logging
from enum import Enum
from typing import Dict, Optional

from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ErrorCode(str, Enum):
    """Error codes surfaced by the formatting API."""

    INVALID_FILE = "INVALID_FILE"
    FORMATTING_FAILED = "FORMATTING_FAILED"


class ErrorSeverity(str, Enum):
    """Error severity levels for logging."""
    LOW = "low"
    HIGH = "high"


ERROR_STATUS_MAP: Dict[ErrorCode, int] = {
    ErrorCode.INVALID_FILE: 400,
    ErrorCode.FORMATTING_FAILED: 500,
}

ERROR_SEVERITY_MAP: Dict[ErrorCode, ErrorSeverity] = {
    ErrorCode.INVALID_FILE: ErrorSeverity.LOW,
    ErrorCode.FORMATTING_FAILED: ErrorSeverity.HIGH,
}

ERROR_MESSAGES: Dict[ErrorCode, str] = {
    ErrorCode.INVALID_FILE: "Upload a valid .docx file.",
    ErrorCode.FORMATTING_FAILED: (
        "We could not format that document. "
        "Please ensure it is a valid .docx exported from Word."
    ),
}


class FormattingError(Exception):
    """Raised by a pipeline stage that cannot complete."""

    stage = "pipeline"

    def __init__(self, message: str, stage: Optional[str] = None):
        super().__init__(message)
        if stage:
            self.stage = stage


class DecodeError(FormattingError):
    """The upload is not a readable .docx document."""

    stage = "decode"


class EncodeError(FormattingError):
    """The assembled HTML could not be converted back to .docx."""

    stage = "encode"


def create_error_response(
    error_code: ErrorCode,
    details: Optional[str] = None,
) -> JSONResponse:
    """
    Create the JSON error response for an error code.

    Args:
        error_code: Error code from ErrorCode enum
        details: Internal detail, logged only (truncated to 1000 chars)

    Returns:
        JSONResponse with body {"error": <fixed message>}
    """
    status_code = ERROR_STATUS_MAP.get(error_code, 500)
    severity = ERROR_SEVERITY_MAP.get(error_code, ErrorSeverity.HIGH)

    log_message = f"Error response {error_code.value} ({status_code})"
    if details:
        log_message += f": {str(details)[:1000]}"

    if severity == ErrorSeverity.HIGH:
        logger.error(log_message)
    else:
        logger.info(log_message)

    return JSONResponse(
        status_code=status_code,
        content={"error": ERROR_MESSAGES[error_code]},
    )
