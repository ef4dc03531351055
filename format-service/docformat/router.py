"""
Formatting router for the /api endpoints.

POST /api/format takes a multipart upload (file, preset and tidy options) and
answers with the re-styled .docx (base64) and an HTML preview.
"""

from typing import Any

from fastapi import APIRouter, Request
from starlette.datastructures import UploadFile

from . import pipeline
from .config import (
    API_PREFIX,
    DEFAULT_PRESET,
    FALSE_TOKENS,
    OPTION_FIELDS,
    TRUE_TOKENS,
    FormatterOptions,
    StylePresetId,
    option_defaults,
    resolve_preset,
)
from .utils.error_handling import ErrorCode, create_error_response
from .utils.logging_config import get_logger

logger = get_logger()

router = APIRouter(prefix=API_PREFIX, tags=["format"])


def parse_boolean(value: Any, fallback: bool) -> bool:
    """Read a form flag; anything other than a known token gives the fallback."""
    if not isinstance(value, str):
        return fallback
    if value in TRUE_TOKENS:
        return True
    if value in FALSE_TOKENS:
        return False
    return fallback


def parse_options(form) -> FormatterOptions:
    """Build FormatterOptions from the submitted form fields."""
    defaults = option_defaults()
    values = {
        attr: parse_boolean(form.get(field), defaults[field])
        for field, attr in OPTION_FIELDS.items()
    }
    return FormatterOptions(**values)


@router.post("/format")
async def format_upload(request: Request):
    """
    Format an uploaded .docx.

    Form fields:
    - file: the .docx upload (required)
    - preset: classic | modern | executive (default: classic)
    - justify, tidySpacing, titleCaseHeadings, convertQuotes: "true"/"1" (default: true)
    - autoNumberHeadings: "true"/"1" (default: false)

    Returns:
        {"base64": ..., "previewHtml": ..., "appliedPreset": ...}
    """
    try:
        form = await request.form()
    except Exception as e:
        return create_error_response(ErrorCode.INVALID_FILE, details=f"unreadable form: {e}")

    upload = form.get("file")

    if not isinstance(upload, UploadFile):
        return create_error_response(
            ErrorCode.INVALID_FILE,
            details=f"file field is {type(upload).__name__}"
        )

    preset_id = resolve_preset(form.get("preset"))
    options = parse_options(form)

    try:
        content = await upload.read()
        result = pipeline.format_document(content, preset_id, options)
    except Exception as e:
        logger.exception(
            f"Formatting failed for {upload.filename!r} "
            f"(stage={getattr(e, 'stage', 'unknown')}, preset={preset_id.value}, options={options})"
        )
        return create_error_response(ErrorCode.FORMATTING_FAILED, details=str(e))

    logger.info(f"Formatted {upload.filename!r} with preset {result.applied_preset}")
    return result.to_response()


@router.get("/presets")
async def list_presets():
    """List the available presets and the default value of every option."""
    return {
        "presets": [preset.value for preset in StylePresetId],
        "defaultPreset": DEFAULT_PRESET.value,
        "options": option_defaults(),
    }
