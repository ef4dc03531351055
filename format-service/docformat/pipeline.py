"""
The formatting pipeline.

decode -> transforms -> sanitize -> assemble (stylesheet included) -> encode
"""

import base64
import logging
from typing import NamedTuple

from .config import FormatterOptions, StylePresetId
from .utils.beautifulsoup_utils import sanitize_html
from .utils.docx_decoder import decode_document
from .utils.docx_encoder import encode_document
from .utils.html_utils import build_html_document, extract_root_markup
from .utils.logging_config import get_logger, log_performance
from .utils.transforms import apply_smart_quotes, apply_title_case, normalize_spacing

logger = get_logger()


class ResultPayload(NamedTuple):
    """Result of one formatting run."""
    base64: str
    preview_html: str
    applied_preset: str

    def to_response(self) -> dict:
        return {
            "base64": self.base64,
            "previewHtml": self.preview_html,
            "appliedPreset": self.applied_preset,
        }


@log_performance(logger, level=logging.DEBUG)
def format_document(
    content: bytes,
    preset_id: StylePresetId,
    options: FormatterOptions
) -> ResultPayload:
    """
    Run the whole pipeline on one uploaded document.

    Args:
        content: Uploaded .docx bytes
        preset_id: Resolved preset
        options: Formatter options

    Returns:
        ResultPayload with the base64 .docx, the preview and the preset id

    Raises:
        Exception: Whatever a stage raises; the request handler maps it
    """
    tree = decode_document(content)

    if options.tidy_spacing:
        tree = normalize_spacing(tree)

    if options.title_case_headings:
        tree = apply_title_case(tree)

    if options.convert_quotes:
        tree = apply_smart_quotes(tree)

    body_markup = sanitize_html(extract_root_markup(tree))
    assembled = build_html_document(body_markup, preset_id, options)
    docx_bytes = encode_document(assembled.document_html)

    return ResultPayload(
        base64=base64.b64encode(docx_bytes).decode("ascii"),
        preview_html=assembled.preview_html,
        applied_preset=preset_id.value,
    )
