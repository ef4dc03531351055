"""
DOCX encoding: assembled HTML document -> .docx bytes.
"""

from io import BytesIO

from html4docx import HtmlToDocx

from .css_margin_parser import apply_margins_to_docx_sections, extract_page_margins_from_html
from .error_handling import EncodeError
from .logging_config import get_logger

logger = get_logger()


def encode_document(document_html: str) -> bytes:
    """
    Convert a full HTML document to .docx bytes with html4docx.

    The @page margins declared in the document's stylesheet are applied to
    every section of the result.

    Args:
        document_html: Complete, sanitized HTML document

    Returns:
        The .docx file content

    Raises:
        EncodeError: If the conversion fails
    """
    try:
        converter = HtmlToDocx()
        docx_document = converter.parse_html_string(document_html)

        margins = extract_page_margins_from_html(document_html)
        if margins:
            apply_margins_to_docx_sections(docx_document, margins)

        docx_bytes_io = BytesIO()
        docx_document.save(docx_bytes_io)
    except Exception as e:
        raise EncodeError(f"html4docx conversion failed: {e}") from e

    docx_bytes = docx_bytes_io.getvalue()
    logger.debug(f"Encoded document to {len(docx_bytes)} bytes")
    return docx_bytes
