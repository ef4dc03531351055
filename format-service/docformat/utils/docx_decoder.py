"""
DOCX decoding: uploaded bytes -> markup tree.

The archive structure is checked first so a renamed or truncated file fails
with a clear DecodeError before mammoth is involved.
"""

import zipfile
from io import BytesIO

import mammoth
from bs4 import BeautifulSoup

from .error_handling import DecodeError
from .html_utils import wrap_root_markup
from .logging_config import get_logger

logger = get_logger()

REQUIRED_PARTS = (
    '[Content_Types].xml',
    '_rels/.rels',
    'word/document.xml',
)


def validate_docx_archive(content: bytes) -> None:
    """
    Check that content is a ZIP archive carrying the core DOCX parts.

    Raises:
        DecodeError: If the archive is unreadable or incomplete
    """
    if not content:
        raise DecodeError("Uploaded document is empty")

    try:
        with zipfile.ZipFile(BytesIO(content), 'r') as zf:
            namelist = zf.namelist()
            missing_parts = [part for part in REQUIRED_PARTS if part not in namelist]
            if missing_parts:
                raise DecodeError(f"Missing required DOCX parts: {missing_parts}")

            if zf.getinfo('word/document.xml').file_size == 0:
                raise DecodeError("DOCX document content is empty")
    except zipfile.BadZipFile as e:
        raise DecodeError(f"Invalid DOCX file (not a valid ZIP archive): {e}") from e


def convert_docx_to_html(content: bytes) -> str:
    """
    Convert DOCX bytes to HTML with mammoth's default style map.

    Raises:
        DecodeError: If mammoth cannot read the document
    """
    try:
        result = mammoth.convert_to_html(BytesIO(content), include_default_style_map=True)
    except Exception as e:
        raise DecodeError(f"Mammoth conversion failed: {e}") from e

    for message in result.messages:
        if message.type == "error":
            logger.error(f"Mammoth error: {message.message}")
        else:
            logger.warning(f"Mammoth {message.type}: {message.message}")

    return result.value


def decode_document(content: bytes) -> BeautifulSoup:
    """
    Decode an uploaded .docx into the markup tree used by the transforms.

    Args:
        content: Raw upload bytes

    Returns:
        BeautifulSoup tree whose top-level element is div.docx-root

    Raises:
        DecodeError: If the bytes are not a readable .docx document
    """
    validate_docx_archive(content)
    raw_html = convert_docx_to_html(content)
    logger.debug(f"Decoded document to {len(raw_html)} characters of HTML")
    return BeautifulSoup(wrap_root_markup(raw_html), "html.parser")
