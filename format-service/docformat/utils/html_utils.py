"""
HTML assembly utilities for the docformat service.

This module wraps sanitized document markup into the standalone document
sent to the .docx encoder and into the preview fragment returned to callers.
"""

from typing import NamedTuple

from bs4 import BeautifulSoup

from ..config import PRESET_CONFIG, FormatterOptions, StylePresetId
from .stylesheet import build_stylesheet

ROOT_CLASS = "docx-root"
DOCUMENT_TITLE = "Formatted Word Document"


class AssembledDocument(NamedTuple):
    """Full document plus preview fragment sharing the same content."""
    document_html: str
    preview_html: str


def wrap_root_markup(markup: str) -> str:
    """Wrap decoded body markup in the root container the transforms work on."""
    return f'<div class="{ROOT_CLASS}">{markup}</div>'


def extract_root_markup(tree: BeautifulSoup) -> str:
    """
    Return the inner markup of the root container.

    Args:
        tree: Markup tree produced by the decoder

    Returns:
        Inner HTML of div.docx-root, or an empty string if it is missing
    """
    root = tree.find("div", class_=ROOT_CLASS)
    if root is None:
        return ""
    return root.decode_contents()


def build_html_document(
    sanitized_content: str,
    preset_id: StylePresetId,
    options: FormatterOptions
) -> AssembledDocument:
    """
    Wrap sanitized content into a full HTML document and a preview fragment.

    Args:
        sanitized_content: Body markup that already went through sanitize_html()
        preset_id: Resolved preset
        options: Formatter options

    Returns:
        AssembledDocument(document_html, preview_html)
    """
    stylesheet = build_stylesheet(PRESET_CONFIG[preset_id], options)

    document_html = f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8" />
    <title>{DOCUMENT_TITLE}</title>
    <style>{stylesheet}</style>
</head>
<body>
    <div class="docx-shell">
        <div class="docx-content">
            {sanitized_content}
        </div>
    </div>
</body>
</html>"""

    preview_html = f"""<style>{stylesheet}</style>
<div class="docx-content">
    {sanitized_content}
</div>"""

    return AssembledDocument(document_html=document_html, preview_html=preview_html)
