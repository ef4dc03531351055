"""
Unit tests for document assembly.
"""

from docformat.config import PRESET_CONFIG, FormatterOptions, StylePresetId
from docformat.utils.html_utils import build_html_document, extract_root_markup, wrap_root_markup
from docformat.utils.stylesheet import build_stylesheet

CONTENT = "<h1>Report</h1><p>Body text</p>"


class TestBuildHtmlDocument:
    """Test cases for build_html_document()."""

    def test_full_document(self):
        assembled = build_html_document(CONTENT, StylePresetId.CLASSIC, FormatterOptions())
        document = assembled.document_html

        assert document.startswith("<!DOCTYPE html>")
        assert '<html lang="en">' in document
        assert '<meta charset="utf-8" />' in document
        assert "<title>Formatted Word Document</title>" in document
        assert '<div class="docx-shell">' in document
        assert '<div class="docx-content">' in document
        assert document.index("docx-shell") < document.index("docx-content") < document.index(CONTENT)

    def test_preview_fragment(self):
        assembled = build_html_document(CONTENT, StylePresetId.CLASSIC, FormatterOptions())
        preview = assembled.preview_html

        assert preview.startswith("<style>")
        assert '<div class="docx-content">' in preview
        assert CONTENT in preview
        assert "<html" not in preview
        assert "<body" not in preview
        assert "docx-shell\"" not in preview

    def test_same_content_and_stylesheet(self):
        options = FormatterOptions(justify=False, auto_number_headings=True)
        assembled = build_html_document(CONTENT, StylePresetId.EXECUTIVE, options)
        stylesheet = build_stylesheet(PRESET_CONFIG[StylePresetId.EXECUTIVE], options)

        for html in assembled:
            assert CONTENT in html
            assert f"<style>{stylesheet}</style>" in html


class TestRootMarkup:
    """Test cases for the root container helpers."""

    def test_round_trip(self, tree_factory):
        tree = tree_factory(CONTENT)
        assert extract_root_markup(tree) == CONTENT

    def test_missing_root(self, tree_factory):
        from bs4 import BeautifulSoup

        assert extract_root_markup(BeautifulSoup("<p>loose</p>", "html.parser")) == ""

    def test_wrap(self):
        assert wrap_root_markup("<p>x</p>") == '<div class="docx-root"><p>x</p></div>'
