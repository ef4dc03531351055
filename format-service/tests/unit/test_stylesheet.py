"""
Unit tests for stylesheet synthesis.
"""

import re

import pytest

from docformat.config import PRESET_CONFIG, FormatterOptions, StylePresetId
from docformat.utils.stylesheet import build_stylesheet


class TestPresetStyles:
    """Test cases for preset-driven rules."""

    @pytest.mark.parametrize("preset_id", list(StylePresetId))
    def test_font_and_accent(self, preset_id: StylePresetId):
        preset = PRESET_CONFIG[preset_id]
        css = build_stylesheet(preset, FormatterOptions())

        assert f"font-family: {preset.font_family};" in css
        assert f"font-family: {preset.heading_font};" in css
        assert f"color: {preset.accent};" in css
        assert f"border-left: 4px solid {preset.accent};" in css

    @pytest.mark.parametrize("preset_id", list(StylePresetId))
    def test_page_and_body(self, preset_id: StylePresetId):
        preset = PRESET_CONFIG[preset_id]
        css = build_stylesheet(preset, FormatterOptions())

        assert f"margin: {preset.page_margin};" in css
        assert f"font-size: {preset.body_size}pt;" in css
        assert f"line-height: {preset.line_height};" in css
        assert f"background: {preset.background};" in css
        assert f"margin: {preset.paragraph_spacing}pt 0;" in css
        assert f"font-weight: {preset.heading_weight};" in css

    def test_fixed_layout_rules(self):
        css = build_stylesheet(PRESET_CONFIG[StylePresetId.CLASSIC], FormatterOptions())

        assert "max-width: 7in;" in css
        assert "border-radius: 12px;" in css
        assert "box-shadow:" in css
        assert ".docx-content h1 { font-size: 28px; }" in css
        assert ".docx-content h2 { font-size: 22px; }" in css
        assert ".docx-content h3 { font-size: 18px; }" in css
        assert "border: 1px solid #e2e8f0;" in css

    def test_executive_values(self):
        css = build_stylesheet(PRESET_CONFIG[StylePresetId.EXECUTIVE], FormatterOptions())
        assert "font-family: \"Helvetica Neue\", Arial, sans-serif;" in css
        assert "font-family: Georgia, 'Times New Roman', serif;" in css
        assert "margin: 1in 1.15in 1in 1.15in;" in css
        assert "line-height: 1.58;" in css


class TestOptionRules:
    """Test cases for option-driven rules."""

    def test_justify(self):
        preset = PRESET_CONFIG[StylePresetId.MODERN]

        justified = build_stylesheet(preset, FormatterOptions(justify=True))
        left = build_stylesheet(preset, FormatterOptions(justify=False))

        assert "text-align: justify;" in justified
        assert "text-align: left;" not in justified
        assert "text-align: left;" in left
        assert "text-align: justify;" not in left

    def test_auto_numbering_rules(self):
        preset = PRESET_CONFIG[StylePresetId.CLASSIC]
        css = build_stylesheet(preset, FormatterOptions(auto_number_headings=True))

        for level in ("h1", "h2", "h3"):
            assert f"counter-reset: {level};" in css
            assert f"counter-increment: {level};" in css

        assert 'content: counter(h1) ". ";' in css
        assert 'content: counter(h1) "." counter(h2) " ";' in css
        assert 'content: counter(h1) "." counter(h2) "." counter(h3) " ";' in css

        numbering_style = re.search(
            r"\.docx-content h3::before \{\s*font-weight: (\d+);\s*color: (#[0-9a-f]+);",
            css,
        )
        assert numbering_style is not None
        assert numbering_style.group(1) == str(preset.heading_weight)
        assert numbering_style.group(2) == preset.accent

    def test_no_numbering_by_default(self):
        css = build_stylesheet(PRESET_CONFIG[StylePresetId.CLASSIC], FormatterOptions())
        assert "counter-" not in css
        assert "::before" not in css

    def test_pure_function(self):
        preset = PRESET_CONFIG[StylePresetId.MODERN]
        options = FormatterOptions(auto_number_headings=True)
        assert build_stylesheet(preset, options) == build_stylesheet(preset, options)
