"""
Formatting configuration for the /api/format endpoint.

This module defines the style presets, the formatter options and their
defaults, and the static allow-lists used when sanitizing document markup.
Everything here is built once at import time and never mutated.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping


API_PREFIX = "/api"


class StylePresetId(str, Enum):
    """Available visual presets."""
    CLASSIC = "classic"
    MODERN = "modern"
    EXECUTIVE = "executive"


DEFAULT_PRESET = StylePresetId.CLASSIC


@dataclass(frozen=True)
class StylePreset:
    """Typographic and layout attributes applied by a preset."""
    font_family: str
    heading_font: str
    body_size: int
    heading_weight: int
    line_height: float
    paragraph_spacing: int
    accent: str
    page_margin: str
    background: str


PRESET_CONFIG: Mapping[StylePresetId, StylePreset] = MappingProxyType({
    StylePresetId.CLASSIC: StylePreset(
        font_family='"Times New Roman", Times, serif',
        heading_font='"Times New Roman", Times, serif',
        body_size=12,
        heading_weight=600,
        line_height=1.5,
        paragraph_spacing=14,
        accent="#1d4ed8",
        page_margin="1in",
        background="#f8fafc",
    ),
    StylePresetId.MODERN: StylePreset(
        font_family='"Calibri", "Segoe UI", sans-serif',
        heading_font='"Source Sans Pro", "Calibri", "Segoe UI", sans-serif',
        body_size=11,
        heading_weight=600,
        line_height=1.65,
        paragraph_spacing=16,
        accent="#0f766e",
        page_margin="0.9in",
        background="#f0fdfa",
    ),
    StylePresetId.EXECUTIVE: StylePreset(
        font_family='"Helvetica Neue", Arial, sans-serif',
        heading_font="Georgia, 'Times New Roman', serif",
        body_size=11,
        heading_weight=700,
        line_height=1.58,
        paragraph_spacing=15,
        accent="#a16207",
        page_margin="1in 1.15in 1in 1.15in",
        background="#fffbeb",
    ),
})


def resolve_preset(value) -> StylePresetId:
    """Map a raw preset value to a known preset, falling back to the default."""
    if isinstance(value, StylePresetId):
        return value
    if isinstance(value, str):
        try:
            return StylePresetId(value)
        except ValueError:
            pass
    return DEFAULT_PRESET


@dataclass(frozen=True)
class FormatterOptions:
    """Tidy options for a single formatting run."""
    justify: bool = True
    tidy_spacing: bool = True
    title_case_headings: bool = True
    auto_number_headings: bool = False
    convert_quotes: bool = True


# Form field name -> FormatterOptions attribute
OPTION_FIELDS: Mapping[str, str] = MappingProxyType({
    "justify": "justify",
    "tidySpacing": "tidy_spacing",
    "titleCaseHeadings": "title_case_headings",
    "autoNumberHeadings": "auto_number_headings",
    "convertQuotes": "convert_quotes",
})

TRUE_TOKENS: FrozenSet[str] = frozenset({"true", "1"})
FALSE_TOKENS: FrozenSet[str] = frozenset({"false", "0"})


def option_defaults() -> Dict[str, bool]:
    """Default value of every option, keyed by form field name."""
    defaults = FormatterOptions()
    return {field: getattr(defaults, attr) for field, attr in OPTION_FIELDS.items()}


# Connector words kept lowercase inside title-cased headings
SMALL_WORDS: FrozenSet[str] = frozenset({
    "and", "or", "the", "of", "for", "in", "on", "to", "a", "an", "with",
})

TITLE_CASE_TAGS = ("h1", "h2", "h3")


# ===== SANITIZER ALLOW-LISTS =====

# Removed together with their content
STRIPPED_TAGS: FrozenSet[str] = frozenset({
    "script", "style", "iframe", "object", "embed", "noscript",
    "template", "link", "meta", "base", "form",
})

ALLOWED_TAGS: FrozenSet[str] = frozenset({
    "p", "br", "strong", "b", "em", "i", "u", "s", "sub", "sup",
    "h1", "h2", "h3", "h4", "h5", "h6",
    "ul", "ol", "li", "blockquote", "code", "pre", "hr", "div", "span",
    "table", "thead", "tbody", "tfoot", "tr", "th", "td", "caption",
    "a", "img",
})

ALLOWED_ATTRS: Mapping[str, FrozenSet[str]] = MappingProxyType({
    "a": frozenset({"href", "title", "id"}),
    "img": frozenset({"src", "alt", "title"}),
    "td": frozenset({"colspan", "rowspan"}),
    "th": frozenset({"colspan", "rowspan"}),
})

URL_ATTRS: FrozenSet[str] = frozenset({"href", "src"})

BLOCKED_URL_SCHEMES: FrozenSet[str] = frozenset({"javascript", "vbscript", "data"})
