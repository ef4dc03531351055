"""
CSS @page margin handling for the .docx encoder.

html4docx ignores @page rules, so the encoder reads the preset's page margin
back out of the generated stylesheet and applies it to every section of the
python-docx document.
"""

import re
from typing import Dict, List, Optional

from docx.shared import Inches

SIDES = ('top', 'right', 'bottom', 'left')

# Conversion factors to inches
_UNIT_TO_INCHES = {
    'in': 1.0,
    'inch': 1.0,
    'cm': 1.0 / 2.54,
    'mm': 1.0 / 25.4,
    'pt': 1.0 / 72.0,
    'pc': 1.0 / 6.0,
    'px': 1.0 / 96.0,  # 96 DPI
}

_LENGTH = re.compile(r'^([\d.]+)\s*([a-z]+)?$', re.IGNORECASE)
_PAGE_RULE = re.compile(r'@page\s*\{([^}]+)\}', re.IGNORECASE | re.DOTALL)
_MARGIN_SHORTHAND = re.compile(r'(?<![\w-])margin\s*:\s*([^;]+);', re.IGNORECASE)


def parse_css_length_to_inches(css_value: str) -> Optional[float]:
    """
    Convert a CSS length to inches.

    Unitless numbers are read as inches; unknown units use a factor of 1.
    Returns None when the value is not a length at all.

    >>> parse_css_length_to_inches("0.75in")
    0.75
    """
    match = _LENGTH.match(css_value.strip())
    if not match:
        return None

    unit = (match.group(2) or 'in').lower()
    return float(match.group(1)) * _UNIT_TO_INCHES.get(unit, 1.0)


def _expand_shorthand(values: List[float]) -> Dict[str, float]:
    # CSS box shorthand: 1 value = all, 2 = vertical/horizontal,
    # 3 = top/horizontal/bottom, 4 = top/right/bottom/left
    if len(values) == 1:
        values = values * 4
    elif len(values) == 2:
        values = [values[0], values[1], values[0], values[1]]
    elif len(values) == 3:
        values = [values[0], values[1], values[2], values[1]]
    elif len(values) != 4:
        return {}
    return dict(zip(SIDES, values))


def extract_page_margins_from_html(html_content: str) -> Dict[str, float]:
    """
    Extract @page margins from HTML/CSS content, in inches.

    Individual margin-<side> properties override the shorthand. Returns an
    empty dict when no @page margin is declared.

    >>> extract_page_margins_from_html('<style>@page { margin: 0.5in 1in; }</style>')
    {'top': 0.5, 'right': 1.0, 'bottom': 0.5, 'left': 1.0}
    """
    margins: Dict[str, float] = {}

    for rule_content in _PAGE_RULE.findall(html_content):
        shorthand = _MARGIN_SHORTHAND.search(rule_content)
        if shorthand:
            values = [parse_css_length_to_inches(v) for v in shorthand.group(1).split()]
            if values and None not in values:
                margins = _expand_shorthand(values)

        for side in SIDES:
            individual = re.search(rf'margin-{side}\s*:\s*([^;]+);', rule_content, re.IGNORECASE)
            if individual:
                value = parse_css_length_to_inches(individual.group(1))
                if value is not None:
                    margins[side] = value

    return margins


def apply_margins_to_docx_sections(docx_document, margins: Dict[str, float]) -> None:
    """Apply margins (inches) to all sections of a python-docx Document."""
    for section in docx_document.sections:
        if 'top' in margins:
            section.top_margin = Inches(margins['top'])
        if 'bottom' in margins:
            section.bottom_margin = Inches(margins['bottom'])
        if 'left' in margins:
            section.left_margin = Inches(margins['left'])
        if 'right' in margins:
            section.right_margin = Inches(margins['right'])
