"""
Document formatting endpoints.

This package re-styles uploaded Word documents: it decodes the .docx, tidies
the text, applies a visual preset and returns a new .docx with a preview.
"""

__version__ = "1.0.0"
