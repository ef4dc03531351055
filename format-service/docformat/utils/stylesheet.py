"""
Stylesheet synthesis for formatted documents.

build_stylesheet() turns a preset and the formatter options into the CSS that
is embedded in both the output document and the preview. Heading numbering
is expressed purely with CSS counters; no numbers are written into the text.
"""

from ..config import FormatterOptions, StylePreset


def build_numbering_rules(preset: StylePreset) -> str:
    """Counter rules giving h1-h3 dotted numbers such as "2.3.1 "."""
    return f"""
  .docx-content {{
    counter-reset: h1;
  }}
  .docx-content h1 {{
    counter-reset: h2;
  }}
  .docx-content h1::before {{
    counter-increment: h1;
    content: counter(h1) ". ";
  }}
  .docx-content h2 {{
    counter-reset: h3;
  }}
  .docx-content h2::before {{
    counter-increment: h2;
    content: counter(h1) "." counter(h2) " ";
  }}
  .docx-content h3::before {{
    counter-increment: h3;
    content: counter(h1) "." counter(h2) "." counter(h3) " ";
  }}
  .docx-content h1::before,
  .docx-content h2::before,
  .docx-content h3::before {{
    font-weight: {preset.heading_weight};
    color: {preset.accent};
  }}
"""


def build_stylesheet(preset: StylePreset, options: FormatterOptions) -> str:
    """
    Generate the stylesheet for a preset.

    Args:
        preset: Typographic attributes of the chosen preset
        options: Formatter options (justify, auto_number_headings are read)

    Returns:
        CSS text
    """
    numbering = build_numbering_rules(preset) if options.auto_number_headings else ""
    alignment = "text-align: justify;" if options.justify else "text-align: left;"

    return f"""
  @page {{
    margin: {preset.page_margin};
  }}

  body {{
    font-family: {preset.font_family};
    font-size: {preset.body_size}pt;
    line-height: {preset.line_height};
    color: #1f2937;
    background: #ffffff;
    margin: 0;
  }}

  .docx-shell {{
    min-height: 100vh;
    background: {preset.background};
    padding: 48px 0;
  }}

  .docx-content {{
    background: #ffffff;
    margin: 0 auto;
    max-width: 7in;
    padding: 1in 1.1in;
    box-shadow: 0 20px 45px -28px rgba(15, 23, 42, 0.45);
    border-radius: 12px;
  }}

  .docx-content p {{
    margin: {preset.paragraph_spacing}pt 0;
    {alignment}
  }}

  .docx-content h1,
  .docx-content h2,
  .docx-content h3,
  .docx-content h4,
  .docx-content h5,
  .docx-content h6 {{
    font-family: {preset.heading_font};
    font-weight: {preset.heading_weight};
    letter-spacing: -0.02em;
    color: {preset.accent};
    margin-top: 1.6em;
    margin-bottom: 0.5em;
  }}

  .docx-content h1 {{ font-size: 28px; }}
  .docx-content h2 {{ font-size: 22px; }}
  .docx-content h3 {{ font-size: 18px; }}

  .docx-content ul,
  .docx-content ol {{
    margin: {preset.paragraph_spacing}pt 0 {preset.paragraph_spacing}pt 24px;
    padding: 0;
  }}

  .docx-content ul li {{
    margin-bottom: 6px;
  }}

  .docx-content table {{
    width: 100%;
    border-collapse: collapse;
    margin: 18px 0;
  }}

  .docx-content table th,
  .docx-content table td {{
    border: 1px solid #e2e8f0;
    padding: 8px 12px;
  }}

  .docx-content blockquote {{
    border-left: 4px solid {preset.accent};
    padding-left: 18px;
    margin: {preset.paragraph_spacing}pt 0;
    font-style: italic;
    color: #475569;
  }}
{numbering}"""
