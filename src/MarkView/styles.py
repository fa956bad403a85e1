from __future__ import annotations

from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Cm, Pt

FONT_NAME = "Calibri"
CODE_FONT_NAME = "Courier New"
FONT_SIZE_PT = 11
LINE_SPACING_PT = 15

# Header1..Header3, largest first.
HEADING_SIZES_PT = (24, 18, 14)

MARGIN_CM = 2.0
LIST_INDENT_CM = 0.75
QUOTE_INDENT_CM = 0.5
BULLET_GLYPH = "•"
RULE_WIDTH = 40


def apply_page_layout(doc, config) -> None:
    """Apply uniform page margins."""
    section = doc.sections[0]
    section.left_margin = Cm(config.margin_cm)
    section.right_margin = Cm(config.margin_cm)
    section.top_margin = Cm(config.margin_cm)
    section.bottom_margin = Cm(config.margin_cm)


def set_run_font(run, config, bold: bool = False, italic: bool = False, code: bool = False, size_pt=None) -> None:
    run.font.name = config.code_font_name if code else config.font_name
    run.font.size = Pt(size_pt or config.font_size_pt)
    run.bold = bold
    run.italic = italic


def apply_body_paragraph_format(paragraph, config) -> None:
    paragraph.alignment = WD_ALIGN_PARAGRAPH.LEFT
    paragraph.paragraph_format.space_before = Pt(0)
    paragraph.paragraph_format.space_after = Pt(config.font_size_pt / 2)
    paragraph.paragraph_format.line_spacing = Pt(config.line_spacing_pt)
    paragraph.paragraph_format.first_line_indent = Cm(0)


def apply_heading_format(paragraph, config, level: int) -> None:
    size = config.heading_size(level)
    paragraph.alignment = WD_ALIGN_PARAGRAPH.LEFT
    paragraph.paragraph_format.space_before = Pt(size / 2)
    paragraph.paragraph_format.space_after = Pt(size / 3)
    paragraph.paragraph_format.first_line_indent = Cm(0)
    for run in paragraph.runs:
        set_run_font(run, config, bold=True, size_pt=size)


def apply_list_item_format(paragraph, config) -> None:
    apply_body_paragraph_format(paragraph, config)
    paragraph.paragraph_format.left_indent = Cm(config.list_indent_cm)
    paragraph.paragraph_format.space_after = Pt(0)


def apply_code_format(paragraph, config) -> None:
    apply_body_paragraph_format(paragraph, config)
    paragraph.paragraph_format.space_after = Pt(config.line_spacing_pt)
    for run in paragraph.runs:
        set_run_font(run, config, code=True)


def apply_quote_format(paragraph, config) -> None:
    apply_body_paragraph_format(paragraph, config)
    paragraph.paragraph_format.left_indent = Cm(config.quote_indent_cm)
