from __future__ import annotations

from dataclasses import dataclass

from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Cm, Pt


@dataclass(frozen=True)
class FormatSettings:
    page_width_mm: float = 210
    page_height_mm: float = 297
    margin_left_cm: float = 3.0
    margin_right_cm: float = 1.5
    margin_top_cm: float = 2.0
    margin_bottom_cm: float = 2.0

    font_name: str = "Times New Roman"
    code_font_name: str = "Courier New"
    font_size_pt: float = 14
    line_spacing_pt: float = 18
    first_line_indent_cm: float = 1.25
    quote_indent_cm: float = 1.0

    numbered_headings: bool = False


DEFAULT_SETTINGS = FormatSettings()


def apply_page_layout(doc, settings: FormatSettings = DEFAULT_SETTINGS) -> None:
    """Apply page size and margins."""
    section = doc.sections[0]
    section.page_height = Cm(settings.page_height_mm / 10)
    section.page_width = Cm(settings.page_width_mm / 10)
    section.left_margin = Cm(settings.margin_left_cm)
    section.right_margin = Cm(settings.margin_right_cm)
    section.top_margin = Cm(settings.margin_top_cm)
    section.bottom_margin = Cm(settings.margin_bottom_cm)


def set_run_font(
    run,
    settings: FormatSettings = DEFAULT_SETTINGS,
    bold: bool = False,
    italic: bool = False,
    code: bool = False,
) -> None:
    run.font.name = settings.code_font_name if code else settings.font_name
    run.font.size = Pt(settings.font_size_pt)
    run.bold = bold
    run.italic = italic


def apply_body_paragraph_format(paragraph, settings: FormatSettings = DEFAULT_SETTINGS) -> None:
    """Format normal text: justified, fixed line spacing, indented first line."""
    paragraph.alignment = WD_ALIGN_PARAGRAPH.JUSTIFY
    paragraph.paragraph_format.space_after = Pt(0)
    paragraph.paragraph_format.space_before = Pt(0)
    paragraph.paragraph_format.line_spacing = Pt(settings.line_spacing_pt)
    paragraph.paragraph_format.first_line_indent = Cm(settings.first_line_indent_cm)


def apply_heading_format(paragraph, settings: FormatSettings = DEFAULT_SETTINGS) -> None:
    paragraph.alignment = WD_ALIGN_PARAGRAPH.LEFT
    paragraph.paragraph_format.space_after = Pt(settings.line_spacing_pt)
    paragraph.paragraph_format.space_before = Pt(0)
    paragraph.paragraph_format.first_line_indent = Cm(0)
    for run in paragraph.runs:
        run.bold = True


def apply_code_format(paragraph, settings: FormatSettings = DEFAULT_SETTINGS) -> None:
    paragraph.alignment = WD_ALIGN_PARAGRAPH.LEFT
    paragraph.paragraph_format.first_line_indent = Cm(0)
    paragraph.paragraph_format.line_spacing = Pt(settings.line_spacing_pt)
    paragraph.paragraph_format.space_before = Pt(0)
    paragraph.paragraph_format.space_after = Pt(settings.line_spacing_pt)


def apply_quote_format(paragraph, settings: FormatSettings = DEFAULT_SETTINGS) -> None:
    apply_body_paragraph_format(paragraph, settings)
    paragraph.paragraph_format.first_line_indent = Cm(0)
    paragraph.paragraph_format.left_indent = Cm(settings.quote_indent_cm)
