from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from docx import Document as DocxDocument
from docx.shared import Cm

from . import formatting
from .formatting import DEFAULT_SETTINGS, FormatSettings
from .model import (
    Block,
    Bold,
    CodeBlock,
    Document,
    Heading,
    Image,
    InlineCode,
    InlineElement,
    Italic,
    Link,
    MarkdownText,
    OrderedList,
    Plain,
    Quote,
    Text,
    UnorderedList,
)


@dataclass
class RenderState:
    settings: FormatSettings = DEFAULT_SETTINGS
    heading_counters: list[int] = field(default_factory=list)
    asset_root: Path | None = None


def render_document(
    doc: Document,
    output_path: str | Path,
    asset_root: Path | None = None,
    settings: FormatSettings | None = None,
) -> None:
    output_path = Path(output_path)
    state = RenderState(settings=settings or DEFAULT_SETTINGS, asset_root=asset_root)
    docx = DocxDocument()
    formatting.apply_page_layout(docx, state.settings)

    for block in doc.blocks:
        _dispatch_block(docx, block, state)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    docx.save(output_path)


def _dispatch_block(docx: DocxDocument, block: Block, state: RenderState) -> None:
    if isinstance(block, Heading):
        _render_heading(docx, block, state)
    elif isinstance(block, Text):
        # blank lines only separate paragraphs
        if block.content:
            _render_paragraph(docx, block.content, state)
    elif isinstance(block, OrderedList):
        _render_list(docx, block.items, state, ordered=True)
    elif isinstance(block, UnorderedList):
        _render_list(docx, block.items, state, ordered=False)
    elif isinstance(block, Quote):
        _render_quote(docx, block, state)
    elif isinstance(block, CodeBlock):
        _render_code_block(docx, block, state)
    else:
        raise TypeError(f"Unsupported block: {type(block).__name__}")


def _render_heading(docx: DocxDocument, heading: Heading, state: RenderState) -> None:
    paragraph = docx.add_paragraph()
    if state.settings.numbered_headings:
        number = _compute_heading_number(heading, state)
        run = paragraph.add_run(f"{number} ")
        formatting.set_run_font(run, state.settings, bold=True)
    _render_inline(paragraph, heading.content, state, bold=True)
    formatting.apply_heading_format(paragraph, state.settings)


def _compute_heading_number(heading: Heading, state: RenderState) -> str:
    level = max(1, heading.level)
    while len(state.heading_counters) < level:
        state.heading_counters.append(0)
    state.heading_counters[level - 1] += 1
    for idx in range(level, len(state.heading_counters)):
        state.heading_counters[idx] = 0
    number_parts = [str(n) for n in state.heading_counters[:level] if n > 0]
    return ".".join(number_parts)


def _render_paragraph(docx: DocxDocument, content: MarkdownText, state: RenderState) -> None:
    paragraph = docx.add_paragraph()
    _render_inline(paragraph, content, state)
    formatting.apply_body_paragraph_format(paragraph, state.settings)


def _render_list(docx: DocxDocument, items: Iterable[MarkdownText], state: RenderState, ordered: bool) -> None:
    for idx, item in enumerate(items, start=1):
        paragraph = docx.add_paragraph()
        prefix = f"{idx} " if ordered else "– "
        run = paragraph.add_run(prefix)
        formatting.set_run_font(run, state.settings)
        _render_inline(paragraph, item, state)
        formatting.apply_body_paragraph_format(paragraph, state.settings)
        paragraph.paragraph_format.left_indent = Cm(0)


def _render_quote(docx: DocxDocument, block: Quote, state: RenderState) -> None:
    for line in block.lines:
        paragraph = docx.add_paragraph()
        _render_inline(paragraph, line, state, italic=True)
        formatting.apply_quote_format(paragraph, state.settings)


def _render_code_block(docx: DocxDocument, block: CodeBlock, state: RenderState) -> None:
    paragraph = docx.add_paragraph()
    run = paragraph.add_run(block.code.rstrip("\n"))
    formatting.set_run_font(run, state.settings, code=True)
    formatting.apply_code_format(paragraph, state.settings)


def _render_inline(
    paragraph,
    inlines: Iterable[InlineElement],
    state: RenderState,
    bold: bool = False,
    italic: bool = False,
) -> None:
    settings = state.settings
    for inline in inlines:
        if isinstance(inline, Plain):
            run = paragraph.add_run(inline.text)
            formatting.set_run_font(run, settings, bold=bold, italic=italic)
        elif isinstance(inline, Bold):
            run = paragraph.add_run(inline.text)
            formatting.set_run_font(run, settings, bold=True, italic=italic)
        elif isinstance(inline, Italic):
            run = paragraph.add_run(inline.text)
            formatting.set_run_font(run, settings, bold=bold, italic=True)
        elif isinstance(inline, InlineCode):
            run = paragraph.add_run(inline.code)
            formatting.set_run_font(run, settings, bold=bold, italic=italic, code=True)
        elif isinstance(inline, Link):
            run = paragraph.add_run(inline.label)
            formatting.set_run_font(run, settings, bold=bold, italic=italic)
            run.font.underline = True
        elif isinstance(inline, Image):
            _render_image(paragraph, inline, state)


def _render_image(paragraph, image: Image, state: RenderState) -> None:
    image_path = Path(image.url)
    if state.asset_root:
        candidate = state.asset_root / image.url
        if candidate.exists():
            image_path = candidate

    run = paragraph.add_run()
    try:
        run.add_picture(str(image_path))
    except FileNotFoundError:
        run.add_text(f"[Missing image: {image_path}]")
    formatting.set_run_font(run, state.settings)
