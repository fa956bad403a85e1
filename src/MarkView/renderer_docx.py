from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Sequence

from docx import Document as DocxDocument
from docx.enum.text import WD_ALIGN_PARAGRAPH

from . import styles
from .config import RenderConfig
from .inline_parser import resolve_inline
from .model import Block, BlockKind, Document, RunStyle

logger = logging.getLogger(__name__)


def render_document(
    doc: Document | Sequence[Block],
    output_path: str | Path,
    config: RenderConfig | None = None,
) -> None:
    if not isinstance(doc, Document):
        doc = Document(blocks=list(doc))
    config = config or RenderConfig()
    output_path = Path(output_path)
    docx = DocxDocument()
    styles.apply_page_layout(docx, config)

    if config.show_file_name and doc.file_name:
        _render_file_title(docx, doc.file_name, config)

    for block in doc.blocks:
        _dispatch_block(docx, block, config)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    docx.save(output_path)


def _dispatch_block(docx: DocxDocument, block: Block, config: RenderConfig) -> None:
    logger.debug("Rendering %s block", block.kind.value)
    if block.heading_level is not None:
        _render_heading(docx, block, config)
    elif block.kind is BlockKind.PARAGRAPH:
        paragraph = docx.add_paragraph()
        _add_inline_runs(paragraph, block.text, config)
        styles.apply_body_paragraph_format(paragraph, config)
    elif block.is_list:
        _render_list(docx, block, config)
    elif block.kind is BlockKind.CODE_BLOCK:
        _render_code_block(docx, block, config)
    elif block.kind is BlockKind.QUOTE:
        _render_quote(docx, block, config)
    elif block.kind is BlockKind.HORIZONTAL_RULE:
        _render_horizontal_rule(docx, config)


def _render_file_title(docx: DocxDocument, file_name: str, config: RenderConfig) -> None:
    paragraph = docx.add_paragraph()
    run = paragraph.add_run(file_name)
    styles.set_run_font(run, config, bold=True)
    styles.apply_body_paragraph_format(paragraph, config)
    _render_horizontal_rule(docx, config)


def _render_heading(docx: DocxDocument, block: Block, config: RenderConfig) -> None:
    paragraph = docx.add_paragraph(block.text)
    styles.apply_heading_format(paragraph, config, level=block.heading_level)


def _render_list(docx: DocxDocument, block: Block, config: RenderConfig) -> None:
    ordered = block.kind is BlockKind.NUMBERED_LIST
    # Source numbers are not kept; items are renumbered from 1.
    for idx, item in enumerate(block.items, start=1):
        paragraph = docx.add_paragraph()
        prefix = f"{idx}. " if ordered else f"{config.bullet_glyph} "
        marker = paragraph.add_run(prefix)
        styles.set_run_font(marker, config)
        _add_inline_runs(paragraph, item, config)
        styles.apply_list_item_format(paragraph, config)


def _render_code_block(docx: DocxDocument, block: Block, config: RenderConfig) -> None:
    paragraph = docx.add_paragraph()
    lines = block.text.split("\n")
    for idx, line in enumerate(lines):
        run = paragraph.add_run(line)
        if idx < len(lines) - 1:
            run.add_break()
    styles.apply_code_format(paragraph, config)


def _render_quote(docx: DocxDocument, block: Block, config: RenderConfig) -> None:
    paragraph = docx.add_paragraph()
    _add_inline_runs(paragraph, block.text, config, italic=True)
    styles.apply_quote_format(paragraph, config)


def _render_horizontal_rule(docx: DocxDocument, config: RenderConfig) -> None:
    paragraph = docx.add_paragraph()
    run = paragraph.add_run("-" * config.rule_width)
    styles.set_run_font(run, config)
    styles.apply_body_paragraph_format(paragraph, config)
    paragraph.alignment = WD_ALIGN_PARAGRAPH.CENTER


def _add_inline_runs(paragraph, text: str, config: RenderConfig, italic: bool = False) -> None:
    for styled in resolve_inline(text):
        run = paragraph.add_run(styled.text)
        styles.set_run_font(
            run,
            config,
            bold=styled.style is RunStyle.BOLD,
            italic=italic or styled.style is RunStyle.ITALIC,
            code=styled.style is RunStyle.CODE,
        )


def dump_blocks(blocks: Iterable[Block]) -> str:
    """Return a readable outline of parsed blocks, one entry per line."""
    lines: list[str] = []
    for block in blocks:
        if block.is_list:
            lines.append(f"{block.kind.value}:")
            lines.extend(f"  - {_runs_outline(item)}" for item in block.items)
        elif block.kind is BlockKind.CODE_BLOCK:
            label = f"{block.kind.value} ({block.language})" if block.language else block.kind.value
            lines.append(f"{label}:")
            lines.extend(f"  | {line}" for line in block.text.split("\n"))
        elif block.is_textual:
            lines.append(f"{block.kind.value}: {_runs_outline(block.text)}")
        elif block.kind is BlockKind.HORIZONTAL_RULE:
            lines.append(block.kind.value)
        else:
            lines.append(f"{block.kind.value}: {block.text}")
    return "\n".join(lines)


def _runs_outline(text: str) -> str:
    parts = []
    for run in resolve_inline(text):
        if run.style is RunStyle.PLAIN:
            parts.append(run.text)
        else:
            parts.append(f"[{run.style.value}:{run.text}]")
    return "".join(parts)
