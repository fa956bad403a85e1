from __future__ import annotations

import re
from typing import Any, Callable, List, Sequence

from .model import Block, BlockKind, Document

HEADING_PREFIXES = (
    ("# ", BlockKind.HEADER1),
    ("## ", BlockKind.HEADER2),
    ("### ", BlockKind.HEADER3),
)
RULE_LINES = {"---", "***"}
FENCE = "```"
QUOTE_PREFIX = "> "
BULLET_PREFIXES = ("- ", "* ")
RE_NUMBERED_ITEM = re.compile(r"^\d+\.\s")
# Line breaks only; the \x1c-\x1e separators stay inside a line.
RE_LINE_BREAK = re.compile(r"\r\n|[\n\r\x0b\x0c\x85\u2028\u2029]")


def parse_markdown(text: str) -> List[Block]:
    """Split ``text`` into an ordered list of blocks.

    Never raises: anything that is not recognised becomes a paragraph, and
    unterminated fences or lists simply run to the end of the input.
    """
    lines = _split_lines(text)
    blocks: List[Block] = []
    i = 0
    while i < len(lines):
        line = lines[i].strip()
        if not line:
            i += 1
            continue

        heading = _match_heading(line)
        if heading is not None:
            blocks.append(heading)
            i += 1
        elif line in RULE_LINES:
            blocks.append(Block(kind=BlockKind.HORIZONTAL_RULE))
            i += 1
        elif line.startswith(FENCE):
            block, i = _parse_code_fence(lines, i)
            blocks.append(block)
        elif line.startswith(QUOTE_PREFIX):
            blocks.append(Block(kind=BlockKind.QUOTE, text=line[len(QUOTE_PREFIX) :]))
            i += 1
        elif _is_bullet_item(line):
            items, i = _collect_list_items(lines, i, _is_bullet_item, _strip_bullet)
            blocks.append(Block(kind=BlockKind.BULLET_LIST, items=items))
        elif _is_numbered_item(line):
            items, i = _collect_list_items(lines, i, _is_numbered_item, _strip_number)
            blocks.append(Block(kind=BlockKind.NUMBERED_LIST, items=items))
        else:
            blocks.append(Block(kind=BlockKind.PARAGRAPH, text=line))
            i += 1
    return blocks


def parse_document(text: str, metadata: dict[str, Any] | None = None) -> Document:
    return Document(blocks=parse_markdown(text), metadata=metadata)


def _split_lines(text: str) -> list[str]:
    lines = RE_LINE_BREAK.split(text)
    if lines and not lines[-1]:
        lines.pop()
    return lines


def _match_heading(line: str) -> Block | None:
    for prefix, kind in HEADING_PREFIXES:
        if line.startswith(prefix):
            return Block(kind=kind, text=line[len(prefix) :])
    return None


def _parse_code_fence(lines: Sequence[str], index: int) -> tuple[Block, int]:
    language = lines[index].strip()[len(FENCE) :].strip() or None
    code_lines: list[str] = []
    i = index + 1
    # Body lines are kept verbatim; the closing fence is matched unstripped.
    while i < len(lines) and not lines[i].startswith(FENCE):
        code_lines.append(lines[i])
        i += 1
    if i < len(lines):
        i += 1  # skip closing fence
    return Block(kind=BlockKind.CODE_BLOCK, text="\n".join(code_lines), language=language), i


def _collect_list_items(
    lines: Sequence[str],
    index: int,
    is_item: Callable[[str], bool],
    strip_marker: Callable[[str], str],
) -> tuple[tuple[str, ...], int]:
    items: list[str] = []
    i = index
    while i < len(lines):
        current = lines[i].strip()
        if is_item(current):
            items.append(strip_marker(current))
        elif current:
            break
        i += 1
    return tuple(items), i


def _is_bullet_item(line: str) -> bool:
    return line.startswith(BULLET_PREFIXES)


def _strip_bullet(line: str) -> str:
    return line[2:]


def _is_numbered_item(line: str) -> bool:
    return RE_NUMBERED_ITEM.match(line) is not None


def _strip_number(line: str) -> str:
    return RE_NUMBERED_ITEM.sub("", line, count=1)
