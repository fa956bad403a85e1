from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Tuple


class BlockKind(str, Enum):
    HEADER1 = "header1"
    HEADER2 = "header2"
    HEADER3 = "header3"
    PARAGRAPH = "paragraph"
    BULLET_LIST = "bullet_list"
    NUMBERED_LIST = "numbered_list"
    CODE_BLOCK = "code_block"
    QUOTE = "quote"
    HORIZONTAL_RULE = "horizontal_rule"


HEADING_KINDS = {
    BlockKind.HEADER1: 1,
    BlockKind.HEADER2: 2,
    BlockKind.HEADER3: 3,
}

LIST_KINDS = {BlockKind.BULLET_LIST, BlockKind.NUMBERED_LIST}

# Block kinds whose content goes through the inline resolver.
TEXTUAL_KINDS = {BlockKind.PARAGRAPH, BlockKind.QUOTE} | LIST_KINDS


@dataclass(frozen=True)
class Block:
    """One structural unit of a parsed document.

    ``text`` carries the content for headings, paragraphs, quotes and code
    blocks; ``items`` is only filled for lists.
    """

    kind: BlockKind
    text: str = ""
    items: Tuple[str, ...] = ()
    language: str | None = None

    @property
    def heading_level(self) -> int | None:
        return HEADING_KINDS.get(self.kind)

    @property
    def is_list(self) -> bool:
        return self.kind in LIST_KINDS

    @property
    def is_textual(self) -> bool:
        return self.kind in TEXTUAL_KINDS


class RunStyle(str, Enum):
    PLAIN = "plain"
    BOLD = "bold"
    ITALIC = "italic"
    CODE = "code"


@dataclass(frozen=True)
class StyledRun:
    text: str
    style: RunStyle = RunStyle.PLAIN


@dataclass
class Document:
    blocks: List[Block]
    metadata: dict[str, Any] | None = None

    @property
    def file_name(self) -> str:
        if not self.metadata:
            return ""
        return str(self.metadata.get("file_name") or "")
