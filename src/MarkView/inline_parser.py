from __future__ import annotations

from typing import Iterable, List

from .model import RunStyle, StyledRun

CODE_DELIMITER = "`"
BOLD_DELIMITER = "**"
ITALIC_DELIMITER = "*"


def resolve_inline(text: str) -> List[StyledRun]:
    """Resolve ``**bold**``, ``*italic*`` and ```code``` spans in one pass.

    The scan walks the text left to right. A delimiter opens a span only when
    its closing counterpart exists further on; otherwise it is kept as plain
    text. Spans do not nest: everything between the delimiters is literal,
    so asterisks inside a code span stay visible instead of being stripped
    by an earlier bold or italic pass. A single asterisk right after another
    asterisk never opens italic.
    """
    runs: List[StyledRun] = []
    plain: list[str] = []

    def flush_plain() -> None:
        if plain:
            runs.append(StyledRun("".join(plain), RunStyle.PLAIN))
            plain.clear()

    def emit(content: str, style: RunStyle) -> None:
        flush_plain()
        runs.append(StyledRun(content, style))

    i = 0
    while i < len(text):
        if text.startswith(CODE_DELIMITER, i):
            end = text.find(CODE_DELIMITER, i + 1)
            if end != -1:
                emit(text[i + 1 : end], RunStyle.CODE)
                i = end + 1
                continue
            plain.append(CODE_DELIMITER)
            i += 1
        elif text.startswith(BOLD_DELIMITER, i):
            end = text.find(BOLD_DELIMITER, i + 2)
            if end != -1:
                emit(text[i + 2 : end], RunStyle.BOLD)
                i = end + 2
                continue
            # An unmatched pair stays literal as a pair so its second
            # asterisk cannot open an italic span.
            plain.append(BOLD_DELIMITER)
            i += 2
        elif text.startswith(ITALIC_DELIMITER, i):
            end = text.find(ITALIC_DELIMITER, i + 1)
            # Delimiters of resolved spans are gone; only a literal asterisk blocks.
            opens = not (plain and plain[-1].endswith(ITALIC_DELIMITER))
            if opens and end > i + 1 and not text.startswith(BOLD_DELIMITER, end):
                emit(text[i + 1 : end], RunStyle.ITALIC)
                i = end + 1
                continue
            plain.append(ITALIC_DELIMITER)
            i += 1
        else:
            plain.append(text[i])
            i += 1

    flush_plain()
    return runs


def plain_text(runs: Iterable[StyledRun]) -> str:
    return "".join(run.text for run in runs)
