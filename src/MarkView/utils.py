from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

MARKDOWN_EXTENSIONS = {"md", "markdown", "mdown", "mkdn", "mkd"}


def configure_logging(verbose: bool = False) -> None:
    """Configure a simple console logger."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(message)s",
    )


def resolve_output_path(input_path: Path, output: Optional[str]) -> Path:
    if output:
        out_path = Path(output)
        if out_path.is_dir():
            out_path = out_path / f"{input_path.stem}.docx"
        return out_path
    return input_path.with_suffix(".docx")


def is_markdown_file(path: Path) -> bool:
    return path.suffix.lower().lstrip(".") in MARKDOWN_EXTENSIONS


def read_markdown(path: Path) -> str:
    """Read a Markdown file as UTF-8 text.

    Raises FileNotFoundError when the file is missing and ValueError when it
    is not a Markdown file or cannot be decoded.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Input file not found: {path}")
    if not is_markdown_file(path):
        raise ValueError(f"{path.name} is not a Markdown file (expected one of: {', '.join(sorted(MARKDOWN_EXTENSIONS))})")
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError(f"{path.name} is not readable as UTF-8 text") from exc
