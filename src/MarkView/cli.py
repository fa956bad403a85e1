from __future__ import annotations

import argparse
import logging
from pathlib import Path

from . import markdown_parser, renderer_docx
from .config import load_config
from .utils import configure_logging, read_markdown, resolve_output_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="markview",
        description="Parse a Markdown file and render it to DOCX.",
    )
    parser.add_argument("input", type=str, help="Path to Markdown file")
    parser.add_argument("-o", "--output", type=str, help="Output DOCX path")
    parser.add_argument("--config", type=str, help="YAML file with style overrides")
    parser.add_argument("--dump", action="store_true", help="Print the parsed outline instead of writing DOCX")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)
    input_path = Path(args.input).expanduser()
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")

    logging.info("Reading %s", input_path)
    try:
        markdown_text = read_markdown(input_path)
    except (FileNotFoundError, ValueError) as exc:
        logging.error("Cannot read %s: %s", input_path, exc)
        raise
    logging.debug("Markdown length: %d chars", len(markdown_text))

    logging.info("Parsing markdown...")
    document = markdown_parser.parse_document(
        markdown_text,
        metadata={"source": str(input_path), "file_name": input_path.name},
    )
    logging.debug("Parsed %d blocks", len(document.blocks))

    if args.dump:
        print(renderer_docx.dump_blocks(document.blocks))
        return

    config = load_config(args.config)
    output_path = resolve_output_path(input_path, args.output)
    logging.info("Rendering DOCX to %s", output_path)
    renderer_docx.render_document(document, output_path=output_path, config=config)

    logging.info("Done. Saved to %s", output_path)


if __name__ == "__main__":
    main()
