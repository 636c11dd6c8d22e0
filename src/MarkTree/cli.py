from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import yaml

from . import config, markdown_parser, renderer_docx
from .errors import DocumentParseError
from .model import as_data
from .utils import LOGGER_NAME, configure_logging, read_markdown, resolve_output_path

logger = logging.getLogger(LOGGER_NAME)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="marktree",
        description="Parse lightweight Markdown into a document tree and render it as DOCX.",
    )
    parser.add_argument("input", type=str, help="Path to Markdown file")
    parser.add_argument("-o", "--output", type=str, help="Output DOCX path")
    parser.add_argument("--config", type=str, help="YAML file with format settings")
    parser.add_argument("--dump", action="store_true", help="Print the parsed tree as YAML instead of rendering")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)
    input_path = Path(args.input).expanduser()
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")

    logger.info("Reading %s", input_path)
    markdown_text = read_markdown(input_path)
    logger.debug("Markdown length: %d chars", len(markdown_text))

    logger.info("Parsing markdown...")
    try:
        document = markdown_parser.parse_document(markdown_text)
    except DocumentParseError as exc:
        logger.error("Cannot parse %s: %s", input_path, exc)
        if exc.__cause__ is not None:
            logger.debug("Cause: %s", exc.__cause__)
        raise SystemExit(1) from exc
    logger.debug("Parsed %d blocks", len(document))

    if args.dump:
        yaml.safe_dump(as_data(document), sys.stdout, allow_unicode=True, sort_keys=False)
        return

    settings = config.load_settings(args.config) if args.config else None
    output_path = resolve_output_path(input_path, args.output)
    logger.info("Rendering DOCX to %s", output_path)
    renderer_docx.render_document(document, output_path=output_path, asset_root=input_path.parent, settings=settings)

    logger.info("Done. Saved to %s", output_path)


if __name__ == "__main__":
    main()
