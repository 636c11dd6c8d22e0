from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

LOGGER_NAME = "marktree"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Send MarkTree records to the console; ``verbose`` adds parser diagnostics."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    return logger


def resolve_output_path(input_path: Path, output: Optional[str], suffix: str = ".docx") -> Path:
    if not output:
        return input_path.with_suffix(suffix)
    out_path = Path(output)
    if out_path.is_dir():
        out_path = out_path / f"{input_path.stem}{suffix}"
    return out_path


def normalize_newlines(text: str) -> str:
    """Use ``\\n`` line endings and make sure the last line is terminated."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    if text and not text.endswith("\n"):
        text += "\n"
    return text


def read_markdown(path: Path) -> str:
    return normalize_newlines(path.read_text(encoding="utf-8"))
