from __future__ import annotations

from dataclasses import fields, replace
from pathlib import Path
from typing import Any, get_type_hints

import yaml

from .formatting import FormatSettings


def parse_settings(text: str) -> FormatSettings:
    """Build ``FormatSettings`` from YAML text; missing keys keep their defaults."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError("YAML root must be a mapping of format settings.")

    known = {field.name for field in fields(FormatSettings)}
    unknown = sorted(str(key) for key in data if key not in known)
    if unknown:
        raise ValueError(f"Unknown format settings: {', '.join(unknown)}")

    hints = get_type_hints(FormatSettings)
    for key, value in data.items():
        if not _matches(value, hints[key]):
            raise ValueError(f"Format setting {key} must be {hints[key].__name__}, got {value!r}")
    return replace(FormatSettings(), **data)


def load_settings(path: str | Path) -> FormatSettings:
    return parse_settings(Path(path).read_text(encoding="utf-8"))


def _matches(value: Any, expected: type) -> bool:
    # YAML booleans are ints in Python; keep them out of numeric fields
    if expected is bool:
        return isinstance(value, bool)
    if isinstance(value, bool):
        return False
    if expected is float:
        return isinstance(value, (int, float))
    return isinstance(value, expected)
