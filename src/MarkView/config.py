from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Tuple

import yaml

from . import styles


@dataclass
class RenderConfig:
    font_name: str = styles.FONT_NAME
    code_font_name: str = styles.CODE_FONT_NAME
    font_size_pt: float = styles.FONT_SIZE_PT
    line_spacing_pt: float = styles.LINE_SPACING_PT
    heading_sizes_pt: Tuple[float, ...] = field(default_factory=lambda: styles.HEADING_SIZES_PT)
    margin_cm: float = styles.MARGIN_CM
    list_indent_cm: float = styles.LIST_INDENT_CM
    quote_indent_cm: float = styles.QUOTE_INDENT_CM
    bullet_glyph: str = styles.BULLET_GLYPH
    rule_width: int = styles.RULE_WIDTH
    show_file_name: bool = True

    def heading_size(self, level: int) -> float:
        index = min(max(level, 1), len(self.heading_sizes_pt)) - 1
        return self.heading_sizes_pt[index]


_NUMBER_KEYS = {"font_size_pt", "line_spacing_pt", "margin_cm", "list_indent_cm", "quote_indent_cm"}
_STRING_KEYS = {"font_name", "code_font_name", "bullet_glyph"}


def load_config(path: str | Path | None = None) -> RenderConfig:
    """Load render settings from a YAML file, falling back to the defaults."""
    if path is None:
        return RenderConfig()
    text = Path(path).read_text(encoding="utf-8")
    return config_from_mapping(yaml.safe_load(text) or {})


def config_from_mapping(data: Any) -> RenderConfig:
    if not isinstance(data, dict):
        raise ValueError("Config root must be a mapping of style settings.")

    known = {f.name for f in fields(RenderConfig)}
    unknown = sorted(str(key) for key in data if key not in known)
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")

    values: dict[str, Any] = {}
    for key, value in data.items():
        if key in _NUMBER_KEYS:
            values[key] = _as_number(key, value)
        elif key in _STRING_KEYS:
            if not isinstance(value, str) or not value:
                raise ValueError(f"{key} must be a non-empty string")
            values[key] = value
        elif key == "rule_width":
            width = int(_as_number(key, value))
            if width < 1:
                raise ValueError(f"rule_width must be at least 1, got {value!r}")
            values[key] = width
        elif key == "show_file_name":
            if not isinstance(value, bool):
                raise ValueError("show_file_name must be true or false")
            values[key] = value
        elif key == "heading_sizes_pt":
            if not isinstance(value, list) or len(value) != len(styles.HEADING_SIZES_PT):
                raise ValueError(f"heading_sizes_pt must list {len(styles.HEADING_SIZES_PT)} sizes")
            values[key] = tuple(_as_number(key, size) for size in value)
    return RenderConfig(**values)


def _as_number(key: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise ValueError(f"{key} must be a positive number, got {value!r}")
    return value
