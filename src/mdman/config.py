"""Renderer configuration: settings schema and layered loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError


CONFIG_FILE = "mdman.yaml"
ENV_PREFIX = "MDMAN_"


class Settings(BaseModel):
    output_dir:     Optional[str] = Field(default=None, description="Write pages here; None prints to stdout")
    split_chapters: bool = Field(default=False, description="One man page per chapter")
    filename:       str = Field(default="book.man", description="Single-page output filename")
    parser_config:  str = Field(default="commonmark", description="MarkdownIt parser preset name")
    section_number: int = Field(default=7, ge=1, le=9, description="Manual section of generated pages")
    log_level:      str = Field(default="WARNING", description="Logging level name")


def _normalize(table: dict[str, Any]) -> dict[str, Any]:
    """book.toml tables use kebab-case keys (output-dir); map them to field names."""
    return {str(k).replace("-", "_"): v for k, v in table.items()}


def load_config(
    renderer_config: Optional[dict[str, Any]] = None,
    overrides: Optional[dict[str, Any]] = None,
    ) -> Settings:
    """Load Settings from mdman.yaml, then the [output.man] table, then MDMAN_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            loaded = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(loaded, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(loaded).__name__}")
        data.update(_normalize(loaded))

    if renderer_config:
        data.update(_normalize(renderer_config))

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})

    known = {k: v for k, v in data.items() if k in Settings.model_fields}
    try:
        return Settings(**known)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e
