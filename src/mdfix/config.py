"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:              str  = "mdfix"
    fix_headings:          bool = Field(default=True, description="Rebase heading depths and remove skipped levels")
    fix_lists:             bool = Field(default=True, description="Renumber ordered lists per indentation level")
    fix_spacing:           bool = Field(default=True, description="Canonical blank lines around structural elements")
    promote_notices:       bool = Field(default=True, description="Turn *Last updated ...* lines into level-3 headings")
    default_code_language: str  = Field(default="text", min_length=1, description="Language tag for bare opening fences")
    preserve_frontmatter:  bool = Field(default=True, description="Hold a leading YAML frontmatter block aside verbatim")
    verify_code_blocks:    bool = Field(default=True, description="Return input unchanged if fenced code would change")
    parser_config:         str  = Field(default="gfm-like", description="MarkdownIt parser preset name")
    file_pattern:          str  = Field(default=r"\.md$", description="Regex selecting files in batch mode")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDFIX_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MDFIX_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
