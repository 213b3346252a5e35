"""Application configuration: settings schema and doccheck.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "doccheck.yaml"
ENV_FIELDS = ("verbose",)


class Settings(BaseModel):
    app_name:          str  = "doccheck"
    parser_config:     str  = Field(default="gfm-like", description="MarkdownIt parser preset name")
    max_nesting:       int  = Field(default=6, ge=1, le=6, description="Deepest heading level that starts a section")
    output_format:     str  = Field(default="text", pattern="^(text|json)$", description="text or json")
    report_unverified: bool = Field(default=False, description="Emit info findings for claims next to unknown blocks")
    fail_on_warning:   bool = Field(default=True,  description="Exit non-zero when any warning is found")
    verbose:           bool = Field(default=False, description="Echo per-block classification to stderr")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from doccheck.yaml, then DOCCHECK_VERBOSE, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping")

    for name in ENV_FIELDS:
        if val := os.getenv(f"DOCCHECK_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
